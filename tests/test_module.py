"""
Tests for Module command binding.
"""

from unittest.mock import Mock

import pytest

from commands import Command, Module, command, create_inhibiting_decorator, dm_only, guild_only
from utils.errors import CommandConfigurationError


class Admin(Module):
    def __init__(self):
        self.calls = []
        self.allow = True
        super().__init__()

    @guild_only
    @command("kick", aliases=["k"])
    async def kick(self, ctx):
        self.calls.append(("kick", ctx))
        return "kicked"

    @dm_only
    @command()
    def whisper(self, ctx):
        self.calls.append(("whisper", ctx))

    @command("gated")
    async def gated(self, ctx):
        self.calls.append(("gated", ctx))

    def is_allowed(self, ctx):
        return self.allow


def test_collects_commands():
    admin = Admin()
    assert admin.name == "Admin"
    assert set(admin.commands) == {"kick", "whisper", "gated"}
    assert all(cmd.module is admin for cmd in admin.get_all())


def test_instances_get_own_copies():
    first = Admin()
    second = Admin()

    assert first.kick is not second.kick
    assert first.kick is first.commands["kick"]
    assert isinstance(Admin.kick, Command)
    assert Admin.kick.module is None

    first.kick.disable()
    assert second.kick.disabled is False


def test_get_command():
    admin = Admin()
    assert admin.get_command("kick") is admin.kick
    assert admin.get_command("k") is admin.kick
    assert admin.get_command("missing") is None


async def test_handler_receives_module(make_ctx):
    admin = Admin()
    ctx = make_ctx(guild={"id": 1})

    assert await admin.kick.execute(ctx) == "kicked"
    assert admin.calls == [("kick", ctx)]


async def test_bound_inhibitors_apply(make_ctx):
    admin = Admin()

    await admin.kick.execute(make_ctx(guild=None))
    await admin.whisper.execute(make_ctx(is_dm=False))
    assert admin.calls == []

    await admin.whisper.execute(make_ctx(is_dm=True))
    assert len(admin.calls) == 1


async def test_module_aware_inhibitor(make_ctx):
    """Inhibitors reach the module through a bound method."""
    admin = Admin()
    admin.gated.use_inhibitor(admin.is_allowed)

    admin.allow = False
    await admin.gated.execute(make_ctx())
    assert admin.calls == []

    admin.allow = True
    await admin.gated.execute(make_ctx())
    assert len(admin.calls) == 1


class Owner(Module):
    def __init__(self, allow):
        self.allow = allow
        self.calls = []
        super().__init__()

    def owner_only(self, ctx):
        return self.allow

    async def owner_only_async(self, ctx):
        return self.allow

    @create_inhibiting_decorator(owner_only)
    @command("secret")
    async def secret(self, ctx):
        self.calls.append(ctx)

    @create_inhibiting_decorator(owner_only_async)
    @command("vault")
    async def vault(self, ctx):
        self.calls.append(ctx)


async def test_class_body_inhibitor_gets_module(make_ctx, client):
    """Inhibitors declared in the class body run with the module as receiver."""
    blocked = Owner(allow=False)
    await blocked.secret.execute(make_ctx())
    await blocked.vault.execute(make_ctx())
    assert blocked.calls == []
    client.logger.warning.assert_not_called()

    allowed = Owner(allow=True)
    await allowed.secret.execute(make_ctx())
    await allowed.vault.execute(make_ctx())
    assert len(allowed.calls) == 2
    client.logger.warning.assert_not_called()


async def test_inherited_class_body_inhibitor(make_ctx, client):
    class Vault(Owner):
        @create_inhibiting_decorator(Owner.owner_only)
        @command("open")
        async def open(self, ctx):
            self.calls.append(ctx)

    vault = Vault(allow=False)
    await vault.open.execute(make_ctx())
    assert vault.calls == []
    client.logger.warning.assert_not_called()


async def test_foreign_function_inhibitor_gets_ctx_only(make_ctx):
    seen = Mock(return_value=True)

    def check(ctx):
        return seen(ctx)

    owner = Owner(allow=True)
    owner.secret.use_inhibitor(check)
    ctx = make_ctx()

    await owner.secret.execute(ctx)
    seen.assert_called_once_with(ctx)
    assert owner.calls == [ctx]


def test_custom_name():
    class Tools(Module):
        @command("ping")
        async def ping(self, ctx):
            pass

    tools = Tools("utility")
    assert tools.name == "utility"
    assert tools.get_command("ping") is tools.ping


def test_duplicate_names_raise():
    class Broken(Module):
        @command("same")
        async def one(self, ctx):
            pass

        @command("same")
        async def two(self, ctx):
            pass

    with pytest.raises(CommandConfigurationError):
        Broken()


def test_misuse_fails_at_class_definition():
    with pytest.raises(CommandConfigurationError):
        class Broken(Module):
            @guild_only
            async def plain(self, ctx):
                pass


def test_subclass_inherits_commands():
    class Extended(Admin):
        @command("ban")
        async def ban(self, ctx):
            pass

    extended = Extended()
    assert set(extended.commands) == {"kick", "whisper", "gated", "ban"}
    assert extended.ban.module is extended
