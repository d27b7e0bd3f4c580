"""
Bot-side collaborators: configuration and invocation context.
"""
