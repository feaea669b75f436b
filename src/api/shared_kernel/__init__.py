"""Shared Kernel module.

Foundational building blocks that bounded contexts agree to depend on:
the Entity/Reference shapes every aggregate follows, and the
ValidationError signal raised when a business rule rejects input.

Changes here ripple into every context that imports them, so keep this
module small and coordinate edits with the consuming contexts.
"""
