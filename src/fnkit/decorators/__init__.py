"""Decorators: @safe."""

from fnkit.decorators.safe import safe

__all__ = [
    "safe",
]
