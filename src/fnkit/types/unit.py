"""Unit type: the payload of a success that carries no value."""

from __future__ import annotations

import msgspec

__all__ = ["Unit", "unit"]


class Unit(msgspec.Struct, frozen=True, gc=False):
    """A value with no information.

    Ok(None) is a contract violation, so operations that succeed without
    producing anything return ``Ok(unit)`` instead.
    """


unit: Unit = Unit()
"""Singleton Unit instance."""
