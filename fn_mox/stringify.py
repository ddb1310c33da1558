"""Render arbitrary values for diagnostic messages."""

from __future__ import annotations

import reprlib
import typing as t

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80
_repr.maxlist = 10
_repr.maxdict = 10

Stringify: t.TypeAlias = t.Callable[[object], str]


def stringify(value: object) -> str:
    """Return a short human readable form of *value*.

    Never raises: recursive containers are truncated by :mod:`reprlib`, and
    objects whose ``__repr__`` fails are described by their type.
    """
    try:
        return _repr.repr(value)
    except Exception as exc:  # noqa: BLE001 - diagnostics must not fail
        return f"<{type(value).__name__} object (repr failed: {type(exc).__name__})>"


__all__ = ["Stringify", "stringify"]
