"""HandlerRegistration dataclass: metadata for a registered handler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["HandlerFn", "HandlerRegistration"]

# (argument, params, auth, context) -> Outcome | raw value | awaitable of either
HandlerFn = Callable[[Any, Any, Any, Any], Any]


@dataclass(frozen=True, slots=True)
class HandlerRegistration:
    """A single registered handler with its metadata.

    Attributes:
        name: The handler name rules refer to (e.g. ``"select"``).
        fn: The handler callable.
        description: Human-readable description (from docstring).
    """

    name: str
    fn: HandlerFn
    description: str
