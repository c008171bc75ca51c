"""@handler decorator: register host handler functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sqla_acl.handlers._base import HandlerFn
from sqla_acl.handlers._registry import HandlerRegistry, get_default_registry

__all__ = ["handler"]

F = TypeVar("F", bound=HandlerFn)


def handler(
    name: str,
    *,
    registry: HandlerRegistry | None = None,
    replace: bool = False,
) -> Callable[[F], F]:
    """Decorator that registers a handler function under *name*.

    Args:
        name: The rule key that dispatches to this handler.
        registry: Optional custom registry. Defaults to the global registry.
        replace: Allow overriding an existing registration.

    Returns:
        A decorator that registers the function and returns it unchanged.

    Example::

        @handler("tenant")
        def tenant(argument, params, auth, context):
            return {"tenant_id": auth.tenant_id}

        rules = {"orders": {"fetch": {"staff": {"tenant": True, "limit": 50}}}}
    """

    def decorator(fn: F) -> F:
        target = registry if registry is not None else get_default_registry()
        target.register(name, fn, description=fn.__doc__ or "", replace=replace)
        return fn

    return decorator
