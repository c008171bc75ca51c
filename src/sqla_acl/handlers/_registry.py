"""HandlerRegistry: maps handler names to handler functions."""

from __future__ import annotations

from sqla_acl.handlers._base import HandlerFn, HandlerRegistration
from sqla_acl.handlers._builtins import BUILTIN_HANDLERS

__all__ = ["HandlerRegistry", "get_default_registry"]


class HandlerRegistry:
    """Registry that maps handler names to handler functions.

    Thread-safe for reads after startup. Rules name handlers by key
    (``{"select": [...]}``); names not found here fault with
    ``inexistent ACL`` when dispatched.

    Example::

        registry = HandlerRegistry()
        registry.register("owner", owner_handler, description="")
        registry.lookup("select").fn  # the built-in select handler
    """

    def __init__(self, *, builtins: bool = True) -> None:
        self._handlers: dict[str, HandlerRegistration] = {}
        if builtins:
            for name, fn in BUILTIN_HANDLERS.items():
                self.register(name, fn, description=(fn.__doc__ or "").strip())

    def register(
        self,
        name: str,
        fn: HandlerFn,
        *,
        description: str = "",
        replace: bool = False,
    ) -> None:
        """Register a handler under *name*.

        Args:
            name: The name rules use to refer to the handler.
            fn: A callable ``(argument, params, auth, context)`` returning
                an ``Outcome``, a raw value, or an awaitable of either.
            description: Description of the handler (typically the docstring).
            replace: Allow overriding an existing registration.

        Raises:
            ValueError: If *name* is empty or already registered and
                *replace* is false.

        Example::

            def tenant(argument, params, auth, context):
                return {"tenant_id": auth.tenant_id}

            registry.register("tenant", tenant)
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"handler name must be a non-empty string, got {name!r}")
        if name in self._handlers and not replace:
            raise ValueError(f"handler {name!r} is already registered")
        self._handlers[name] = HandlerRegistration(name=name, fn=fn, description=description)

    def unregister(self, name: str) -> None:
        """Remove the handler registered under *name*, if any."""
        self._handlers.pop(name, None)

    def lookup(self, name: str) -> HandlerRegistration | None:
        """Return the registration for *name*, or ``None`` if unknown."""
        return self._handlers.get(name)

    def has_handler(self, name: str) -> bool:
        """Check whether a handler is registered under *name*."""
        return name in self._handlers

    def names(self) -> list[str]:
        """Return registered handler names in registration order."""
        return list(self._handlers)

    def copy(self) -> HandlerRegistry:
        """Return an independent registry with the same registrations.

        Example::

            local = get_default_registry().copy()
            local.register("tenant", tenant)  # default registry untouched
        """
        clone = HandlerRegistry(builtins=False)
        clone._handlers = dict(self._handlers)
        return clone

    def clear(self) -> None:
        """Remove all registered handlers, built-ins included."""
        self._handlers.clear()


# Module-level default registry (singleton).
_default_registry = HandlerRegistry()


def get_default_registry() -> HandlerRegistry:
    """Return the global default (singleton) handler registry.

    This is the registry used by ``Acl`` and ``@handler`` when no
    explicit registry is provided. It starts with the built-ins.
    """
    return _default_registry
