"""Built-in handlers: boolean, expression, select, limit."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any

from sqla_acl.exceptions import AclRejected
from sqla_acl.handlers._outcome import Outcome, Passthrough, Patch, Reject

__all__ = ["BUILTIN_HANDLERS", "boolean", "expression", "limit", "select"]


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        return [value]
    return list(value)


def _field(params: Any, name: str) -> Any:
    if isinstance(params, Mapping):
        return params.get(name)
    return None


def boolean(value: bool | None, params: Any, auth: Any, context: Any) -> Outcome:
    """Grant unchanged when *value* is truthy, reject on ``False``/``None``."""
    return Passthrough() if value else Reject()


def expression(fn: Any, params: Any, auth: Any, context: Any) -> Any:
    """Invoke a rule expression as ``fn(params, auth, context)``.

    The raw result (immediate or awaitable) is returned to the evaluator,
    which awaits it and coerces it with
    :func:`~sqla_acl.handlers._outcome.coerce_outcome`. An expression
    returning an exception instance rejects with that exception.

    Example::

        def owner_only(params, auth, context):
            return {"owner_id": auth.id}

        rules = {"orders": {"fetch": {"customer": owner_only}}}
    """
    if not callable(fn):
        raise TypeError(f"expression must be callable, got {type(fn).__name__}")
    return fn(params, auth, context)


def select(allowed: Any, params: Any, auth: Any, context: Any) -> Outcome:
    """Restrict ``params["select"]`` to the *allowed* fields.

    The result keeps the order of *allowed*. When the caller requested no
    fields, every allowed field is selected; when none of the requested
    fields is allowed, the request is rejected with a message naming the
    allowed fields, unless the caller supplies ``on_reject``.

    Example::

        select(["id", "name"], {"select": ["id", "age"]}, auth, None)
        # Patch(values={'select': ['id']})
    """
    allowed_fields = _as_list(allowed)
    requested = _field(params, "select")
    requested_fields = allowed_fields if requested is None else _as_list(requested)

    intersection = [name for name in allowed_fields if name in requested_fields]
    if not intersection:
        return Reject(
            AclRejected(
                "No select field is allowed, you can select "
                + ",".join(str(name) for name in allowed_fields)
            ),
            overridable=True,
        )
    return Patch({"select": intersection})


def limit(max_value: Real, params: Any, auth: Any, context: Any) -> Outcome:
    """Clamp ``params["limit"]`` to ``(0, max_value]``, defaulting to *max_value*."""
    requested = _field(params, "limit")
    if (
        isinstance(requested, Real)
        and not isinstance(requested, bool)
        and 0 < requested <= max_value
    ):
        return Patch({"limit": requested})
    return Patch({"limit": max_value})


BUILTIN_HANDLERS = {
    "boolean": boolean,
    "expression": expression,
    "select": select,
    "limit": limit,
}
