"""evaluate(): sequential, short-circuiting execution of planned steps."""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from sqla_acl.exceptions import (
    AclError,
    AclRejected,
    BadAclError,
    MissingAuthError,
    UnknownHandlerError,
)
from sqla_acl.handlers._outcome import Reject, apply_outcome, coerce_outcome
from sqla_acl.handlers._registry import HandlerRegistry
from sqla_acl.rules._spec import Step

__all__ = ["Decision", "Granted", "Rejected", "evaluate"]


@dataclass(frozen=True, slots=True)
class Granted:
    """Every step passed. *params* is the final accumulated value."""

    params: Any


@dataclass(frozen=True, slots=True)
class Rejected:
    """A step refused the request.

    Attributes:
        error: The explicit error produced by the step, if any.
        step: The step that rejected.
        overridable: *error* is only a default; a caller's ``on_reject``
            factory replaces it.
    """

    error: BaseException | None
    step: Step
    overridable: bool = False


Decision = Union[Granted, Rejected]


def _snapshot(params: Any) -> Any:
    # Handlers never see the accumulator itself.
    if isinstance(params, Mapping):
        return dict(params)
    return params


async def evaluate(
    steps: Sequence[Step],
    params: Any,
    auth: Any,
    *,
    handlers: HandlerRegistry,
    context: Any = None,
) -> Decision:
    """Run *steps* in order against *params* and *auth*.

    Each handler is invoked as ``fn(argument, params, auth, context)``.
    Awaitable results are awaited before the next step starts; steps
    never run concurrently. The first rejection stops evaluation. A
    handler raising ``AclRejected``, while called or while awaited,
    rejects like a returned ``Reject``.

    Args:
        steps: Planned steps, see :func:`~sqla_acl.rules.normalize`.
        params: The initial request params.
        auth: The caller's identity. Must not be ``None``.
        handlers: Registry used to dispatch step names.
        context: Opaque value handed to every handler.

    Returns:
        ``Granted(final_params)`` or ``Rejected(error, step)``.

    Raises:
        MissingAuthError: If *auth* is ``None``.
        UnknownHandlerError: If a step names an unregistered handler.
        BadAclError: If a handler raises (or its awaitable fails) with
            anything other than an ``AclError``.

    Example::

        steps = normalize({"limit": 10, "select": ["id"]})
        decision = await evaluate(steps, {"limit": 50}, auth, handlers=registry)
        # Granted(params={'limit': 10, 'select': ['id']})
    """
    if auth is None:
        raise MissingAuthError()

    current = params
    for step in steps:
        registration = handlers.lookup(step.name)
        if registration is None:
            raise UnknownHandlerError(step.name)

        try:
            result = registration.fn(step.argument, _snapshot(current), auth, context)
            if inspect.isawaitable(result):
                result = await result
        except AclRejected as exc:
            return Rejected(exc, step)
        except AclError:
            raise
        except Exception as exc:
            raise BadAclError(str(exc) or type(exc).__name__) from exc

        outcome = coerce_outcome(result)
        if isinstance(outcome, Reject):
            return Rejected(outcome.error, step, outcome.overridable)
        current = apply_outcome(current, outcome)

    return Granted(current)
