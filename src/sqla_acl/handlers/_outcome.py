"""Handler outcomes: the tagged result of a single evaluation step."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

__all__ = [
    "Outcome",
    "Passthrough",
    "Patch",
    "Reject",
    "Replace",
    "apply_outcome",
    "coerce_outcome",
]


@dataclass(frozen=True, slots=True)
class Passthrough:
    """Grant the step and keep the accumulated params unchanged."""


@dataclass(frozen=True, slots=True)
class Patch:
    """Grant the step and shallow-merge *values* over the accumulated params."""

    values: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Replace:
    """Grant the step and replace the accumulated params with *value*.

    *value* may be anything, ``None`` included.
    """

    value: Any = None


@dataclass(frozen=True, slots=True)
class Reject:
    """Refuse the request.

    Attributes:
        error: Explicit error to surface. When ``None`` the caller's
            ``on_reject`` factory or the generic rejection is used.
        overridable: *error* is a descriptive default that the caller's
            ``on_reject`` factory replaces when one is given.
    """

    error: BaseException | None = None
    overridable: bool = False


Outcome = Union[Passthrough, Patch, Replace, Reject]


def coerce_outcome(result: Any) -> Outcome:
    """Turn a raw handler or expression result into an ``Outcome``.

    ======================  ======================
    result                  outcome
    ======================  ======================
    ``Outcome`` instance    itself
    exception instance      ``Reject(result)``
    mapping                 ``Patch(result)``
    ``True``                ``Passthrough()``
    ``None``                ``Replace(None)``
    other falsy value       ``Reject()``
    anything else           ``Replace(result)``
    ======================  ======================

    Example::

        coerce_outcome({"id": "X"})   # Patch(values={'id': 'X'})
        coerce_outcome(False)         # Reject(error=None)
    """
    if isinstance(result, (Passthrough, Patch, Replace, Reject)):
        return result
    if isinstance(result, BaseException):
        return Reject(result)
    if isinstance(result, Mapping):
        return Patch(result)
    if result is True:
        return Passthrough()
    if result is None:
        return Replace(None)
    if not result:
        return Reject()
    return Replace(result)


def apply_outcome(current: Any, outcome: Passthrough | Patch | Replace) -> Any:
    """Return the params that follow *current* once *outcome* is applied.

    Never mutates *current*; a ``Patch`` over a non-mapping accumulator
    starts from an empty mapping.
    """
    if isinstance(outcome, Passthrough):
        return current
    if isinstance(outcome, Patch):
        base = current if isinstance(current, Mapping) else {}
        return {**base, **outcome.values}
    return outcome.value
