"""Shared protocols and type aliases for sqla-acl."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, Union, runtime_checkable

__all__ = [
    "AuthLike",
    "Params",
    "RejectFactory",
    "Role",
    "RoleTable",
    "RuleTree",
    "get_role",
]

# A role is a single identifier or an ordered list of candidates.
Role = Union[str, Sequence[str]]

# Request parameters flowing through the evaluation pipeline.
Params = Mapping[str, Any]

# role -> raw rule
RoleTable = Mapping[str, Any]

# path segment -> nested RuleTree or RoleTable
RuleTree = Mapping[str, Any]

# Zero-argument factory producing the error raised on rejection.
RejectFactory = Callable[[], BaseException]


@runtime_checkable
class AuthLike(Protocol):
    """Structural type for caller identities.

    Any object with a ``role`` attribute satisfies this protocol.
    Mappings carrying a ``"role"`` key are accepted as well.

    Example::

        @dataclass
        class Caller:
            id: str
            role: str

        assert isinstance(Caller(id="u1", role="viewer"), AuthLike)
    """

    @property
    def role(self) -> Role | None: ...


def get_role(auth: AuthLike | Mapping[str, Any]) -> Role | None:
    """Return the role carried by *auth*, or ``None`` when it has none.

    Example::

        get_role({"role": "viewer"})          # "viewer"
        get_role(MockAuth(id=1, role="admin"))  # "admin"
    """
    if isinstance(auth, Mapping):
        return auth.get("role")
    return getattr(auth, "role", None)
