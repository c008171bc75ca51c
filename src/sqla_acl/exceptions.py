"""Exception hierarchy for sqla-acl.

Three families are kept apart:

- ``AclFault``: the rule configuration itself is broken.
- ``MissingAuthError``: the caller supplied no identity.
- ``AclRejected``: the request is simply not permitted.

Only ``AclRejected`` can be silenced by ``reject_silently``.
"""

from __future__ import annotations

__all__ = [
    "AclError",
    "AclFault",
    "AclRejected",
    "BadAclError",
    "MissingAuthError",
    "NoAclError",
    "NoAclRoleError",
    "RuleValidationError",
    "UnknownHandlerError",
]


class AclError(Exception):
    """Base exception for all sqla-acl errors.

    Attributes:
        status_code: Status-like hint for transport mapping. The core
            never interprets it.
    """

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class AclFault(AclError):
    """The ACL configuration is broken. Never silenced."""


class NoAclError(AclFault):
    """No role table exists at the requested namespace path.

    Attributes:
        path: The dotted namespace path that was looked up.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"no ACL for {path}")


class NoAclRoleError(AclFault):
    """The caller's role has no entry in the namespace's role table.

    Attributes:
        path: The dotted namespace path.
        role: The role (or candidate list) that failed to resolve.
    """

    def __init__(self, path: str, *, role: object = None) -> None:
        self.path = path
        self.role = role
        super().__init__(f"no ACL role for {path}")


class UnknownHandlerError(AclFault):
    """A rule step names a handler that is not registered.

    Attributes:
        handler: The unregistered handler name.
    """

    def __init__(self, handler: str) -> None:
        self.handler = handler
        super().__init__("inexistent ACL")


class BadAclError(AclFault):
    """A rule could not be planned, or a handler raised while invoked.

    Attributes:
        detail: The underlying problem description.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"bad ACL: {detail}")


class RuleValidationError(BadAclError):
    """Strict rule validation found one or more problems.

    Attributes:
        problems: Every problem found, in tree order.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class MissingAuthError(AclError):
    """No auth object was supplied to a guarded operation. Never silenced."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("no auth object provided")


class AclRejected(AclError):  # noqa: N818
    """The request is not permitted by the resolved rule.

    Attributes:
        path: The namespace path being evaluated, when known.
        role: The caller's role, when known.

    Example::

        try:
            params = await acl.execute["orders.fetch"](params, auth)
        except AclRejected as exc:
            print(exc.path, exc.role, exc.status_code)  # ... 403
    """

    status_code = 403

    def __init__(
        self,
        message: str | None = None,
        *,
        path: str | None = None,
        role: object = None,
        status_code: int | None = None,
    ) -> None:
        self.path = path
        self.role = role
        super().__init__(message or "ACL refused request", status_code=status_code)
