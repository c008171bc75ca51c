"""sqla-acl: namespace/role ACL rules for request params.

Resolves a caller's role against a nested rule tree, runs the matching
rule steps (boolean gates, expressions, field selection, limit clamping)
and hands back the params the data layer may safely execute.

Example::

    from sqla_acl import Acl, apply_params

    acl = Acl(
        {"orders": {"fetch": {"viewer": {"select": ["id", "total"], "limit": 20}}}},
        context=session,
        executors=["orders.fetch"],
    )

    params = await acl.execute["orders.fetch"]({"limit": 100}, {"role": "viewer"})
    stmt = apply_params(select(Order), params)
"""

from importlib.metadata import PackageNotFoundError, version

from sqla_acl._acl import Acl, GuardedOperation
from sqla_acl._types import AuthLike
from sqla_acl.binding._select import apply_params
from sqla_acl.config._config import AclConfig, configure
from sqla_acl.engine._options import AclOptions
from sqla_acl.exceptions import (
    AclError,
    AclFault,
    AclRejected,
    BadAclError,
    MissingAuthError,
    NoAclError,
    NoAclRoleError,
    RuleValidationError,
    UnknownHandlerError,
)
from sqla_acl.handlers._decorator import handler
from sqla_acl.handlers._registry import HandlerRegistry

try:
    __version__ = version("sqla-acl")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "Acl",
    "AclConfig",
    "AclError",
    "AclFault",
    "AclOptions",
    "AclRejected",
    "AuthLike",
    "BadAclError",
    "GuardedOperation",
    "HandlerRegistry",
    "MissingAuthError",
    "NoAclError",
    "NoAclRoleError",
    "RuleValidationError",
    "UnknownHandlerError",
    "apply_params",
    "configure",
    "handler",
]
