"""Handler set: the named operations rule steps dispatch to."""

from sqla_acl.handlers._base import HandlerFn, HandlerRegistration
from sqla_acl.handlers._builtins import BUILTIN_HANDLERS, boolean, expression, limit, select
from sqla_acl.handlers._decorator import handler
from sqla_acl.handlers._outcome import (
    Outcome,
    Passthrough,
    Patch,
    Reject,
    Replace,
    apply_outcome,
    coerce_outcome,
)
from sqla_acl.handlers._registry import HandlerRegistry, get_default_registry

__all__ = [
    "BUILTIN_HANDLERS",
    "HandlerFn",
    "HandlerRegistration",
    "HandlerRegistry",
    "Outcome",
    "Passthrough",
    "Patch",
    "Reject",
    "Replace",
    "apply_outcome",
    "boolean",
    "coerce_outcome",
    "expression",
    "get_default_registry",
    "handler",
    "limit",
    "select",
]
