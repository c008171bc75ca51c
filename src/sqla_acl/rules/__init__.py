"""Rule tree: resolution, parsing and planning of ACL rules."""

from sqla_acl.rules._resolver import NOT_FOUND, UNDEFINED, Missing, resolve, resolve_role
from sqla_acl.rules._spec import (
    BooleanRule,
    ChainRule,
    ExpressionRule,
    HandlerRule,
    RuleSpec,
    Step,
    normalize,
    parse_rule,
)
from sqla_acl.rules._validate import validate_rules

__all__ = [
    "NOT_FOUND",
    "UNDEFINED",
    "BooleanRule",
    "ChainRule",
    "ExpressionRule",
    "HandlerRule",
    "Missing",
    "RuleSpec",
    "Step",
    "normalize",
    "parse_rule",
    "resolve",
    "resolve_role",
    "validate_rules",
]
