"""Namespace and role resolution against a rule tree."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

from sqla_acl._types import Role, RoleTable, RuleTree

__all__ = ["NOT_FOUND", "UNDEFINED", "Missing", "resolve", "resolve_role"]


class Missing(enum.Enum):
    """Sentinels for failed lookups, distinct from a rule set to ``None``."""

    NOT_FOUND = "not_found"
    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return f"<{self.name}>"


NOT_FOUND = Missing.NOT_FOUND
UNDEFINED = Missing.UNDEFINED


def resolve(tree: RuleTree, path: str) -> RoleTable | Missing:
    """Look up the role table stored at dotted *path* in *tree*.

    Each dot-separated segment is a single mapping lookup.

    Returns:
        The role table, or ``NOT_FOUND`` if any segment is missing or the
        value at *path* is not a mapping.

    Example::

        tree = {"orders": {"fetch": {"viewer": True}}}
        resolve(tree, "orders.fetch")  # {"viewer": True}
        resolve(tree, "orders.drop")   # NOT_FOUND
    """
    node: Any = tree
    for segment in path.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return NOT_FOUND
        node = node[segment]
    if not isinstance(node, Mapping):
        return NOT_FOUND
    return node


def resolve_role(table: RoleTable, role: Role | None) -> Any:
    """Return the raw rule for *role* in *table*.

    A single role is a direct lookup. A candidate list returns the value
    of the first candidate present as a key, whatever that value is
    (``False`` and ``None`` included).

    Returns:
        The raw rule, or ``UNDEFINED`` when no role matches.

    Example::

        table = {"guest": False, "admin": True}
        resolve_role(table, ["guest", "admin"])  # False
        resolve_role(table, ["editor"])          # UNDEFINED
    """
    if role is None:
        return UNDEFINED
    if isinstance(role, str):
        return table[role] if role in table else UNDEFINED
    for candidate in role:
        if candidate in table:
            return table[candidate]
    return UNDEFINED
