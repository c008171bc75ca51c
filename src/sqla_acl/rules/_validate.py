"""Static validation of rule tree entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from sqla_acl._types import RuleTree
from sqla_acl.exceptions import BadAclError
from sqla_acl.handlers._registry import HandlerRegistry
from sqla_acl.rules._resolver import NOT_FOUND, resolve
from sqla_acl.rules._spec import parse_rule

__all__ = ["validate_rules"]


def _is_rule(raw: Any) -> bool:
    try:
        parse_rule(raw)
    except BadAclError:
        return False
    return True


def _is_namespace(node: Mapping[str, Any], handlers: HandlerRegistry) -> bool:
    """Whether *node* holds role tables rather than being one itself.

    Every child must be a non-empty mapping whose keys are not handler
    names and whose values are valid rules.
    """
    if not node:
        return False
    for child in node.values():
        if not isinstance(child, Mapping) or not child:
            return False
        for name, raw in child.items():
            if not isinstance(name, str) or handlers.has_handler(name) or not _is_rule(raw):
                return False
    return True


def _role_table_paths(tree: RuleTree, path: str, handlers: HandlerRegistry) -> Iterator[str]:
    node = resolve(tree, path)
    if node is NOT_FOUND or not _is_namespace(node, handlers):
        yield path
        return
    for key in node:
        yield from _role_table_paths(tree, f"{path}.{key}", handlers)


def validate_rules(
    tree: RuleTree,
    paths: Iterable[str],
    handlers: HandlerRegistry,
    *,
    descend: bool = False,
) -> list[str]:
    """Collect problems in the rules stored at each of *paths*.

    Never raises. Checks that every path resolves, every role's rule can
    be planned, and every planned step names a registered handler.

    Args:
        tree: The rule tree.
        paths: Dotted paths of the role tables to check.
        handlers: Registry that step names must be found in.
        descend: Treat a path whose children all look like role tables
            as a namespace and check those children instead. A role
            table whose rules are all mappings of unregistered names is
            indistinguishable from a namespace and is descended into.

    Returns:
        Human-readable problems in path/role order; empty when all is well.

    Example::

        problems = validate_rules(rules, ["orders.fetch"], get_default_registry())
        # ["orders.fetch[viewer]: unknown handler 'selct'"]
    """
    if descend:
        paths = [leaf for path in paths for leaf in _role_table_paths(tree, path, handlers)]

    problems: list[str] = []
    for path in paths:
        table = resolve(tree, path)
        if table is NOT_FOUND:
            problems.append(f"{path}: no ACL")
            continue
        for role, raw in table.items():
            try:
                steps = parse_rule(raw).steps()
            except BadAclError as exc:
                problems.append(f"{path}[{role}]: {exc.detail}")
                continue
            for step in steps:
                if not handlers.has_handler(step.name):
                    problems.append(f"{path}[{role}]: unknown handler {step.name!r}")
    return problems
