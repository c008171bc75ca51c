"""apply_params(): bind granted params onto a SQLAlchemy SELECT."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select
from sqlalchemy import inspect as sa_inspect

__all__ = ["apply_params"]

_RESERVED = frozenset({"select", "limit"})


def _statement_entity(stmt: Select[Any]) -> type:
    for desc in stmt.column_descriptions:
        entity: type | None = desc.get("entity")
        if entity is not None:
            return entity
    raise ValueError("statement does not select a mapped entity")


def apply_params(
    stmt: Select[Any],
    params: Mapping[str, Any] | None,
    *,
    entity: type | None = None,
) -> Select[Any]:
    """Apply params granted by a guarded operation to a SELECT statement.

    - ``select`` narrows the selected columns to the named mapped columns.
    - ``limit`` sets the LIMIT clause.
    - Any other key naming a mapped column adds ``column == value``
      (``column IN (...)`` for list/tuple/set values).
    - Remaining keys are ignored.

    Args:
        stmt: A SQLAlchemy 2.0 Select statement.
        params: The granted params. ``None`` leaves *stmt* unchanged.
        entity: Mapped class whose columns params refer to. Defaults to
            the first entity selected by *stmt*.

    Returns:
        A new Select with the params applied.

    Raises:
        ValueError: If ``select`` names a field that is not a mapped
            column, or no entity can be determined.

    Example::

        params = await acl.execute["orders.fetch"]({"status": "open"}, auth)
        stmt = apply_params(select(Order), params)
        # SELECT orders.id, orders.total FROM orders
        #  WHERE orders.status = :status_1 LIMIT :param_1
    """
    if params is None:
        return stmt
    if not isinstance(params, Mapping):
        raise TypeError(f"params must be a mapping, got {type(params).__name__}")

    target = entity if entity is not None else _statement_entity(stmt)
    mapper = sa_inspect(target)
    columns: dict[str, Any] = {prop.key: getattr(target, prop.key) for prop in mapper.column_attrs}

    for key, value in params.items():
        if key in _RESERVED or key not in columns:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            stmt = stmt.where(columns[key].in_(list(value)))
        else:
            stmt = stmt.where(columns[key] == value)

    fields = params.get("select")
    if fields is not None:
        names = [fields] if isinstance(fields, str) else list(fields)
        unknown = [name for name in names if name not in columns]
        if unknown:
            raise ValueError(
                f"cannot select unmapped field(s) {unknown!r} on {target.__name__}"
            )
        stmt = stmt.with_only_columns(*(columns[name] for name in names))

    limit = params.get("limit")
    if limit is not None:
        stmt = stmt.limit(limit)

    return stmt
