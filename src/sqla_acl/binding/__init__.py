"""SQLAlchemy binding: turn granted params into query clauses."""

from __future__ import annotations

from sqla_acl.binding._select import apply_params

__all__ = ["apply_params"]
