"""FastAPI integration for sqla-acl."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install sqla-acl[fastapi]"
    ) from exc

from sqla_acl.integrations.fastapi._dependencies import AclDep, get_auth, params_from_request
from sqla_acl.integrations.fastapi._errors import install_error_handlers

__all__ = ["AclDep", "get_auth", "install_error_handlers", "params_from_request"]
