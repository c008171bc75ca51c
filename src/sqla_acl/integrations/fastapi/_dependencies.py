"""FastAPI dependencies for sqla-acl guarded operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Depends, Request

from sqla_acl._acl import GuardedOperation
from sqla_acl._types import AuthLike

__all__ = ["AclDep", "get_auth", "params_from_request"]


def get_auth(request: Request) -> AuthLike:
    """Sentinel dependency: override via ``app.dependency_overrides[get_auth]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their identity provider before using ``AclDep``.

    Example::

        from sqla_acl.integrations.fastapi import get_auth

        app.dependency_overrides[get_auth] = my_get_current_caller
    """
    raise NotImplementedError(
        "Override get_auth via app.dependency_overrides[get_auth]. "
        "See sqla-acl docs for configuration guide."
    )


def params_from_request(request: Request) -> dict[str, Any]:
    """Build request params from path and query parameters.

    Query keys given once map to their value and repeated keys to a list.
    ``select`` is always a list (repeated and/or comma-separated) and
    ``limit`` is parsed as an integer when it is one. Path parameters win
    over query parameters.

    Example::

        # GET /orders?status=open&select=id,total&limit=5
        params_from_request(request)
        # {"status": "open", "select": ["id", "total"], "limit": 5}
    """
    params: dict[str, Any] = {}
    query = request.query_params
    for key in query.keys():
        values = query.getlist(key)
        if key == "select":
            params[key] = [name for value in values for name in value.split(",") if name]
        elif key == "limit" and len(values) == 1:
            try:
                params[key] = int(values[0])
            except ValueError:
                params[key] = values[0]
        else:
            params[key] = values[0] if len(values) == 1 else list(values)
    params.update(request.path_params)
    return params


def _make_dependency(
    operation: GuardedOperation,
    *,
    reject_silently: bool = False,
) -> Callable[..., Any]:
    """Build the async dependency function for a guarded operation."""

    async def _resolve(request: Request, auth: Any = Depends(get_auth)) -> Any:
        params = params_from_request(request)
        return await operation(params, auth, reject_silently=reject_silently)

    return _resolve


def AclDep(  # noqa: N802
    operation: GuardedOperation,
    *,
    reject_silently: bool = False,
) -> Any:
    """FastAPI dependency that authorizes the request's params.

    Resolves the caller through the ``get_auth`` sentinel, builds params
    from the request, runs *operation* and injects the granted params.
    Rejections and faults raise ``AclError``; install
    :func:`install_error_handlers` to turn them into responses. With
    ``reject_silently`` a rejection injects ``None`` instead.

    Args:
        operation: A guarded operation, e.g. ``acl.execute["orders.fetch"]``.
        reject_silently: Inject ``None`` instead of raising on rejection.

    Returns:
        A FastAPI ``Depends`` instance.

    Example::

        @app.get("/orders")
        async def list_orders(
            params: dict = AclDep(acl.factory("orders.fetch")),
            session: AsyncSession = Depends(get_db),
        ) -> list[dict]:
            rows = await session.execute(apply_params(select(Order), params))
            return [dict(row._mapping) for row in rows]
    """
    return Depends(_make_dependency(operation, reject_silently=reject_silently))
