"""Audit logging for ACL evaluation decisions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqla_acl.rules._spec import Step

__all__ = ["log_acl_decision", "log_acl_fault", "log_bypass_event"]

logger = logging.getLogger("sqla_acl")


def log_acl_decision(
    *,
    path: str,
    role: object,
    outcome: str,
    steps: Sequence[Step],
    params: Any = None,
) -> None:
    """Log the decision reached for one guarded operation call.

    Logging levels:
    - INFO: Summary (path, role, outcome, step count)
    - DEBUG: Detailed (step names, keys of the resulting params)

    Example::

        log_acl_decision(
            path="orders.fetch",
            role="viewer",
            outcome="granted",
            steps=steps,
            params=final_params,
        )
    """
    logger.info(
        "ACL decision: %s role=%r %s after %d step(s)",
        path,
        role,
        outcome,
        len(steps),
    )

    if logger.isEnabledFor(logging.DEBUG):
        step_names = [step.name for step in steps]
        keys = sorted(params) if isinstance(params, Mapping) else type(params).__name__
        logger.debug("ACL steps for %s: %s, params: %s", path, step_names, keys)


def log_acl_fault(*, path: str, error: BaseException) -> None:
    """Log a configuration or caller-input fault for *path*."""
    logger.warning("ACL fault for %s: %s", path, error)


def log_bypass_event(*, path: str, role: object) -> None:
    """Log use of the bypass role on the ``sqla_acl.bypass`` sub-logger."""
    logging.getLogger("sqla_acl.bypass").warning(
        "BYPASS: role=%r granted %s by the bypass role", role, path
    )
