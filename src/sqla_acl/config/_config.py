"""Layered configuration for sqla-acl."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "AclConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]


@dataclass(frozen=True, slots=True)
class AclConfig:
    """Layered configuration with merge semantics (global -> acl).

    Attributes:
        bypass_role: Root/super-access role that skips role resolution
            and is granted unconditionally. ``None`` disables the bypass.
            An explicit ``bypass_role`` passed to ``Acl`` wins over this.
        log_acl_decisions: Emit audit log records for each evaluation.
        audit_bypass_role: Log every use of the bypass role.
        reject_silently: Default for ``AclOptions.reject_silently`` when
            a call passes no options.
        strict_rules: Validate executor rules when an ``Acl`` is built
            instead of deferring unknown handlers to call time.

    Example::

        config = AclConfig(bypass_role="root")
        merged = config.merge(log_acl_decisions=True)
    """

    bypass_role: str | None = None
    log_acl_decisions: bool = False
    audit_bypass_role: bool = False
    reject_silently: bool = False
    strict_rules: bool = False

    def __post_init__(self) -> None:
        if self.bypass_role is not None and (
            not isinstance(self.bypass_role, str) or not self.bypass_role
        ):
            raise ValueError(
                f"bypass_role must be a non-empty string or None, got {self.bypass_role!r}"
            )

    def merge(
        self,
        *,
        bypass_role: str | None = None,
        log_acl_decisions: bool | None = None,
        audit_bypass_role: bool | None = None,
        reject_silently: bool | None = None,
        strict_rules: bool | None = None,
    ) -> AclConfig:
        """Return a new config with non-None overrides applied.

        Args:
            bypass_role: Override for bypass_role (ignored if None).
            log_acl_decisions: Override for log_acl_decisions (ignored if None).
            audit_bypass_role: Override for audit_bypass_role (ignored if None).
            reject_silently: Override for reject_silently (ignored if None).
            strict_rules: Override for strict_rules (ignored if None).

        Returns:
            A new ``AclConfig`` with overrides merged.

        Example::

            base = AclConfig()
            acl_cfg = base.merge(bypass_role="root", strict_rules=True)
        """
        return AclConfig(
            bypass_role=bypass_role if bypass_role is not None else self.bypass_role,
            log_acl_decisions=(
                log_acl_decisions if log_acl_decisions is not None else self.log_acl_decisions
            ),
            audit_bypass_role=(
                audit_bypass_role if audit_bypass_role is not None else self.audit_bypass_role
            ),
            reject_silently=(
                reject_silently if reject_silently is not None else self.reject_silently
            ),
            strict_rules=strict_rules if strict_rules is not None else self.strict_rules,
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AclConfig()


def get_global_config() -> AclConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.bypass_role)  # None
    """
    return _global_config


def configure(
    *,
    bypass_role: str | None = None,
    log_acl_decisions: bool | None = None,
    audit_bypass_role: bool | None = None,
    reject_silently: bool | None = None,
    strict_rules: bool | None = None,
) -> AclConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Args:
        bypass_role: Set the default root/super-access role.
        log_acl_decisions: Enable/disable audit logging of decisions.
        audit_bypass_role: Enable/disable logging of bypass role use.
        reject_silently: Set the default for per-call rejection silencing.
        strict_rules: Enable/disable validation at ``Acl`` construction.

    Returns:
        The updated global ``AclConfig``.

    Example::

        configure(bypass_role=f"root-{os.getpid()}", log_acl_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        bypass_role=bypass_role,
        log_acl_decisions=log_acl_decisions,
        audit_bypass_role=audit_bypass_role,
        reject_silently=reject_silently,
        strict_rules=strict_rules,
    )
    return _global_config


def _set_global_config(cfg: AclConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AclConfig()
