"""Per-invocation options for guarded operations."""

from __future__ import annotations

from dataclasses import dataclass

from sqla_acl._types import RejectFactory

__all__ = ["AclOptions"]


@dataclass(frozen=True, slots=True)
class AclOptions:
    """Options recognized by a guarded operation call.

    Attributes:
        reject_silently: Turn a rejection into an empty completion
            (the call returns ``None``). Faults are never silenced.
        on_reject: Zero-argument factory producing the error raised on a
            bare rejection, instead of ``AclRejected``.

    Example::

        options = AclOptions(on_reject=lambda: PermissionError("nope"))
        await fetch(params, auth, options)
    """

    reject_silently: bool = False
    on_reject: RejectFactory | None = None

    def merge(
        self,
        *,
        reject_silently: bool | None = None,
        on_reject: RejectFactory | None = None,
    ) -> AclOptions:
        """Return new options with non-None overrides applied."""
        return AclOptions(
            reject_silently=(
                reject_silently if reject_silently is not None else self.reject_silently
            ),
            on_reject=on_reject if on_reject is not None else self.on_reject,
        )
