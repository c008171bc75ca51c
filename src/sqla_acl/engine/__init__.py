"""Evaluation engine: runs planned rule steps."""

from sqla_acl.engine._evaluate import Decision, Granted, Rejected, evaluate
from sqla_acl.engine._options import AclOptions

__all__ = ["AclOptions", "Decision", "Granted", "Rejected", "evaluate"]
