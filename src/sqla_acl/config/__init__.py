"""Configuration module for sqla-acl."""

from __future__ import annotations

from sqla_acl.config._config import AclConfig, configure, get_global_config

__all__ = ["AclConfig", "configure", "get_global_config"]
