"""Tests for audit logging."""

from __future__ import annotations

import logging

import pytest

from sqla_acl._acl import Acl
from sqla_acl.config._config import AclConfig, configure
from sqla_acl.exceptions import AclRejected, NoAclError
from sqla_acl.handlers._registry import HandlerRegistry
from sqla_acl.testing._auth import make_auth

RULES = {
    "orders": {
        "fetch": {"viewer": {"select": ["id"], "limit": 5}, "guest": False},
    }
}


@pytest.mark.asyncio
class TestAuditLogging:
    async def test_logging_disabled_by_default(self, caplog, registry: HandlerRegistry):
        acl = Acl(RULES, handlers=registry)

        with caplog.at_level(logging.DEBUG, logger="sqla_acl"):
            await acl.factory("orders.fetch")({}, make_auth(role="viewer"))

        assert len(caplog.records) == 0

    async def test_info_level_summary(self, caplog, registry: HandlerRegistry):
        configure(log_acl_decisions=True)
        acl = Acl(RULES, handlers=registry)

        with caplog.at_level(logging.INFO, logger="sqla_acl"):
            await acl.factory("orders.fetch")({}, make_auth(role="viewer"))

        info_records = [r for r in caplog.records if r.levelno == logging.INFO]
        assert len(info_records) == 1
        msg = info_records[0].message
        assert "orders.fetch" in msg
        assert "'viewer'" in msg
        assert "granted after 2 step(s)" in msg

    async def test_debug_level_details(self, caplog, registry: HandlerRegistry):
        acl = Acl(RULES, handlers=registry, config=AclConfig(log_acl_decisions=True))

        with caplog.at_level(logging.DEBUG, logger="sqla_acl"):
            await acl.factory("orders.fetch")({"id": 1}, make_auth(role="viewer"))

        debug_records = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert len(debug_records) == 1
        msg = debug_records[0].message
        assert "['select', 'limit']" in msg
        assert "['id', 'limit', 'select']" in msg

    async def test_rejection_logged(self, caplog, registry: HandlerRegistry):
        acl = Acl(RULES, handlers=registry, config=AclConfig(log_acl_decisions=True))

        with caplog.at_level(logging.INFO, logger="sqla_acl"):
            with pytest.raises(AclRejected):
                await acl.factory("orders.fetch")({}, make_auth(role="guest"))

        assert "rejected after 1 step(s)" in caplog.records[0].message

    async def test_silenced_rejection_logged(self, caplog, registry: HandlerRegistry):
        acl = Acl(RULES, handlers=registry, config=AclConfig(log_acl_decisions=True))

        with caplog.at_level(logging.INFO, logger="sqla_acl"):
            await acl.factory("orders.fetch")({}, make_auth(role="guest"), reject_silently=True)

        assert "silenced" in caplog.records[0].message

    async def test_fault_logged_as_warning(self, caplog, registry: HandlerRegistry):
        acl = Acl(RULES, handlers=registry, config=AclConfig(log_acl_decisions=True))

        with caplog.at_level(logging.WARNING, logger="sqla_acl"):
            with pytest.raises(NoAclError):
                await acl.factory("users.fetch")({}, make_auth())

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "no ACL for users.fetch" in warnings[0].message

    async def test_bypass_audit(self, caplog, registry: HandlerRegistry):
        acl = Acl(
            RULES,
            bypass_role="root",
            handlers=registry,
            config=AclConfig(audit_bypass_role=True),
        )

        with caplog.at_level(logging.WARNING, logger="sqla_acl.bypass"):
            await acl.factory("orders.fetch")({}, make_auth(role="root"))

        bypass = [r for r in caplog.records if r.name == "sqla_acl.bypass"]
        assert len(bypass) == 1
        assert "BYPASS" in bypass[0].message
        assert "orders.fetch" in bypass[0].message

    async def test_bypass_not_audited_by_default(self, caplog, registry: HandlerRegistry):
        acl = Acl(RULES, bypass_role="root", handlers=registry)

        with caplog.at_level(logging.DEBUG, logger="sqla_acl"):
            await acl.factory("orders.fetch")({}, make_auth(role="root"))

        assert caplog.records == []
