"""Shared test fixtures for sqla-acl tests."""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from sqla_acl._acl import Acl
from sqla_acl.config._config import _reset_global_config
from sqla_acl.handlers._registry import HandlerRegistry
from sqla_acl.testing._auth import MockAuth, make_auth
from sqla_acl.testing._fixtures import (  # noqa: F401
    acl_config,
    acl_handlers,
    isolated_acl_state,
)
from tests._models import Base, Customer, Order

# ---------------------------------------------------------------------------
# Global state
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


# ---------------------------------------------------------------------------
# ACL fixtures
# ---------------------------------------------------------------------------


class FakeModel:
    """Stand-in for the data layer handed to expressions as context."""

    def __init__(self) -> None:
        self.fetched: list[Any] = []

    def fetch(self, params: Any) -> list[int]:
        self.fetched.append(params)
        return list(range(10))


@pytest.fixture()
def registry() -> HandlerRegistry:
    """Fresh registry with the built-ins, isolated from the global one."""
    return HandlerRegistry()


@pytest.fixture()
def model() -> FakeModel:
    return FakeModel()


@pytest.fixture()
def context(model: FakeModel) -> dict[str, Any]:
    return {"model": model}


@pytest.fixture()
def acl(context: dict[str, Any], registry: HandlerRegistry) -> Acl:
    return Acl({"model": {"fetch": {"someRole": True}}}, context, handlers=registry)


@pytest.fixture()
def params() -> dict[str, Any]:
    return {"id": "someId"}


@pytest.fixture()
def auth() -> MockAuth:
    return make_auth(id="someId", role="someRole")


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def engine():
    """Create an in-memory SQLite engine with all tables."""
    eng = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture()
def session(engine):
    """Provide a transactional session that rolls back after each test."""
    factory = sessionmaker(bind=engine)
    sess = factory()
    try:
        yield sess
    finally:
        sess.rollback()
        sess.close()


@pytest.fixture()
def sample_data(session: Session) -> dict[str, list]:
    """Seed the database with two customers and their orders."""
    alice = Customer(id=1, name="Alice", tenant_id=1)
    bob = Customer(id=2, name="Bob", tenant_id=2)
    session.add_all([alice, bob])

    orders = [
        Order(id=1, customer_id=1, status="open", total=100),
        Order(id=2, customer_id=1, status="paid", total=250),
        Order(id=3, customer_id=2, status="open", total=75),
        Order(id=4, customer_id=2, status="open", total=30),
    ]
    session.add_all(orders)

    session.flush()
    return {"customers": [alice, bob], "orders": orders}
