"""sqla-acl testing utilities: MockAuth, assertions, and fixtures.

Provides test helpers for verifying ACL rules:

- **MockAuth / factories**: Lightweight identities for tests.
- **CountingHandler**: Records handler invocations.
- **Assertion helpers**: ``assert_granted``, ``assert_rejected``,
  ``assert_faulted``.
- **Fixtures**: ``acl_handlers``, ``acl_config``, ``isolated_acl_state``.

Example::

    from sqla_acl.testing import assert_granted, make_auth

    async def test_viewer_fetches(acl):
        await assert_granted(acl.factory("orders.fetch"), {"id": "A"}, make_auth())
"""

from sqla_acl.testing._assertions import assert_faulted, assert_granted, assert_rejected
from sqla_acl.testing._auth import MockAuth, make_auth, make_root
from sqla_acl.testing._fixtures import acl_config, acl_handlers, isolated_acl_state
from sqla_acl.testing._instrument import CountingHandler
from sqla_acl.testing._isolation import isolated_acl

__all__ = [
    "CountingHandler",
    "MockAuth",
    "acl_config",
    "acl_handlers",
    "assert_faulted",
    "assert_granted",
    "assert_rejected",
    "isolated_acl",
    "isolated_acl_state",
    "make_auth",
    "make_root",
]
