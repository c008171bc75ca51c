"""Acl: builds guarded operations over a namespace/role rule tree."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqla_acl._audit import log_acl_decision, log_acl_fault, log_bypass_event
from sqla_acl._types import AuthLike, RejectFactory, RuleTree, get_role
from sqla_acl.config._config import AclConfig, get_global_config
from sqla_acl.engine._evaluate import Granted, evaluate
from sqla_acl.engine._options import AclOptions
from sqla_acl.exceptions import (
    AclError,
    AclRejected,
    MissingAuthError,
    NoAclError,
    NoAclRoleError,
    RuleValidationError,
)
from sqla_acl.handlers._registry import HandlerRegistry, get_default_registry
from sqla_acl.rules._resolver import NOT_FOUND, UNDEFINED, resolve, resolve_role
from sqla_acl.rules._spec import BooleanRule, Step, parse_rule
from sqla_acl.rules._validate import validate_rules

__all__ = ["Acl", "GuardedOperation"]


class GuardedOperation:
    """Callable that authorizes request params for one namespace path.

    Built by :meth:`Acl.factory`. The rule tree is read on every call, so
    building an operation for a path that does not exist (yet) is fine:
    the call faults with ``no ACL for <path>``.

    Example::

        fetch = acl.factory("orders.fetch")
        params = await fetch({"id": "A"}, {"role": "viewer"})
    """

    def __init__(self, acl: Acl, path: str) -> None:
        self.acl = acl
        self.path = path

    def __repr__(self) -> str:
        return f"GuardedOperation({self.path!r})"

    def _plan(self, auth: Any, config: AclConfig) -> tuple[tuple[Step, ...], Any]:
        table = resolve(self.acl.rules, self.path)
        if table is NOT_FOUND:
            raise NoAclError(self.path)
        if auth is None:
            raise MissingAuthError()

        role = get_role(auth)
        bypass_role = self.acl.bypass_role or config.bypass_role
        if bypass_role is not None and isinstance(role, str) and role == bypass_role:
            if config.audit_bypass_role:
                log_bypass_event(path=self.path, role=role)
            return BooleanRule(True).steps(), role

        raw = resolve_role(table, role)
        if raw is UNDEFINED:
            raise NoAclRoleError(self.path, role=role)
        return parse_rule(raw).steps(), role

    async def __call__(
        self,
        params: Any = None,
        auth: AuthLike | Mapping[str, Any] | None = None,
        options: AclOptions | Mapping[str, Any] | None = None,
        *,
        reject_silently: bool | None = None,
        on_reject: RejectFactory | None = None,
    ) -> Any:
        """Authorize *params* for *auth*.

        Args:
            params: Request params. ``None`` is treated as an empty mapping.
                A mapping is copied; the caller's object is never mutated.
            auth: The caller's identity (mapping or object with ``role``).
            options: ``AclOptions`` or a mapping of its fields.
            reject_silently: Override for ``options.reject_silently``.
            on_reject: Override for ``options.on_reject``.

        Returns:
            The granted (possibly rewritten) params, or ``None`` when a
            rejection was silenced.

        Raises:
            NoAclError: No rules at this path.
            MissingAuthError: *auth* is ``None``.
            NoAclRoleError: The caller's role has no rule here.
            UnknownHandlerError: A rule names an unregistered handler.
            BadAclError: A rule is malformed or its handler raised.
            AclRejected: The request is refused (unless silenced or
                replaced by ``on_reject``).
        """
        config = self.acl.config
        if options is None:
            options = AclOptions(reject_silently=config.reject_silently)
        elif isinstance(options, Mapping):
            options = AclOptions(**options)
        options = options.merge(reject_silently=reject_silently, on_reject=on_reject)

        if params is None:
            params = {}
        elif isinstance(params, Mapping):
            params = dict(params)

        try:
            steps, role = self._plan(auth, config)
            decision = await evaluate(
                steps,
                params,
                auth,
                handlers=self.acl.handlers,
                context=self.acl.context,
            )
        except AclError as exc:
            if config.log_acl_decisions:
                log_acl_fault(path=self.path, error=exc)
            raise

        if isinstance(decision, Granted):
            if config.log_acl_decisions:
                log_acl_decision(
                    path=self.path,
                    role=role,
                    outcome="granted",
                    steps=steps,
                    params=decision.params,
                )
            return decision.params

        if options.reject_silently:
            if config.log_acl_decisions:
                log_acl_decision(path=self.path, role=role, outcome="silenced", steps=steps)
            return None

        if config.log_acl_decisions:
            log_acl_decision(path=self.path, role=role, outcome="rejected", steps=steps)

        error = decision.error
        if options.on_reject is not None and (error is None or decision.overridable):
            error = options.on_reject()
        elif error is None:
            error = AclRejected()
        if isinstance(error, AclRejected) and error.path is None:
            error.path = self.path
            error.role = role
        if not isinstance(error, BaseException):
            error = AclRejected(str(error), path=self.path, role=role)
        raise error


class Acl:
    """Namespace/role rule tree plus the guarded operations built over it.

    Args:
        rules: Nested mapping addressed by dotted paths. Leaves are role
            tables mapping role names to rules.
        context: Opaque value handed to expression rules (for example a
            SQLAlchemy session). Never inspected.
        executors: ``True`` to build an operation for every top-level key
            holding a mapping, a list of dotted paths to build only
            those (missing ones are skipped), or ``False`` for none.
        bypass_role: Root/super-access role that is granted without
            consulting role tables. Defaults to ``config.bypass_role``.
        handlers: Handler registry. Defaults to the global registry.
        config: Configuration. Defaults to the global config, read at
            call time.

    Raises:
        RuleValidationError: When ``strict_rules`` is on and a built
            executor's rules have problems.

    Example::

        acl = Acl(
            {"orders": {"fetch": {"viewer": {"select": ["id", "total"], "limit": 20}}}},
            context=session,
            executors=["orders.fetch"],
            bypass_role="root",
        )
        params = await acl.execute["orders.fetch"]({"limit": 100}, auth)
    """

    def __init__(
        self,
        rules: RuleTree,
        context: Any = None,
        executors: bool | Iterable[str] | None = False,
        bypass_role: str | None = None,
        *,
        handlers: HandlerRegistry | None = None,
        config: AclConfig | None = None,
    ) -> None:
        self.rules = rules
        self.context = context
        self.bypass_role = bypass_role
        self.handlers = handlers if handlers is not None else get_default_registry()
        self._config = config
        self.execute: dict[str, GuardedOperation] = {
            path: self.factory(path) for path in self._executor_paths(executors)
        }

        if self.config.strict_rules:
            problems = self.validate(*self.execute)
            if problems:
                raise RuleValidationError(problems)

    @property
    def config(self) -> AclConfig:
        """The effective configuration."""
        return self._config if self._config is not None else get_global_config()

    def _executor_paths(self, executors: bool | Iterable[str] | None) -> list[str]:
        if executors is None or executors is False:
            return []
        candidates = list(self.rules) if executors is True else list(executors)
        return [path for path in candidates if resolve(self.rules, path) is not NOT_FOUND]

    def factory(self, path: str) -> GuardedOperation:
        """Build the guarded operation for dotted *path*.

        Never raises for unknown paths; the operation faults when called.
        """
        return GuardedOperation(self, path)

    def validate(self, *paths: str) -> list[str]:
        """Return problems in the rules at *paths* (all built executors if none).

        A path holding a nested namespace rather than a role table is
        checked through the role tables below it.
        """
        return validate_rules(
            self.rules, paths or list(self.execute), self.handlers, descend=True
        )
