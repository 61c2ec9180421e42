"""Ordered first-defined-wins dispatch and identity-checked method invocation."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, ClassVar

from .config import TRACE_DISPATCH
from .errors import CombinatorTypeError, PreconditionError, require_callable
from .logger import logger
from .values import CombinatorInfo, existy, name_of

_MISSING = object()


@dataclass(frozen=True)
class Dispatcher:
    """Runs each candidate in order and returns the first non-``None`` result.

    ``False`` and ``0`` are answers and stop the scan. Every candidate that
    is reached is actually called, so candidates should be cheap and free of
    side effects.
    """

    candidates: tuple[Callable, ...]
    _combinator_kind: ClassVar[str] = "dispatch"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="dispatch", name=None, arity=None)

    def __call__(self, *args, **kwargs):
        for idx, candidate in enumerate(self.candidates):
            result = candidate(*args, **kwargs)
            if existy(result):
                return result
            if TRACE_DISPATCH:
                logger.debug("dispatch candidate %d (%s) did not apply", idx, name_of(candidate))
        if TRACE_DISPATCH:
            logger.debug("dispatch exhausted %d candidate(s) without a result", len(self.candidates))
        return None


@dataclass(frozen=True)
class Invoker:
    method: Callable
    name: str
    _combinator_kind: ClassVar[str] = "invoker"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="invoker", name=self.name, arity=None)

    def __call__(self, target, *args, **kwargs):
        if not existy(target):
            raise PreconditionError("Must provide a target")
        installed = inspect.getattr_static(target, self.name, _MISSING)
        if isinstance(installed, (staticmethod, classmethod)):
            # Class and static methods resolve through their wrapped function.
            wanted = self.method
            if isinstance(installed, classmethod):
                wanted = getattr(self.method, "__func__", _MISSING)
            if installed.__func__ is wanted:
                return getattr(target, self.name)(*args, **kwargs)
        elif installed is self.method:
            return self.method(target, *args, **kwargs)
        if TRACE_DISPATCH:
            logger.debug("invoker %s does not apply to %s", self.name, type(target).__name__)
        return None


def dispatch(*candidates: Callable) -> Dispatcher:
    for idx, candidate in enumerate(candidates):
        require_callable(candidate, where=f"dispatch candidate {idx}")
    return Dispatcher(candidates=candidates)


def _read_tag(subject, field: str):
    if isinstance(subject, Mapping):
        return subject.get(field, _MISSING)
    return getattr(subject, field, _MISSING)


def is_a(tag, action: Callable, *, field: str = "type"):
    """Dispatch candidate applying ``action`` only to subjects tagged ``tag``."""
    require_callable(action, where="is_a action")

    def when_tagged(subject):
        if subject is None:
            return None
        if _read_tag(subject, field) == tag:
            return action(subject)
        return None

    when_tagged.__name__ = f"is_a_{tag}"
    return when_tagged


def invoker(method: Callable) -> Invoker:
    """Adapt an unbound method into ``call(target, *args)``.

    The call only goes through when ``target`` carries this very method
    object under its name; a different method with the same name yields
    ``None``.
    """
    require_callable(method, where="invoker")
    name = getattr(method, "__name__", None)
    if not isinstance(name, str):
        raise CombinatorTypeError("invoker requires a named method")
    return Invoker(method=method, name=name)
