"""Null-guarding wrappers that keep ``None`` away from wrapped functions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, ClassVar

from .errors import require_callable
from .values import CombinatorInfo, existy, name_of, truthy


@dataclass(frozen=True)
class FNull:
    """Positional default substitution in front of ``func``.

    Positions past the declared defaults reuse the last default. Declared
    positions the caller did not supply at all are filled as well.
    """

    func: Callable
    defaults: tuple[object, ...]
    _combinator_kind: ClassVar[str] = "fnull"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="fnull", name=name_of(self.func), arity=None)

    def default_for(self, position: int):
        if not self.defaults:
            return None
        if position < len(self.defaults):
            return self.defaults[position]
        return self.defaults[-1]

    def __call__(self, *args, **kwargs):
        padded = list(args)
        if len(padded) < len(self.defaults):
            padded.extend([None] * (len(self.defaults) - len(padded)))
        substituted = [
            arg if existy(arg) else self.default_for(idx)
            for idx, arg in enumerate(padded)
        ]
        return self.func(*substituted, **kwargs)


def fnull(func: Callable, *defaults) -> FNull:
    require_callable(func, where="fnull")
    return FNull(func=func, defaults=defaults)


def _read_field(record, key):
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def defaults(fallbacks: Mapping[str, object]):
    """Return ``lookup(record, key)`` falling back to ``fallbacks[key]``."""

    def lookup(record, key):
        if not existy(record):
            return None
        value = _read_field(record, key)
        if existy(value):
            return value
        return fallbacks.get(key)

    return lookup


def do_when(condition, action: Callable):
    if truthy(condition):
        return action()
    return None
