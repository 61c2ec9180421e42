"""Arity adapters: splatting, currying and partial application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

from .errors import CombinatorTypeError, require_callable
from .values import CombinatorInfo, name_of


@dataclass(frozen=True)
class Splat:
    func: Callable
    _combinator_kind: ClassVar[str] = "splat"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="splat", name=name_of(self.func), arity=1)

    def __call__(self, seq):
        return self.func(*seq)


@dataclass(frozen=True)
class Unsplat:
    func: Callable
    _combinator_kind: ClassVar[str] = "unsplat"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="unsplat", name=name_of(self.func), arity=None)

    def __call__(self, *args):
        return self.func(list(args))


@dataclass(frozen=True)
class Curried:
    """One stage of a right-to-left curry chain.

    ``captured`` holds the arguments supplied so far, in call order. The
    first call provides the last positional argument of ``func``.
    """

    func: Callable
    arity: int
    captured: tuple[object, ...] = ()
    _combinator_kind: ClassVar[str] = "curried"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="curried", name=name_of(self.func), arity=1)

    @property
    def remaining(self) -> int:
        return self.arity - len(self.captured)

    def __call__(self, arg):
        captured = (*self.captured, arg)
        if len(captured) == self.arity:
            return self.func(*reversed(captured))
        return Curried(func=self.func, arity=self.arity, captured=captured)


@dataclass(frozen=True)
class Partial:
    func: Callable
    bound: tuple[object, ...]
    _combinator_kind: ClassVar[str] = "partial"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="partial", name=name_of(self.func), arity=None)

    def __call__(self, *args, **kwargs):
        return self.func(*self.bound, *args, **kwargs)


@dataclass(frozen=True)
class Composed:
    funcs: tuple[Callable, ...]
    _combinator_kind: ClassVar[str] = "composed"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="composed", name=None, arity=None)

    def __call__(self, *args, **kwargs):
        if not self.funcs:
            if len(args) != 1 or kwargs:
                raise TypeError("identity composition takes exactly one argument")
            return args[0]
        *outer, inner = self.funcs
        result = inner(*args, **kwargs)
        for func in reversed(outer):
            result = func(result)
        return result


def splat(func: Callable) -> Splat:
    require_callable(func, where="splat")
    return Splat(func=func)


def unsplat(func: Callable) -> Unsplat:
    require_callable(func, where="unsplat")
    return Unsplat(func=func)


def curry_n(func: Callable, n: int) -> Curried:
    require_callable(func, where="curry")
    if not isinstance(n, int) or isinstance(n, bool) or n < 1:
        raise CombinatorTypeError(f"curry depth must be a positive integer, got {n!r}")
    return Curried(func=func, arity=n)


def curry(func: Callable) -> Curried:
    return curry_n(func, 1)


def curry2(func: Callable) -> Curried:
    return curry_n(func, 2)


def curry3(func: Callable) -> Curried:
    return curry_n(func, 3)


def partial(func: Callable, *bound) -> Partial:
    require_callable(func, where="partial")
    if isinstance(func, Partial):
        return Partial(func=func.func, bound=(*func.bound, *bound))
    return Partial(func=func, bound=bound)


def partial1(func: Callable, arg1) -> Partial:
    return partial(func, arg1)


def partial2(func: Callable, arg1, arg2) -> Partial:
    return partial(func, arg1, arg2)


def compose(*funcs: Callable) -> Composed:
    """Right-to-left composition: ``compose(f, g)(x) == f(g(x))``."""
    for idx, func in enumerate(funcs):
        require_callable(func, where=f"compose argument {idx}")
    return Composed(funcs=funcs)
