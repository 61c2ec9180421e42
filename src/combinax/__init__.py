"""combinax public API."""

from .arity import compose, curry, curry2, curry3, curry_n, partial, partial1, partial2, splat, unsplat
from .dispatch import dispatch, invoker, is_a
from .errors import CombinatorError, CombinatorTypeError, GuardError, PreconditionError
from .generators import UniqueStringGenerator
from .guards import defaults, do_when, fnull
from .sequences import butlast, cat, cons, interpose, mapcat
from .validation import (
    checker,
    complement,
    cond,
    condition1,
    has_keys,
    is_mapping,
    is_not_zero,
    is_number,
    validator,
)
from .values import CombinatorInfo, always, combinator_info, existy, message_of, truthy

__all__ = [
    "cat",
    "cons",
    "mapcat",
    "butlast",
    "interpose",
    "splat",
    "unsplat",
    "curry",
    "curry2",
    "curry3",
    "curry_n",
    "partial",
    "partial1",
    "partial2",
    "compose",
    "fnull",
    "defaults",
    "do_when",
    "complement",
    "cond",
    "validator",
    "checker",
    "condition1",
    "is_mapping",
    "is_number",
    "is_not_zero",
    "has_keys",
    "dispatch",
    "is_a",
    "invoker",
    "UniqueStringGenerator",
    "existy",
    "truthy",
    "always",
    "message_of",
    "combinator_info",
    "CombinatorInfo",
    "CombinatorError",
    "CombinatorTypeError",
    "GuardError",
    "PreconditionError",
]
