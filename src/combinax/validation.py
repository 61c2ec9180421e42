"""Labeled predicates, validator pipelines and precondition guards.

A validator collects every failing message for a subject and hands them back
as data. A ``condition1`` guard runs the same pipeline but refuses to call
the guarded function when anything failed, raising ``GuardError`` instead.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, ClassVar

from .config import GUARD_MESSAGE_SEPARATOR
from .errors import CombinatorTypeError, GuardError, require_callable
from .logger import logger
from .values import CombinatorInfo, message_of, name_of, truthy


@dataclass(frozen=True)
class LabeledPredicate:
    """A predicate that carries its own failure message."""

    predicate: Callable
    message: str
    _combinator_kind: ClassVar[str] = "labeled"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="labeled", name=name_of(self.predicate), arity=None)

    def __call__(self, *args, **kwargs):
        return self.predicate(*args, **kwargs)


@dataclass(frozen=True)
class Complement:
    predicate: Callable
    _combinator_kind: ClassVar[str] = "complement"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="complement", name=name_of(self.predicate), arity=None)

    def __call__(self, *args, **kwargs):
        return not self.predicate(*args, **kwargs)


@dataclass(frozen=True)
class Validator:
    predicates: tuple[LabeledPredicate, ...]
    _combinator_kind: ClassVar[str] = "validator"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="validator", name=None, arity=1)

    def __call__(self, subject) -> list[str]:
        return [pred.message for pred in self.predicates if not truthy(pred(subject))]


@dataclass(frozen=True)
class Condition:
    validator: Validator
    separator: str = GUARD_MESSAGE_SEPARATOR
    _combinator_kind: ClassVar[str] = "condition"

    @property
    def info(self) -> CombinatorInfo:
        return CombinatorInfo(kind="condition", name=None, arity=2)

    def __call__(self, func: Callable, subject):
        errors = self.validator(subject)
        if errors:
            logger.debug("guard rejected subject with %d failing check(s)", len(errors))
            raise GuardError.from_messages(errors, separator=self.separator)
        return func(subject)


def complement(predicate: Callable) -> Complement:
    require_callable(predicate, where="complement")
    return Complement(predicate=predicate)


def cond(message: str, predicate: Callable) -> LabeledPredicate:
    require_callable(predicate, where="cond")
    if not isinstance(message, str):
        raise CombinatorTypeError(f"cond message must be a string, got {type(message).__name__}")
    if isinstance(predicate, LabeledPredicate):
        predicate = predicate.predicate
    return LabeledPredicate(predicate=predicate, message=message)


def _as_labeled(value: object, *, where: str) -> LabeledPredicate:
    if isinstance(value, LabeledPredicate):
        return value
    require_callable(value, where=where)
    message = message_of(value)
    if message is None:
        raise CombinatorTypeError(f"{where} has no failure message; wrap it with cond()")
    return LabeledPredicate(predicate=value, message=message)


def validator(*predicates: Callable) -> Validator:
    labeled = tuple(
        _as_labeled(pred, where=f"validator argument {idx}") for idx, pred in enumerate(predicates)
    )
    return Validator(predicates=labeled)


checker = validator


def condition1(*predicates: Callable, separator: str | None = None) -> Condition:
    check = validator(*predicates)
    if separator is None:
        return Condition(validator=check)
    return Condition(validator=check, separator=separator)


def _is_mapping(value) -> bool:
    return isinstance(value, Mapping)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def _is_not_zero(value) -> bool:
    return value != 0


is_mapping = cond("arg must be a map", _is_mapping)
is_number = cond("arg must be a number", _is_number)
is_not_zero = cond("arg must not be zero", _is_not_zero)


def has_keys(*keys: str) -> LabeledPredicate:
    def has_all_keys(record) -> bool:
        if not _is_mapping(record):
            return False
        return all(key in record for key in keys)

    return cond("Must have values for keys: " + " ".join(keys), has_all_keys)
