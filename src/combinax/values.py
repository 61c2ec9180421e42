"""Value model shared by all combinators: absence, truthiness and metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CombinatorInfo:
    kind: str
    name: str | None
    arity: int | None


def existy(value: object) -> bool:
    return value is not None


def truthy(value: object) -> bool:
    """``False`` and ``None`` are the only non-truthy values; ``0`` and ``""`` pass."""
    return existy(value) and value is not False


def always(value):
    def constant(*_args, **_kwargs):
        return value

    return constant


def combinator_info(value: object) -> CombinatorInfo | None:
    if hasattr(value, "info"):
        info = getattr(value, "info")
        if isinstance(info, CombinatorInfo):
            return info

    marker = getattr(value, "_combinator_kind", None)
    if marker is not None:
        return CombinatorInfo(kind=str(marker), name=None, arity=None)

    if callable(value):
        name = getattr(value, "__name__", None)
        if not isinstance(name, str):
            name = None
        return CombinatorInfo(kind="callable", name=name, arity=None)
    return None


def message_of(value: object) -> str | None:
    message = getattr(value, "message", None)
    if isinstance(message, str):
        return message
    return None


def name_of(func: object) -> str | None:
    name = getattr(func, "__name__", None)
    if isinstance(name, str):
        return name
    info = combinator_info(func)
    if info is not None:
        return info.name
    return None
