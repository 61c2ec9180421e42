"""List primitives the higher-level combinators are built from.

Python sequences and one-dimensional JAX arrays are both accepted as
ordered sequences. Joining only JAX arrays keeps the result on the JAX side
via ``jnp.concatenate``; any other mix yields a fresh Python list.
"""

from __future__ import annotations

from typing import Callable

import jax.numpy as jnp


def _is_array(value: object) -> bool:
    return isinstance(value, jnp.ndarray)


def _as_vector(arr: jnp.ndarray) -> jnp.ndarray:
    if arr.ndim == 0:
        return jnp.reshape(arr, (1,))
    return arr


def _concat_arrays(arrays) -> jnp.ndarray:
    vectors = [_as_vector(arr) for arr in arrays]
    ranks = {vec.ndim for vec in vectors}
    if len(ranks) != 1:
        raise ValueError("cat requires matching array ranks after scalar promotion")
    return jnp.concatenate(vectors, axis=0)


def cat(*sequences):
    """Concatenate every argument one level deep, preserving order."""
    if not sequences:
        return []
    if all(_is_array(seq) for seq in sequences):
        return _concat_arrays(sequences)

    out: list[object] = []
    for seq in sequences:
        out.extend(_as_vector(seq) if _is_array(seq) else seq)
    return out


def cons(head, tail):
    return cat([head], tail)


def mapcat(f: Callable[[object], object], seq):
    """Apply ``f`` to each element and ``cat`` the resulting sequences.

    ``f`` has to return an ordered sequence for every element; a scalar
    result is not checked here.
    """
    return cat(*[f(item) for item in seq])


def butlast(seq):
    if _is_array(seq):
        return seq[:-1]
    return list(seq)[:-1]


def interpose(separator, seq):
    return butlast(mapcat(lambda item: cons(item, [separator]), seq))
