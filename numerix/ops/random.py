"""
Random matrices.

Values come from the kernel's ?larnv-style generator, which is driven by a
4-word integer seed. Each word must lie in [0, 4095] and the last word must
be odd; a fresh seed is drawn for every call unless one is supplied.
"""

from __future__ import annotations

import numbers
import warnings
from enum import IntEnum
from typing import Any, Sequence

import numpy as np

from numerix.containers.matrix import Matrix
from numerix.core.dtypes import ElementType, resolve_element_type
from numerix.core.exceptions import ValidationError
from numerix.core.validation import check_dims, check_length
from numerix.kernels import get_kernel
from numerix.ops._dispatch import require_support


# Seed words are limited to 12 bits
SEED_MAX = 4095


class Distribution(IntEnum):
    """Distribution codes, matching the LAPACK ?larnv `idist` argument."""

    UNIFORM = 1            # uniform (0, 1)
    UNIFORM_SYMMETRIC = 2  # uniform (-1, 1)
    NORMAL = 3             # normal (0, 1)


def _force_odd(word: int) -> int:
    return 2 * (word // 2) + 1


def draw_seed(rng: np.random.Generator | None = None) -> list[int]:
    """
    Draw a fresh 4-word seed.

    The first three words are uniform in [1, 4095); the last is drawn from
    the same range and forced odd.

    Args:
        rng: Source of entropy, defaults to a freshly seeded Generator
    """
    if rng is None:
        rng = np.random.default_rng()
    words = [int(w) for w in rng.integers(1, SEED_MAX, size=4)]
    words[3] = _force_odd(words[3])
    return words


def check_seed(seed: Sequence[Any]) -> list[int]:
    """
    Validate a caller-supplied 4-word seed.

    An even last word is forced odd with a RuntimeWarning.

    Raises:
        LengthMismatchError: If the seed does not have 4 words
        ValidationError: If a word is not an integer in [0, 4095]
    """
    words = list(seed)
    check_length(len(words), 4, 'seed')
    for position, word in enumerate(words):
        if isinstance(word, bool) or not isinstance(word, numbers.Integral):
            raise ValidationError(f"seed: word {position} must be an integer, got {word!r}")
        if not 0 <= word <= SEED_MAX:
            raise ValidationError(
                f"seed: word {position} must be in [0, {SEED_MAX}], got {word}"
            )
    words = [int(w) for w in words]
    if words[3] % 2 == 0:
        warnings.warn(
            f"seed: last word {words[3]} must be odd, using {_force_odd(words[3])}",
            RuntimeWarning,
            stacklevel=3,
        )
        words[3] = _force_odd(words[3])
    return words


def _check_distribution(dist: Any) -> Distribution:
    if isinstance(dist, str):
        try:
            return Distribution[dist.upper()]
        except KeyError as e:
            names = ", ".join(d.name.lower() for d in Distribution)
            raise ValidationError(f"dist: unknown distribution {dist!r}, expected one of {names}") from e
    try:
        return Distribution(dist)
    except ValueError as e:
        raise ValidationError(
            f"dist: expected 1 (uniform 0..1), 2 (uniform -1..1) or 3 (normal), got {dist!r}"
        ) from e


def random_matrix(
    rows: int,
    columns: int,
    dist: Any = Distribution.UNIFORM,
    *,
    dtype: Any = ElementType.FLOAT64,
    seed: Sequence[int] | None = None
) -> Matrix:
    """
    New Matrix of random values.

    Args:
        rows: Number of rows
        columns: Number of columns
        dist: Distribution, its code (1-3) or its name ('uniform',
            'uniform_symmetric', 'normal')
        dtype: float32 or float64
        seed: Optional 4-word seed; drawn with draw_seed() when omitted

    Raises:
        InvalidSizeError: If rows or columns is not a positive integer
        UnsupportedDTypeError: If dtype is not float32 or float64
        ValidationError: If dist or seed is invalid
    """
    shape = check_dims((rows, columns), 'shape')
    element_type = resolve_element_type(dtype)
    kernel = get_kernel()
    require_support(kernel, 'random', element_type)
    idist = _check_distribution(dist)
    iseed = draw_seed() if seed is None else check_seed(seed)

    out = Matrix._empty(shape, element_type)
    kernel.larnv(int(idist), iseed, out.buffer)
    return out
