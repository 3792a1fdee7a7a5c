"""
Approximate comparison of containers.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from numerix.containers.base import Container
from numerix.core.dtypes import default_rtol, is_close
from numerix.core.exceptions import ValidationError
from numerix.core.validation import check_nested, check_same_shape, has_complex
from numerix.ops._dispatch import check_container


def is_approx(
    actual: Container,
    expected: Any,
    rtol: float | None = None,
    atol: float = 0.0
) -> bool:
    """
    Check every element of a container is close to an expected value.

    Uses |actual - expected| <= atol + rtol * |expected| elementwise.

    Args:
        actual: Container to check
        expected: Container or (nested) sequence of the same shape
        rtol: Relative tolerance, default sqrt(eps) of actual's element type
        atol: Absolute tolerance

    Raises:
        ShapeMismatchError: If the shapes differ
        ValidationError: If expected holds non-numeric values
    """
    check_container(actual, 'is_approx')
    if isinstance(expected, Container):
        shape, values = expected.shape, expected.buffer.data
    else:
        shape, values = check_nested(expected, 'expected', allow_empty=True)
    check_same_shape(actual.shape, shape, 'is_approx')
    if rtol is None:
        rtol = default_rtol(actual.dtype)
    dtype = np.result_type(actual.dtype.dtype, np.float64)
    if has_complex(values):
        dtype = np.result_type(dtype, np.complex128)
    try:
        reference = np.asarray(values, dtype=dtype)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"expected: values are not numbers: {e}") from e
    return bool(np.all(is_close(actual.buffer.data, reference, rtol=rtol, atol=atol)))
