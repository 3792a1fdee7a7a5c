"""
Library configuration: print options and bounds checking.

Print options control how the Formatter renders elements. Bounds checking
controls whether element access validates indices before touching storage.
Both are module-level settings read once per call; operations never modify
them.

Usage:
    from numerix.core.config import printoptions

    with printoptions(float64_precision=2):
        print(vec)
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Mapping


@dataclass(frozen=True)
class PrintOptions:
    """
    Formatting options for rendering container elements.

    Attributes:
        float64_precision: Decimal places for float64 and complex128 elements
        float32_precision: Decimal places for float32 and complex64 elements
        separator: Text placed between elements of a row
    """
    float64_precision: int = 4
    float32_precision: int = 2
    separator: str = '  '


DEFAULT_PRINT_OPTIONS = PrintOptions()

# Values of NUMERIX_BOUNDS_CHECK that disable bounds checking
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


def bounds_check_from_env(environ: Mapping[str, str] = os.environ) -> bool:
    """Initial bounds-checking setting from NUMERIX_BOUNDS_CHECK (default on)."""
    return environ.get('NUMERIX_BOUNDS_CHECK', '1').strip().lower() not in _FALSE_VALUES


_print_options = DEFAULT_PRINT_OPTIONS
_bounds_check = bounds_check_from_env()


def get_printoptions() -> PrintOptions:
    """Return the active print options."""
    return _print_options


def set_printoptions(**changes: object) -> PrintOptions:
    """
    Replace fields of the active print options.

    Args:
        **changes: PrintOptions fields to change

    Returns:
        The previous print options

    Raises:
        ValueError: If a precision is negative
    """
    global _print_options
    updated = replace(_print_options, **changes)
    if updated.float64_precision < 0 or updated.float32_precision < 0:
        raise ValueError(
            f"precision must be >= 0, got float64_precision={updated.float64_precision}, "
            f"float32_precision={updated.float32_precision}"
        )
    previous = _print_options
    _print_options = updated
    return previous


@contextmanager
def printoptions(**changes: object) -> Iterator[PrintOptions]:
    """
    Temporarily change print options.

    Yields:
        The print options in effect inside the block
    """
    global _print_options
    previous = set_printoptions(**changes)
    try:
        yield _print_options
    finally:
        _print_options = previous


def bounds_check_enabled() -> bool:
    """True if element access validates indices."""
    return _bounds_check


def set_bounds_check(enabled: bool) -> bool:
    """
    Enable or disable bounds-checked element access.

    Args:
        enabled: New setting

    Returns:
        The previous setting
    """
    global _bounds_check
    previous = _bounds_check
    _bounds_check = bool(enabled)
    return previous
