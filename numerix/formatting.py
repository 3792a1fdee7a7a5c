"""
Text rendering of containers.

A rank-1 container (or a matrix with a single row) prints as one bracketed
line. Higher ranks print one line per innermost row, right-justified to the
widest element, with bracket glyphs marking every nesting level and an empty
line between consecutive 2-D sheets:

    ⎛ ⎛ 1.0000  2.0000 ⎞ ⎞
    ⎜ ⎝ 3.0000  4.0000 ⎠ ⎟
    ⎜                    ⎟
    ⎜ ⎛ 5.0000  6.0000 ⎞ ⎟
    ⎝ ⎝ 7.0000  8.0000 ⎠ ⎠

Rendering is pure: it reads the buffer and shape and returns a string.
"""

from __future__ import annotations

from typing import Any, Sequence

from numerix.core.buffer import Buffer
from numerix.core.config import PrintOptions, get_printoptions
from numerix.core.dtypes import ElementType


def format_element(value: Any, element_type: ElementType, options: PrintOptions) -> str:
    """Printed text of one element."""
    if element_type.is_integer:
        return str(int(value))
    if element_type.real_type is ElementType.FLOAT32:
        precision = options.float32_precision
    else:
        precision = options.float64_precision
    if element_type.is_complex:
        return f"{value.real:.{precision}f}{value.imag:+.{precision}f}j"
    return f"{value:.{precision}f}"


def last_rows(dims: Sequence[int]) -> list[int]:
    """
    Index of the last row of each nesting level, counting separator lines.

    dims are the non-innermost dimensions ordered from the row level
    outwards. The first level's boundary is its own size; each further level
    is prev * d + d - 1, which accounts for the blank line between blocks.

    Examples:
        >>> last_rows([2])
        [2]
        >>> last_rows([3, 2])
        [3, 7]
    """
    rows: list[int] = []
    for d in dims:
        if rows:
            rows.append(rows[-1] * d + d - 1)
        else:
            rows.append(d)
    return rows


def _prefix(n: int, boundary: int) -> str:
    position = n % (boundary + 1)
    if position == 0:
        return "( " if boundary == 1 else "⎛ "
    if position == boundary - 1:
        return "⎝ "
    if position == boundary:
        return "  "
    return "⎜ "


def _suffix(n: int, boundary: int) -> str:
    position = n % (boundary + 1)
    if position == 0:
        return " )" if boundary == 1 else " ⎞"
    if position == boundary - 1:
        return " ⎠"
    if position == boundary:
        return "  "
    return " ⎟"


def layout(elements: Sequence[str], shape: Sequence[int], separator: str = "  ") -> str:
    """
    Arrange printed elements into the nested-bracket layout.

    Args:
        elements: Printed elements in row-major order
        shape: Dimension sizes
        separator: Text between elements of a row

    Returns:
        Multi-line string without a trailing newline
    """
    if len(shape) == 1 or (len(shape) == 2 and shape[0] == 1):
        return "( " + separator.join(elements) + " )"

    columns = shape[-1]
    width = max(len(e) for e in elements)
    lines = [
        separator.join(e.rjust(width) for e in elements[start:start + columns])
        for start in range(0, len(elements), columns)
    ]
    blank = " " * ((width + len(separator)) * columns - len(separator))

    rows = last_rows(list(reversed(shape[:-1])))
    first = rows[0]

    out: list[str] = []
    n = 0

    def add(line: str) -> None:
        nonlocal n
        prefix = "".join(_prefix(n, row) for row in reversed(rows))
        suffix = "".join(_suffix(n, row) for row in rows)
        out.append(prefix + line + suffix)
        n += 1

    for line in lines:
        if n % (first + 1) == first:
            add(blank)
        add(line)

    return "\n".join(out)


def array_description(
    buffer: Buffer,
    shape: Sequence[int],
    options: PrintOptions | None = None
) -> str:
    """
    Render a flat buffer with the given shape as nested-bracket text.

    Args:
        buffer: Elements in row-major order
        shape: Dimension sizes; product must equal buffer.count
        options: Print options, defaults to the active ones

    Returns:
        Display string without a trailing newline
    """
    if options is None:
        options = get_printoptions()
    element_type = buffer.element_type
    elements = [format_element(v, element_type, options) for v in buffer.data]
    return layout(elements, shape, options.separator)
