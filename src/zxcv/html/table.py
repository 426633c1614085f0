#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/html/table.py
"""Table layout for the HTML renderer.

Tables are rendered as aligned text columns::

    name | value
    =====|======
    foo  | 1
    bar  | 2

Column widths are chosen from statistics of each column's rendered cells.
When the natural width of the table is larger than the available width,
columns are narrowed in proportion to how much they can give up, and cell
contents are wrapped inside their columns.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from bs4.element import Tag

from zxcv.utils.text import display_width, words

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = " | "
CONTINUATION_SEPARATOR = "   "

# Renders a cell element, wrapping to the given width (None for no wrapping)
CellRenderer = Callable[[Tag, Optional[int]], str]


@dataclass
class Table:
    """Rows of cell elements of a parsed ``<table>``.

    Parameters
    ----------
    rows : list of list of Tag
        Cell elements row by row; rows may have different lengths
    header_row_count : int
        Number of leading rows that form the header
    footer_row_count : int
        Number of trailing rows that form the footer

    """

    rows: list[list[Tag]]
    header_row_count: int = 0
    footer_row_count: int = 0


@dataclass
class ColumnStat:
    """Width statistics of one column.

    Parameters
    ----------
    min : int
        Width of the widest word; narrower columns would break words
    avg : int
        Mean of the widest line of each cell, rounded down
    max : int
        Width of the widest line; wider columns would waste space

    """

    min: int
    avg: int
    max: int


def _child_elements(element: Tag) -> list[Tag]:
    return [child for child in element.children if isinstance(child, Tag)]


def _single_child(table: Tag, name: str) -> Tag | None:
    matches = table.find_all(name, recursive=False, limit=2)
    return matches[0] if len(matches) == 1 else None


def parse_table(table: Tag) -> Table:
    """Collect the rows of ``table``.

    Rows come from a single ``thead``, then from every ``tbody`` and every
    ``tr`` directly inside the table, then from a single ``tfoot``. Parsers
    differ in whether they wrap bare rows in an implied ``tbody``, so both
    layouts are accepted.

    Parameters
    ----------
    table : Tag
        The ``<table>`` element

    Returns
    -------
    Table
        The parsed table

    """
    header = _single_child(table, "thead")
    footer = _single_child(table, "tfoot")

    header_rows = _child_elements(header) if header is not None else []
    footer_rows = _child_elements(footer) if footer is not None else []

    body_rows: list[Tag] = []
    for child in _child_elements(table):
        if child.name == "tr":
            body_rows.append(child)
        elif child.name == "tbody":
            body_rows.extend(_child_elements(child))

    rows = [_child_elements(row) for row in (*header_rows, *body_rows, *footer_rows)]
    return Table(rows=rows, header_row_count=len(header_rows), footer_row_count=len(footer_rows))


def compute_column_stats(rows: Sequence[Sequence[Tag]], render_cell: CellRenderer) -> list[ColumnStat]:
    """Measure every column of a table.

    Parameters
    ----------
    rows : sequence of sequence of Tag
        Cell elements row by row
    render_cell : CellRenderer
        Renders a cell; called without a width

    Returns
    -------
    list[ColumnStat]
        One entry per column of the longest row

    """
    column_count = max((len(row) for row in rows), default=0)
    rendered = [[render_cell(cell, None) for cell in row] for row in rows]

    stats: list[ColumnStat] = []
    for index in range(column_count):
        min_width = 0
        max_width = 0
        total = 0
        count = 0
        for row in rendered:
            if index >= len(row):
                continue
            text = row[index]
            word_width = max((display_width(word) for word in words(text)), default=0)
            line_width = max(display_width(line) for line in text.split("\n"))
            min_width = max(min_width, word_width)
            max_width = max(max_width, line_width)
            total += line_width
            count += 1
        stats.append(ColumnStat(min=min_width, avg=total // count, max=max_width))
    return stats


def compute_widths(column_stats: Sequence[ColumnStat], max_width: int | None) -> list[int]:
    """Choose the width of every column.

    Parameters
    ----------
    column_stats : sequence of ColumnStat
        Statistics of each column; must not be empty
    max_width : int or None
        Available width including separators; ``None`` or ``0`` means
        unconstrained

    Returns
    -------
    list[int]
        Column widths. Their sum plus separators does not exceed
        ``max_width`` unless even the widest words do not fit.

    Examples
    --------
        >>> compute_widths([ColumnStat(4, 16, 16), ColumnStat(5, 5, 5)], 20)
        [12, 5]

    """
    if not max_width:
        return [stat.max for stat in column_stats]

    separator_width = (len(column_stats) - 1) * len(COLUMN_SEPARATOR)

    if sum(stat.max for stat in column_stats) + separator_width <= max_width:
        return [stat.max for stat in column_stats]

    if sum(stat.min for stat in column_stats) + separator_width >= max_width:
        return [stat.min for stat in column_stats]

    averages = [max(stat.avg, stat.min) for stat in column_stats]
    avg_total = sum(averages) + separator_width

    if avg_total < max_width:
        extra = max_width - avg_total
        delta = sum(stat.max - avg for stat, avg in zip(column_stats, averages))
        return [avg + extra * (stat.max - avg) // delta for stat, avg in zip(column_stats, averages)]

    if avg_total > max_width:
        excess = avg_total - max_width
        delta = sum(avg - stat.min for stat, avg in zip(column_stats, averages))
        # Round the reduction up so the total stays within max_width
        return [avg - _div_ceil(excess * (avg - stat.min), delta) for stat, avg in zip(column_stats, averages)]

    return averages


def _div_ceil(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _separator_line(widths: Sequence[int], fill_char: str) -> str:
    joint = fill_char + "|" + fill_char
    return joint.join(fill_char * width for width in widths)


def _pad(content: str, width: int) -> str:
    return content + " " * max(width - display_width(content), 0)


def render_table(table_element: Tag, render_cell: CellRenderer, max_width: int | None = None) -> str:
    """Render a ``<table>`` element as aligned text columns.

    Parameters
    ----------
    table_element : Tag
        The ``<table>`` element
    render_cell : CellRenderer
        Renders a cell element wrapped to a width
    max_width : int or None, default None
        Available width; ``None`` lays out every column at its natural width

    Returns
    -------
    str
        The rendered table, or an empty string for a table without cells

    """
    table = parse_table(table_element)
    if not any(table.rows):
        return ""

    widths = compute_widths(compute_column_stats(table.rows, render_cell), max_width)
    logger.debug("Table of %d rows laid out with column widths %s", len(table.rows), widths)

    lines: list[str] = []
    footer_start = len(table.rows) - table.footer_row_count
    for index, row in enumerate(table.rows):
        if index == footer_start:
            lines.append(_separator_line(widths, "-"))

        cell_lines = [render_cell(cell, width or None).split("\n") for cell, width in zip(row, widths)]
        line_count = max((len(cell) for cell in cell_lines), default=1)
        for line_index in range(line_count):
            separator = COLUMN_SEPARATOR if line_index == 0 else CONTINUATION_SEPARATOR
            parts = [
                _pad(cell[line_index] if line_index < len(cell) else "", width)
                for cell, width in zip(cell_lines, widths)
            ]
            lines.append(separator.join(parts).rstrip())

        if index + 1 == table.header_row_count:
            lines.append(_separator_line(widths, "="))

    return "\n".join(lines)
