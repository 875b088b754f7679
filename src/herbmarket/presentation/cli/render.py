"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence

from herbmarket.services import StockView

STOCK_HEADERS = ("Herb", "Quantity", "Price (gp)")
FENCE = "```"


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    right_align: Sequence[int] = (),
) -> list[str]:
    """
    Lay out rows as a bordered ASCII table.

    Args:
        headers: Column titles
        rows: Cell text, one sequence per row, each as long as headers
        right_align: Indexes of columns whose cells are right-aligned

    Returns:
        The table as a list of lines
    """
    widths = [len(header) for header in headers]
    for row in rows:
        if len(row) != len(headers):
            raise ValueError(f"Row has {len(row)} cells, expected {len(headers)}.")
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    def _format_row(cells: Sequence[str], align: bool) -> str:
        padded = []
        for idx, cell in enumerate(cells):
            if align and idx in right_align:
                padded.append(cell.rjust(widths[idx]))
            else:
                padded.append(cell.ljust(widths[idx]))
        return "| " + " | ".join(padded) + " |"

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    header_border = "+" + "+".join("=" * (width + 2) for width in widths) + "+"
    lines = [border, _format_row(headers, align=False), header_border]
    for row in rows:
        lines.append(_format_row(row, align=True))
    lines.append(border)
    return lines


def render_stock_lines(view: StockView) -> list[str]:
    """Return the stock table wrapped in a fenced block."""
    rows = [(row.name, str(row.quantity), str(row.price)) for row in view.rows]
    table = render_table(STOCK_HEADERS, rows, right_align=(1, 2))
    return [FENCE, *table, FENCE]


def render_stock(view: StockView) -> None:
    """Print the stock table."""
    for line in render_stock_lines(view):
        print(line)
