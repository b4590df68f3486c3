"""Task table rendering (Number / Task / Done? columns)."""

from typing import List, Sequence, Tuple

from core import DisplayElement
from .display import display_width, pad_display


HEADERS: Tuple[str, str, str] = ("Number", "Task", "Done?")

Fragments = List[Tuple[str, str]]


def _single_line(text: str) -> str:
    return " ".join(text.splitlines())


def table_rows(elements: Sequence[DisplayElement]) -> List[Tuple[str, str, str]]:
    return [(el.number, _single_line(el.task.description), el.task.status_label()) for el in elements]


def column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    widths = [display_width(h) for h in HEADERS]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], display_width(cell))
    return widths


def _border(widths: Sequence[int], left: str, mid: str, right: str) -> Fragments:
    line = left + mid.join("─" * (w + 2) for w in widths) + right
    return [("class:table.border", line), ("", "\n")]


def _row(cells: Sequence[str], widths: Sequence[int], styles: Sequence[str]) -> Fragments:
    frags: Fragments = [("class:table.border", "│")]
    for cell, width, style in zip(cells, widths, styles):
        frags.append(("", " "))
        frags.append((style, pad_display(cell, width)))
        frags.append(("", " "))
        frags.append(("class:table.border", "│"))
    frags.append(("", "\n"))
    return frags


def render_table(elements: Sequence[DisplayElement]) -> Fragments:
    """Box-drawn table as prompt_toolkit style fragments (trailing newline dropped)."""
    rows = table_rows(elements)
    widths = column_widths(rows)
    header_style = "class:table.header"

    frags: Fragments = []
    frags += _border(widths, "┌", "┬", "┐")
    frags += _row(HEADERS, widths, [header_style] * 3)
    if rows:
        frags += _border(widths, "├", "┼", "┤")
    for row, element in zip(rows, elements):
        status_style = "class:status.done" if element.task.complete else "class:status.todo"
        frags += _row(row, widths, ["class:number", "", status_style])
    frags += _border(widths, "└", "┴", "┘")
    return frags[:-1]


def render_raw(elements: Sequence[DisplayElement]) -> str:
    """Tab-separated rows without a header, for scripts."""
    return "\n".join("\t".join(row) for row in table_rows(elements))


__all__ = ["HEADERS", "table_rows", "column_widths", "render_table", "render_raw"]
