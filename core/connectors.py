"""Box-drawing connectors for the task outline.

Each row's glyph depends only on the rows directly above and below it, plus
the set of depths that still have siblings further down (the vertical bars).
"""

from enum import Enum
from typing import AbstractSet, FrozenSet, List, Optional, Sequence

from .flatten import DisplayElement


BRANCH = "├─"
CORNER = "└─"
BAR_SLOT = "│    "
BLANK_SLOT = "     "
ROW_LEAD = "   "


class Transition(Enum):
    END_OF_LIST = "end"
    INDENTED = "indented"
    SAME_DEPTH = "same"
    DEDENTED = "dedented"


def classify(element: DisplayElement, neighbour: Optional[DisplayElement]) -> Transition:
    """How `neighbour` sits relative to `element` (None = edge of the list)."""
    if neighbour is None:
        return Transition.END_OF_LIST
    if neighbour.depth == element.depth:
        return Transition.SAME_DEPTH
    if neighbour.depth > element.depth:
        return Transition.INDENTED
    return Transition.DEDENTED


def select_glyph(
    above: Optional[DisplayElement],
    element: DisplayElement,
    below: Optional[DisplayElement],
) -> str:
    if classify(element, above) is Transition.END_OF_LIST:
        return ""
    below_kind = classify(element, below)
    if below_kind is Transition.INDENTED and not element.is_last_sibling:
        return BRANCH
    if below_kind in (Transition.END_OF_LIST, Transition.INDENTED, Transition.DEDENTED):
        return CORNER
    return BRANCH


def advance_open_depths(open_depths: AbstractSet[int], element: DisplayElement) -> FrozenSet[int]:
    """Open-depth set in effect once `element` has been reached."""
    if element.is_last_sibling:
        return frozenset(open_depths - {element.depth})
    return frozenset(open_depths | {element.depth})


def open_depths_per_row(elements: Sequence[DisplayElement]) -> List[FrozenSet[int]]:
    """Running open-depth sets; the first row starts from nothing."""
    if not elements:
        return []
    sets: List[FrozenSet[int]] = [frozenset()]
    for element in elements[1:]:
        sets.append(advance_open_depths(sets[-1], element))
    return sets


def connector_prefix(element: DisplayElement, glyph: str, open_depths: AbstractSet[int]) -> str:
    lead = "" if element.depth == 0 else ROW_LEAD
    slots = "".join(BAR_SLOT if depth in open_depths else BLANK_SLOT for depth in range(1, element.depth))
    return f"{lead}{slots}{glyph}"


def connector_prefixes(elements: Sequence[DisplayElement]) -> List[str]:
    """One prefix per row, using a 3-row window padded with None at both ends."""
    padded: List[Optional[DisplayElement]] = [None, *elements, None]
    rows = zip(padded, elements, padded[2:], open_depths_per_row(elements))
    prefixes: List[str] = []
    for above, element, below, open_depths in rows:
        prefixes.append(connector_prefix(element, select_glyph(above, element, below), open_depths))
    return prefixes


def render_outline(elements: Sequence[DisplayElement]) -> List[str]:
    """Plain-text outline lines: prefix, a space, then the description."""
    return [f"{prefix} {element.task.description}" for prefix, element in zip(connector_prefixes(elements), elements)]


__all__ = [
    "BRANCH",
    "CORNER",
    "Transition",
    "classify",
    "select_glyph",
    "advance_open_depths",
    "open_depths_per_row",
    "connector_prefix",
    "connector_prefixes",
    "render_outline",
]
