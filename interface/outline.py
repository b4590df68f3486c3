"""Outline view of one task's subtree with box-drawing connectors."""

from typing import List, Sequence, Tuple

from core import DisplayElement, connector_prefixes


def render_outline_fragments(elements: Sequence[DisplayElement]) -> List[Tuple[str, str]]:
    frags: List[Tuple[str, str]] = []
    for index, (prefix, element) in enumerate(zip(connector_prefixes(elements), elements)):
        if index:
            frags.append(("", "\n"))
        frags.append(("class:outline.connector", f"{prefix} "))
        if element.depth == 0:
            style = "class:outline.root"
        elif element.task.complete:
            style = "class:outline.done"
        else:
            style = ""
        frags.append((style, element.task.description))
    return frags


__all__ = ["render_outline_fragments"]
