"""Linearize a task tree into display rows."""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .record import Task
from .tree import TaskTree, build_tree


@dataclass(frozen=True)
class DisplayElement:
    """One outline row.

    `ancestor_ids` runs from the root down to, but excluding, this row's task.
    """

    depth: int
    is_last_sibling: bool
    task: Task
    ancestor_ids: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def number(self) -> str:
        """Breadcrumb numbering such as "1.4.7"."""
        return ".".join(str(i) for i in (*self.ancestor_ids, self.task.id))


def flatten_tree(tree: TaskTree) -> List[DisplayElement]:
    """Flatten `tree` in deterministic pre-order.

    The root is always treated as the last sibling.
    """
    flat: List[DisplayElement] = []
    # (node, is_last_sibling, ancestor_ids); LIFO, so children go on reversed.
    frames: List[Tuple[TaskTree, bool, Tuple[int, ...]]] = [(tree, True, ())]
    while frames:
        node, is_last, ancestors = frames.pop()
        flat.append(
            DisplayElement(
                depth=node.depth,
                is_last_sibling=is_last,
                task=node.to_task(),
                ancestor_ids=ancestors,
            )
        )
        child_ancestors = ancestors + (node.id,)
        count = len(node.children)
        for index in reversed(range(count)):
            frames.append((node.children[index], index + 1 == count, child_ancestors))
    return flat


def flatten_records(tasks: Iterable[Task]) -> List[DisplayElement]:
    """Build and flatten in one step; raises what `build_tree` raises."""
    return flatten_tree(build_tree(tasks))


__all__ = ["DisplayElement", "flatten_tree", "flatten_records"]
