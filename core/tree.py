"""Task tree reconstruction.

Pure domain logic: turns the flat parent-pointer rows returned by a store into
a single rooted tree. No I/O - receives the rows as parameters.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .record import Task


logger = logging.getLogger("teal.tree")


class TreeBuildError(Exception):
    """Rows cannot be arranged into a single rooted tree."""


class MultipleRootsError(TreeBuildError):
    def __init__(self, root_ids: List[int]):
        self.root_ids = list(root_ids)
        super().__init__(f"Multiple root tasks found: {', '.join(str(i) for i in self.root_ids)}")


class NoRootFoundError(TreeBuildError):
    def __init__(self, message: str = "No root task found"):
        super().__init__(message)


@dataclass
class TaskTree:
    """A task node that owns its children.

    Children keep the order in which their rows appeared in the flat input.
    There is no link back to the parent node.
    """

    id: int
    description: str = ""
    complete: bool = False
    depth: int = 0
    children: List["TaskTree"] = field(default_factory=list)

    def to_task(self) -> Task:
        return Task(id=self.id, description=self.description, complete=self.complete, parent=None)

    def iter_ids(self) -> List[int]:
        """Ids of the whole subtree in pre-order."""
        ids: List[int] = []
        stack: List[TaskTree] = [self]
        while stack:
            node = stack.pop()
            ids.append(node.id)
            stack.extend(reversed(node.children))
        return ids

    def __len__(self) -> int:
        return len(self.iter_ids())


def partition_by_parent(tasks: Iterable[Task]) -> Tuple[List[Task], Dict[int, List[Task]]]:
    """Split rows into parentless rows and a parent id -> children map."""
    roots: List[Task] = []
    children_by_parent: Dict[int, List[Task]] = {}
    for task in tasks:
        if task.parent is None:
            roots.append(task)
        else:
            children_by_parent.setdefault(task.parent, []).append(task)
    return roots, children_by_parent


def find_orphan(tasks: List[Task]) -> Optional[Task]:
    """First row (input order) whose parent is not among the rows."""
    known_ids = {task.id for task in tasks}
    for task in tasks:
        if task.parent is not None and task.parent not in known_ids:
            return task
    return None


def select_root(tasks: List[Task], roots: List[Task]) -> Task:
    if len(roots) > 1:
        raise MultipleRootsError([task.id for task in roots])
    if roots:
        return roots[0]
    orphan = find_orphan(tasks)
    if orphan is None:
        raise NoRootFoundError()
    logger.debug(
        "No parentless task among %d rows; promoting task %s (missing parent %s) to root",
        len(tasks),
        orphan.id,
        orphan.parent,
    )
    return orphan


def _materialize(root: Task, children_by_parent: Dict[int, List[Task]]) -> Tuple[TaskTree, Set[int]]:
    """Depth-first descent over the children map.

    Iterative so deep chains do not hit the interpreter recursion limit.
    Returns the tree and the ids that were placed in it.
    """
    tree = TaskTree(id=root.id, description=root.description, complete=root.complete, depth=0)
    visited: Set[int] = {root.id}
    stack: List[TaskTree] = [tree]
    while stack:
        node = stack.pop()
        for child in children_by_parent.get(node.id, []):
            # Duplicate ids would otherwise re-enter an already built subtree.
            if child.id in visited:
                continue
            visited.add(child.id)
            child_node = TaskTree(
                id=child.id,
                description=child.description,
                complete=child.complete,
                depth=node.depth + 1,
            )
            node.children.append(child_node)
            stack.append(child_node)
    return tree, visited


def build_tree(tasks: Iterable[Task]) -> TaskTree:
    """Build the single rooted tree described by `tasks`.

    Raises:
        MultipleRootsError: more than one row has no parent.
        NoRootFoundError: no parentless row and no row whose parent is missing
            (this includes an empty input).

    Rows that cannot be reached from the root (a broken or cyclic parent
    chain) are left out of the result.
    """
    rows = list(tasks)
    roots, children_by_parent = partition_by_parent(rows)
    root = select_root(rows, roots)
    tree, visited = _materialize(root, children_by_parent)

    omitted = [task.id for task in rows if task.id not in visited]
    if omitted:
        logger.warning("Tasks unreachable from root %s were left out: %s", root.id, omitted)
    return tree


__all__ = [
    "TaskTree",
    "TreeBuildError",
    "MultipleRootsError",
    "NoRootFoundError",
    "partition_by_parent",
    "find_orphan",
    "select_root",
    "build_tree",
]
