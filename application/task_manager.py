"""Application-level task service: store rows in, outline rows out."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from application.ports import TaskRepository
from core import DisplayElement, Task, TaskTree, build_tree, flatten_tree, flatten_records, NoRootFoundError
from infrastructure.file_repository import FileTaskRepository


class TaskManager:
    def __init__(self, tasks_dir: Optional[Path] = None, repository: Optional[TaskRepository] = None):
        self.repository: TaskRepository = repository or FileTaskRepository(tasks_dir)
        self.tasks_dir = getattr(self.repository, "tasks_dir", tasks_dir)

    def subtree(self, task_id: int) -> TaskTree:
        """Tree rooted at `task_id`.

        Raises NoRootFoundError when the task does not exist.
        """
        rows = self.repository.fetch_subtree(task_id)
        if not rows:
            raise NoRootFoundError(f"Task {task_id} doesn't exist")
        return build_tree(rows)

    def outline(self, task_id: int) -> List[DisplayElement]:
        return flatten_tree(self.subtree(task_id))

    def list_outline(self) -> List[DisplayElement]:
        """Every root task followed by its flattened subtree, roots in id order."""
        elements: List[DisplayElement] = []
        for root in self.repository.fetch_roots():
            elements.extend(self.outline(root.id))
        return elements

    def add_task(self, description: str, parent: Optional[int] = None) -> DisplayElement:
        """Create a task and return it as a single row numbered under its parent."""
        task = self.repository.add(description, parent)
        ancestors: tuple = ()
        if parent is not None:
            ancestors = (parent,)
        return DisplayElement(depth=0, is_last_sibling=False, task=task.detached(), ancestor_ids=ancestors)

    def remove_task(self, task_id: int) -> List[DisplayElement]:
        """Delete a task with its subtree; returns the removed rows as an outline.

        Raises NoRootFoundError when nothing was removed.
        """
        removed = self.repository.remove(task_id)
        return flatten_records(removed)

    def set_completion(self, task_id: int, complete: bool) -> Task:
        return self.repository.set_completion(task_id, complete)
