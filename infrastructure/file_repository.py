import logging
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Set

import yaml

from core import Task
from application.ports import InvalidParentError, TaskNotFoundError, TaskRepository
from infrastructure.task_file_parser import TaskFileParser


logger = logging.getLogger("teal.store")


class FileTaskRepository(TaskRepository):
    """Task store keeping one `<id>.task` file per row in `tasks_dir`."""

    def __init__(self, tasks_dir: Path | None):
        if tasks_dir is None:
            from config import resolve_tasks_dir
            self.tasks_dir = resolve_tasks_dir()
        else:
            self.tasks_dir = tasks_dir

    def _resolve_path(self, task_id: int) -> Path:
        if task_id < 1:
            raise ValueError(f"Invalid task id: {task_id}")
        return self.tasks_dir / f"{task_id}.task"

    def _task_files(self) -> List[Path]:
        if not self.tasks_dir.exists():
            return []
        files = []
        for file in self.tasks_dir.glob("*.task"):
            if file.stem.isdigit():
                files.append(file)
        return sorted(files, key=lambda f: int(f.stem))

    def _parse_or_skip(self, file: Path) -> Optional[Task]:
        try:
            return TaskFileParser.parse(file)
        except (ValueError, KeyError, yaml.YAMLError) as exc:
            logger.warning("Skipping unreadable task file %s: %s", file, exc)
            return None

    def _write(self, task: Task, created_at: str = "") -> None:
        path = self._resolve_path(task.id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(TaskFileParser.to_file_content(task, created_at), encoding="utf-8")

    def load(self, task_id: int) -> Optional[Task]:
        path = self._resolve_path(task_id)
        if not path.exists():
            return None
        return self._parse_or_skip(path)

    def fetch_all(self) -> List[Task]:
        tasks: List[Task] = []
        for file in self._task_files():
            parsed = self._parse_or_skip(file)
            if parsed:
                tasks.append(parsed)
        return tasks

    def fetch_roots(self) -> List[Task]:
        return [task for task in self.fetch_all() if task.parent is None]

    def fetch_subtree(self, root_id: int) -> List[Task]:
        """The root row plus every row reachable from it through parent links.

        Breadcrumb order: root first, then level by level, siblings by id.
        An unknown root yields an empty list.
        """
        tasks = self.fetch_all()
        by_id: Dict[int, Task] = {task.id: task for task in tasks}
        if root_id not in by_id:
            return []
        children: Dict[int, List[Task]] = {}
        for task in tasks:
            if task.parent is not None:
                children.setdefault(task.parent, []).append(task)

        result: List[Task] = []
        seen: Set[int] = set()
        queue = deque([by_id[root_id]])
        while queue:
            task = queue.popleft()
            if task.id in seen:
                continue
            seen.add(task.id)
            result.append(task)
            queue.extend(children.get(task.id, []))
        return result

    def next_id(self) -> int:
        ids = [int(f.stem) for f in self._task_files()]
        return (max(ids) + 1) if ids else 1

    def add(self, description: str, parent: Optional[int] = None) -> Task:
        task_id = self.next_id()
        if parent is not None:
            if parent == task_id:
                raise InvalidParentError(parent, "a task cannot be its own parent")
            if not self._resolve_path(parent).exists():
                raise InvalidParentError(parent, "parent task doesn't exist")
        task = Task(id=task_id, description=description, complete=False, parent=parent)
        self._write(task, created_at=datetime.now().isoformat(timespec="seconds"))
        return task

    def set_completion(self, task_id: int, complete: bool) -> Task:
        current = self.load(task_id)
        if current is None:
            raise TaskNotFoundError(task_id)
        path = self._resolve_path(task_id)
        updated = Task(id=current.id, description=current.description, complete=complete, parent=current.parent)
        self._write(updated, created_at=TaskFileParser.created_at(path))
        return updated

    def remove(self, task_id: int) -> List[Task]:
        """Delete a task together with its whole subtree; returns the removed rows.

        Removing an unknown id returns an empty list.
        """
        removed = self.fetch_subtree(task_id)
        for task in removed:
            try:
                self._resolve_path(task.id).unlink()
            except FileNotFoundError:
                continue
        if removed:
            logger.info("Removed %d task(s) under %s", len(removed), task_id)
        return removed
