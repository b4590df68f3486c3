from typing import Protocol, List, Optional
from core import Task


class TaskStoreError(RuntimeError):
    pass


class TaskNotFoundError(TaskStoreError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class InvalidParentError(TaskStoreError):
    def __init__(self, parent_id: int, reason: str):
        self.parent_id = parent_id
        super().__init__(f"Invalid parent {parent_id}: {reason}")


class TaskRepository(Protocol):
    def fetch_all(self) -> List[Task]:
        ...

    def fetch_roots(self) -> List[Task]:
        ...

    def fetch_subtree(self, root_id: int) -> List[Task]:
        ...

    def load(self, task_id: int) -> Optional[Task]:
        ...

    def add(self, description: str, parent: Optional[int] = None) -> Task:
        ...

    def remove(self, task_id: int) -> List[Task]:
        ...

    def set_completion(self, task_id: int, complete: bool) -> Task:
        ...

    def next_id(self) -> int:
        ...
