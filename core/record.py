from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Task:
    """A flat task row as the store hands it out.

    `id` starts at 1 and is assigned by the store. `parent` is the id of the
    owning task, or None for a root task.
    """

    id: int
    description: str = ""
    complete: bool = False
    parent: Optional[int] = None

    def detached(self) -> "Task":
        """Copy of the task with the parent link dropped."""
        return replace(self, parent=None)

    def status_label(self) -> str:
        return "Done" if self.complete else "Not done"
