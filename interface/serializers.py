"""JSON contract for tasks and outline rows used by `--json` output."""

from typing import Any, Dict

from core import DisplayElement, Task


def task_to_dict(task: Task) -> Dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "complete": task.complete,
        "parent": task.parent,
    }


def element_to_dict(element: DisplayElement) -> Dict[str, Any]:
    data = task_to_dict(element.task)
    data.pop("parent")
    data.update(
        {
            "number": element.number,
            "depth": element.depth,
            "last_sibling": element.is_last_sibling,
            "ancestors": list(element.ancestor_ids),
        }
    )
    return data


__all__ = ["task_to_dict", "element_to_dict"]
