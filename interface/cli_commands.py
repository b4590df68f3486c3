#!/usr/bin/env python3
"""CLI commands."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Set

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

import config
from application.ports import InvalidParentError, TaskNotFoundError
from application.task_manager import TaskManager
from core import DisplayElement, MultipleRootsError, NoRootFoundError, render_outline
from .cli_io import structured_error, structured_response
from .outline import render_outline_fragments
from .serializers import element_to_dict, task_to_dict
from .table import render_raw, render_table
from .themes import build_style


logger = logging.getLogger("teal.cli")


def _manager(args: argparse.Namespace) -> TaskManager:
    raw_dir = getattr(args, "tasks_dir", None)
    return TaskManager(tasks_dir=config.resolve_tasks_dir(Path(raw_dir) if raw_dir else None))


def _theme(args: argparse.Namespace) -> str:
    return getattr(args, "theme", None) or config.get_user_theme()


def _emit(args: argparse.Namespace, fragments) -> None:
    print_formatted_text(FormattedText(fragments), style=build_style(_theme(args)))


def _fail(args: argparse.Namespace, command: str, message: str) -> int:
    if getattr(args, "json", False):
        return structured_error(command, message)
    print(message, file=sys.stderr)
    return 1


def _print_table(args: argparse.Namespace, elements: Sequence[DisplayElement]) -> None:
    if getattr(args, "raw", False):
        print(render_raw(elements))
    else:
        _emit(args, render_table(elements))


def cmd_list(args: argparse.Namespace) -> int:
    """List every root task with its subtasks."""
    manager = _manager(args)
    try:
        elements = manager.list_outline()
    except MultipleRootsError as exc:
        return _fail(args, "list", f"Data inconsistency: {exc}")
    logger.debug("listing %d rows from %s", len(elements), manager.tasks_dir)
    if getattr(args, "json", False):
        return structured_response(
            "list",
            message=f"{len(elements)} tasks",
            payload={"tasks": [element_to_dict(el) for el in elements]},
        )
    if not elements:
        print("There's nothing here, run 'teal add <name>' to add a new task")
        return 0
    _print_table(args, elements)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Show one task's subtree as an outline."""
    manager = _manager(args)
    try:
        elements = manager.outline(args.task_id)
    except NoRootFoundError:
        return _fail(args, "show", f"Task {args.task_id} doesn't exist, please run 'teal list' to view all of your tasks")
    except MultipleRootsError as exc:
        return _fail(args, "show", f"Data inconsistency: {exc}")
    if getattr(args, "json", False):
        return structured_response(
            "show",
            message=elements[0].task.description,
            payload={"tasks": [element_to_dict(el) for el in elements]},
        )
    if getattr(args, "raw", False):
        print("\n".join(render_outline(elements)))
    else:
        _emit(args, render_outline_fragments(elements))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    """Create a task, optionally under a parent."""
    name = " ".join(args.name).strip()
    if not name:
        return _fail(args, "add", "Task name cannot be empty, please run 'teal add --help' for help")
    manager = _manager(args)
    try:
        element = manager.add_task(name, getattr(args, "parent", None))
    except InvalidParentError:
        return _fail(args, "add", "The task you set as a parent task doesn't exist")
    if getattr(args, "json", False):
        return structured_response("add", message=f"Added task {element.number}", payload={"task": element_to_dict(element)})
    _print_table(args, [element])
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    """Remove tasks with their whole subtrees."""
    manager = _manager(args)
    removed: List[dict] = []
    gone: Set[int] = set()
    for tid in args.task_ids:
        if tid in gone:
            logger.debug("task %s already removed with an earlier subtree", tid)
            continue
        try:
            elements = manager.remove_task(tid)
        except NoRootFoundError:
            message = f"Task {tid} doesn't exist, please run 'teal list' to view all of your tasks"
            if getattr(args, "json", False):
                return structured_error("remove", message, payload={"tasks": removed})
            return _fail(args, "remove", message)
        gone.update(el.task.id for el in elements)
        if getattr(args, "json", False):
            removed.extend(element_to_dict(el) for el in elements)
            continue
        print(f"Deleted {len(elements)} tasks:")
        _print_table(args, elements)
    if getattr(args, "json", False):
        return structured_response("remove", message=f"Deleted {len(removed)} tasks", payload={"tasks": removed})
    return 0


def cmd_done(args: argparse.Namespace) -> int:
    """Set the completion flag (`done` / `undone`)."""
    command = "done" if args.complete else "undone"
    manager = _manager(args)
    try:
        task = manager.set_completion(args.task_id, args.complete)
    except TaskNotFoundError:
        return _fail(args, command, f"Task {args.task_id} doesn't exist, please run 'teal list' to view all of your tasks")
    message = f"Task {task.id}: {task.status_label()}"
    if getattr(args, "json", False):
        return structured_response(command, message=message, payload={"task": task_to_dict(task)})
    print(message)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show or update ~/.teal_config.yaml."""
    new_dir: Optional[str] = getattr(args, "set_tasks_dir", None)
    new_theme: Optional[str] = getattr(args, "set_theme", None)
    if new_dir is not None:
        config.set_user_tasks_dir(new_dir)
    if new_theme is not None:
        config.set_user_theme(new_theme)
    print(f"tasks_dir: {config.resolve_tasks_dir()}")
    print(f"theme: {config.get_user_theme()}")
    return 0


__all__ = ["cmd_list", "cmd_show", "cmd_add", "cmd_remove", "cmd_done", "cmd_config"]
