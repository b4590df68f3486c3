"""CLI parser construction for teal."""

import argparse
from typing import Any, Mapping


def task_id(value: str) -> int:
    """Accept a plain id or a breadcrumb number ("1.4.7"); the last segment is the id."""
    last = str(value).strip().split(".")[-1]
    try:
        parsed = int(last)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid task id: {value}")
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"Invalid task id: {value}")
    return parsed


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teal",
        description="teal: personal hierarchical task tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--tasks-dir", dest="tasks_dir", help="directory holding the .task files")
    parser.add_argument("--theme", choices=list(themes.keys()), help=f"output palette (default: {default_theme})")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")

    def add_output_args(sp, raw: bool = True):
        if raw:
            sp.add_argument("--raw", action="store_true", help="tab-separated output without header or colours")
        sp.add_argument("--json", action="store_true", help="structured JSON output")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    # list
    lp = sub.add_parser("list", aliases=["ls"], help="List every task tree")
    add_output_args(lp)
    lp.set_defaults(func=commands.cmd_list)

    # show
    sp = sub.add_parser("show", help="Show one task and its subtasks as an outline")
    sp.add_argument("task_id", type=task_id)
    add_output_args(sp)
    sp.set_defaults(func=commands.cmd_show)

    # add
    ap = sub.add_parser("add", aliases=["create"], help="Create a task")
    ap.add_argument("name", nargs="+", help="task description")
    ap.add_argument("--parent", "-p", type=task_id, help="id (or number) of the parent task")
    add_output_args(ap)
    ap.set_defaults(func=commands.cmd_add)

    # remove
    rp = sub.add_parser("remove", aliases=["del"], help="Remove tasks together with their subtasks")
    rp.add_argument("task_ids", nargs="+", type=task_id, metavar="task_id")
    add_output_args(rp)
    rp.set_defaults(func=commands.cmd_remove)

    # done / undone
    dp = sub.add_parser("done", help="Mark a task as done")
    dp.add_argument("task_id", type=task_id)
    add_output_args(dp, raw=False)
    dp.set_defaults(func=commands.cmd_done, complete=True)

    up = sub.add_parser("undone", help="Mark a task as not done")
    up.add_argument("task_id", type=task_id)
    add_output_args(up, raw=False)
    up.set_defaults(func=commands.cmd_done, complete=False)

    # config
    cfg = sub.add_parser("config", help="Show or change user settings (~/.teal_config.yaml)")
    cfg.add_argument("--set-tasks-dir", dest="set_tasks_dir", metavar="PATH", help="store tasks in PATH ('' to reset)")
    cfg.add_argument("--set-theme", dest="set_theme", choices=list(themes.keys()), help="default palette")
    cfg.set_defaults(func=commands.cmd_config)

    return parser
