"""Command-line front end for the task API.

    tasktracker list
    tasktracker add Buy milk
    tasktracker done 3
    tasktracker undo 3
    tasktracker rm 3 [-y]
"""
import argparse
import logging
import sys

from tasktracker import config
from tasktracker.client.api import TaskClient
from tasktracker.client.board import TaskBoard, ask, warn


def format_task(task) -> str:
    mark = "x" if task["completed"] else " "
    return f"[{mark}] {task['id']:>4}  {task['title']}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasktracker", description="Manage tasks over the task API.")
    parser.add_argument("--url", default=config.API_URL, help="API base URL (default: %(default)s)")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="show all tasks, newest first")

    add = sub.add_parser("add", help="create a task")
    add.add_argument("title", nargs="+")

    for name, text in (("done", "mark a task completed"), ("undo", "mark a task not completed")):
        p = sub.add_parser(name, help=text)
        p.add_argument("id", type=int)

    rm = sub.add_parser("rm", help="delete a task")
    rm.add_argument("id", type=int)
    rm.add_argument("-y", "--yes", action="store_true", help="do not ask for confirmation")
    return parser


def main(argv=None, session=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    alerts = []

    def alert(message):
        alerts.append(message)
        warn(message)

    confirm = (lambda message: True) if getattr(args, "yes", False) else ask
    board = TaskBoard(TaskClient(args.url, session=session), confirm=confirm, alert=alert)

    if args.command == "list":
        board.load()
    elif args.command == "add":
        board.input_value = " ".join(args.title)
        if not board.submit() and not alerts:
            alert("Task title cannot be empty")
    elif args.command in ("done", "undo"):
        board.toggle(args.id, args.command == "done")
    elif args.command == "rm":
        if not board.delete(args.id) and not alerts:
            return 0

    if alerts:
        return 1
    if not board.tasks:
        print("No tasks yet")
    for task in board.tasks:
        print(format_task(task))
    return 0


if __name__ == "__main__":
    sys.exit(main())
