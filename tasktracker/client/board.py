"""Interactive task list.

``TaskBoard`` mirrors what a user sees: the rendered list, the new-task input
and the alerts raised when a request fails. Every successful mutation is
followed by a full reload, so the board never patches its own state.
"""
import logging
import sys
from typing import Any, Callable, Dict, List

from tasktracker.client.api import ApiError, TaskClient
from tasktracker.client.render import render_tasks

logger = logging.getLogger(__name__)


def ask(message: str) -> bool:
    answer = input(f"{message} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def warn(message: str) -> None:
    print(message, file=sys.stderr)


class TaskBoard:
    def __init__(
        self,
        client: TaskClient,
        confirm: Callable[[str], bool] = ask,
        alert: Callable[[str], None] = warn,
    ):
        self.client = client
        self.confirm = confirm
        self.alert = alert
        self.tasks: List[Dict[str, Any]] = []
        self.html = render_tasks(self.tasks)
        self.input_value = ""

    def render(self) -> str:
        self.html = render_tasks(self.tasks)
        return self.html

    def load(self) -> bool:
        try:
            tasks = self.client.list_tasks()
        except ApiError:
            self.alert("Could not load tasks")
            return False
        self.tasks = tasks
        logger.debug("Loaded %d tasks", len(tasks))
        self.render()
        return True

    def submit(self) -> bool:
        """Create a task from ``input_value``. Blank input is ignored."""
        title = self.input_value.strip()
        if not title:
            return False
        try:
            self.client.create_task(title)
        except ApiError:
            self.alert("Could not create the task")
            return False
        self.input_value = ""
        self.load()
        return True

    def toggle(self, task_id: int, completed: bool) -> bool:
        try:
            self.client.set_completion(task_id, completed)
        except ApiError:
            self.alert("Could not update the task")
            # put the checkbox back the way the last load left it
            self.render()
            return False
        self.load()
        return True

    def delete(self, task_id: int) -> bool:
        if not self.confirm("Are you sure you want to delete this task?"):
            return False
        try:
            self.client.delete_task(task_id)
        except ApiError:
            self.alert("Could not delete the task")
            return False
        self.load()
        return True
