"""Command-line interface for the task tracker."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import Config, ConfigModel, get_config
from .exceptions import TaskNotFoundError, TaskParseError
from .parser import (
    parse_command_word,
    parse_deadline,
    parse_event,
    parse_find_keyword,
    parse_task_index,
    parse_todo,
    suggest_command,
)
from .storage import Storage
from .task import Task
from .task_list import TaskList

logger = logging.getLogger(__name__)

console = Console()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Response:
    """What the router has to say about one command line."""
    message: str
    is_error: bool = False
    exit: bool = False
    suggestions: List[str] = field(default_factory=list)


class CommandRouter:
    """Routes command lines to the parser and applies them to the task list."""

    def __init__(self, task_list: TaskList, storage: Storage, config: ConfigModel):
        self.task_list = task_list
        self.storage = storage
        self.config = config
        self.handlers: Dict[str, Callable[[str], Response]] = {
            "list": self._list,
            "sort": self._sort,
            "todo": self._add_todo,
            "deadline": self._add_deadline,
            "event": self._add_event,
            "mark": self._mark,
            "unmark": self._unmark,
            "delete": self._delete,
            "find": self._find,
            "bye": self._bye,
        }

    @property
    def commands(self) -> List[str]:
        return list(self.handlers)

    def handle(self, line: str) -> Response:
        """Run one command line and return the reply for the user.

        Parse failures and bad task numbers become error responses; they
        never end the session.
        """
        word = parse_command_word(line)
        if not word:
            return Response("Type a command, e.g. 'todo read book' or 'list'.")

        handler = self.handlers.get(word)
        if handler is None:
            return self._unknown(word)

        try:
            return handler(line)
        except (TaskParseError, TaskNotFoundError) as e:
            logger.debug("Rejected %r: %s", line, e)
            return Response(e.message, is_error=True, suggestions=e.suggestions)
        except OSError as e:
            logger.error("Failed to save tasks to %s: %s", self.storage.path, e)
            return Response(f"Could not save your tasks, nothing was changed: {e}",
                            is_error=True)

    def _show(self, task: Task) -> str:
        return task.display_string(self.config.display_datetime_format)

    def _numbered(self, header: str, numbered_tasks) -> str:
        lines = [header]
        lines.extend(f"{number}. {self._show(task)}" for number, task in numbered_tasks)
        return "\n".join(lines)

    def _save(self, undo: Callable[[], None]):
        """Persist the list, reverting the last change if it cannot be written."""
        try:
            self.storage.save(self.task_list)
        except OSError:
            undo()
            raise

    @staticmethod
    def _restore_status(task: Task, done: bool):
        if done:
            task.mark_done()
        else:
            task.mark_undone()

    def _count(self) -> str:
        size = len(self.task_list)
        noun = "task" if size == 1 else "tasks"
        return f"Now you have {size} {noun} in the list."

    def _list(self, line: str) -> Response:
        if not len(self.task_list):
            return Response("Your list is empty.")
        return Response(self._numbered("Here are the tasks in your list:",
                                       enumerate(self.task_list, start=1)))

    def _sort(self, line: str) -> Response:
        if not len(self.task_list):
            return Response("Your list is empty.")
        return Response(self._numbered("Here are your tasks by due date:",
                                       enumerate(self.task_list.sorted_by_due(), start=1)))

    def _add(self, task: Task) -> Response:
        self.task_list.add(task)
        self._save(lambda: self.task_list.delete(len(self.task_list)))
        return Response(f"Got it. I've added this task:\n  {self._show(task)}\n{self._count()}")

    def _add_todo(self, line: str) -> Response:
        return self._add(parse_todo(line))

    def _add_deadline(self, line: str) -> Response:
        return self._add(parse_deadline(line))

    def _add_event(self, line: str) -> Response:
        return self._add(parse_event(line))

    def _mark(self, line: str) -> Response:
        index = parse_task_index(line)
        was_done = self.task_list.get(index).status()
        task = self.task_list.mark(index)
        self._save(lambda: self._restore_status(task, was_done))
        return Response(f"Nice! I've marked this task as done:\n  {self._show(task)}")

    def _unmark(self, line: str) -> Response:
        index = parse_task_index(line)
        was_done = self.task_list.get(index).status()
        task = self.task_list.unmark(index)
        self._save(lambda: self._restore_status(task, was_done))
        return Response(f"OK, I've marked this task as not done yet:\n  {self._show(task)}")

    def _delete(self, line: str) -> Response:
        index = parse_task_index(line)
        task = self.task_list.delete(index)
        self._save(lambda: self.task_list.insert(index, task))
        return Response(f"Noted. I've removed this task:\n  {self._show(task)}\n{self._count()}")

    def _find(self, line: str) -> Response:
        matches = self.task_list.find(parse_find_keyword(line))
        if not matches:
            return Response("No matching tasks found.")
        return Response(self._numbered("Here are the matching tasks in your list:", matches))

    def _bye(self, line: str) -> Response:
        return Response("Bye. Hope to see you again soon!", exit=True)

    def _unknown(self, word: str) -> Response:
        suggestion = suggest_command(word, self.commands)
        suggestions = [f"Did you mean '{suggestion}'?"] if suggestion else []
        return Response(f"I don't know what '{word}' means.", is_error=True,
                        suggestions=suggestions)


def configure_logging(config: ConfigModel, verbose: bool = False) -> None:
    """Configure root logging once for the CLI process."""
    level = logging.DEBUG if verbose else getattr(logging, str(config.log_level).upper(),
                                                   logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def print_response(response: Response, no_color: bool = False) -> None:
    """Print a router response to the console."""
    style = "red" if response.is_error and not no_color else ""
    console.print(Text(response.message, style=style), highlight=False)
    for suggestion in response.suggestions:
        console.print(Text(f"  {suggestion}", style="" if no_color else "dim"), highlight=False)


@click.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(config_path, verbose):
    """Task tracker - add to-dos, deadlines and events from the command line."""
    if config_path:
        config = Config.reload(Path(config_path))
    else:
        config = get_config()

    configure_logging(config, verbose)

    storage = Storage(config)
    router = CommandRouter(TaskList(storage.load()), storage, config)

    console.print(Panel.fit("Hello! What can I do for you?", title="Task Tracker"))

    while True:
        try:
            line = console.input("> ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        response = router.handle(line)
        print_response(response, config.no_color)
        if response.exit:
            break


if __name__ == "__main__":
    main()
