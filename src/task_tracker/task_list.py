"""In-memory list of tasks addressed by 1-based task numbers."""

from typing import Iterable, Iterator, List, Optional, Tuple

from .exceptions import TaskNotFoundError
from .task import Task
from .utils.datetime import max_datetime


class TaskList:
    """Ordered collection of tasks as the user sees them."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _position(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise TaskNotFoundError(index, len(self._tasks))
        return index - 1

    def get(self, index: int) -> Task:
        """Return task number ``index``."""
        return self._tasks[self._position(index)]

    def add(self, task: Task) -> int:
        """Append a task and return its task number."""
        self._tasks.append(task)
        return len(self._tasks)

    def insert(self, index: int, task: Task) -> None:
        """Put ``task`` back as task number ``index``, shifting later tasks down."""
        if index < 1 or index > len(self._tasks) + 1:
            raise TaskNotFoundError(index, len(self._tasks))
        self._tasks.insert(index - 1, task)

    def delete(self, index: int) -> Task:
        """Remove and return task number ``index``."""
        return self._tasks.pop(self._position(index))

    def mark(self, index: int) -> Task:
        """Mark task number ``index`` as done."""
        task = self.get(index)
        task.mark_done()
        return task

    def unmark(self, index: int) -> Task:
        """Mark task number ``index`` as not done."""
        task = self.get(index)
        task.mark_undone()
        return task

    def find(self, keyword: str) -> List[Tuple[int, Task]]:
        """Return (task number, task) pairs whose name contains ``keyword``.

        Matching ignores case.
        """
        needle = keyword.lower()
        return [
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if needle in task.name.lower()
        ]

    def sorted_by_due(self) -> List[Task]:
        """Return tasks ordered by due date, undated tasks last."""
        return sorted(self._tasks, key=lambda t: t.due() or max_datetime())
