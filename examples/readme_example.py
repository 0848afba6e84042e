from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from objextras import (
    clone,
    get_messages,
    get_property_value,
    is_equivalent_to,
    set_property_value,
    to_json,
)


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Task:
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    due: datetime | None = None


@dataclass
class Owner:
    name: str | None = None
    mail: str | None = None


@dataclass
class TaskList:
    """A task list with an owner and labels, edited through a working copy."""

    owner: Owner | None = None
    tasks: list[Task] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)


def progress(task_list: TaskList) -> None:
    """Move every task one step through its lifecycle."""
    for task in task_list.tasks:
        if task.status == TaskStatus.PENDING:
            task.status = TaskStatus.IN_PROGRESS
        elif task.status == TaskStatus.IN_PROGRESS:
            task.status = TaskStatus.COMPLETED


def main() -> None:
    saved = TaskList(
        tasks=[
            Task("Collect data", due=datetime(2024, 5, 1)),
            Task("Analyze data"),
            Task("Generate report"),
        ],
        labels={"team": "research"},
    )

    # Edit a working copy; the saved list stays untouched until we commit
    draft = clone(saved)
    print(f"Draft unchanged: {is_equivalent_to(saved, draft)}")

    set_property_value(draft, "owner/name", "Joe")
    progress(draft)
    print(f"Owner: {get_property_value(draft, 'Owner.Name')}")
    print(f"Draft changed: {not is_equivalent_to(saved, draft)}")
    print(f"Saved status: {saved.tasks[0].status.value}")

    # A sparse patch only states what it wants to check
    patch = TaskList(labels={"team": "research"})
    print(f"Patch applies: {is_equivalent_to(patch, draft, ignore_null_source=True)}")

    # Stored values may come back as text
    print(f"Status matches text: {is_equivalent_to(draft.tasks[0].status, 'IN_PROGRESS')}")
    print(f"Due matches text: {is_equivalent_to(draft.tasks[0].due, '2024-05-01T00:00:00')}")

    print(to_json(draft, indented=True))

    try:
        try:
            int(get_property_value(draft, "owner.name"))
        except ValueError as e:
            raise RuntimeError("Cannot read owner id") from e
    except RuntimeError as e:
        print(get_messages(e))


if __name__ == "__main__":
    main()
