"""Console rendering of task reports using rich."""

from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from clickupreport.engine.due_dates import DueDateParser, is_sentinel, normalize_due_date
from clickupreport.engine.grouping import TaskGroup, group_key
from clickupreport.engine.priority import task_priority_tier
from clickupreport.engine.report import TaskReport
from clickupreport.models.task import Task, TaskList, PriorityTier

# Row styles by priority tier; NONE rows use the terminal default
TIER_STYLES = {
    PriorityTier.URGENT: "red",
    PriorityTier.HIGH: "yellow",
    PriorityTier.NORMAL: "blue",
    PriorityTier.NONE: None,
}
WEEKLY_SUMMARY_STYLE = "green"
NO_DUE_DATE = "No due date"
NO_PRIORITY = "None"


def format_due_date(task: Task, parser: Optional[DueDateParser] = None) -> str:
    due = normalize_due_date(task.due_date, parser)
    if is_sentinel(due):
        return NO_DUE_DATE
    return due.strftime("%Y-%m-%d")


def format_priority(task: Task) -> str:
    return task.priority_label or NO_PRIORITY


def row_style(task: Task) -> Optional[str]:
    return TIER_STYLES[task_priority_tier(task)]


def _new_table(*columns: str, title: Optional[str] = None) -> Table:
    table = Table(
        title=Text(title) if title else None,
        title_justify="left",
        show_header=True,
        header_style="bold",
        border_style="dim",
    )
    for column in columns:
        table.add_column(column, no_wrap=False)
    return table


def build_status_table(tasks: Iterable[Task], title: str, parser: Optional[DueDateParser] = None) -> Table:
    """Table of tasks with Task Name, List, Due Date and Priority columns."""
    table = _new_table("Task Name", "List", "Due Date", "Priority", title=title)
    for task in tasks:
        table.add_row(
            Text(task.name),
            Text(group_key(task)),
            format_due_date(task, parser),
            Text(format_priority(task)),
            style=row_style(task),
        )
    return table


def build_group_table(group: TaskGroup, parser: Optional[DueDateParser] = None) -> Table:
    """Table for one list group, titled with the list name and task count."""
    title = f"List: {group.list_name} ({len(group)} tasks)"
    table = _new_table("Task Name", "Due Date", "Priority", title=title)
    for task in group.tasks:
        table.add_row(
            Text(task.name),
            format_due_date(task, parser),
            Text(format_priority(task)),
            style=row_style(task),
        )
    return table


class ReportRenderer:
    """Prints a TaskReport to a rich console."""

    def __init__(self, console: Optional[Console] = None, parser: Optional[DueDateParser] = None):
        self.console = console or Console()
        self.parser = parser

    def render(self, report: TaskReport, skipped_lists: Optional[List[TaskList]] = None) -> None:
        self.console.rule("ClickUp Tasks Report", characters="=")
        self.console.print()

        self._render_summary(report)

        if skipped_lists:
            names = ", ".join(task_list.name or task_list.id for task_list in skipped_lists)
            self.console.print(
                Text(f"Skipped {len(skipped_lists)} list(s) that could not be fetched: {names}", style="yellow")
            )
            self.console.print()

        self.console.print("Tasks by Status:", style="bold")
        if report.todo:
            self.console.print(build_status_table(report.todo, "To Do Tasks", self.parser))
        if report.in_progress:
            self.console.print(build_status_table(report.in_progress, "In Progress Tasks", self.parser))
        self.console.print()

        self.console.print("Tasks by List:", style="bold")
        if report.todo_by_list:
            self._render_groups("To Do Tasks", report.todo_by_list)
        if report.in_progress_by_list:
            self._render_groups("In Progress Tasks", report.in_progress_by_list)

        if report.completed_this_week is not None:
            self.console.rule("Weekly Completion Summary", characters="=")
            self.console.print(
                Text(f"Tasks completed this week: {report.completed_this_week}", style=WEEKLY_SUMMARY_STYLE)
            )
            self.console.print()

        self.console.rule("End of Report", characters="=")

    def _render_summary(self, report: TaskReport) -> None:
        self.console.rule("Task Summary", characters="=")
        self.console.print(f"Completed Tasks: {len(report.completed)}")
        self.console.print(f"To Do Tasks: {len(report.todo)}")
        self.console.print(f"In Progress Tasks: {len(report.in_progress)}")
        self.console.print()

    def _render_groups(self, title: str, groups: List[TaskGroup]) -> None:
        self.console.rule(f"{title} by List", characters="-")
        for group in groups:
            self.console.print(build_group_table(group, self.parser))
        self.console.print()
