#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from rich.console import Console
from rich.table import Table
from rich.text import Text

from reminders.apps_implementation.reminders import Reminder, RemindersGroupingByTag
from reminders.constants import COMPLETED_MARK
from reminders.interactive.console_messages import NO_SEARCH_RESULTS
from reminders.interactive.utils import MENU_ITEM_DESCRIPTIONS


def display_menu(console: Console | None = None):
    """Display the main menu as a rich table with the following format

    ┏━━━━━━━━━━┳━━━━━━━━━━━━━━━━━━━━┓
    ┃ [Number] ┃ Action             ┃
    ┡━━━━━━━━━━╇━━━━━━━━━━━━━━━━━━━━┩
    """  # noqa
    console = console or Console()
    table = Table(title="Main Menu", show_header=True, header_style="bold magenta")
    table.add_column("\\[Number]", justify="right", style="cyan", no_wrap=True)
    table.add_column("Action")
    for item, description in MENU_ITEM_DESCRIPTIONS.items():
        table.add_row(item.value, description)
    console.print(table)


def reminders_table(
    reminders: list[Reminder],
    title: str | Text | None = None,
) -> Table:
    """Create a table in the format

    ┏━━━━┳━━━━━━━━━━━━━━━━━━━━━━━━━┳━━━━━━━━━━┳━━━━━━┓
    ┃  # ┃ Reminder                ┃ Tag      ┃ Done ┃
    ┡━━━━╇━━━━━━━━━━━━━━━━━━━━━━━━━╇━━━━━━━━━━╇━━━━━━┩

    where reminders are numbered from 1.
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Reminder")
    table.add_column("Tag", style="dim")
    table.add_column("Done", justify="center", style="green", no_wrap=True)
    for i, reminder in enumerate(reminders, start=1):
        # user text is wrapped in Text so that it is never parsed as markup
        table.add_row(
            str(i),
            Text(reminder.description),
            Text(reminder.tag),
            COMPLETED_MARK if reminder.completed else "",
        )
    return table


def display_reminders(
    reminders: list[Reminder],
    console: Console | None = None,
    title: str | None = None,
):
    """Display a list of reminders as a `rich` table."""
    console = console or Console()
    console.print(reminders_table(reminders, title=title))


def display_search_results(results: list[Reminder], console: Console | None = None):
    console = console or Console()
    if not results:
        console.print(NO_SEARCH_RESULTS, style="bold yellow")
        return
    title = f"Found {len(results)} matching reminder(s)"
    console.print(reminders_table(results, title=title))


def display_grouped_reminders(
    groups: RemindersGroupingByTag, console: Console | None = None
):
    """Display each group of reminders as a standalone table titled
    with the tag shared by the reminders in the group."""
    console = console or Console()
    for tag, reminders in groups.items():
        console.print(reminders_table(reminders, title=Text(f"Tag: {tag}")))
