#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from rich.console import Console

from reminders.apps_implementation.reminders import ReminderCollection
from reminders.constants import COMPLETED_MARK
from reminders.interactive.display import (
    display_grouped_reminders,
    display_menu,
    display_reminders,
    display_search_results,
    reminders_table,
)
from reminders.interactive.utils import MENU_ITEM_DESCRIPTIONS


def test_display_menu(console: Console):
    display_menu(console)
    output = console.export_text()
    assert "Main Menu" in output
    assert "[Number]" in output
    for description in MENU_ITEM_DESCRIPTIONS.values():
        assert description in output


def test_reminders_table_numbering(example_collection: ReminderCollection):
    table = reminders_table(example_collection.reminders)
    assert table.row_count == 3
    assert list(table.columns[0].cells) == ["1", "2", "3"]


def test_display_reminders_marks_completed(
    example_collection: ReminderCollection, console: Console
):
    example_collection.toggle_completion(1)
    display_reminders(example_collection.reminders, console)
    output = console.export_text()
    assert "Buy milk" in output
    assert "Call mom" in output
    assert output.count(COMPLETED_MARK) == 1


def test_display_reminders_does_not_parse_markup(
    collection: ReminderCollection, console: Console
):
    collection.add("[bold]not bold[/bold]", "[red]")
    display_reminders(collection.reminders, console)
    output = console.export_text()
    assert "[bold]not bold[/bold]" in output
    assert "[red]" in output


def test_display_search_results(
    example_collection: ReminderCollection, console: Console
):
    display_search_results(example_collection.search("buy"), console)
    output = console.export_text()
    assert "Found 2 matching reminder(s)" in output
    assert "Buy milk" in output
    assert "Buy eggs" in output
    assert "Call mom" not in output


def test_display_empty_search_results(console: Console):
    display_search_results([], console)
    assert "No reminders match your search" in console.export_text()


def test_display_grouped_reminders(
    example_collection: ReminderCollection, console: Console
):
    display_grouped_reminders(example_collection.group_by_tag(), console)
    output = console.export_text()
    assert "Tag: shopping" in output
    assert "Tag: family" in output
    assert output.index("Tag: shopping") < output.index("Tag: family")
    assert output.index("Buy eggs") < output.index("Tag: family")
