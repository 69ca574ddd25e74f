#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import re
from enum import StrEnum

from reminders.aliases import RawInput, ReminderIdx
from reminders.apps_implementation.reminders import ReminderCollection
from reminders.interactive.console_messages import (
    BLANK_INPUT,
    INDEX_NOT_A_NUMBER,
    INDEX_OUT_OF_RANGE,
)

POSITIVE_NUMBER = re.compile(r"^\d+$")


class MenuItem(StrEnum):
    """The main menu items, valued with the number the user types to select them."""

    ShowReminders = "1"
    SearchReminders = "2"
    AddReminder = "3"
    ModifyReminder = "4"
    ToggleCompletion = "5"
    Exit = "6"


MENU_ITEM_DESCRIPTIONS = {
    MenuItem.ShowReminders: "Show all reminders",
    MenuItem.SearchReminders: "Search reminders",
    MenuItem.AddReminder: "Add a reminder",
    MenuItem.ModifyReminder: "Modify a reminder",
    MenuItem.ToggleCompletion: "Toggle completion",
    MenuItem.Exit: "Exit",
}


class SessionEndException(Exception):
    pass


def to_index(user_input: RawInput) -> ReminderIdx:
    """Convert the 1-based reminder number shown to the user to
    the position of the reminder in the collection."""
    return int(user_input) - 1


def validate_user_input(
    user_input: RawInput,
    collection: ReminderCollection,
    is_index_required: bool = False,
) -> str | None:
    """Check the text typed by the user at a prompt.

    Parameters
    ----------
    user_input
        The raw text entered by the user.
    collection
        The reminders the user may refer to by number.
    is_index_required
        Set when the user is asked to pick a reminder from the list,
        in which case the input must be the number of an existing reminder.

    Returns
    -------
    The message explaining why the input was rejected, or `None` if
    the input is valid.
    """
    if not user_input.strip():
        return BLANK_INPUT
    if not is_index_required:
        return None
    if not POSITIVE_NUMBER.match(user_input):
        return INDEX_NOT_A_NUMBER
    if not collection.is_index_valid(to_index(user_input)):
        return INDEX_OUT_OF_RANGE
    return None
