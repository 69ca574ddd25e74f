#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import pytest

from reminders.apps_implementation.reminders import ReminderCollection
from reminders.interactive.console_messages import (
    BLANK_INPUT,
    INDEX_NOT_A_NUMBER,
    INDEX_OUT_OF_RANGE,
)
from reminders.interactive.utils import to_index, validate_user_input


@pytest.mark.parametrize("user_input", ["", "   ", "\t"])
def test_blank_input_is_rejected(collection: ReminderCollection, user_input: str):
    assert validate_user_input(user_input, collection) == BLANK_INPUT
    assert (
        validate_user_input(user_input, collection, is_index_required=True)
        == BLANK_INPUT
    )


@pytest.mark.parametrize("user_input", ["Buy milk", "42", "-1", "[x]"])
def test_free_text_is_accepted(collection: ReminderCollection, user_input: str):
    assert validate_user_input(user_input, collection) is None


@pytest.mark.parametrize("user_input", ["one", "-1", "1.5", "2a", " 1"])
def test_index_must_be_a_positive_number(
    example_collection: ReminderCollection, user_input: str
):
    assert (
        validate_user_input(user_input, example_collection, is_index_required=True)
        == INDEX_NOT_A_NUMBER
    )


@pytest.mark.parametrize("user_input", ["0", "4", "100"])
def test_index_must_refer_to_a_reminder(
    example_collection: ReminderCollection, user_input: str
):
    assert (
        validate_user_input(user_input, example_collection, is_index_required=True)
        == INDEX_OUT_OF_RANGE
    )


@pytest.mark.parametrize("user_input", ["1", "2", "3", "03"])
def test_valid_index(example_collection: ReminderCollection, user_input: str):
    assert (
        validate_user_input(user_input, example_collection, is_index_required=True)
        is None
    )


def test_index_on_empty_collection(collection: ReminderCollection):
    assert (
        validate_user_input("1", collection, is_index_required=True)
        == INDEX_OUT_OF_RANGE
    )


@pytest.mark.parametrize("user_input, expected", [("1", 0), ("3", 2), ("10", 9)])
def test_to_index(user_input: str, expected: int):
    assert to_index(user_input) == expected
