#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import io

import pytest
from omegaconf import DictConfig, OmegaConf
from rich.console import Console
from rich.theme import Theme

from reminders.apps_implementation.reminders import ReminderCollection

THEME = {"info": "bold green", "warning": "magenta", "danger": "bold red"}


@pytest.fixture
def collection() -> ReminderCollection:
    return ReminderCollection()


@pytest.fixture
def example_collection() -> ReminderCollection:
    collection = ReminderCollection()
    collection.add("Buy milk", "shopping")
    collection.add("Call mom", "family")
    collection.add("Buy eggs", "Shopping")
    return collection


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), record=True, width=120, theme=Theme(THEME))


@pytest.fixture
def session_config() -> DictConfig:
    return OmegaConf.create(
        {
            "confirm_input": False,
            "wait_for_enter": False,
            "debug": False,
            "theme": THEME,
        }
    )
