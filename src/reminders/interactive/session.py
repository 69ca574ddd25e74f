#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging

from omegaconf import DictConfig, OmegaConf
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.theme import Theme

from reminders.aliases import RawInput
from reminders.apps_implementation.reminders import ReminderCollection
from reminders.constants import CONFIRM_NO, CONFIRM_YES
from reminders.interactive.console_messages import (
    COMPLETION_TOGGLED,
    CONFIRM_CHOICE,
    CONFIRM_INVALID,
    EXITED,
    HIT_ENTER,
    MENU_CHOICE,
    MENU_ITEM_INVALID,
    NO_REMINDERS,
    REMINDER_ADDED,
    REMINDER_MODIFIED,
    TRY_AGAIN,
    USER_CHOICE,
)
from reminders.interactive.display import (
    display_grouped_reminders,
    display_menu,
    display_reminders,
    display_search_results,
)
from reminders.interactive.utils import (
    MenuItem,
    SessionEndException,
    to_index,
    validate_user_input,
)

logger = logging.getLogger(__name__)


class MenuPrompt(Prompt):
    illegal_choice_message = MENU_ITEM_INVALID


class ConfirmationPrompt(Prompt):
    illegal_choice_message = CONFIRM_INVALID


class ReminderSession:
    """Interactive console session in which the user manages their
    reminders through a looping text menu.

    Parameters
    ----------
    config
        The session configuration. `confirm_input` controls whether the user
        is asked to confirm each answer, `wait_for_enter` whether the user
        has to hit Enter before the menu is shown and `theme` maps the
        `info`, `warning` and `danger` styles to rich styles.
    collection
        The reminders managed during the session. A new, empty collection
        is created if not specified.
    console
        Console used for all prompts and output.
    """

    def __init__(
        self,
        config: DictConfig,
        collection: ReminderCollection | None = None,
        console: Console | None = None,
    ):
        self.config = config
        self._confirm_input: bool = config.confirm_input
        self._wait_for_enter: bool = config.wait_for_enter
        self._collection = (
            collection if collection is not None else ReminderCollection()
        )
        if console is None:
            custom_theme = Theme(OmegaConf.to_container(config.theme, resolve=True))
            console = Console(theme=custom_theme)
        self._console = console

    @property
    def collection(self) -> ReminderCollection:
        return self._collection

    def start(self):
        """Prompt the user to choose from the menu items until they choose to exit."""
        logger.info("Starting reminders session.")
        while True:
            try:
                self.handle_menu_item(self.select_menu_item())
            except SessionEndException:
                break
        self._console.print(EXITED)
        logger.info(
            f"Terminating session with {self._collection.size()} reminder(s)."
        )

    def select_menu_item(self) -> MenuItem:
        """Show the main menu and return the item the user selects. The user
        is prompted until they enter a valid menu item."""
        if self._wait_for_enter:
            Prompt.ask(
                HIT_ENTER,
                default="",
                show_default=False,
                password=True,
                console=self._console,
            )
        display_menu(self._console)
        item = MenuPrompt.ask(
            MENU_CHOICE,
            choices=[item.value for item in MenuItem],
            show_choices=False,
            console=self._console,
        )
        return MenuItem(item)

    def handle_menu_item(self, item: MenuItem):
        logger.debug(f"Menu item selected: {item.name}")
        match item:
            case MenuItem.ShowReminders:
                self.handle_show_reminders()
            case MenuItem.SearchReminders:
                self.handle_search_reminders()
            case MenuItem.AddReminder:
                self.handle_add_reminder()
            case MenuItem.ModifyReminder:
                self.handle_modify_reminder()
            case MenuItem.ToggleCompletion:
                self.handle_toggle_completion()
            case _:
                raise SessionEndException

    def handle_show_reminders(self):
        """Display the reminders, grouped by tag."""
        if self._warn_if_empty():
            return
        display_grouped_reminders(self._collection.group_by_tag(), self._console)

    def handle_search_reminders(self):
        """Display the reminders matching a keyword entered by the user.
        Reminders whose tags match the keyword are shown before those
        that only match by description."""
        if self._warn_if_empty():
            return
        keyword = self.get_user_choice("search keyword")
        display_search_results(self._collection.search(keyword), self._console)

    def handle_add_reminder(self):
        description = self.get_user_choice("Reminder")
        tag = self.get_user_choice("tag")
        self._collection.add(description, tag)
        self._console.print(REMINDER_ADDED, style="info")

    def handle_modify_reminder(self):
        if self._warn_if_empty():
            return
        display_reminders(self._collection.reminders, self._console)
        number = self.get_user_choice("Reminder to modify", is_index_required=True)
        description = self.get_user_choice("New Reminder Description")
        self._collection.modify(to_index(number), description)
        self._console.print(REMINDER_MODIFIED, style="info")

    def handle_toggle_completion(self):
        if self._warn_if_empty():
            return
        display_reminders(self._collection.reminders, self._console)
        number = self.get_user_choice("Reminder to toggle", is_index_required=True)
        self._collection.toggle_completion(to_index(number))
        self._console.print(COMPLETION_TOGGLED, style="info")

    def get_user_choice(
        self, question: str, is_index_required: bool = False
    ) -> RawInput:
        """Prompt the user until they enter a valid answer to `question`
        and, if the session is so configured, confirm it.

        Parameters
        ----------
        question
            Describes what the user should enter.
        is_index_required
            Set if the user is asked to pick a reminder by its number
            in the list of reminders.
        """
        while True:
            user_choice = Prompt.ask(
                USER_CHOICE.format(question=question), console=self._console
            )
            error = validate_user_input(
                user_choice, self._collection, is_index_required=is_index_required
            )
            if error is not None:
                self._console.print(error, style="danger")
                continue
            if self._confirm_input and not self._confirm(question, user_choice):
                self._console.print(TRY_AGAIN, style="info")
                continue
            return user_choice

    def _confirm(self, question: str, user_choice: RawInput) -> bool:
        decision = ConfirmationPrompt.ask(
            CONFIRM_CHOICE.format(question=question, choice=escape(user_choice)),
            choices=[CONFIRM_YES, CONFIRM_NO],
            case_sensitive=False,
            console=self._console,
        )
        return decision.lower() == CONFIRM_YES

    def _warn_if_empty(self) -> bool:
        if self._collection.size() == 0:
            self._console.print(NO_REMINDERS, style="warning")
            return True
        return False
