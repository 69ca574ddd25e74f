#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A simple and easy to use reminder app - use it for all
your TODOs and all things important."""

import logging
from typing import Iterator

from pydantic import BaseModel

from reminders.aliases import FoldedTag, Keyword, ReminderIdx, Tag
from reminders.apps_implementation.exceptions import InvalidIndexError

logger = logging.getLogger(__name__)


def fold_case(text: str) -> str:
    return text.casefold()


class Reminder(BaseModel):
    """A note the user wants to remember.

    Parameters
    ----------
    description
        What the reminder is about.
    tag
        A free-form label used to categorise the reminder. Tags
        are compared case-insensitively.
    completed
        Flag indicating if the reminder has been marked
        as complete by the user.
    """

    description: str
    tag: Tag
    completed: bool = False

    def toggle_completion(self) -> None:
        self.completed = not self.completed

    def modify_description(self, description: str) -> None:
        self.description = description


RemindersGroupingByTag = dict[FoldedTag, list[Reminder]]


class ReminderCollection:
    """An ordered list of reminders. The position of a reminder
    in the list is the index used to address it and never changes,
    as reminders cannot be removed."""

    def __init__(self):
        self._reminders: list[Reminder] = []

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Reminder]:
        return iter(self._reminders)

    @property
    def reminders(self) -> list[Reminder]:
        """The reminders added so far, in insertion order."""
        return list(self._reminders)

    def add(self, description: str, tag: Tag) -> None:
        """Create a new reminder and append it to the collection."""
        self._reminders.append(Reminder(description=description, tag=tag))

    def get(self, index: ReminderIdx) -> Reminder:
        """Return the reminder at `index`.

        Raises
        ------
        InvalidIndexError
            If there is no reminder at `index`.
        """
        if not self.is_index_valid(index):
            raise InvalidIndexError(index, self.size())
        return self._reminders[index]

    def is_index_valid(self, index: ReminderIdx) -> bool:
        if self.size() == 0:
            return False
        return 0 <= index < self.size()

    def size(self) -> int:
        return len(self._reminders)

    def modify(self, index: ReminderIdx, description: str) -> None:
        """Replace the description of the reminder at `index`. The call
        is silently ignored if `index` is not valid."""
        if not self.is_index_valid(index):
            logger.debug(f"Ignoring modification of reminder at invalid index {index}")
            return
        self._reminders[index].modify_description(description)

    def toggle_completion(self, index: ReminderIdx) -> None:
        """Toggle the completion status of the reminder at `index`. The call
        is silently ignored if `index` is not valid."""
        if not self.is_index_valid(index):
            logger.debug(f"Ignoring completion toggle at invalid index {index}")
            return
        self._reminders[index].toggle_completion()

    def search(self, keyword: Keyword) -> list[Reminder]:
        """Find the reminders matching `keyword`.

        Parameters
        ----------
        keyword
            Text searched for, case-insensitively, in reminder tags and
            descriptions. Partial matches count, so an empty keyword
            matches every reminder.

        Returns
        -------
        The reminders whose tag matches `keyword`, followed by the
        reminders matched by description only. Each group is in collection
        order and no reminder is returned twice.
        """
        matches = self._search_tags(keyword)
        # nb: reminders are de-duplicated by identity since two distinct
        #  reminders may hold the same description and tag
        seen = {id(reminder) for reminder in matches}
        for reminder in self._search_descriptions(keyword):
            if id(reminder) not in seen:
                seen.add(id(reminder))
                matches.append(reminder)
        return matches

    def group_by_tag(self) -> RemindersGroupingByTag:
        """Group the reminders by their case-folded tag. Groups and the
        reminders within them appear in collection order."""
        groupings: RemindersGroupingByTag = {}
        for reminder in self._reminders:
            groupings.setdefault(fold_case(reminder.tag), []).append(reminder)
        return groupings

    def _search_tags(self, keyword: Keyword) -> list[Reminder]:
        keyword = fold_case(keyword)
        return [r for r in self._reminders if keyword in fold_case(r.tag)]

    def _search_descriptions(self, keyword: Keyword) -> list[Reminder]:
        keyword = fold_case(keyword)
        return [r for r in self._reminders if keyword in fold_case(r.description)]
