#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
HIT_ENTER = "\n[bold green]Hit \\[Enter] key to see the main menu[/bold green]"
MENU_CHOICE = "[bold green]Choose a \\[Number] followed by \\[Enter][/bold green]"
MENU_ITEM_INVALID = "\n  🚨  [prompt.invalid]Sorry, input is not a valid menu item.\n"
USER_CHOICE = "\n[bold green]Enter a {question} here[/bold green]"
CONFIRM_CHOICE = "You entered {question}: '{choice}', is it correct?"
CONFIRM_INVALID = "\n  🚨  [prompt.invalid]Invalid input: Please enter either y/n.\n"
TRY_AGAIN = "\n  🔄  Please try typing it again"
BLANK_INPUT = "\n  🚨  Input cannot be blank: Please try again.\n"
INDEX_NOT_A_NUMBER = "\n  🚨  Input must be a positive number from the list of reminders: Please try again.\n"  # noqa
INDEX_OUT_OF_RANGE = "\n  🚨  Input must be a number from the list of reminders: Please try again.\n"  # noqa
NO_REMINDERS = "\n  ⚠️  You have no reminders"
NO_SEARCH_RESULTS = "\n  ⚠️  No reminders match your search"
REMINDER_ADDED = "\n  🏁  Reminder Added"
REMINDER_MODIFIED = "\n  🏁  Reminder Modified"
COMPLETION_TOGGLED = "\n  🏁  Reminder Completion Toggled"
EXITED = "\n  ❌  Exited application\n"
