#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
PACKAGE_NAME = "reminders"
CONFIGS_ROOT = f"{PACKAGE_NAME}.configs"
APP_CONFIG_MODULE = f"{CONFIGS_ROOT}.reminder_app"
APP_CONFIG_NAME = "default"
# answers accepted when the user is asked to confirm their input
CONFIRM_YES = "y"
CONFIRM_NO = "n"
COMPLETED_MARK = "✔"
