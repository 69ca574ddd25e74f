#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
# free-text category label attached to a reminder
Tag = str
# a tag normalised with str.casefold, used as grouping key
FoldedTag = str
# text searched for in reminder tags and descriptions
Keyword = str
# 0-based position of a reminder in its collection
ReminderIdx = int
# what the user typed at a prompt, before validation
RawInput = str
