#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class InvalidIndexError(Exception):
    """Raised when a reminder is requested at a position outside the collection.

    Only lookups raise this error. Mutations addressed to an invalid
    position are ignored instead."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Invalid index {index} for a collection of {size} reminder(s)"
        )
