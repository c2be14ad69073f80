"""Exceptions raised by the consensus scoring core."""

from typing import Any


class InvalidStudyType(Exception):
    """A source carries a study-design category outside the closed set.

    This is a provider contract violation. It is not recoverable inside the
    scoring core and rejects the whole claim analysis.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unknown study type: {value!r}")
