"""Exceptions raised by cleverlists."""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """A programming contract was broken while computing an edit.

    Raised for things that cannot happen when the operations are driven through
    their public entry points, such as reading a numeral from a bullet marker or
    applying overlapping edits. The current operation is abandoned; nothing has
    been written to the document at that point.
    """
