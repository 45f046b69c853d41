"""Exceptions raised outside the pure filter core."""

from __future__ import annotations


class ContactFiltersError(Exception):
    """Base class for contact-filters errors."""


class InvalidFilterError(ContactFiltersError, ValueError):
    """A filter config failed validation; ``errors`` holds the messages."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid filter")
