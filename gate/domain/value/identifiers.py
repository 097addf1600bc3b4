"""Strongly typed identifiers for Gate domain entities."""

from typing import NewType

# Assigned by the persistence layer on first save
AccountId = NewType("AccountId", str)
