# src/park_locator/services/__init__.py
"""Business logic services for the Park Locator application."""

from .ledger import VoteLedger
from .moderation import ModerationService
from .tally import Tally

__all__ = [
    "VoteLedger",
    "ModerationService",
    "Tally",
]
