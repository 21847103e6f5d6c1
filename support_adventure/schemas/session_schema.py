"""Per-session mutable state and the terminal outcome record."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from support_adventure.schemas.story_schema import Choice, Customer


class AdventurePhase(str, Enum):
    """Coarse session state."""
    START = "start"
    CUSTOMER_SELECTION = "customer_selection"
    IN_CONVERSATION = "in_conversation"
    COMPLETE = "complete"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class FinalOutcome:
    """Terminal success/failure record produced when the phase becomes complete."""
    status: OutcomeStatus
    message: str

    @property
    def display_message(self) -> str:
        if self.status == OutcomeStatus.SUCCESS:
            return f"✅ SUCCESS: {self.message}"
        return f"❌ FAILURE: {self.message}"


@dataclass
class PhaseEntry:
    """Recorded history entry for a phase visit."""
    phase: AdventurePhase
    entered_at: datetime
    trigger: Optional[str] = None


@dataclass
class SessionState:
    """
    Mutable session record paired with the engine's static story content.

    Resetting a session means replacing this record; the customers and
    their choice trees are never copied or rebuilt.
    """
    phase: AdventurePhase = AdventurePhase.START
    active_customer: Optional[Customer] = None
    current_choices: tuple[Choice, ...] = ()
    resolved_customer_ids: set[int] = field(default_factory=set)
    final_outcome: Optional[FinalOutcome] = None
