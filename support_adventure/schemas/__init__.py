from support_adventure.schemas.session_schema import (
    AdventurePhase,
    FinalOutcome,
    OutcomeStatus,
    PhaseEntry,
    SessionState,
)
from support_adventure.schemas.story_schema import (
    Choice,
    ChoiceOutcome,
    ContinueToNextCustomer,
    Customer,
    Failure,
    NextChoice,
    OutcomeKind,
    Success,
)

__all__ = [
    "AdventurePhase", "FinalOutcome", "OutcomeStatus", "PhaseEntry", "SessionState",
    "Choice", "ChoiceOutcome", "ContinueToNextCustomer", "Customer",
    "Failure", "NextChoice", "OutcomeKind", "Success",
]
