"""
Narrative state machine for the support adventure.

Walks a fixed tree of customer tickets through four phases:

    start -> customer_selection <-> in_conversation -> complete

Static story content is shared and immutable; everything a session can
change lives in a SessionState record, so reset() simply swaps in a new
one. Invalid commands (unknown IDs, stale choices, no active customer)
are ignored: they leave state untouched and return False.

Usage:
    engine = AdventureEngine()
    engine.start()
    engine.select_customer(1)
    engine.make_choice(101)
    print(engine.current_story_text())
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from support_adventure.config import settings
from support_adventure.logging_context import get_session_logger, set_session_id
from support_adventure.schemas.session_schema import (
    AdventurePhase,
    FinalOutcome,
    OutcomeStatus,
    PhaseEntry,
    SessionState,
)
from support_adventure.schemas.story_schema import Choice, Customer, NextChoice, OutcomeKind
from support_adventure.story.content import (
    ALL_CUSTOMERS_HANDLED_MESSAGE,
    CUSTOMER_SATISFIED_SUFFIX,
    EVERY_CUSTOMER_HANDLED_MESSAGE,
    INTRO_TEMPLATE,
    SELECTION_PROMPT,
    STORY_CUSTOMERS,
    validate_story,
)

logger = get_session_logger(__name__)

# Synthetic "Handle <name>" choices are numbered from here.
SELECTION_CHOICE_ID_BASE = 1000


class AdventureEngine:
    """
    Single-session adventure engine.

    Commands (start, select_customer, make_choice, reset) mutate the
    session; queries (current_story_text, available_customers and the
    read-only properties) never do. Callers re-query after every command.
    """

    def __init__(
        self,
        customers: tuple[Customer, ...] = STORY_CUSTOMERS,
        role_title: Optional[str] = None,
    ) -> None:
        validate_story(customers)
        self._customers = tuple(customers)
        self._role_title = role_title or settings.game.role_title
        self._new_session()

    # ------------------------------------------------------------------ #
    # Read access
    # ------------------------------------------------------------------ #

    @property
    def customers(self) -> tuple[Customer, ...]:
        return self._customers

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def phase(self) -> AdventurePhase:
        return self._state.phase

    @property
    def active_customer(self) -> Optional[Customer]:
        return self._state.active_customer

    @property
    def current_choices(self) -> tuple[Choice, ...]:
        return self._state.current_choices

    @property
    def resolved_customer_ids(self) -> frozenset[int]:
        return frozenset(self._state.resolved_customer_ids)

    @property
    def final_outcome(self) -> Optional[FinalOutcome]:
        return self._state.final_outcome

    def is_complete(self) -> bool:
        return self._state.phase == AdventurePhase.COMPLETE

    def get_history(self) -> list[PhaseEntry]:
        """Return the phase history of the current session."""
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """Return ordered list of phase names visited this session."""
        return [entry.phase.value for entry in self._history]

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def start(self) -> bool:
        """Enter customer selection, offering every unresolved customer."""
        self._state.active_customer = None
        self._state.current_choices = self._customer_selection_choices()
        self._enter(AdventurePhase.CUSTOMER_SELECTION, "start")
        return True

    def select_customer(self, customer_id: int) -> bool:
        """
        Open the conversation with a customer.

        Ignored when the ID is unknown, or when the session ended in a
        failure. After a per-customer success the complete phase still
        accepts a selection, which is how a player picks the next customer.
        """
        customer = next((c for c in self._customers if c.id == customer_id), None)
        if customer is None:
            logger.debug("Ignored select_customer(%s): unknown customer", customer_id)
            return False
        final = self._state.final_outcome
        if self.is_complete() and final is not None and final.status == OutcomeStatus.FAILURE:
            logger.debug("Ignored select_customer(%s): session ended in failure", customer_id)
            return False

        self._state.active_customer = customer
        self._state.current_choices = customer.choices
        self._enter(AdventurePhase.IN_CONVERSATION, f"select_customer:{customer.id}")
        return True

    def make_choice(self, choice_id: int) -> bool:
        """
        Apply one of the currently offered choices.

        Returns:
            True if the choice was applied, False if it was ignored
            because no customer is active or the ID is not on offer.
        """
        customer = self._state.active_customer
        if customer is None:
            logger.debug("Ignored make_choice(%s): no active customer", choice_id)
            return False
        choice = next((c for c in self._state.current_choices if c.id == choice_id), None)
        if choice is None:
            logger.debug("Ignored make_choice(%s): not in current choices", choice_id)
            return False

        outcome = choice.outcome
        if outcome.kind == OutcomeKind.NEXT_CHOICE:
            self._state.current_choices = outcome.choices
            logger.debug(
                "Choice %s -> %d further choices", choice.id, len(outcome.choices)
            )
        elif outcome.kind == OutcomeKind.SUCCESS:
            self._resolve(customer)
            if self._all_resolved():
                final = FinalOutcome(OutcomeStatus.SUCCESS, ALL_CUSTOMERS_HANDLED_MESSAGE)
            else:
                final = FinalOutcome(
                    OutcomeStatus.SUCCESS, outcome.message + CUSTOMER_SATISFIED_SUFFIX
                )
            self._complete(final, f"success:{choice.id}")
        elif outcome.kind == OutcomeKind.FAILURE:
            self._complete(
                FinalOutcome(OutcomeStatus.FAILURE, outcome.message), f"failure:{choice.id}"
            )
        elif outcome.kind == OutcomeKind.CONTINUE_TO_NEXT_CUSTOMER:
            self._resolve(customer)
            self._state.current_choices = ()
            if self._all_resolved():
                self._complete(
                    FinalOutcome(OutcomeStatus.SUCCESS, EVERY_CUSTOMER_HANDLED_MESSAGE),
                    f"continue:{choice.id}",
                )
            else:
                self._state.active_customer = None
                self._state.current_choices = self._customer_selection_choices()
                self._enter(AdventurePhase.CUSTOMER_SELECTION, f"continue:{choice.id}")
        else:
            logger.warning(
                "Ignored make_choice(%s): unknown outcome kind %r", choice_id, outcome.kind
            )
            return False
        return True

    def reset(self) -> bool:
        """Discard the session entirely and start again at customer selection."""
        logger.info("Session %s reset", self._session_id)
        self._new_session()
        return self.start()

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def current_story_text(self) -> str:
        """Return the narrative text for the current phase."""
        intro = INTRO_TEMPLATE.format(role=self._role_title)
        phase = self._state.phase

        if phase == AdventurePhase.START:
            return intro
        if phase == AdventurePhase.CUSTOMER_SELECTION:
            return f"{intro}\n\n{SELECTION_PROMPT}"
        if phase == AdventurePhase.IN_CONVERSATION:
            customer = self._state.active_customer
            return f"{customer.name} from {customer.company}\n\nIssue: {customer.issue}"
        return self._state.final_outcome.display_message

    def available_customers(self) -> list[Customer]:
        """Customers not yet resolved, in definition order."""
        resolved = self._state.resolved_customer_ids
        return [c for c in self._customers if c.id not in resolved]

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _new_session(self) -> None:
        self._session_id = f"ADV-{uuid.uuid4().hex[:8]}"
        set_session_id(self._session_id)
        self._state = SessionState()
        self._history: list[PhaseEntry] = [
            PhaseEntry(phase=AdventurePhase.START, entered_at=datetime.now(timezone.utc))
        ]

    def _enter(self, phase: AdventurePhase, trigger: str) -> None:
        old_phase = self._state.phase
        self._state.phase = phase
        self._history.append(PhaseEntry(
            phase=phase,
            entered_at=datetime.now(timezone.utc),
            trigger=trigger,
        ))
        logger.debug(
            "Phase transition: %s -> %s (trigger: %s)", old_phase.value, phase.value, trigger
        )

    def _complete(self, final: FinalOutcome, trigger: str) -> None:
        self._state.final_outcome = final
        self._state.active_customer = None
        self._state.current_choices = ()
        self._enter(AdventurePhase.COMPLETE, trigger)
        logger.info("Session complete (%s): %s", final.status.value, final.message)

    def _resolve(self, customer: Customer) -> None:
        self._state.resolved_customer_ids.add(customer.id)
        logger.info(
            "Customer %s (%s) resolved, %d remaining",
            customer.id, customer.name, len(self.available_customers()),
        )

    def _all_resolved(self) -> bool:
        return len(self._state.resolved_customer_ids) >= len(self._customers)

    def _customer_selection_choices(self) -> tuple[Choice, ...]:
        return tuple(
            Choice(
                id=SELECTION_CHOICE_ID_BASE + index,
                text=f"Handle {customer.name}",
                outcome=NextChoice(choices=customer.choices),
            )
            for index, customer in enumerate(self.available_customers())
        )
