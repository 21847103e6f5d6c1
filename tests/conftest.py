"""Shared test fixtures and helpers."""

import pytest

from console_demo import ConsoleSession
from support_adventure.engine.state_machine import AdventureEngine
from support_adventure.schemas.story_schema import (
    Choice,
    ContinueToNextCustomer,
    Customer,
    Failure,
    NextChoice,
    Success,
)


@pytest.fixture
def engine():
    return AdventureEngine()


@pytest.fixture
def started_engine():
    engine = AdventureEngine()
    engine.start()
    return engine


@pytest.fixture
def console_session():
    return ConsoleSession()


@pytest.fixture
def handoff_customers():
    """Two customers whose winning choice hands off instead of completing."""
    return make_handoff_story()


def play(engine: AdventureEngine, customer_id: int, *choice_ids: int) -> None:
    """Select a customer and apply a sequence of choice IDs."""
    assert engine.select_customer(customer_id)
    for choice_id in choice_ids:
        assert engine.make_choice(choice_id)


def make_handoff_story() -> tuple[Customer, ...]:
    """Story where choice x1 continues to the next customer and x2 fails."""
    return (
        Customer(
            id=1,
            name="Alice",
            company="Acme",
            issue="VPN tunnel keeps dropping.",
            choices=(
                Choice(id=11, text="Hand off to networking", outcome=ContinueToNextCustomer()),
                Choice(id=12, text="Ignore it", outcome=Failure(message="Tunnel stays down.")),
            ),
        ),
        Customer(
            id=2,
            name="Dave",
            company="Globex",
            issue="S3 bucket is public.",
            choices=(
                Choice(
                    id=21,
                    text="Review bucket policy",
                    outcome=NextChoice(choices=(
                        Choice(id=211, text="Block public access",
                               outcome=ContinueToNextCustomer()),
                        Choice(id=212, text="Make it more public",
                               outcome=Success(message="Everyone can read it now.")),
                    )),
                ),
            ),
        ),
    )
