"""Tests for the built-in story and its structural validation."""

import pytest
from pydantic import ValidationError

from support_adventure.engine.state_machine import AdventureEngine
from support_adventure.schemas.story_schema import (
    Choice,
    Customer,
    Failure,
    NextChoice,
    OutcomeKind,
    Success,
)
from support_adventure.story.content import (
    STORY_CUSTOMERS,
    StoryValidationError,
    validate_story,
)
from support_adventure.utils import iter_choices


def _customer(customer_id: int, *choices: Choice) -> Customer:
    return Customer(id=customer_id, name=f"C{customer_id}", company="Co",
                    issue="Broken.", choices=choices)


class TestBuiltInStory:
    def test_builtin_story_is_valid(self):
        validate_story(STORY_CUSTOMERS)  # should not raise

    def test_three_customers_in_order(self):
        assert [c.name for c in STORY_CUSTOMERS] == ["Karen", "Bob", "Susan"]

    def test_at_most_three_choices_per_list(self):
        for customer in STORY_CUSTOMERS:
            assert len(customer.choices) <= 3
            for choice in iter_choices(customer.choices):
                if choice.outcome.kind == OutcomeKind.NEXT_CHOICE:
                    assert len(choice.outcome.choices) <= 3

    def test_every_customer_has_success_and_failure_endings(self):
        for customer in STORY_CUSTOMERS:
            kinds = {c.outcome.kind for c in iter_choices(customer.choices)}
            assert OutcomeKind.SUCCESS.value in kinds
            assert OutcomeKind.FAILURE.value in kinds

    def test_models_are_frozen(self):
        with pytest.raises(ValidationError):
            STORY_CUSTOMERS[0].name = "Kevin"


class TestValidateStory:
    def test_rejects_empty_story(self):
        with pytest.raises(StoryValidationError, match="at least one customer"):
            validate_story(())

    def test_rejects_duplicate_customer_id(self):
        win = Choice(id=1, text="Fix", outcome=Success(message="Done"))
        other = Choice(id=2, text="Fix", outcome=Success(message="Done"))
        with pytest.raises(StoryValidationError, match="Duplicate customer id 7"):
            validate_story((_customer(7, win), _customer(7, other)))

    def test_rejects_choice_id_reused_across_customers(self):
        first = Choice(id=5, text="Fix", outcome=Success(message="Done"))
        second = Choice(id=5, text="Break", outcome=Failure(message="Oops"))
        with pytest.raises(StoryValidationError, match="Duplicate choice id 5"):
            validate_story((_customer(1, first), _customer(2, second)))

    def test_rejects_choice_id_reused_across_levels(self):
        nested = Choice(id=10, text="Again", outcome=Failure(message="Oops"))
        root = Choice(id=10, text="Look", outcome=NextChoice(choices=(nested,)))
        with pytest.raises(StoryValidationError, match="Duplicate choice id 10"):
            validate_story((_customer(1, root),))

    def test_rejects_customer_without_choices(self):
        with pytest.raises(StoryValidationError, match="has no choices"):
            validate_story((_customer(1),))

    def test_rejects_empty_next_choice(self):
        dead_end = Choice(id=3, text="Look", outcome=NextChoice(choices=()))
        with pytest.raises(StoryValidationError, match="empty choice list"):
            validate_story((_customer(1, dead_end),))

    def test_engine_validates_on_construction(self):
        with pytest.raises(StoryValidationError):
            AdventureEngine(customers=())


class TestOutcomeParsing:
    def test_outcome_parsed_from_dict(self):
        choice = Choice.model_validate({
            "id": 1,
            "text": "Look closer",
            "outcome": {
                "kind": "next_choice",
                "choices": [
                    {"id": 2, "text": "Fix", "outcome": {"kind": "success", "message": "Done"}},
                    {"id": 3, "text": "Hand off",
                     "outcome": {"kind": "continue_to_next_customer"}},
                ],
            },
        })
        assert isinstance(choice.outcome, NextChoice)
        assert isinstance(choice.outcome.choices[0].outcome, Success)
        assert choice.outcome.choices[1].outcome.kind == OutcomeKind.CONTINUE_TO_NEXT_CUSTOMER

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Choice.model_validate({"id": 1, "text": "?", "outcome": {"kind": "maybe"}})
