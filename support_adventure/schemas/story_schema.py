"""Static story models: customers, choices, and the choice outcome union."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(str, Enum):
    """Values of the `kind` discriminator on the four ChoiceOutcome variants."""
    NEXT_CHOICE = "next_choice"
    SUCCESS = "success"
    FAILURE = "failure"
    CONTINUE_TO_NEXT_CUSTOMER = "continue_to_next_customer"


class NextChoice(BaseModel):
    """Presents a further list of choices within the same conversation."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["next_choice"] = "next_choice"
    choices: tuple["Choice", ...]


class Success(BaseModel):
    """Ends the current customer's arc positively."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    message: str


class Failure(BaseModel):
    """Ends the whole session, however many customers remain."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    message: str


class ContinueToNextCustomer(BaseModel):
    """Resolves the customer and goes back to customer selection."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["continue_to_next_customer"] = "continue_to_next_customer"


ChoiceOutcome = Annotated[
    Union[NextChoice, Success, Failure, ContinueToNextCustomer],
    Field(discriminator="kind"),
]


class Choice(BaseModel):
    """A single selectable option. IDs are unique across the whole story graph."""
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    outcome: ChoiceOutcome


class Customer(BaseModel):
    """A support ticket: who is calling, what broke, and the root choices."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    company: str
    issue: str
    choices: tuple[Choice, ...]


NextChoice.model_rebuild()
Choice.model_rebuild()
Customer.model_rebuild()
