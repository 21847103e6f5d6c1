"""Built-in story: three cloud support tickets and their choice trees."""

import logging

from support_adventure.schemas.story_schema import (
    Choice,
    Customer,
    Failure,
    NextChoice,
    OutcomeKind,
    Success,
)
from support_adventure.utils import iter_choices

logger = logging.getLogger(__name__)

INTRO_TEMPLATE = "You're the {role}. Choose a customer to save the day."
SELECTION_PROMPT = "Pick your next customer."
ALL_CUSTOMERS_HANDLED_MESSAGE = "🎉 You helped all customers! You're Employee of the Month!"
CUSTOMER_SATISFIED_SUFFIX = " Customer satisfied! Pick another."
EVERY_CUSTOMER_HANDLED_MESSAGE = "You handled every customer successfully."


class StoryValidationError(ValueError):
    """Raised when story content breaks a structural invariant."""


def _ask(choice_id: int, text: str, *choices: Choice) -> Choice:
    return Choice(id=choice_id, text=text, outcome=NextChoice(choices=choices))


def _win(choice_id: int, text: str, message: str) -> Choice:
    return Choice(id=choice_id, text=text, outcome=Success(message=message))


def _lose(choice_id: int, text: str, message: str) -> Choice:
    return Choice(id=choice_id, text=text, outcome=Failure(message=message))


STORY_CUSTOMERS: tuple[Customer, ...] = (
    Customer(
        id=1,
        name="Karen",
        company="CloudCorp Inc.",
        issue="EC2 instance won't connect to the internet.",
        choices=(
            _ask(101, "Check if it has a public IP",
                 _ask(1011, "Check security group rules",
                      _win(10111, "Allow HTTP/HTTPS traffic",
                           "Karen's instance is online! She gives you 5 stars ⭐⭐⭐⭐⭐"),
                      _lose(10112, "Open ALL ports to internet",
                            "Security team shuts down your entire department. Karen's data got hacked."),
                      _lose(10113, "Close all ports for security",
                            "Nothing can connect. Karen threatens legal action.")),
                 _lose(1012, "Just reboot everything",
                       "The instance had ephemeral storage. All data gone. Karen cries."),
                 _lose(1013, "Tell her to wait 30 days",
                       "Karen escalates to your CEO. You're now answering phones.")),
            _lose(102, "Delete AWS and use Google Cloud",
                  "You just got fired. Karen is angrier now."),
            _lose(103, "Tell her to restart her computer",
                  "Karen demands to speak to YOUR manager."),
        ),
    ),
    Customer(
        id=2,
        name="Bob",
        company="StartupXYZ",
        issue="Monthly AWS bill jumped from $50 to $10,000.",
        choices=(
            _ask(201, "Check CloudWatch for idle resources",
                 _ask(2011, "Review NAT Gateway charges",
                      _win(20111, "Delete unused NAT Gateways",
                           "Found 47 idle NAT Gateways! Bill drops to $52. "
                           "Bob names his firstborn after you. 🎉"),
                      _lose(20112, "Keep them 'just in case'",
                            "Bill stays at $10k/month. Bob's startup runs out of funding."),
                      _lose(20113, "Replace with NAT instances",
                            "NAT instances crash constantly. Bob migrates to Azure.")),
                 _win(2012, "Check for zombie RDS databases",
                      "Found 20 test databases still running. Deleted them. Bill fixed!"),
                 _lose(2013, "Upgrade everything to save money",
                       "Bill jumps to $50k. Bob files bankruptcy.")),
            _lose(202, "Tell him that's just how cloud works",
                  "Bob cancels AWS. Your boss is NOT happy."),
            _lose(203, "Mine Bitcoin on his instances",
                  "Security escorts you out. Police are involved."),
        ),
    ),
    Customer(
        id=3,
        name="Susan",
        company="Enterprise Solutions LLC",
        issue="Load balancer returning 503 errors.",
        choices=(
            _ask(301, "Check target group health",
                 _ask(3011, "Check health check configuration",
                      _win(30111, "Fix health check path to /health",
                           "All targets healthy! Susan promotes you to Senior Engineer! 🚀"),
                      _lose(30112, "Disable health checks entirely",
                            "Load balancer sends traffic to dead servers. Website down for 3 days."),
                      _lose(30113, "Change interval to 1 second",
                            "Health checks overwhelm servers. Everything crashes. CEO is furious.")),
                 _lose(3012, "Add more instances randomly",
                       "New instances also fail health checks. Bill doubles. Nothing works."),
                 _lose(3013, "Remove load balancer completely",
                       "Single point of failure. Website crashes under load. Susan quits.")),
            _lose(302, "Turn it off and back on again",
                  "Load balancer offline for 20 minutes. Lost $2M in sales."),
            _lose(303, "Blame Mercury retrograde",
                  "Susan files formal complaint. HR escorts you to exit interview."),
        ),
    ),
)


def validate_story(customers: tuple[Customer, ...]) -> None:
    """
    Check structural invariants of a story before it is played.

    Raises:
        StoryValidationError: If there are no customers, a customer or
            choice ID is reused, or a choice list is empty.
    """
    if not customers:
        raise StoryValidationError("Story must define at least one customer")

    customer_ids: set[int] = set()
    choice_ids: set[int] = set()
    for customer in customers:
        if customer.id in customer_ids:
            raise StoryValidationError(f"Duplicate customer id {customer.id}")
        customer_ids.add(customer.id)

        if not customer.choices:
            raise StoryValidationError(f"Customer {customer.name!r} has no choices")

        for choice in iter_choices(customer.choices):
            if choice.id in choice_ids:
                raise StoryValidationError(
                    f"Duplicate choice id {choice.id} (customer {customer.name!r})"
                )
            choice_ids.add(choice.id)
            if choice.outcome.kind == OutcomeKind.NEXT_CHOICE and not choice.outcome.choices:
                raise StoryValidationError(f"Choice {choice.id} leads to an empty choice list")

    logger.debug(
        "Story validated: %d customers, %d choices", len(customer_ids), len(choice_ids)
    )
