"""Shared utilities used across the support adventure."""

from typing import Iterable, Iterator

from support_adventure.schemas.story_schema import Choice, OutcomeKind


def iter_choices(choices: Iterable[Choice]) -> Iterator[Choice]:
    """Walk a choice tree depth-first, parents before their nested choices."""
    for choice in choices:
        yield choice
        if choice.outcome.kind == OutcomeKind.NEXT_CHOICE:
            yield from iter_choices(choice.outcome.choices)
