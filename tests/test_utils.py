"""Tests for shared utility functions."""

from support_adventure.schemas.story_schema import Choice, Failure, NextChoice, Success
from support_adventure.story.content import STORY_CUSTOMERS
from support_adventure.utils import iter_choices


class TestIterChoices:
    def test_depth_first_order(self):
        ids = [c.id for c in iter_choices(STORY_CUSTOMERS[0].choices)]
        assert ids == [101, 1011, 10111, 10112, 10113, 1012, 1013, 102, 103]

    def test_counts_every_choice_once(self):
        ids = [c.id for c in iter_choices(STORY_CUSTOMERS[1].choices)]
        assert len(ids) == len(set(ids)) == 9

    def test_leaves_only(self):
        leaves = (
            Choice(id=1, text="a", outcome=Success(message="ok")),
            Choice(id=2, text="b", outcome=Failure(message="no")),
        )
        assert [c.id for c in iter_choices(leaves)] == [1, 2]

    def test_nested_before_siblings(self):
        tree = (
            Choice(id=1, text="a", outcome=NextChoice(choices=(
                Choice(id=11, text="aa", outcome=Success(message="ok")),
            ))),
            Choice(id=2, text="b", outcome=Failure(message="no")),
        )
        assert [c.id for c in iter_choices(tree)] == [1, 11, 2]

    def test_empty_input(self):
        assert list(iter_choices(())) == []
