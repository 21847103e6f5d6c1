from support_adventure.story.content import (
    ALL_CUSTOMERS_HANDLED_MESSAGE,
    CUSTOMER_SATISFIED_SUFFIX,
    EVERY_CUSTOMER_HANDLED_MESSAGE,
    INTRO_TEMPLATE,
    SELECTION_PROMPT,
    STORY_CUSTOMERS,
    StoryValidationError,
    validate_story,
)

__all__ = [
    "STORY_CUSTOMERS",
    "StoryValidationError",
    "validate_story",
    "INTRO_TEMPLATE",
    "SELECTION_PROMPT",
    "ALL_CUSTOMERS_HANDLED_MESSAGE",
    "CUSTOMER_SATISFIED_SUFFIX",
    "EVERY_CUSTOMER_HANDLED_MESSAGE",
]
