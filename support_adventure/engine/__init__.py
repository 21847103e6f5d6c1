from support_adventure.engine.state_machine import (
    SELECTION_CHOICE_ID_BASE,
    AdventureEngine,
)

__all__ = ["AdventureEngine", "SELECTION_CHOICE_ID_BASE"]
