"""
Console front end for the support adventure.

Renders the engine the way the touch UI did: the story text, up to three
numbered choice buttons, and a restart button that only appears once the
session is complete. After every command the view is re-queried from the
engine; the console keeps no game state of its own.

Usage:
    python console_demo.py
    python console_demo.py --scenario karen
    python console_demo.py --scenario all-customers
"""

import argparse
from typing import Optional

from support_adventure.config import settings
from support_adventure.engine.state_machine import AdventureEngine
from support_adventure.schemas.session_schema import AdventurePhase, OutcomeStatus

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

RESTART_KEYS = ("r", "restart")
QUIT_KEYS = ("q", "quit", "exit")


class ConsoleSession:
    """Drives one AdventureEngine from terminal input."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "karen": ["1", "1", "1", "1"],
        "karen-hacked": ["1", "1", "1", "2"],
        "bob-walkout": ["2", "2"],
        "all-customers": [
            "1", "1", "1", "1",  # Karen: public IP -> security group -> allow HTTP/HTTPS
            "1", "1", "2",  # Bob: CloudWatch -> zombie RDS databases
            "1", "1", "1", "1",  # Susan: target health -> health check -> fix path
        ],
        "restart": ["3", "2", "r", "1"],
    }

    def __init__(self, engine: Optional[AdventureEngine] = None) -> None:
        self.engine = engine or AdventureEngine()
        self.max_visible = settings.game.max_visible_choices
        self.max_input_length = settings.game.max_input_length

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    # ------------------------------------------------------------------ #
    # View
    # ------------------------------------------------------------------ #

    def option_labels(self) -> list[str]:
        """Labels of the numbered buttons currently shown, in order."""
        phase = self.engine.phase
        if phase == AdventurePhase.START:
            return ["Start"]
        if phase == AdventurePhase.CUSTOMER_SELECTION or self._can_pick_another():
            labels = [f"Handle {c.name}" for c in self.engine.available_customers()]
        elif phase == AdventurePhase.IN_CONVERSATION:
            labels = [c.text for c in self.engine.current_choices]
        else:
            labels = []
        return labels[:self.max_visible]

    def render(self) -> None:
        outcome = self.engine.final_outcome
        text = self.engine.current_story_text()
        if self.engine.is_complete():
            color = GREEN if outcome.status == OutcomeStatus.SUCCESS else RED
            print(f"\n{color}{BOLD}{text}{RESET}")
        else:
            print(f"\n{BOLD}{text}{RESET}")

        for index, label in enumerate(self.option_labels(), start=1):
            print(f"  {YELLOW}[{index}]{RESET} {label}")
        if self.engine.is_complete():
            print(f"  {YELLOW}[r]{RESET} Restart")

    # ------------------------------------------------------------------ #
    # Input handling
    # ------------------------------------------------------------------ #

    def handle_input(self, text: str) -> bool:
        """
        Apply one line of player input.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        key = text.strip().lower()
        if key in QUIT_KEYS:
            return False
        if len(key) > self.max_input_length:
            self.system_log("Input too long, pick one of the numbered options.")
            return True

        if key in RESTART_KEYS:
            if self.engine.is_complete():
                self.engine.reset()
                self.system_log(f"Restarted, new session {self.engine.session_id}")
            else:
                self.system_log("Restart is only available once the session is over.")
            return True

        try:
            index = int(key) - 1
        except ValueError:
            self.system_log(f"Unrecognised input {text.strip()!r}.")
            return True
        self.handle_button(index)
        return True

    def handle_button(self, index: int) -> None:
        """Map a zero-based button index to the matching engine command."""
        if not 0 <= index < len(self.option_labels()):
            self.system_log("No such option.")
            return

        phase = self.engine.phase
        if phase == AdventurePhase.START:
            self.engine.start()
        elif phase == AdventurePhase.CUSTOMER_SELECTION or self._can_pick_another():
            customer = self.engine.available_customers()[index]
            self.engine.select_customer(customer.id)
        elif phase == AdventurePhase.IN_CONVERSATION:
            choice = self.engine.current_choices[index]
            self.engine.make_choice(choice.id)

        self.system_log(f"Phase: {self.engine.phase.value}")

    def _can_pick_another(self) -> bool:
        outcome = self.engine.final_outcome
        return (
            self.engine.is_complete()
            and outcome is not None
            and outcome.status == OutcomeStatus.SUCCESS
            and bool(self.engine.available_customers())
        )

    # ------------------------------------------------------------------ #
    # Loops
    # ------------------------------------------------------------------ #

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  SUPPORT ADVENTURE - {title}{RESET}")
        print(f"{BOLD}  Session: {self.engine.session_id}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def _summary(self, title: str) -> None:
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {title}{RESET}")
        print(f"{DIM}  Phase trace: {' -> '.join(self.engine.get_state_trace())}{RESET}")
        print(f"{DIM}  Resolved customers: {sorted(self.engine.resolved_customer_ids)}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"Scenario: {scenario}")
        self.engine.start()
        self.render()

        for step in steps:
            print(f"\n{BLUE}[You] {RESET}{step}")
            self.handle_input(step)
            self.render()

        self._summary(f"Scenario '{scenario}' complete.")

    def run(self) -> None:
        self._banner("Console")
        print(f"{BOLD}  Type a number to choose, 'r' to restart, 'q' to quit{RESET}")
        self.engine.start()

        while True:
            self.render()
            user_input = input(f"\n{BLUE}[You] {RESET}").strip()
            if not user_input:
                continue
            if not self.handle_input(user_input):
                print(f"\n{DIM}Session ended.{RESET}")
                break

        self._summary("Thanks for playing.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Support adventure console")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
