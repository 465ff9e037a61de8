"""Interactive console for the route optimizer.

Shows the location menu, asks for start, destination and travel mode,
prints the available routes and the recommendation, and repeats until
the user declines another trip. Input and output callables are
injectable so the loop can be driven from tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from ..config import configure_logging
from ..container import get_container
from ..ports.graph import GraphStorePort
from ..ports.rendering import RouteRendererPort
from ..services.route_planner import RoutePlannerService

BANNER = "=" * 20 + " USER DRIVEN ROUTE FINDER / OPTIMIZER " + "=" * 20


def _choices(modes: Sequence[str]) -> str:
    quoted = [f"'{m}'" for m in modes]
    if len(quoted) < 2:
        return "".join(quoted)
    return ", ".join(quoted[:-1]) + ", or " + quoted[-1]


@dataclass
class ConsoleSession:
    """One interactive session over a loaded road network.

    Attributes:
        store: The road network, for the location menu
        planner: Answers route queries
        renderer: Formats plans for display
        modes: Travel modes accepted at the prompt
        input_fn: Reads one line of user input
        output_fn: Writes one block of output
    """

    store: GraphStorePort
    planner: RoutePlannerService
    renderer: RouteRendererPort
    modes: Sequence[str] = ("walk", "bike", "car")
    input_fn: Callable[[str], str] = input
    output_fn: Callable[[str], None] = print
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def prompt_number(self, low: int, high: int, prompt: str) -> int:
        """Ask until the user enters an integer in [low, high]."""
        while True:
            answer = self.input_fn(prompt).strip()
            try:
                choice = int(answer)
            except ValueError:
                choice = None
            if choice is not None and low <= choice <= high:
                return choice
            self.output_fn(
                f"Invalid input. Please enter a number between {low} and {high}."
            )

    def prompt_mode(self) -> str:
        """Ask until the user enters a recognized travel mode."""
        options = "/".join(self.modes)
        while True:
            mode = self.input_fn(f"Enter travel mode ({options}): ").strip()
            if mode in self.modes:
                return mode
            self.output_fn(f"Invalid travel mode. Please enter {_choices(self.modes)}.")

    def ask_yes_no(self, question: str) -> bool:
        """Ask until the user answers yes/y or no/n."""
        while True:
            answer = self.input_fn(f"{question} (yes/no): ").strip().lower()
            if answer in ("yes", "y"):
                return True
            if answer in ("no", "n"):
                return False
            self.output_fn("Please answer 'yes' or 'no'.")

    def run_once(self) -> None:
        """Run a single query: menu, prompts, report."""
        locations = self.store.locations()
        menu = ["Available Locations:"]
        menu.extend(f"  {i}. {loc.name}" for i, loc in enumerate(locations, start=1))
        self.output_fn("\n".join(menu))

        count = len(locations)
        start = self.prompt_number(1, count, "Enter start location number: ")
        while True:
            end = self.prompt_number(1, count, "Enter destination number: ")
            if end != start:
                break
            self.output_fn(
                "Destination cannot be the same as start location. Please enter again."
            )

        mode = self.prompt_mode()
        plan, error = self.planner.plan_safe(start - 1, end - 1, mode)
        if plan is None:
            self._logger.info("Query not planned", extra={"error": error})
            self.output_fn(error or "No routes found!")
            return
        self.output_fn(self.renderer.render_plan(plan))

    def run(self) -> None:
        """Run queries until the user is done."""
        if not self.store.locations():
            self.output_fn("No locations available.")
            return

        self.output_fn(BANNER + "\n")
        while True:
            self.run_once()
            if not self.ask_yes_no("Do you want to find routes for another trip?"):
                break
        self.output_fn("Thank you for using the route finder. Goodbye!")


def main() -> None:
    """Entry point for the ``route-optimizer`` console script."""
    container = get_container()
    config = container.config
    configure_logging(config.observability)

    session = ConsoleSession(
        store=container.resolve(GraphStorePort),
        planner=container.resolve(RoutePlannerService),
        renderer=container.resolve(RouteRendererPort),
        modes=config.cost.modes,
    )
    try:
        session.run()
    except (KeyboardInterrupt, EOFError):
        session.output_fn("\nGoodbye!")


if __name__ == "__main__":
    main()
