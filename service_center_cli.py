"""
Vehicle Service Center - Main Entry Point
Minimal console loop that wires the menu commands to an in-memory registry.
"""
import logging
from typing import Callable, Optional

from service_center.config import get_config
from service_center.exceptions import ServiceCenterError
from service_center.registry import AppointmentRegistry
from service_center.commands.menu import render_menu, handle_choice

logger = logging.getLogger(__name__)


def run(
    registry: Optional[AppointmentRegistry] = None,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> AppointmentRegistry:
    """Run the menu loop until the operator exits or input ends"""
    registry = registry if registry is not None else AppointmentRegistry()

    while True:
        echo(render_menu())
        try:
            choice = prompt("Enter your choice: ")
        except EOFError:
            echo("Exiting system...")
            break

        try:
            if not handle_choice(choice, registry, prompt=prompt, echo=echo):
                break
        except ServiceCenterError as e:
            echo(f"Error: {e}")
        except EOFError:
            echo("Exiting system...")
            break

    return registry


def main() -> None:
    """Start the console application"""
    config = get_config()

    # Configure logging
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=config.log_level
    )

    logger.info(f"Starting {config.center_name} console")
    registry = run()
    logger.info(f"Session ended with {len(registry)} appointment(s)")


if __name__ == '__main__':
    main()
