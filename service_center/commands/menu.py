"""
Main menu - Render options and dispatch the operator's choice
"""

import logging
from typing import Callable, Optional

from service_center.config import get_config
from service_center.registry import AppointmentRegistry
from service_center.commands.schedule import schedule_command
from service_center.commands.view import view_command
from service_center.commands.advance import advance_command

logger = logging.getLogger(__name__)

MENU_OPTIONS = {
    "1": "Schedule New Appointment",
    "2": "View Appointments",
    "3": "Advance Appointment Status",
    "4": "Exit",
}
EXIT_OPTION = "4"

COMMANDS = {
    "1": schedule_command,
    "2": view_command,
    "3": advance_command,
}


def render_menu() -> str:
    """Build the main menu text"""
    lines = [f"\n{get_config().center_name} Management"]
    lines.extend(f"{key}. {label}" for key, label in MENU_OPTIONS.items())
    return "\n".join(lines)


def handle_choice(
    choice: str,
    registry: AppointmentRegistry,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> bool:
    """
    Run the command behind a menu choice

    Returns:
        bool: False when the operator chose to exit
    """
    choice = choice.strip()
    if choice == EXIT_OPTION:
        echo("Exiting system...")
        return False

    command: Optional[Callable] = COMMANDS.get(choice)
    if command is None:
        logger.debug(f"Unknown menu option: {choice!r}")
        echo("Invalid option!")
        return True

    command(registry, prompt=prompt, echo=echo)
    return True
