"""
Advance command - Move an appointment to its next lifecycle stage
"""

import logging
from typing import Callable

from service_center.exceptions import InvalidInput
from service_center.models import AppointmentView
from service_center.registry import AppointmentRegistry
from service_center.validation import require_text

logger = logging.getLogger(__name__)


def advance_command(
    registry: AppointmentRegistry,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> AppointmentView:
    """
    Prompt for an appointment number and advance its status

    Raises:
        InvalidInput: If the number is not an integer
        NotFound: If no appointment has that number
    """
    raw = require_text(prompt("Enter appointment number: "), "Appointment number")
    try:
        handle = int(raw)
    except ValueError:
        raise InvalidInput(f"Appointment number must be a whole number, got '{raw}'") from None

    view = registry.advance(handle)
    echo(f"Appointment #{view.id} ({view.vehicle_number}) is now: {view.status}")
    return view
