"""
Schedule command - Collect appointment details and book them
"""

import logging
from typing import Callable

from service_center.config import get_config
from service_center.models import Client, ServiceKind
from service_center.registry import AppointmentRegistry
from service_center.services_catalog import (
    available_service_types,
    build_service,
    parse_service_kind,
)
from service_center.validation import require_text, validate_date

logger = logging.getLogger(__name__)


def schedule_command(
    registry: AppointmentRegistry,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> int:
    """
    Prompt for a new appointment and schedule it

    Returns:
        int: Handle of the new appointment

    Raises:
        InvalidInput: Blank field, unknown service type or bad date
        SchedulingConflict: Vehicle already booked on that date
    """
    config = get_config()
    tags = "/".join(available_service_types())

    client_name = require_text(prompt("Enter client name: "), "Client name")
    contact = require_text(prompt("Enter contact number: "), "Contact number")
    vehicle_number = require_text(prompt("Enter vehicle number: "), "Vehicle number")
    date = validate_date(
        prompt("Enter appointment date (DD-MM-YYYY): "), strict=config.strict_dates
    )
    tag = prompt(f"Enter service type ({tags}): ")

    # Unknown tags fail here, before any service or client is built
    kind = parse_service_kind(tag)
    repair_type = None
    if kind is ServiceKind.ENGINE_REPAIR:
        repair_type = require_text(prompt("Enter engine repair type: "), "Repair type")

    service = build_service(kind.value, repair_type)
    client = Client(name=client_name, contact=contact)

    handle = registry.schedule(client, vehicle_number, service, date)
    echo("Appointment scheduled successfully!")
    logger.debug(f"Console scheduled appointment {handle} ({service.label})")
    return handle
