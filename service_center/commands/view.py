"""
View command - Show all appointments in scheduling order
"""

from typing import Callable

from service_center.config import get_config
from service_center.models import AppointmentView
from service_center.registry import AppointmentRegistry


def format_appointment(view: AppointmentView) -> str:
    """Format a single appointment for display"""
    config = get_config()
    lines = [
        f"\nAppointment #{view.id}",
        f"Vehicle: {view.vehicle_number}",
        f"Client: {view.client_name}",
        f"Service: {view.service_description}",
        f"Cost: {config.format_cost(view.cost)}",
        f"Date: {view.scheduled_date}",
        f"Status: {view.status}",
    ]
    if view.parts_required:
        lines.append(f"Parts: {', '.join(view.parts_required)}")
    return "\n".join(lines)


def view_command(
    registry: AppointmentRegistry,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> None:
    """Print every appointment"""
    appointments = registry.list()
    if not appointments:
        echo("No appointments scheduled.")
        return

    for view in appointments:
        echo(format_appointment(view))
