"""
Appointment registry
Owns all appointments, enforces one appointment per vehicle per date
and notifies clients when their appointment is booked
"""

import logging
import threading
from typing import List

from service_center.exceptions import NotFound, SchedulingConflict
from service_center.models import Appointment, AppointmentView, Client, Service
from service_center.notifications import scheduled_message

logger = logging.getLogger(__name__)

# Handles are 1-based appointment ids in insertion order
AppointmentHandle = int


class AppointmentRegistry:
    """In-memory appointment book for a single service center"""

    def __init__(self):
        self._appointments: List[Appointment] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._appointments)

    def schedule(
        self, client: Client, vehicle_number: str, service: Service, date: str
    ) -> AppointmentHandle:
        """
        Book a service appointment

        The conflict check and the insert happen in a single critical section,
        so concurrent callers can never double-book a vehicle.

        Args:
            client: Client shown in listings and notified through its
                Notifiable.notify once booked
            vehicle_number: Vehicle registration number
            service: Service to perform
            date: Appointment date (DD-MM-YYYY), compared as an opaque key

        Returns:
            AppointmentHandle: Id for later lookup and advance calls

        Raises:
            SchedulingConflict: If the vehicle already has an appointment on that date
        """
        with self._lock:
            for existing in self._appointments:
                if existing.conflicts_with(vehicle_number, date):
                    logger.warning(
                        f"Conflict for vehicle {vehicle_number} on {date} "
                        f"(appointment {existing.id})"
                    )
                    raise SchedulingConflict(vehicle_number, date)

            appointment = Appointment(
                id=len(self._appointments) + 1,
                client=client,
                vehicle_number=vehicle_number,
                service=service,
                scheduled_date=date,
            )
            self._appointments.append(appointment)

        logger.info(
            f"Scheduled appointment {appointment.id}: {vehicle_number} "
            f"for {client.name} on {date}"
        )
        # The booking stands even if the client cannot be reached
        try:
            client.notify(scheduled_message(date))
        except Exception as e:
            logger.error(
                f"Failed to notify {client.name} about appointment {appointment.id}: {e}"
            )
        return appointment.id

    def advance(self, handle: AppointmentHandle) -> AppointmentView:
        """Move an appointment one lifecycle stage forward and return its new view"""
        with self._lock:
            appointment = self._lookup(handle)
            previous = appointment.state
            appointment.advance()
            view = appointment.to_view()

        if previous is appointment.state:
            logger.info(f"Appointment {handle} already {view.status}, nothing to advance")
        else:
            logger.info(
                f"Appointment {handle} moved from {previous.label} to {view.status}"
            )
        return view

    def get(self, handle: AppointmentHandle) -> AppointmentView:
        """Get a read-only view of one appointment"""
        with self._lock:
            return self._lookup(handle).to_view()

    def list(self) -> List[AppointmentView]:
        """Get read-only views of all appointments in scheduling order"""
        with self._lock:
            return [appointment.to_view() for appointment in self._appointments]

    def _lookup(self, handle: AppointmentHandle) -> Appointment:
        # Caller must hold the lock
        if (
            isinstance(handle, bool)
            or not isinstance(handle, int)
            or not 1 <= handle <= len(self._appointments)
        ):
            logger.warning(f"Unknown appointment handle: {handle!r}")
            raise NotFound(handle)
        return self._appointments[handle - 1]
