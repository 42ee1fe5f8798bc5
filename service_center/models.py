"""
Type-safe data models for the service center
Uses dataclasses and enums for better type safety and IDE support
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from service_center.notifications import ConsoleChannel, Notifiable, NotificationChannel


class ServiceKind(str, Enum):
    """Offered service types"""
    OIL_CHANGE = "oil"
    ENGINE_REPAIR = "engine"


class LifecycleState(str, Enum):
    """Appointment fulfillment stage, strictly forward-only"""
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return STATE_LABELS[self]

    @property
    def is_terminal(self) -> bool:
        return self is LifecycleState.COMPLETED

    def next(self) -> "LifecycleState":
        """Following stage; Completed absorbs further transitions"""
        if self is LifecycleState.SCHEDULED:
            return LifecycleState.IN_PROGRESS
        return LifecycleState.COMPLETED


STATE_LABELS = {
    LifecycleState.SCHEDULED: "Scheduled",
    LifecycleState.IN_PROGRESS: "In Progress",
    LifecycleState.COMPLETED: "Completed",
}

# Labor-intensive repairs are billed above the base cost
ENGINE_REPAIR_MARKUP = Decimal("1.5")

SERVICE_BASE_COSTS = {
    ServiceKind.OIL_CHANGE: Decimal("50.0"),
    ServiceKind.ENGINE_REPAIR: Decimal("200.0"),
}

SERVICE_PARTS = {
    ServiceKind.OIL_CHANGE: ("Oil Filter", "Engine Oil"),
    ServiceKind.ENGINE_REPAIR: ("Engine Parts", "Lubricants"),
}

SERVICE_LABELS = {
    ServiceKind.OIL_CHANGE: "Oil Change",
    ServiceKind.ENGINE_REPAIR: "Engine Repair",
}


@dataclass(frozen=True)
class Client(Notifiable):
    """Customer requesting a service; identified by name in notifications"""
    name: str
    contact: str
    channel: NotificationChannel = field(
        default_factory=ConsoleChannel, compare=False, repr=False
    )

    def notify(self, message: str) -> None:
        self.channel.send(self.name, message)


@dataclass(frozen=True)
class Service:
    """
    Immutable service offering

    Base cost and parts are fixed per kind; only engine repairs carry
    a repair detail.
    """
    kind: ServiceKind
    repair_detail: Optional[str] = None

    def __post_init__(self):
        # Raises ValueError for anything that is not a known kind
        object.__setattr__(self, "kind", ServiceKind(self.kind))

    @property
    def label(self) -> str:
        return SERVICE_LABELS[self.kind]

    @property
    def base_cost(self) -> Decimal:
        return SERVICE_BASE_COSTS[self.kind]

    @property
    def parts_required(self) -> Tuple[str, ...]:
        return SERVICE_PARTS[self.kind]

    def cost(self) -> Decimal:
        if self.kind is ServiceKind.OIL_CHANGE:
            return self.base_cost
        return self.base_cost * ENGINE_REPAIR_MARKUP

    def description(self) -> str:
        if self.kind is ServiceKind.OIL_CHANGE:
            return "Standard Oil Change Service"
        return f"Engine Repair: {self.repair_detail or ''}"


@dataclass(frozen=True)
class AppointmentView:
    """Read-only snapshot of an appointment for display"""
    id: int
    vehicle_number: str
    client_name: str
    service_description: str
    cost: Decimal
    scheduled_date: str
    status: str
    parts_required: Tuple[str, ...] = ()


@dataclass
class Appointment:
    """A scheduled service visit for one vehicle on one date"""
    id: int
    client: Client
    vehicle_number: str
    service: Service
    scheduled_date: str
    state: LifecycleState = LifecycleState.SCHEDULED

    def advance(self) -> LifecycleState:
        """Move one stage forward; no-op once completed"""
        self.state = self.state.next()
        return self.state

    def status(self) -> str:
        return self.state.label

    def conflicts_with(self, vehicle_number: str, date: str) -> bool:
        return self.vehicle_number == vehicle_number and self.scheduled_date == date

    def to_view(self) -> AppointmentView:
        return AppointmentView(
            id=self.id,
            vehicle_number=self.vehicle_number,
            client_name=self.client.name,
            service_description=self.service.description(),
            cost=self.service.cost(),
            scheduled_date=self.scheduled_date,
            status=self.status(),
            parts_required=self.service.parts_required,
        )
