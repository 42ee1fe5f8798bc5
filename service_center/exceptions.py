"""
Error taxonomy for the service center
All errors are recoverable: the console loop reports them and keeps running
"""


class ServiceCenterError(Exception):
    """Base class for every error surfaced to the presentation layer"""


class InvalidInput(ServiceCenterError):
    """Input rejected at the presentation boundary"""


class InvalidServiceType(InvalidInput):
    """Service tag is not one of the recognized types"""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Invalid service type: '{tag}'")


class InvalidDate(InvalidInput):
    """Date is not a real DD-MM-YYYY calendar date"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date '{value}' (expected DD-MM-YYYY)")


class SchedulingConflict(ServiceCenterError):
    """Vehicle already has an appointment on the requested date"""

    def __init__(self, vehicle_number: str, date: str):
        self.vehicle_number = vehicle_number
        self.date = date
        super().__init__(
            f"Scheduling conflict: Vehicle {vehicle_number} already has an appointment on {date}"
        )


class NotFound(ServiceCenterError):
    """No appointment exists for the given handle"""

    def __init__(self, handle):
        self.handle = handle
        super().__init__(f"Appointment {handle} not found")
