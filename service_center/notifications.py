"""
Notification channels for appointment events
The registry only depends on the Notifiable interface, so new channels
(email, SMS, push) plug in without touching scheduling logic
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO, Optional

logger = logging.getLogger(__name__)


class Notifiable(ABC):
    @abstractmethod
    def notify(self, message: str) -> None:
        """Deliver a textual notification to the recipient"""
        pass


class NotificationChannel(ABC):
    @abstractmethod
    def send(self, recipient: str, message: str) -> None:
        """Deliver a message addressed to the named recipient"""
        pass


class ConsoleChannel(NotificationChannel):
    """Prints notifications for a named recipient to a text stream"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def send(self, recipient: str, message: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        print(f"Notification for {recipient}: {message}", file=stream)
        logger.debug(f"Console notification delivered to {recipient}")


def scheduled_message(date: str) -> str:
    """Message sent to a client once an appointment is booked"""
    return f"Appointment scheduled for {date}"
