"""Mail delivery abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    success: bool
    message: str


class AbstractMailer(ABC):
    """Interface for verification code delivery backends."""

    @abstractmethod
    def send(self, email: str, display_name: str, code: str) -> DeliveryResult:
        """Deliver ``code`` to ``email``; failures are reported, not raised."""
