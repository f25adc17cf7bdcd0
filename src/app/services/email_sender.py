from abc import ABC, abstractmethod


class EmailSender(ABC):
    """Outbound email transport"""

    @abstractmethod
    async def send(self, to: str, subject: str, html_body: str) -> bool:
        """Send one HTML email; returns False when delivery failed"""
        pass
