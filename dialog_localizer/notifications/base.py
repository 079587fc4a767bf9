from abc import ABC, abstractmethod

from dialog_localizer.processor.models import TranslationStats

COLOR_INFO = 0x3498DB
COLOR_PROGRESS = 0xF39C12
COLOR_SUCCESS = 0x2ECC71
COLOR_FAILURE = 0xE74C3C


class BaseNotifier(ABC):
    """Contract for progress notification channels."""

    @abstractmethod
    def notify(
        self,
        title: str,
        description: str,
        stats: TranslationStats | None = None,
        color: int = COLOR_INFO,
    ) -> None:
        """Deliver one notification. Implementations must not raise on delivery failure."""

    def close(self) -> None:
        """Release any held resources."""


class NullNotifier(BaseNotifier):
    """Used when no notification channel is configured."""

    def notify(
        self,
        title: str,
        description: str,
        stats: TranslationStats | None = None,
        color: int = COLOR_INFO,
    ) -> None:
        _ = title, description, stats, color
