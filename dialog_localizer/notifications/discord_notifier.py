from datetime import datetime, timezone
from typing import Any

import httpx

from dialog_localizer.logging.logger import Log
from dialog_localizer.notifications.base import COLOR_INFO, BaseNotifier
from dialog_localizer.processor.models import TranslationStats


def format_elapsed(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"


def build_embed(
    title: str,
    description: str,
    stats: TranslationStats | None,
    color: int,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build a Discord embed object for a translation status message."""
    now = now or datetime.now(timezone.utc)
    embed: dict[str, Any] = {
        "title": title,
        "description": description,
        "color": color,
        "timestamp": now.isoformat(),
    }
    if stats is not None:
        embed["fields"] = [
            {"name": "Progress", "value": f"{stats.progress_percent:.2f}%", "inline": True},
            {
                "name": "Translated",
                "value": f"{stats.success_count}/{stats.total_unique_texts}",
                "inline": True,
            },
            {"name": "Errors", "value": str(stats.error_count), "inline": True},
            {
                "name": "Records Updated",
                "value": f"{stats.records_updated}/{stats.total_records}",
                "inline": True,
            },
            {"name": "Copied", "value": str(stats.copied_count), "inline": True},
            {
                "name": "Elapsed",
                "value": format_elapsed(stats.elapsed_seconds(now)),
                "inline": True,
            },
        ]
    return embed


class DiscordNotifier(BaseNotifier):
    """Posts embeds to a Discord webhook."""

    def __init__(
        self,
        webhook_url: str,
        timeout_seconds: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def notify(
        self,
        title: str,
        description: str,
        stats: TranslationStats | None = None,
        color: int = COLOR_INFO,
    ) -> None:
        payload = {"embeds": [build_embed(title, description, stats, color)]}
        try:
            response = self._client.post(self._webhook_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            Log.error(f"Failed to send Discord notification: {exc}")

    def close(self) -> None:
        self._client.close()
