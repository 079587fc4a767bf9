from dialog_localizer.config.settings import Settings
from dialog_localizer.logging.logger import Log
from dialog_localizer.notifications.base import BaseNotifier, NullNotifier
from dialog_localizer.notifications.discord_notifier import DiscordNotifier


class NotifierFactory:
    """Creates the configured notification channel."""

    @classmethod
    def create(cls, settings: Settings) -> BaseNotifier:
        url = settings.discord_webhook_url.strip()
        if not url:
            Log.warning("DISCORD_WEBHOOK_URL not set. Notifications disabled.")
            return NullNotifier()
        Log.info("Discord webhook initialized")
        return DiscordNotifier(url)
