from abc import ABC, abstractmethod


class BaseTranslator(ABC):
    """Contract for all translator implementations."""

    @abstractmethod
    def translate(self, text: str) -> str:
        """Translate masked dialog text into the target language.

        Args:
            text: Source text, with glossary terms already replaced by
                  placeholders.

        Returns:
            Translated text with placeholders preserved, or *text* itself
            when every attempt failed.
        """
