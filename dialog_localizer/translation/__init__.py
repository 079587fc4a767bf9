from dialog_localizer.translation.base import BaseTranslator
from dialog_localizer.translation.factory import TranslatorFactory
from dialog_localizer.translation.translator import Translator

__all__ = ["BaseTranslator", "Translator", "TranslatorFactory"]
