from dialog_localizer.anomaly.classifier import (
    classify,
    is_dlc,
    is_punctuation_mismatch,
    is_technical,
)
from dialog_localizer.anomaly.models import AnomalyReport, AnomalyTag

__all__ = [
    "AnomalyReport",
    "AnomalyTag",
    "classify",
    "is_dlc",
    "is_punctuation_mismatch",
    "is_technical",
]
