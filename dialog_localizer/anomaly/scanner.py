from collections.abc import Iterable
from typing import ClassVar

from dialog_localizer.anomaly.classifier import classify
from dialog_localizer.anomaly.models import SAMPLED_TAGS, AnomalyReport, AnomalyTag
from dialog_localizer.database.models import DialogStringRecord

ALL_TYPES = "all"


class AnomalyScanner:
    """Aggregates classifier tags over a set of dialog strings."""

    MAX_SAMPLES: ClassVar[int] = 5

    def scan(self, records: Iterable[DialogStringRecord]) -> AnomalyReport:
        report = AnomalyReport()
        for record in records:
            report.total += 1
            if not record.source:
                continue

            tags = classify(record.source, record.dest)
            if not tags:
                continue

            report.anomalies += 1
            for tag in tags:
                report.counts[tag] += 1
                samples = report.samples.get(tag)
                if samples is not None and len(samples) < self.MAX_SAMPLES:
                    samples.append(f"{record.source} -> {record.dest}")

        return report


def matches_filter(record: DialogStringRecord, anomaly_type: str, search: str = "") -> bool:
    """Review-page filter: case-insensitive search on source/dest plus a tag filter.

    *anomaly_type* is ``"all"`` or an :class:`AnomalyTag` value; unknown
    values behave like ``"all"``.
    """
    if not record.source:
        return False

    needle = search.lower()
    if needle and needle not in record.source.lower() and needle not in (record.dest or "").lower():
        return False

    try:
        tag = AnomalyTag(anomaly_type)
    except ValueError:
        return True
    return tag in classify(record.source, record.dest)


_REPORT_LABELS: dict[AnomalyTag, str] = {
    AnomalyTag.MISSING: "Missing Translations",
    AnomalyTag.SAME: "Untranslated (Same as Source)",
    AnomalyTag.DLC: "DLC References",
    AnomalyTag.TECHNICAL: "Technical IDs",
    AnomalyTag.PUNCTUATION: "Punctuation Mismatches",
}

_SAMPLE_HEADINGS: dict[AnomalyTag, str] = {
    AnomalyTag.DLC: "DLC Samples",
    AnomalyTag.TECHNICAL: "Technical Samples",
    AnomalyTag.PUNCTUATION: "Punctuation Mismatches",
}


def format_report(report: AnomalyReport) -> list[str]:
    """Render a report as console lines."""
    lines = [
        "Scan Results:",
        f"Total Strings: {report.total}",
        f"Total Anomalies Found: {report.anomalies}",
        "-" * 48,
    ]
    lines.extend(
        f"[{tag.value}] {label}: {report.counts[tag]}" for tag, label in _REPORT_LABELS.items()
    )
    for tag in SAMPLED_TAGS:
        if report.counts[tag] == 0:
            continue
        lines.append(f"[{_SAMPLE_HEADINGS[tag]}]:")
        lines.extend(f" - {sample}" for sample in report.samples[tag])
    return lines
