"""Fixed metric schema shared by assessments, the classifier and the rule engine.

A metric snapshot maps category -> metric name -> integer value. Rules address
metrics by name only, so metric names must be unique across categories; the
schema is validated when this module is imported.
"""

from typing import Mapping

MetricSnapshot = Mapping[str, Mapping[str, int]]

REHABILITATION = "Rehabilitasi"
PHYSICAL = "Pemeriksaan Fisik"
MENTAL = "Kesehatan Mental"
SLEEP = "Kualitas Tidur"
RECOVERY = "Recovery"
ACTIVITY = "Tingkat Aktivitas"

INJURY = "Cedera"
RECOVERY_PROGRESS = "Pemulihan"
SLEEP_HOURS = "Rata-rata Jam Tidur"

METRIC_SCHEMA: dict[str, tuple[str, ...]] = {
    REHABILITATION: (INJURY, RECOVERY_PROGRESS),
    PHYSICAL: (
        "Fleksibilitas",
        "Kekuatan",
        "Daya Tahan",
        "Kecepatan",
        "Keseimbangan",
        "Kelincahan",
    ),
    MENTAL: ("Stress", "Motivasi", "Percaya Diri", "Kohesi Tim", "Fokus"),
    SLEEP: (SLEEP_HOURS, "Kualitas", "Konsistensi"),
    RECOVERY: ("Tingkat Recovery",),
    ACTIVITY: ("Harian", "Latihan", "Pertandingan", "Recovery"),
}

DEFAULT_MAX_VALUE = 10
MAX_VALUE_OVERRIDES = {SLEEP_HOURS: 12}


def validate_metric_schema(schema: Mapping[str, tuple[str, ...]]) -> dict[str, str]:
    """Return a metric -> category index, raising ValueError on name collisions."""
    index: dict[str, str] = {}
    for category, names in schema.items():
        for name in names:
            if name in index:
                raise ValueError(
                    f"Metric {name!r} is defined in both {index[name]!r} and {category!r}."
                )
            index[name] = category
    return index


METRIC_CATEGORY = validate_metric_schema(METRIC_SCHEMA)


def metric_max_value(metric_name: str) -> int:
    return MAX_VALUE_OVERRIDES.get(metric_name, DEFAULT_MAX_VALUE)


def validate_snapshot(snapshot: MetricSnapshot) -> None:
    """Raise ValueError if the snapshot does not fit the schema."""
    for category, metrics in snapshot.items():
        if category not in METRIC_SCHEMA:
            raise ValueError(f"Unknown metric category {category!r}.")
        for name, value in metrics.items():
            if METRIC_CATEGORY.get(name) != category:
                raise ValueError(f"Unknown metric {name!r} for category {category!r}.")
            upper = metric_max_value(name)
            if not 0 <= value <= upper:
                raise ValueError(f"{name} must be between 0 and {upper}, got {value}.")


def flatten_snapshot(snapshot: MetricSnapshot) -> dict[str, int]:
    """Drop category information, keyed by metric name."""
    return {name: value for metrics in snapshot.values() for name, value in metrics.items()}
