from statistics import fmean
from typing import Mapping

from ..core.enums import AthleteStatus
from .metrics import INJURY, MENTAL, PHYSICAL, RECOVERY_PROGRESS, REHABILITATION, MetricSnapshot

NEUTRAL_AVERAGE = 5.0


def _category_average(snapshot: MetricSnapshot, category: str) -> float:
    values: Mapping[str, int] = snapshot.get(category) or {}
    if not values:
        return NEUTRAL_AVERAGE
    return fmean(values.values())


def classify_status(snapshot: MetricSnapshot) -> AthleteStatus:
    """Derive an athlete's status from one assessment snapshot.

    Rehabilitation readings take precedence over the physical/mental averages;
    a missing or empty category averages to a neutral 5.
    """
    rehab = snapshot.get(REHABILITATION) or {}
    injury = rehab.get(INJURY)
    if injury is not None and injury >= 7:
        return AthleteStatus.REHABILITASI
    recovery = rehab.get(RECOVERY_PROGRESS)
    if recovery is not None and recovery < 5:
        return AthleteStatus.PEMULIHAN

    avg_physical = _category_average(snapshot, PHYSICAL)
    avg_mental = _category_average(snapshot, MENTAL)
    if avg_physical >= 8 and avg_mental >= 8:
        return AthleteStatus.PRIMA
    if avg_physical >= 6 and avg_mental >= 6:
        return AthleteStatus.FIT
    return AthleteStatus.PEMULIHAN
