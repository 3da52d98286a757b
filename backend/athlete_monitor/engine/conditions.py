"""Trigger-condition mini-language.

A trigger condition is stored as a JSON object literal mapping a metric name
to a comparison expression, for example ``{"Fleksibilitas": "<4", "Kekuatan": "<5"}``.
An expression is an optional operator prefix followed by a number; without a
prefix the comparison is equality. All clauses must hold.
"""

import enum
import json
import operator
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Mapping

from ..core.errors import MalformedRuleError


class Comparator(str, enum.Enum):
    GE = ">="
    GT = ">"
    LE = "<="
    LT = "<"
    EQ = "=="
    NE = "!="

    def apply(self, value: float, threshold: float) -> bool:
        return _OPERATIONS[self](value, threshold)


_OPERATIONS: dict[Comparator, Callable[[float, float], bool]] = {
    Comparator.GE: operator.ge,
    Comparator.GT: operator.gt,
    Comparator.LE: operator.le,
    Comparator.LT: operator.lt,
    Comparator.EQ: operator.eq,
    Comparator.NE: operator.ne,
}

# Multi-character prefixes first so ">=" is never read as ">" followed by "=7".
_PREFIXES: tuple[tuple[str, Comparator], ...] = (
    (">=", Comparator.GE),
    ("<=", Comparator.LE),
    ("==", Comparator.EQ),
    ("!=", Comparator.NE),
    (">", Comparator.GT),
    ("<", Comparator.LT),
    ("=", Comparator.EQ),
)


def parse_expression(expression: str) -> tuple[Comparator, float]:
    """Split ``">=7"`` into ``(Comparator.GE, 7.0)``; ``"5"`` gives ``(Comparator.EQ, 5.0)``."""
    text = expression.strip()
    comparator = Comparator.EQ
    for prefix, candidate in _PREFIXES:
        if text.startswith(prefix):
            comparator = candidate
            text = text[len(prefix):].strip()
            break
    try:
        threshold = float(text)
    except ValueError:
        raise MalformedRuleError(f"Invalid threshold in expression {expression!r}.") from None
    return comparator, threshold


@dataclass(frozen=True)
class Clause:
    metric: str
    comparator: Comparator
    threshold: float

    def holds(self, metric_map: Mapping[str, float]) -> bool:
        value = metric_map.get(self.metric)
        if value is None:
            return False
        return self.comparator.apply(value, self.threshold)


@dataclass(frozen=True)
class TriggerCondition:
    clauses: tuple[Clause, ...]

    def matches(self, metric_map: Mapping[str, float]) -> bool:
        return all(clause.holds(metric_map) for clause in self.clauses)


@lru_cache(maxsize=256)
def parse_trigger_condition(text: str) -> TriggerCondition:
    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedRuleError(f"Trigger condition is not valid JSON: {exc}") from None
    if not isinstance(raw, dict):
        raise MalformedRuleError("Trigger condition must be a JSON object.")

    clauses = []
    for metric, expression in raw.items():
        if not isinstance(expression, str):
            raise MalformedRuleError(f"Expression for {metric!r} must be a string.")
        comparator, threshold = parse_expression(expression)
        clauses.append(Clause(metric, comparator, threshold))
    return TriggerCondition(tuple(clauses))


def evaluate_condition(text: str, metric_map: Mapping[str, float]) -> bool:
    return parse_trigger_condition(text).matches(metric_map)
