import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Mapping

from ..core.errors import MalformedRuleError
from .conditions import parse_trigger_condition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleDefinition:
    rule_id: int | None
    priority: int
    trigger_condition: str
    recommendation_text: str


@dataclass(frozen=True)
class RuleMatch:
    rule_id: int | None
    priority: int
    recommendation: str


def evaluate_rules(
    rules: Iterable[RuleDefinition], metric_map: Mapping[str, float]
) -> list[RuleMatch]:
    """Return the recommendations whose conditions hold, lowest priority number first.

    A rule with an unparseable trigger condition is skipped with a warning and
    does not stop the remaining rules from being evaluated.
    """
    matches: list[RuleMatch] = []
    for rule in rules:
        try:
            condition = parse_trigger_condition(rule.trigger_condition)
        except MalformedRuleError as exc:
            logger.warning(
                "Skipping recommendation rule %s with invalid condition %r: %s",
                rule.rule_id,
                rule.trigger_condition,
                exc,
            )
            continue
        if condition.matches(metric_map):
            matches.append(RuleMatch(rule.rule_id, rule.priority, rule.recommendation_text))
    return sorted(matches, key=attrgetter("priority"))
