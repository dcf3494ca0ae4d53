"""Rule engine for turning weather snapshots into condition cards."""

from weather_advisories.rules.engine import (
    ConditionRuleEngine,
    EvaluationSummary,
    evaluate_conditions,
    sort_by_severity,
)
from weather_advisories.rules.evaluators import (
    DEFAULT_EVALUATORS,
    evaluate_activity_indices,
    evaluate_air_quality,
    evaluate_temperature,
    evaluate_uv,
    evaluate_wind,
)
from weather_advisories.rules.thresholds import (
    AirQualityTier,
    SeverityBand,
    classify_air_quality,
    classify_falling,
    classify_rising,
)

__all__ = [
    "ConditionRuleEngine",
    "EvaluationSummary",
    "evaluate_conditions",
    "sort_by_severity",
    "DEFAULT_EVALUATORS",
    "evaluate_activity_indices",
    "evaluate_air_quality",
    "evaluate_temperature",
    "evaluate_uv",
    "evaluate_wind",
    "AirQualityTier",
    "SeverityBand",
    "classify_air_quality",
    "classify_falling",
    "classify_rising",
]
