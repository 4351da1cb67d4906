"""Sunset policy exports."""

from .policy_evaluator import SunsetPolicyEvaluator
from .sunset_dates import SunsetParseError, parse_sunset_date

__all__ = [
    "SunsetParseError",
    "SunsetPolicyEvaluator",
    "parse_sunset_date",
]
