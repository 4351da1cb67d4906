"""Run execution domain exports."""

from .run_contracts import CheckArtifacts, CheckOutcome, CheckRequest
from .sunset_check_use_case import CheckExecutionError, execute_sunset_check

__all__ = [
    "CheckRequest",
    "CheckOutcome",
    "CheckArtifacts",
    "CheckExecutionError",
    "execute_sunset_check",
]
