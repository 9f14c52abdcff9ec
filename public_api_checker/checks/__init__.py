"""Check subsystem — static endpoint registry and HTTP check engine."""

from .engine import CheckResult, CheckStatus, HealthReport, check_http_ok, run_checks
from .registry import CHECK_DEFINITIONS, CheckDefinition, HealthCheck, make_health_checks

__all__ = [
    "CHECK_DEFINITIONS",
    "CheckDefinition",
    "CheckResult",
    "CheckStatus",
    "HealthCheck",
    "HealthReport",
    "check_http_ok",
    "make_health_checks",
    "run_checks",
]
