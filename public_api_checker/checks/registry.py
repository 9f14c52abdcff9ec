"""Check registry — the fixed set of public API endpoints we probe.

Definitions are static; ``make_health_checks`` binds them to a base URL,
credentials and a shared HTTP client once at startup.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from .engine import CheckResult, check_http_ok

logger = logging.getLogger(__name__)


# ── Data models ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CheckDefinition:
    """A named endpoint, relative to the checker's base URL."""

    id: str
    path: str


@dataclass(frozen=True)
class HealthCheck:
    """A runnable check plus the metadata shown in the health report."""

    name: str
    severity: int
    business_impact: str
    technical_summary: str
    panic_guide: str
    url: str
    checker: Callable[[], CheckResult]


CHECK_DEFINITIONS: tuple[CheckDefinition, ...] = (
    CheckDefinition("lists", "/__document-store-api/lists/f91b1e6a-5e21-11e6-a72a-bd4bf1198c63"),
    CheckDefinition("content", "/__document-store-api/content/bd1cecf2-893e-11e6-8cb7-e7ada1d123b1"),
)

# A failing endpoint means a business function is down.
BUSINESS_SEVERITY = 1


def full_url(base_url: str, path: str) -> str:
    """Join the base URL and a check path with exactly one slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def make_health_checks(
    base_url: str,
    client: httpx.Client,
    user: str = "",
    password: str = "",
    definitions: tuple[CheckDefinition, ...] = CHECK_DEFINITIONS,
) -> list[HealthCheck]:
    """Build one HealthCheck per definition."""
    checks: list[HealthCheck] = []
    for d in definitions:
        url = full_url(base_url, d.path)
        checks.append(
            HealthCheck(
                name=f"Check for url {d.path}",
                severity=BUSINESS_SEVERITY,
                business_impact=f"{d.id} appears to be failing at url {d.path}",
                technical_summary="See specific service in question for more technical detail",
                panic_guide=f"Inspect the {d.id} services in this cluster to find the problem(s)",
                url=url,
                checker=functools.partial(check_http_ok, client, url, user, password),
            )
        )
    logger.debug("Built %d health checks against %s", len(checks), base_url)
    return checks
