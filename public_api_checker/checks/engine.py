"""Check engine — runs HTTP checks and folds them into a health report.

Every check is executed fresh on each call; nothing is cached between
requests. Failures never raise: they come back as a failing CheckResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel

if TYPE_CHECKING:
    from .registry import HealthCheck

logger = logging.getLogger(__name__)

HEALTH_SCHEMA_VERSION = 1


# ── Models ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check execution."""

    ok: bool
    output: str = ""

    @classmethod
    def success(cls) -> CheckResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> CheckResult:
        return cls(ok=False, output=message)


class CheckStatus(BaseModel):
    name: str
    ok: bool
    severity: int
    businessImpact: str
    technicalSummary: str
    panicGuide: str
    checkOutput: str
    lastUpdated: str


class HealthReport(BaseModel):
    schemaVersion: int = HEALTH_SCHEMA_VERSION
    name: str
    description: str
    checks: list[CheckStatus]
    ok: bool
    severity: int | None = None


# ── Check runner ─────────────────────────────────────────────────────────────


def check_http_ok(
    client: httpx.Client,
    url: str,
    user: str = "",
    password: str = "",
) -> CheckResult:
    """GET ``url`` and succeed only on a 200.

    Basic auth is attached when ``user`` is non-empty. The status code alone
    decides the result. The body is always drained and the response closed
    so the connection goes back to the pool, whatever the status.
    """
    auth = (user, password) if user else None
    try:
        with client.stream("GET", url, auth=auth) as resp:
            status_code = resp.status_code
            _drain(resp, url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Check request failed for %s: %s", url, e)
        return CheckResult.failure(str(e) or type(e).__name__)

    if status_code == 200:
        return CheckResult.success()

    logger.warning("check failed with status %d for url %s", status_code, url)
    return CheckResult.failure(f"check failed with status {status_code} for url {url}")


def _drain(resp: httpx.Response, url: str) -> None:
    """Discard the rest of the body; errors here never change the verdict."""
    try:
        for _ in resp.iter_raw():
            pass
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.debug("Body drain interrupted for %s: %s", url, e)


# ── Aggregation ──────────────────────────────────────────────────────────────


def _run_one(check: HealthCheck) -> CheckResult:
    try:
        return check.checker()
    except Exception as e:
        logger.exception("Checker for %r raised", check.name)
        return CheckResult.failure(f"{type(e).__name__}: {e}")


def run_checks(name: str, description: str, checks: Iterable[HealthCheck]) -> HealthReport:
    """Run every check in order and build the aggregate report."""
    statuses: list[CheckStatus] = []
    for check in checks:
        result = _run_one(check)
        statuses.append(
            CheckStatus(
                name=check.name,
                ok=result.ok,
                severity=check.severity,
                businessImpact=check.business_impact,
                technicalSummary=check.technical_summary,
                panicGuide=check.panic_guide,
                checkOutput=result.output,
                lastUpdated=datetime.now(timezone.utc).isoformat(),
            )
        )

    failing = [s.severity for s in statuses if not s.ok]
    return HealthReport(
        name=name,
        description=description,
        checks=statuses,
        ok=not failing,
        severity=min(failing) if failing else None,
    )
