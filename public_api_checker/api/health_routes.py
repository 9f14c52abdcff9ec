"""Health routes — detailed report and the good-to-go gate.

Endpoints:
  GET /__health — every check, with impact/remediation metadata (JSON or HTML)
  GET /__gtg    — 200 if every check passes, 503 otherwise, empty body
"""

from __future__ import annotations

import html
import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse

from public_api_checker.api.headers import NO_CACHE_HEADERS
from public_api_checker.checks.engine import HealthReport, run_checks

logger = logging.getLogger(__name__)

health_router = APIRouter()

HEALTH_NAME = "Public API Checker healthchecks"
HEALTH_DESCRIPTION = "Checks for accessing public API endpoints"


def _wants_html(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "text/html" in accept and "application/json" not in accept


def render_html(report: HealthReport) -> str:
    """Render the report as a minimal HTML page for humans."""
    rows = []
    for c in report.checks:
        rows.append(
            "<tr class=\"{cls}\"><td>{name}</td><td>{state}</td><td>{sev}</td>"
            "<td>{impact}</td><td>{guide}</td><td>{output}</td><td>{updated}</td></tr>".format(
                cls="ok" if c.ok else "failed",
                name=html.escape(c.name),
                state="OK" if c.ok else "FAILED",
                sev=c.severity,
                impact=html.escape(c.businessImpact),
                guide=html.escape(c.panicGuide),
                output=html.escape(c.checkOutput),
                updated=html.escape(c.lastUpdated),
            )
        )
    overall = "OK" if report.ok else f"FAILED (severity {report.severity})"
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<title>{html.escape(report.name)}</title>"
        "<style>td,th{padding:4px 8px;border:1px solid #ccc}"
        ".ok{background:#dfd}.failed{background:#fdd}</style></head><body>"
        f"<h1>{html.escape(report.name)}</h1>"
        f"<p>{html.escape(report.description)}</p>"
        f"<p><strong>Overall: {overall}</strong></p>"
        "<table><tr><th>Check</th><th>Status</th><th>Severity</th><th>Business impact</th>"
        "<th>Panic guide</th><th>Output</th><th>Last updated</th></tr>"
        + "".join(rows)
        + "</table></body></html>"
    )


def build_report(request: Request) -> HealthReport:
    return run_checks(HEALTH_NAME, HEALTH_DESCRIPTION, request.app.state.checks)


# ── Endpoints ────────────────────────────────────────────────────────────────


@health_router.get("/__health", response_model=HealthReport)
def health(request: Request) -> Response:
    """Run every check and report the results."""
    report = build_report(request)
    if _wants_html(request):
        return HTMLResponse(render_html(report), headers=NO_CACHE_HEADERS)
    return JSONResponse(report.model_dump(), headers=NO_CACHE_HEADERS)


@health_router.get("/__gtg")
def good_to_go(request: Request) -> Response:
    """Collapse all checks into a single admit/reject status."""
    report = build_report(request)
    if report.ok:
        return Response(status_code=200, headers=NO_CACHE_HEADERS)
    failed = [c.name for c in report.checks if not c.ok]
    logger.info("GTG failing: %d check(s) down: %s", len(failed), ", ".join(failed))
    return Response(status_code=503, headers=NO_CACHE_HEADERS)
