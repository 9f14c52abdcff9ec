"""Entry point for the public API checker — `public-api-checker` console script."""

from __future__ import annotations

import argparse
import logging

import uvicorn
from rich.console import Console
from rich.panel import Panel

from public_api_checker.api.server import create_app
from public_api_checker.config import CheckerSettings, settings

console = Console()
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None, defaults: CheckerSettings = settings) -> CheckerSettings:
    """Overlay command-line flags on the environment-derived settings."""
    parser = argparse.ArgumentParser(
        prog="public-api-checker",
        description="A checker for business level API endpoints",
    )
    parser.add_argument("--port", type=int, default=defaults.app_port,
                        help="Port to listen on (env APP_PORT)")
    parser.add_argument("--host", default=defaults.app_host,
                        help="Interface to bind (env APP_HOST)")
    parser.add_argument("--baseurl", default=defaults.base_url,
                        help="Base URL for outgoing check requests, e.g. the router's base URL (env BASE_URL)")
    parser.add_argument("--user", default=defaults.check_user,
                        help="User for basic auth in outgoing check requests (env CHECK_USER)")
    parser.add_argument("--password", default=defaults.check_password,
                        help="Password for basic auth in outgoing check requests (env CHECK_PASSWORD)")
    parser.add_argument("--log-level", default=defaults.log_level,
                        help="Logging level (env LOG_LEVEL)")

    args = parser.parse_args(argv)
    return defaults.model_copy(update={
        "app_port": args.port,
        "app_host": args.host,
        "base_url": args.baseurl,
        "check_user": args.user,
        "check_password": args.password,
        "log_level": args.log_level.upper(),
    })


def main(argv: list[str] | None = None) -> None:
    """Start the checker service."""
    cfg = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    auth_status = f"basic auth as {cfg.check_user!r}" if cfg.check_user else "none"
    console.print(
        Panel.fit(
            f"[bold]Public API Checker[/bold]\n"
            f"Bind:     {cfg.app_host}:{cfg.app_port}\n"
            f"Base URL: {cfg.base_url}\n"
            f"Auth:     {auth_status}",
            title="public-api-checker",
            border_style="green",
        )
    )
    logger.info("Starting on port %d", cfg.app_port)

    # uvicorn exits non-zero if the port cannot be bound
    uvicorn.run(
        create_app(cfg),
        host=cfg.app_host,
        port=cfg.app_port,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
