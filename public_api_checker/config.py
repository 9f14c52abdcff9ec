"""Checker configuration — loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from public_api_checker import __version__


class CheckerSettings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Bind address
    app_host: str = "0.0.0.0"
    app_port: int = 8080

    # Outgoing checks (e.g. the cluster's routing layer)
    base_url: str = "http://localhost:1234/"
    check_user: str = ""  # basic auth is only sent when set
    check_password: str = ""

    # Build info (normally injected by the image build)
    build_version: str = __version__
    build_repository: str = ""
    build_revision: str = ""
    build_builder: str = ""
    build_datetime: str = ""

    # Logging
    log_level: str = "INFO"


settings = CheckerSettings()
