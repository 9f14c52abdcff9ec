"""Tests for the static check registry."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from public_api_checker.checks.registry import (
    BUSINESS_SEVERITY,
    CHECK_DEFINITIONS,
    CheckDefinition,
    full_url,
    make_health_checks,
)


class TestCheckDefinitions:
    def test_known_endpoints(self) -> None:
        ids = [d.id for d in CHECK_DEFINITIONS]
        assert ids == ["lists", "content"]
        assert all(d.path.startswith("/__document-store-api/") for d in CHECK_DEFINITIONS)

    def test_definitions_are_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            CHECK_DEFINITIONS[0].path = "/elsewhere"  # type: ignore[misc]


class TestFullURL:
    @pytest.mark.parametrize("base", ["http://router:8080", "http://router:8080/"])
    def test_single_slash_join(self, base: str) -> None:
        assert full_url(base, "/__api/x") == "http://router:8080/__api/x"

    def test_path_without_leading_slash(self) -> None:
        assert full_url("http://router", "x/y") == "http://router/x/y"


class TestMakeHealthChecks:
    def test_one_check_per_definition_with_metadata(self) -> None:
        with httpx.Client() as client:
            checks = make_health_checks("http://router/", client)
        assert len(checks) == len(CHECK_DEFINITIONS)

        lists = checks[0]
        path = CHECK_DEFINITIONS[0].path
        assert lists.name == f"Check for url {path}"
        assert lists.severity == BUSINESS_SEVERITY == 1
        assert lists.business_impact == f"lists appears to be failing at url {path}"
        assert lists.panic_guide == "Inspect the lists services in this cluster to find the problem(s)"
        assert lists.technical_summary
        assert lists.url == f"http://router{path}"

    def test_checker_hits_bound_url_with_credentials(self) -> None:
        seen: list[httpx.Request] = []

        def handler(req: httpx.Request) -> httpx.Response:
            seen.append(req)
            return httpx.Response(200)

        defs = (CheckDefinition("things", "/things/1"),)
        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            checks = make_health_checks("http://router", client, user="u", password="p", definitions=defs)
            result = checks[0].checker()

        assert result.ok is True
        assert str(seen[0].url) == "http://router/things/1"
        assert seen[0].headers["Authorization"].startswith("Basic ")
