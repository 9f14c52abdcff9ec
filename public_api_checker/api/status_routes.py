"""Standard status routes — ping and build-info, in both path styles."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from public_api_checker.api.headers import NO_CACHE_HEADERS

status_router = APIRouter()


class BuildInfo(BaseModel):
    version: str
    repository: str
    revision: str
    builder: str
    dateTime: str


def ping() -> PlainTextResponse:
    return PlainTextResponse("pong", headers=NO_CACHE_HEADERS)


def build_info(request: Request) -> JSONResponse:
    s = request.app.state.settings
    info = BuildInfo(
        version=s.build_version,
        repository=s.build_repository,
        revision=s.build_revision,
        builder=s.build_builder,
        dateTime=s.build_datetime,
    )
    return JSONResponse(info.model_dump(), headers=NO_CACHE_HEADERS)


for _path in ("/__ping", "/ping"):
    status_router.add_api_route(_path, ping, methods=["GET"], response_class=PlainTextResponse)

for _path in ("/__build-info", "/build-info"):
    status_router.add_api_route(_path, build_info, methods=["GET"], response_model=BuildInfo)
