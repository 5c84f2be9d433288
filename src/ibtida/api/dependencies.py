"""Shared FastAPI dependencies: container access, token auth and day parsing."""

from __future__ import annotations

from datetime import date

from fastapi import Depends, Header, HTTPException, Request, status

from ibtida.containers import AppContainer  # noqa: TC001
from ibtida.domain.dates import parse_day_id


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def _get_api_token(request: Request) -> str:
    return get_container(request).settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def parse_day(day_id: str) -> date:
    """Parse a ``yyyy-MM-dd`` path segment or reject it with 422."""
    day = parse_day_id(day_id)
    if day is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Malformed day id {day_id!r}, expected yyyy-MM-dd",
        )
    return day
