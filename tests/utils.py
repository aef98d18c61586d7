"""
Test helpers for faking aiohttp sessions.

``make_session`` returns a MagicMock whose ``request`` method hands out the
given outcomes in order, one per call. An outcome is either a response built
with ``make_response`` or an exception to raise from ``session.request``.
The last outcome repeats once the list is exhausted.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock


def make_response(
    status: int = 200,
    payload: Any = None,
    json_error: BaseException | None = None,
) -> MagicMock:
    """Build a fake aiohttp response."""
    response = MagicMock()
    response.status = status
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)
    return response


def make_session(*outcomes: Any) -> MagicMock:
    """Build a fake aiohttp session serving ``outcomes`` in order."""
    session = MagicMock()
    calls = {"count": 0}

    def request(method: str, url: str, **kwargs: Any) -> MagicMock:
        index = min(calls["count"], len(outcomes) - 1)
        calls["count"] += 1
        outcome = outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        ctx = MagicMock()
        ctx.__aenter__ = AsyncMock(return_value=outcome)
        ctx.__aexit__ = AsyncMock(return_value=None)
        return ctx

    session.request = MagicMock(side_effect=request)
    return session


def requested_urls(session: MagicMock) -> list[str]:
    """URLs passed to ``session.request`` in call order."""
    return [call.args[1] for call in session.request.call_args_list]
