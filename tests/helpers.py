from __future__ import annotations

from unittest.mock import MagicMock


def fake_response(text="", status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


def url_router(routes):
    """Return a requests.get replacement serving responses or raising per URL."""

    def _get(url, *args, **kwargs):
        outcome = routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return _get
