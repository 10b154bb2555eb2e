"""Unit tests for remote document fetching."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from workout_manager.services.remote_source import RemoteFetchError, fetch_remote_text


def _response(status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.headers = {"Content-Type": "text/plain; charset=utf-8"}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


NO_WAIT = {"min_wait_seconds": 0, "max_wait_seconds": 0}


class TestFetchRemoteText:

    def test_returns_body_text(self):
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.return_value = _response(text="workouts 4x\n- row, 10")
            text = fetch_remote_text("https://example.com/w.txt", **NO_WAIT)

        assert text == "workouts 4x\n- row, 10"
        _, kwargs = mock_get.call_args
        assert kwargs["headers"] == {}

    def test_sends_basic_auth_header(self):
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.return_value = _response(text="ok")
            fetch_remote_text("https://example.com/w.txt", auth_token="dXNlcjpwYXNz", timeout=5, **NO_WAIT)

        args, kwargs = mock_get.call_args
        assert args[0] == "https://example.com/w.txt"
        assert kwargs["headers"] == {"Authorization": "Basic dXNlcjpwYXNz"}
        assert kwargs["timeout"] == 5

    def test_retries_transient_errors(self):
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.side_effect = [
                requests.ConnectionError("Connection reset by peer"),
                _response(status_code=503),
                _response(text="finally"),
            ]
            text = fetch_remote_text("https://example.com/w.txt", max_attempts=3, **NO_WAIT)

        assert text == "finally"
        assert mock_get.call_count == 3

    def test_gives_up_after_max_attempts(self):
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.side_effect = requests.Timeout("Read timed out")
            with pytest.raises(RemoteFetchError):
                fetch_remote_text("https://example.com/w.txt", max_attempts=2, **NO_WAIT)

        assert mock_get.call_count == 2

    def test_auth_failure_is_not_retried(self):
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.return_value = _response(status_code=401)
            with pytest.raises(RemoteFetchError, match="Could not fetch"):
                fetch_remote_text("https://example.com/w.txt", max_attempts=3, **NO_WAIT)

        assert mock_get.call_count == 1


def _raw_response(body: bytes, content_type: str) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response._content = body
    response.headers["Content-Type"] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    return response


class TestResponseEncoding:
    """Document text decoding."""

    def test_plain_text_without_charset_is_utf8(self):
        body = "workouts 3x\n- flyé × curl, 10".encode("utf-8")
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.return_value = _raw_response(body, "text/plain")
            text = fetch_remote_text("https://example.com/w.txt", **NO_WAIT)

        assert text == "workouts 3x\n- flyé × curl, 10"

    def test_declared_charset_is_respected(self):
        body = "- café curl, 10".encode("latin-1")
        with patch("workout_manager.services.remote_source.requests.get") as mock_get:
            mock_get.return_value = _raw_response(body, "text/plain; charset=ISO-8859-1")
            text = fetch_remote_text("https://example.com/w.txt", **NO_WAIT)

        assert text == "- café curl, 10"
