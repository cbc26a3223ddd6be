"""Shared fixtures: a recording console and in-memory HTTP responses."""

import io
import json

import pytest
import requests
from rich.console import Console

from _data.deepseek import CHAT_COMPLETIONS_URL


def sse(*contents):
    """One ``data:`` line whose event carries one choice per content value.

    ``None`` leaves the ``content`` field out entirely.
    """
    choices = []
    for content in contents:
        delta = {} if content is None else {"content": content}
        choices.append({"delta": delta})
    return "data: " + json.dumps({"choices": choices})


class TrackingBody(io.BytesIO):
    """Response body that remembers whether the connection was released."""

    released = False

    def release_conn(self):
        self.released = True


class FailingBody(TrackingBody):
    """Body that breaks once its bytes are exhausted instead of ending cleanly."""

    def read(self, size=-1):
        data = super().read(size)
        if not data:
            raise requests.exceptions.ChunkedEncodingError("Connection broken")
        return data


def make_response(status_code, lines=(), body=None, body_class=TrackingBody):
    if body is None:
        body = "".join(line + "\n" for line in lines)
    response = requests.models.Response()
    response.status_code = status_code
    response.raw = body_class(body.encode("utf-8"))
    response.encoding = "utf-8"
    response.url = CHAT_COMPLETIONS_URL
    return response


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def make_console():
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def record_console():
    return make_console()


def printed_lines(console):
    return [line.rstrip() for line in console.file.getvalue().splitlines()]
