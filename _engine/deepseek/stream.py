from typing import Iterable, List, Optional, Sequence, Union

import requests
from pydantic import ValidationError
from rich.console import Console

from _data.deepseek import (
    CHAT_COMPLETIONS_URL,
    DATA_PREFIX,
    DONE_SENTINEL,
    LINE_MARKER,
    MODEL,
)
from _engine.console import console as default_console
from _engine.console import print_literal
from _engine.errors import (
    NonSuccessStatusError,
    RequestConstructionError,
    StreamReadError,
    TransportError,
)
from _types.model import ChatMessage, ChatRequest, StreamChunk


class LineAccumulator:
    """
    Rebuilds the generated message from streamed text fragments.

    Completed lines are echoed as soon as their newline arrives.
    ``full_message + current_line`` always equals every fragment fed so far,
    in arrival order.
    """

    def __init__(self, target: Console):
        self.target = target
        self._lines: List[str] = []
        self.current_line = ""

    @property
    def full_message(self) -> str:
        return "".join(self._lines)

    def feed(self, fragment: str) -> None:
        while True:
            head, newline, fragment = fragment.partition("\n")
            self.current_line += head
            if not newline:
                return
            self.current_line += newline
            self._flush_line()

    def _flush_line(self) -> None:
        line = self.current_line
        print_literal(f"{LINE_MARKER} {line[:-1]}", self.target)
        self._lines.append(line)
        self.current_line = ""

    def finish(self) -> str:
        """Flush any unterminated residual and return the whole message."""
        if self.current_line:
            # Trimmed for display only; the message keeps it verbatim
            print_literal(f"{LINE_MARKER} {self.current_line.strip()}", self.target)
            self._lines.append(self.current_line)
            self.current_line = ""
        return self.full_message


def extract_payload(line: str) -> Optional[str]:
    """Return the event payload of a ``data:`` line, or None if there is nothing to decode."""
    if not line.startswith(DATA_PREFIX):
        return None

    payload = line[len(DATA_PREFIX):].strip()
    if not payload or payload == DONE_SENTINEL:
        return None
    return payload


def decode_event(payload: str) -> Optional[StreamChunk]:
    """Decode one event payload. Malformed events yield None instead of raising."""
    try:
        return StreamChunk.model_validate_json(payload)
    except ValidationError:
        return None


def assemble_stream(lines: Iterable[Union[str, bytes]], target: Console) -> str:
    """
    Consume an event stream line by line and return the generated message.

    Args:
        lines (Iterable[Union[str, bytes]]): Raw lines of the response body.
        target (Console): Console that receives the echoed lines.

    Returns:
        str: Concatenation of every content fragment, in arrival order.

    Raises:
        StreamReadError: the underlying line source failed mid-stream.
    """
    accumulator = LineAccumulator(target)

    try:
        for raw_line in lines:
            line = raw_line.decode("utf-8", errors="replace") if isinstance(raw_line, bytes) else raw_line

            payload = extract_payload(line)
            if payload is None:
                continue

            chunk = decode_event(payload)
            if chunk is None:
                # Malformed event: skip it and keep streaming
                continue

            for choice in chunk.choices:
                if choice is not None and choice.delta.content is not None:
                    accumulator.feed(choice.delta.content)
    except requests.exceptions.RequestException as e:
        raise StreamReadError(f"failed to read response stream: {e}") from e

    return accumulator.finish()


def build_request_body(
    messages: Sequence[ChatMessage], temperature: Optional[float] = None
) -> bytes:
    """Serialize the streaming chat request. ``temperature`` is omitted when None."""
    if len(messages) != 2:
        raise RequestConstructionError(
            f"expected a system and a user message, got {len(messages)} message(s)"
        )

    try:
        envelope = ChatRequest(
            model=MODEL,
            messages=list(messages),
            stream=True,
            temperature=temperature,
        )
        return envelope.model_dump_json(exclude_none=True).encode("utf-8")
    except ValueError as e:
        raise RequestConstructionError(f"failed to build request body: {e}") from e


def _read_error_body(response: requests.Response) -> str:
    try:
        return response.text
    except requests.exceptions.RequestException:
        return ""


def stream_commit_message(
    api_key: str,
    messages: Sequence[ChatMessage],
    temperature: Optional[float] = None,
    session: Optional[requests.Session] = None,
    console: Optional[Console] = None,
) -> str:
    """
    Ask the model for a commit message and stream it to the console.

    Each completed line is printed as ``"| <line>"`` while the response is
    still arriving.

    Args:
        api_key (str): DeepSeek API key, sent as a bearer token.
        messages (Sequence[ChatMessage]): The system + user instruction pair.
        temperature (Optional[float]): Sampling temperature. The remote default
            applies when None.
        session (Optional[requests.Session]): HTTP session to send the request
            with. Defaults to a one-off ``requests.post``.
        console (Optional[Console]): Console for the echoed lines.

    Returns:
        str: The full generated message, including embedded newlines.

    Raises:
        RequestConstructionError: the request could not be built.
        TransportError: the request could not be delivered.
        NonSuccessStatusError: the endpoint answered with a non-200 status.
        StreamReadError: the response body could not be read to the end.
    """
    if not api_key:
        raise RequestConstructionError("an API key is required")

    target = console or default_console
    body = build_request_body(messages, temperature)
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }

    http = session if session is not None else requests
    try:
        response = http.post(CHAT_COMPLETIONS_URL, data=body, headers=headers, stream=True)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"request to {CHAT_COMPLETIONS_URL} failed: {e}") from e

    with response:
        if response.status_code != requests.codes.ok:
            raise NonSuccessStatusError(response.status_code, _read_error_body(response))
        return assemble_stream(response.iter_lines(), target)
