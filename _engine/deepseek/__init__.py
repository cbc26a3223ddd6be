from .prompt import build_prompt_messages
from .stream import LineAccumulator, assemble_stream, stream_commit_message

__all__ = [
    "build_prompt_messages",
    "LineAccumulator",
    "assemble_stream",
    "stream_commit_message",
]
