from typing import Optional, Tuple

from _data.deepseek import SYSTEM_PROMPT, USER_PROMPT_LABEL
from _types.model import ChatMessage


def build_prompt_messages(
    changes: str, prompt: Optional[str] = None
) -> Tuple[ChatMessage, ChatMessage]:
    """
    Build the system + user instruction pair sent to the model.

    A non-empty ``prompt`` replaces the default system instructions.
    """
    system_prompt = prompt if prompt else SYSTEM_PROMPT

    return (
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=f"{USER_PROMPT_LABEL}{changes}"),
    )
