from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatRequest(BaseModel):
    model: str
    messages: List[ChatMessage]
    stream: bool = True
    # JSON has no NaN/Infinity; reject instead of serializing them as null
    temperature: Optional[float] = Field(default=None, allow_inf_nan=False)


class DeltaMessage(BaseModel):
    content: Optional[str] = None


class StreamChoice(BaseModel):
    delta: DeltaMessage = Field(default_factory=DeltaMessage)

    @field_validator("delta", mode="before")
    @classmethod
    def null_delta_is_empty(cls, value):
        return {} if value is None else value


class StreamChunk(BaseModel):
    # A null entry carries no content but must not discard its siblings
    choices: List[Optional[StreamChoice]] = Field(default_factory=list)

    @field_validator("choices", mode="before")
    @classmethod
    def null_choices_is_empty(cls, value):
        return [] if value is None else value


class DeepSeekConfig(BaseModel):
    api_key: str = ""
    temperature: Optional[float] = Field(default=None, allow_inf_nan=False)
    prompt: Optional[str] = None


class Config(BaseModel):
    deepseek: DeepSeekConfig = Field(default_factory=DeepSeekConfig)
