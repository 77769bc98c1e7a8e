from typing import List, Union

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: str = Field(..., description="Message author role")
    content: str = Field(..., description="Message text")


class ChatCompletionRequest(BaseModel):
    """Body of an OpenAI-compatible chat completion request"""

    model: str
    messages: List[ChatMessage]


class ResponseMessage(BaseModel):
    content: str


class Choice(BaseModel):
    message: ResponseMessage


class ChatCompletionResponse(BaseModel):
    """The part of a chat completion response the relay reads.

    Every other field the upstream sends (ids, usage, finish reasons...)
    is ignored.
    """

    choices: List[Choice]


class Answer(BaseModel):
    """Text of the first choice returned by the upstream"""

    text: str


class Failure(BaseModel):
    """Description of whatever went wrong obtaining an answer"""

    message: str


CompletionResult = Union[Answer, Failure]
