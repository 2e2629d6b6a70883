from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class AIClient(Protocol):
    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        json_output: bool = False,
        temperature: float | None = None,
        max_output_tokens: int = 2000,
    ) -> str: ...

    async def read_image(
        self,
        *,
        instruction: str,
        image: bytes,
        mime_type: str = "image/jpeg",
    ) -> str: ...
