from typing import Protocol

from magical_miles.core.result import Result


class TextGenerationCapability(Protocol):
    """Anything that turns a prompt into text or a Failure, e.g. GeminiClient."""

    @property
    def ready(self) -> bool: ...

    async def generate_text(self, prompt: str) -> Result[str]: ...
