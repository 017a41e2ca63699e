from typing import Protocol


class InsightServiceError(RuntimeError):
    def __init__(self, message: str, *, code: str = "ai_unavailable"):
        super().__init__(message)
        self.code = code


class AIClient(Protocol):
    async def generate(self, prompt: str) -> str: ...
