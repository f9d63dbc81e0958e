"""
Stub Backend — Engine that is never available.

Used when no native engine is installed, so every operation runs on the
local fallback.
"""

from soguard.config import StructuredOutputConfig
from soguard.engine.interfaces import (
    EngineResult,
    ResultCode,
    StructuredOutputEngine,
)
from soguard.validation import ValidationResult

UNAVAILABLE_MESSAGE = "No structured output engine configured"


class StubEngine(StructuredOutputEngine):
    """Stub engine that reports UNAVAILABLE for everything."""

    @property
    def name(self) -> str:
        return "stub"

    def get_system_prompt(self, schema: str) -> EngineResult[str]:
        return EngineResult.failure(ResultCode.UNAVAILABLE, UNAVAILABLE_MESSAGE)

    def extract_json(self, text: str) -> EngineResult[str]:
        return EngineResult.failure(ResultCode.UNAVAILABLE, UNAVAILABLE_MESSAGE)

    def prepare_prompt(
        self, original_prompt: str, config: StructuredOutputConfig
    ) -> EngineResult[str]:
        return EngineResult.failure(ResultCode.UNAVAILABLE, UNAVAILABLE_MESSAGE)

    def validate(
        self, text: str, config: StructuredOutputConfig
    ) -> EngineResult[ValidationResult]:
        return EngineResult.failure(ResultCode.UNAVAILABLE, UNAVAILABLE_MESSAGE)
