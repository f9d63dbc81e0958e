"""
Local Fallback Backend — The pure-Python structured output pipeline.

Wraps the prompt templates, extractor and validator behind the engine
interface. Never fails: a missing JSON value is a successful "not found".
"""

from soguard import prompts
from soguard.config import StructuredOutputConfig
from soguard.engine.interfaces import EngineResult, StructuredOutputEngine
from soguard.extraction import extract_json
from soguard.validation import ValidationResult, validate


class LocalFallbackEngine(StructuredOutputEngine):
    """Engine backed by the local templates and scanner."""

    @property
    def name(self) -> str:
        return "local"

    def get_system_prompt(self, schema: str) -> EngineResult[str]:
        return EngineResult.success(prompts.get_system_prompt(schema))

    def extract_json(self, text: str) -> EngineResult[str]:
        return EngineResult.success(extract_json(text))

    def prepare_prompt(
        self, original_prompt: str, config: StructuredOutputConfig
    ) -> EngineResult[str]:
        return EngineResult.success(
            prompts.prepare_prompt(original_prompt, config.json_schema, config=config)
        )

    def validate(
        self, text: str, config: StructuredOutputConfig
    ) -> EngineResult[ValidationResult]:
        return EngineResult.success(validate(text, config.json_schema))
