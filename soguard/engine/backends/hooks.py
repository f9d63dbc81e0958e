"""
Hooks Backend — Adapt plain functions to the engine interface.

Lets callers plug in whatever reaches their native engine (a library
binding, an HTTP client, a model server) without subclassing. Each hook may
return a plain value or an EngineResult; raised exceptions and missing
values become failure outcomes.
"""

from typing import Any, Callable, Optional

from pydantic import ValidationError

from soguard.config import StructuredOutputConfig
from soguard.core.logging import LogChannel, get_logger
from soguard.engine.interfaces import (
    EngineResult,
    ResultCode,
    StructuredOutputEngine,
)
from soguard.validation import ValidationResult


class CallableEngine(StructuredOutputEngine):
    """
    Engine built from optional per-operation callables.

    Operations without a callable report UNAVAILABLE.
    """

    def __init__(
        self,
        get_system_prompt: Optional[Callable[[str], Any]] = None,
        extract_json: Optional[Callable[[str], Any]] = None,
        prepare_prompt: Optional[Callable[[str, StructuredOutputConfig], Any]] = None,
        validate: Optional[Callable[[str, StructuredOutputConfig], Any]] = None,
        name: str = "callable",
    ):
        self._hooks = {
            "get_system_prompt": get_system_prompt,
            "extract_json": extract_json,
            "prepare_prompt": prepare_prompt,
            "validate": validate,
        }
        self._name = name
        self._log = get_logger(LogChannel.ENGINE)

    @property
    def name(self) -> str:
        return self._name

    def _call(self, operation: str, *args) -> EngineResult:
        hook = self._hooks[operation]
        if hook is None:
            return EngineResult.failure(
                ResultCode.UNAVAILABLE, f"{operation} not provided by {self._name}"
            )

        try:
            outcome = hook(*args)
        except Exception as e:
            self._log.warning(
                "engine_hook_failed",
                engine=self._name,
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            return EngineResult.failure(ResultCode.ERROR, str(e))

        if isinstance(outcome, EngineResult):
            return outcome
        return EngineResult.success(outcome)

    def get_system_prompt(self, schema: str) -> EngineResult[str]:
        return self._call("get_system_prompt", schema)

    def extract_json(self, text: str) -> EngineResult[str]:
        return self._call("extract_json", text)

    def prepare_prompt(
        self, original_prompt: str, config: StructuredOutputConfig
    ) -> EngineResult[str]:
        return self._call("prepare_prompt", original_prompt, config)

    def validate(
        self, text: str, config: StructuredOutputConfig
    ) -> EngineResult[ValidationResult]:
        result = self._call("validate", text, config)
        if not result.ok or isinstance(result.value, ValidationResult):
            return result

        # Hooks may hand back a plain mapping
        try:
            return EngineResult.success(ValidationResult.model_validate(result.value))
        except ValidationError as e:
            self._log.warning(
                "engine_validation_malformed",
                engine=self._name,
                error=str(e),
            )
            return EngineResult.failure(ResultCode.ERROR, "Engine returned malformed validation result")
