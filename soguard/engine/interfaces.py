"""
Engine Interfaces — Abstract structured output engine.

An engine is anything that can build prompts, extract JSON and validate
output, typically more robustly than the local fallback (for example a
native library doing schema-constrained decoding).

Engine outcomes are untrusted: the gateway treats any non-success code,
missing value, or raised exception as "use the fallback".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, Optional, TypeVar

from soguard.config import StructuredOutputConfig
from soguard.validation import ValidationResult

T = TypeVar("T")


class ResultCode(IntEnum):
    """Status codes reported by engines."""
    SUCCESS = 0
    ERROR = -1
    UNAVAILABLE = -2
    INVALID_ARGUMENT = -3


@dataclass
class EngineResult(Generic[T]):
    """Typed outcome of one engine operation."""

    code: ResultCode
    value: Optional[T] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the engine succeeded and produced a value."""
        return self.code == ResultCode.SUCCESS and self.value is not None

    @classmethod
    def success(cls, value: Optional[T]) -> "EngineResult[T]":
        return cls(code=ResultCode.SUCCESS, value=value)

    @classmethod
    def failure(cls, code: ResultCode = ResultCode.ERROR, message: str = None) -> "EngineResult[T]":
        return cls(code=code, message=message)


class StructuredOutputEngine(ABC):
    """
    Abstract interface for structured output engines.

    Implementations must:
    - Accept and return plain Python values
    - Report failure through EngineResult codes where possible
    - Never mutate shared state between calls
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for tracing."""
        ...

    @abstractmethod
    def get_system_prompt(self, schema: str) -> EngineResult[str]:
        """
        Build a system prompt for JSON generation.

        Args:
            schema: JSON Schema text

        Returns:
            Prompt text
        """
        ...

    @abstractmethod
    def extract_json(self, text: str) -> EngineResult[str]:
        """
        Extract JSON from generated text.

        Args:
            text: Model output

        Returns:
            JSON text, or no value if none was found
        """
        ...

    @abstractmethod
    def prepare_prompt(
        self, original_prompt: str, config: StructuredOutputConfig
    ) -> EngineResult[str]:
        """
        Wrap a user prompt with structured output instructions.

        Args:
            original_prompt: The caller's prompt
            config: Schema and prompt options

        Returns:
            Augmented prompt text
        """
        ...

    @abstractmethod
    def validate(
        self, text: str, config: StructuredOutputConfig
    ) -> EngineResult[ValidationResult]:
        """
        Validate generated text.

        Args:
            text: Model output
            config: Schema and options

        Returns:
            ValidationResult
        """
        ...
