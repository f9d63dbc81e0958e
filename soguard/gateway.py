"""
Gateway — Engine-first structured output with local fallback.

Every operation asks the primary engine once. If it reports a failure code,
returns no value, or raises, the local fallback answers instead. Engine
failures are logged and never reach the caller. No retries.
"""

from typing import Any, Callable, Optional

from pydantic import ValidationError

from soguard.config import StructuredOutputConfig
from soguard.core.logging import ChannelLogger, LogChannel, get_logger
from soguard.engine.backends.local import LocalFallbackEngine
from soguard.engine.backends.stub import StubEngine
from soguard.engine.interfaces import EngineResult, ResultCode, StructuredOutputEngine
from soguard.validation import ValidationResult


class StructuredOutputGateway:
    """
    Structured output operations with engine delegation.

    The gateway holds no per-call state and is safe to share between threads.
    """

    def __init__(
        self,
        engine: Optional[StructuredOutputEngine] = None,
        fallback: Optional[StructuredOutputEngine] = None,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.engine = engine or StubEngine()
        self.fallback = fallback or LocalFallbackEngine()
        self._log = logger or get_logger(LogChannel.GATEWAY)

    def _delegate(
        self,
        operation: str,
        *args: Any,
        coerce: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """
        Run ``operation`` on the engine, falling back on any failure.

        ``coerce`` normalizes a successful engine value; if it raises
        ValidationError the engine value is rejected.
        """
        log = self._log.bind(operation=operation)

        try:
            log = log.bind(engine=self.engine.name)
            result: EngineResult = getattr(self.engine, operation)(*args)
            ok = result.ok
            value = result.value
            if ok and coerce is not None:
                value = coerce(value)
        except ValidationError as e:
            log.warning(
                "engine_result_invalid",
                error=str(e),
            )
        except Exception as e:
            log.error(
                "engine_exception",
                error=str(e),
                error_type=type(e).__name__,
            )
        else:
            if ok:
                log.debug("engine_succeeded")
                return value
            if result.code == ResultCode.UNAVAILABLE:
                log.verbose("engine_unavailable", message=result.message)
            elif result.code != ResultCode.SUCCESS:
                log.warning(
                    "engine_failed",
                    code=int(result.code),
                    message=result.message,
                )
            else:
                log.verbose("engine_empty_output")

        log.verbose("fallback_used", fallback=self.fallback.name)
        return getattr(self.fallback, operation)(*args).value

    def get_system_prompt(self, schema: str) -> str:
        """System prompt for generating JSON matching ``schema``."""
        return self._delegate("get_system_prompt", schema)

    def extract_json(self, text: str) -> Optional[str]:
        """First parseable JSON value in ``text``, or None."""
        return self._delegate("extract_json", text)

    def prepare_prompt(
        self,
        original_prompt: str,
        schema: str,
        config: Optional[StructuredOutputConfig] = None,
        *,
        include_schema_in_prompt: Optional[bool] = None,
    ) -> str:
        """
        Wrap ``original_prompt`` with structured output instructions.

        An explicit ``config`` goes to the engine unchanged. Otherwise one is
        built from ``schema``; ``include_schema_in_prompt`` overrides either
        and defaults to True.
        """
        if not isinstance(config, StructuredOutputConfig):
            config = StructuredOutputConfig(json_schema=schema or "")
        if include_schema_in_prompt is not None:
            config = config.model_copy(
                update={"include_schema_in_prompt": bool(include_schema_in_prompt)}
            )
        return self._delegate("prepare_prompt", original_prompt, config)

    def validate(self, text: str, schema: str) -> ValidationResult:
        """Classify ``text`` as valid, malformed, or absent JSON."""
        config = StructuredOutputConfig(json_schema=schema or "")
        return self._delegate("validate", text, config, coerce=_as_validation_result)


def _as_validation_result(value: Any) -> ValidationResult:
    """Engines may hand back a plain mapping; hold it to the model invariants."""
    if isinstance(value, ValidationResult):
        return value
    return ValidationResult.model_validate(value)


# Default gateway instance
_gateway: Optional[StructuredOutputGateway] = None


def get_gateway() -> StructuredOutputGateway:
    """Get or create the default gateway (stub engine, local fallback)."""
    global _gateway
    if _gateway is None:
        _gateway = StructuredOutputGateway()
    return _gateway


def set_gateway(gateway: StructuredOutputGateway) -> None:
    """Replace the default gateway, e.g. once a native engine is available."""
    global _gateway
    _gateway = gateway


def reset_gateway() -> None:
    """Drop the default gateway. Useful for testing."""
    global _gateway
    _gateway = None
