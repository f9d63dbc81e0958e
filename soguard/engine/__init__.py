"""Engine — Structured output engines consumed by the gateway."""

from soguard.engine.interfaces import EngineResult, ResultCode, StructuredOutputEngine

__all__ = [
    "EngineResult",
    "ResultCode",
    "StructuredOutputEngine",
]
