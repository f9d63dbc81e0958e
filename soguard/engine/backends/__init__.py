"""Engine Backends — Concrete implementations of the engine interface."""

from soguard.engine.backends.hooks import CallableEngine
from soguard.engine.backends.local import LocalFallbackEngine
from soguard.engine.backends.stub import StubEngine

__all__ = [
    "CallableEngine",
    "LocalFallbackEngine",
    "StubEngine",
]
