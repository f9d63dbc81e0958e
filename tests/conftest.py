import json

import pytest

from soguard.config import StructuredOutputConfig
from soguard.gateway import reset_gateway

PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer"},
    },
    "required": ["name", "age"],
}


@pytest.fixture
def schema() -> str:
    return json.dumps(PERSON_SCHEMA, indent=2)


@pytest.fixture
def config(schema) -> StructuredOutputConfig:
    return StructuredOutputConfig(json_schema=schema)


@pytest.fixture(autouse=True)
def clean_gateway():
    """Each test starts without a cached default gateway."""
    reset_gateway()
    yield
    reset_gateway()


class RecordingLogger:
    """Stand-in for ChannelLogger that keeps events in memory."""

    def __init__(self, events=None, context=None):
        self.events = events if events is not None else []
        self.context = context or {}

    def _record(self, level, event, **kwargs):
        self.events.append((level, event, {**self.context, **kwargs}))

    def info(self, event, **kwargs):
        self._record("info", event, **kwargs)

    def verbose(self, event, **kwargs):
        self._record("verbose", event, **kwargs)

    def debug(self, event, **kwargs):
        self._record("debug", event, **kwargs)

    def warning(self, event, **kwargs):
        self._record("warning", event, **kwargs)

    def error(self, event, **kwargs):
        self._record("error", event, **kwargs)

    def bind(self, **kwargs):
        return RecordingLogger(self.events, {**self.context, **kwargs})

    def names(self):
        return [event for _, event, _ in self.events]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
