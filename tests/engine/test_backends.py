"""
Unit tests for engine backends.
"""

from soguard.engine.backends import CallableEngine, LocalFallbackEngine, StubEngine
from soguard.engine.interfaces import EngineResult, ResultCode
from soguard.prompts import get_system_prompt
from soguard.validation import ValidationResult


class TestEngineResult:
    """Tests for the typed engine outcome."""

    def test_ok_requires_value(self):
        """Verify SUCCESS without a value is not ok."""
        assert EngineResult.success("x").ok
        assert not EngineResult.success(None).ok

    def test_failure_not_ok(self):
        """Verify failure codes are not ok."""
        result = EngineResult.failure(ResultCode.INVALID_ARGUMENT, "bad schema")
        assert not result.ok
        assert result.message == "bad schema"


class TestStubEngine:
    """Tests for the always-unavailable engine."""

    def test_all_operations_unavailable(self, schema, config):
        """Verify every operation reports UNAVAILABLE."""
        engine = StubEngine()
        results = [
            engine.get_system_prompt(schema),
            engine.extract_json("{}"),
            engine.prepare_prompt("p", config),
            engine.validate("{}", config),
        ]
        assert all(r.code == ResultCode.UNAVAILABLE for r in results)
        assert not any(r.ok for r in results)

    def test_backend_name(self):
        assert StubEngine().name == "stub"


class TestLocalFallbackEngine:
    """Tests for the local engine."""

    def test_system_prompt(self, schema):
        """Verify the local template is served."""
        result = LocalFallbackEngine().get_system_prompt(schema)
        assert result.ok
        assert result.value == get_system_prompt(schema)

    def test_extract_not_found_is_success(self):
        """Verify 'no JSON' is a successful empty outcome."""
        result = LocalFallbackEngine().extract_json("plain")
        assert result.code == ResultCode.SUCCESS
        assert result.value is None

    def test_prepare_uses_config_flag(self, schema):
        """Verify include_schema_in_prompt comes from the config."""
        from soguard.config import StructuredOutputConfig

        config = StructuredOutputConfig(json_schema=schema, include_schema_in_prompt=False)
        result = LocalFallbackEngine().prepare_prompt("Describe Ada.", config)
        assert "Describe Ada." in result.value
        assert schema not in result.value

    def test_validate(self, config):
        result = LocalFallbackEngine().validate('{"a": 1}', config)
        assert result.value.is_valid

    def test_backend_name(self):
        assert LocalFallbackEngine().name == "local"


class TestCallableEngine:
    """Tests for the callable adapter."""

    def test_missing_hook_unavailable(self, schema):
        """Verify operations without a hook are UNAVAILABLE."""
        result = CallableEngine().get_system_prompt(schema)
        assert result.code == ResultCode.UNAVAILABLE

    def test_plain_value_wrapped(self, schema):
        """Verify plain return values become successes."""
        engine = CallableEngine(get_system_prompt=lambda s: f"PROMPT {len(s)}")
        result = engine.get_system_prompt(schema)
        assert result.ok
        assert result.value == f"PROMPT {len(schema)}"

    def test_engine_result_passed_through(self):
        """Verify hooks can report their own codes."""
        engine = CallableEngine(extract_json=lambda t: EngineResult.failure(ResultCode.INVALID_ARGUMENT))
        assert engine.extract_json("x").code == ResultCode.INVALID_ARGUMENT

    def test_exception_becomes_error(self):
        """Verify raising hooks become ERROR outcomes."""
        def broken(text):
            raise OSError("library not loaded")

        result = CallableEngine(extract_json=broken).extract_json("{}")
        assert result.code == ResultCode.ERROR
        assert result.message == "library not loaded"

    def test_validate_mapping_coerced(self, config):
        """Verify a mapping from the hook becomes a ValidationResult."""
        engine = CallableEngine(
            validate=lambda text, cfg: {"is_valid": False, "contains_json": True, "error": "bad"}
        )
        result = engine.validate('{"a": }', config)
        assert result.ok
        assert result.value == ValidationResult(is_valid=False, contains_json=True, error="bad")

    def test_validate_inconsistent_mapping_rejected(self, config):
        """Verify an impossible validation result is treated as a failure."""
        engine = CallableEngine(validate=lambda text, cfg: {"is_valid": True, "contains_json": False})
        result = engine.validate("{}", config)
        assert result.code == ResultCode.ERROR

    def test_custom_name(self):
        assert CallableEngine(name="native").name == "native"
