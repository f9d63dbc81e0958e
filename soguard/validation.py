"""
Validator — Classify text as valid, malformed, or absent JSON.

The local path shares the extractor's guarantee: a found candidate already
parsed, so it is valid. Only an engine can report JSON that is present but
malformed (contains_json=True, is_valid=False).
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from soguard.extraction import extract_json

NO_JSON_FOUND = "No valid JSON found"


class ValidationResult(BaseModel):
    """Outcome of validating a piece of model output."""

    is_valid: bool = Field(..., description="Text contains a parseable JSON value")
    contains_json: bool = Field(..., description="JSON-shaped content was found")
    error: Optional[str] = Field(None, description="Why validation failed")
    extracted_json: Optional[str] = Field(None, description="The JSON text that was found")

    @model_validator(mode="after")
    def _valid_implies_present(self) -> "ValidationResult":
        if self.is_valid and not self.contains_json:
            raise ValueError("is_valid requires contains_json")
        return self


def validate(text: str, schema: Optional[str] = None) -> ValidationResult:
    """
    Validate that ``text`` is or contains JSON.

    ``schema`` is accepted to match the engine interface; no schema-level
    checks are made.
    """
    try:
        extracted = extract_json(text)
    except Exception as e:
        return ValidationResult(is_valid=False, contains_json=False, error=str(e))

    if extracted is None:
        return ValidationResult(is_valid=False, contains_json=False, error=NO_JSON_FOUND)

    return ValidationResult(is_valid=True, contains_json=True, extracted_json=extracted)
