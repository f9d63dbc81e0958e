"""
SOGUARD — Structured Output Guard

Keeps language model output inside a target JSON schema: schema-aware
prompts going in, JSON extraction and validation coming out.

A native engine is used when one is available. When it is missing, errors,
or returns nothing, the local pipeline answers instead.
"""

__version__ = "0.1.0"

from soguard.config import StructuredOutputConfig, load_config
from soguard.extraction import extract_json, extract_value
from soguard.gateway import StructuredOutputGateway, get_gateway, reset_gateway, set_gateway
from soguard.prompts import get_system_prompt, prepare_prompt
from soguard.validation import ValidationResult, validate

__all__ = [
    "StructuredOutputConfig",
    "StructuredOutputGateway",
    "ValidationResult",
    "extract_json",
    "extract_value",
    "get_gateway",
    "get_system_prompt",
    "load_config",
    "prepare_prompt",
    "reset_gateway",
    "set_gateway",
    "validate",
]
