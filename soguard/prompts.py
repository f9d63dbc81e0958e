"""
Prompt Augmenter — Schema-aware prompt templates.

Pure string templating. The schema is interpolated verbatim and never parsed.
"""

from typing import Optional

from soguard.config import StructuredOutputConfig

# System prompt for structured output generation
SYSTEM_PROMPT_TEMPLATE = """You are a JSON generator that outputs ONLY valid JSON without any additional text.

CRITICAL RULES:
1. Your entire response must be valid JSON that can be parsed
2. Start with {{ and end with }}
3. No text before the opening {{
4. No text after the closing }}
5. Follow the provided schema exactly
6. Include all required fields
7. Use proper JSON syntax (quotes, commas, etc.)

Expected JSON Schema:
{schema}

Remember: Output ONLY the JSON object, nothing else.
"""

# User prompt wrapper; {schema_part} is empty when the schema is left out
PREPARED_PROMPT_TEMPLATE = """System: You are a JSON generator. You must output only valid JSON.

{original_prompt}

CRITICAL INSTRUCTION: You MUST respond with ONLY a valid JSON object. No other text is allowed.

{schema_part}

RULES:
1. Start your response with {{ and end with }}
2. Include NO text before the opening {{
3. Include NO text after the closing }}
4. Follow the schema exactly
5. All required fields must be present

Remember: Output ONLY the JSON object, nothing else.
"""

SCHEMA_BLOCK_TEMPLATE = "\n\nJSON Schema:\n{schema}\n"


def get_system_prompt(schema: str) -> str:
    """Build the system prompt instructing the model to emit JSON matching ``schema``."""
    return SYSTEM_PROMPT_TEMPLATE.format(schema=schema)


def prepare_prompt(
    original_prompt: str,
    schema: str,
    config: Optional[StructuredOutputConfig] = None,
    include_schema_in_prompt: Optional[bool] = None,
) -> str:
    """
    Wrap a user prompt with structured output instructions.

    Args:
        original_prompt: The caller's prompt, kept verbatim
        schema: JSON Schema text
        config: Optional config supplying include_schema_in_prompt
        include_schema_in_prompt: Explicit override of the config value

    Returns:
        The augmented prompt
    """
    if include_schema_in_prompt is None:
        include_schema_in_prompt = config.include_schema_in_prompt if config else True

    schema_part = SCHEMA_BLOCK_TEMPLATE.format(schema=schema) if include_schema_in_prompt else ""
    return PREPARED_PROMPT_TEMPLATE.format(
        original_prompt=original_prompt,
        schema_part=schema_part,
    )
