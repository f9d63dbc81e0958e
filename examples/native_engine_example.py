#!/usr/bin/env python3
"""
Native Engine Fallback Example

Demonstrates how the gateway delegates to an engine and falls back:
- An engine hook that crashes on extraction
- An engine that only knows how to build system prompts
- Local validation of messy model output

Usage:
    python examples/native_engine_example.py
"""

import json

from soguard.engine.backends import CallableEngine
from soguard.gateway import StructuredOutputGateway


def flaky_extract(text: str) -> str:
    raise RuntimeError("native extractor not loaded")


def main():
    schema = json.dumps(
        {
            "type": "object",
            "properties": {"city": {"type": "string"}, "population": {"type": "integer"}},
            "required": ["city", "population"],
        },
        indent=2,
    )

    model_output = """
    Sure! Here's the information you asked for:

    ```json
    {"city": "Lisbon", "population": 545796}
    ```

    Let me know if you need anything else.
    """

    print("=" * 70)
    print("               NATIVE ENGINE FALLBACK EXAMPLE")
    print("=" * 70)
    print()

    engine = CallableEngine(
        get_system_prompt=lambda s: f"Respond with JSON matching:\n{s}",
        extract_json=flaky_extract,
        name="native",
    )
    gateway = StructuredOutputGateway(engine)

    print("System prompt (served by the engine):")
    print(gateway.get_system_prompt(schema))
    print()

    print("Prepared prompt (engine has no hook, local template used):")
    print(gateway.prepare_prompt("Which city is the capital of Portugal?", schema,
                                 include_schema_in_prompt=False))

    print("Extracted JSON (engine crashed, local scanner used):")
    print(gateway.extract_json(model_output))
    print()

    result = gateway.validate(model_output, schema)
    print("Validation:")
    print(result.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
