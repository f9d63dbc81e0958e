"""
SOGUARD Examples

- native_engine_example.py: Engine delegation with local fallback

Usage:
    python examples/native_engine_example.py
"""
