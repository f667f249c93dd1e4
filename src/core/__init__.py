"""
Core primitives, value objects, and the generator context.

This package contains the raw random source abstraction, the error surface,
the structured domain values and ChineseFormatGenerator itself.
"""
