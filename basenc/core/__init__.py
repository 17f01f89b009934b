"""Core data: schemes, alphabet tables and the error hierarchy.

WHY: Codecs, drivers and the CLI all need the same scheme identifiers,
the same alphabets and the same exception types. Keeping them in one
leaf package avoids import cycles.

HOW: schemes.py defines the Scheme enum, alphabets.py the immutable
symbol tables, errors.py the BasencError family.

RULES:
- Nothing in core imports from codecs or stream
- Alphabet tables are built once at import and never mutated
"""
