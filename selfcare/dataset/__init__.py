"""
Dataset layer.

Responsibilities:
- Read the self-care CSV and normalise every cell to stripped text.
- Derive the column schema (question fields and their answer options).
- Keep the parsed dataset in process memory and refresh it after a TTL.
"""
