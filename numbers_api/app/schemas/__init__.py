"""
Pydantic schema definitions for API payloads.

Schemas double as the in‑session representation of stored numbers;
the codec in ``services.number_codec`` serializes them to text.
"""
