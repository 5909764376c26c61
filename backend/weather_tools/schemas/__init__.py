"""Pydantic Schemas — inbound tool inputs and typed upstream responses.

Invariants:
    - Inbound schemas fail closed: extra fields and wrong types are rejected
    - Upstream schemas tolerate missing optional sub-fields with explicit defaults

Design Decisions:
    - Inbound and upstream models in separate modules: one is our contract,
      the other is OpenWeather's
"""
