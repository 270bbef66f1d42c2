"""API Schemas — pydantic models at the HTTP boundary.

Invariants:
    - Schemas only shape and type-check payloads; field RULES live in core/validate_user
"""
