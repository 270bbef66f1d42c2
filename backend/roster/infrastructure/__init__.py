"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core domain logic, only core errors/types
    - All external calls wrapped with timeout and error mapping
"""
