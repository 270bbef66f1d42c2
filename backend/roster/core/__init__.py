"""Core Layer — pure roster logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (given an explicit `today`)

Design Decisions:
    - Functional core separated from imperative shell: controller does the IO
"""
