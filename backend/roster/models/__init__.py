"""ORM Models — persisted state owned by this service (the session blob only).

Invariants:
    - User records are NOT modelled here: the external store owns them
"""
