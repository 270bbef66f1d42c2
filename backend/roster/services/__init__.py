"""Services Layer — imperative shell that sequences IO around the pure core.

Invariants:
    - Services call core functions; core never calls services
    - IO reaches the outside world only through core/repository_protocols contracts
"""
