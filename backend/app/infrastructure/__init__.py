"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports it
    - All external calls bounded by timeouts and mapped to CraftError subclasses

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
