"""Services Layer — request orchestration between core logic and infrastructure.

Invariants:
    - Services depend on core Protocols, never on SQLAlchemy or httpx directly
    - The combination flow is sequential: one await at a time per request

Design Decisions:
    - Retry loop separate from the handler for locality (one concern per file)
"""
