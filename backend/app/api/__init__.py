"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses with a "message" on errors

Design Decisions:
    - Thin routes delegate to services
"""
