"""Database Metadata — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - Single Base per process; models register on import of app.models
"""
