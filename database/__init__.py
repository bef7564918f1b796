"""ORM models, session factory and query helpers."""
