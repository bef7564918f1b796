"""Shared schemas and the application error taxonomy."""
