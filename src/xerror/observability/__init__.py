"""Observability – logging for reported errors."""
