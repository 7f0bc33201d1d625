"""Kernel – the structured error type and its ports."""
