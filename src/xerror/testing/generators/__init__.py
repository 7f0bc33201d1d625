"""Testing generators – property-based strategies (requires hypothesis)."""
from xerror.testing.generators.strategies import (
    cause_strategy,
    structured_error_strategy,
    template_strategy,
)

__all__ = ["cause_strategy", "structured_error_strategy", "template_strategy"]
