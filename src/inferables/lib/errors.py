"""Error types for inferables.

Transitions between variants cannot fail. The only failures are
precondition violations, raised at construction time.
"""


class ConstraintViolation(ValueError):
    """A value was built from input that breaks its invariants."""
