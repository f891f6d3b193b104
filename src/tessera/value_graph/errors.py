"""Errors raised by frozen value-graph containers."""


class FrozenValueError(TypeError):
    """Raised when code attempts to mutate a frozen container.

    Subclasses `TypeError` because that is how Python reports mutation of its
    own immutable built-ins (e.g. item assignment on a tuple).
    """

    def __init__(self, container_type: str, operation: str) -> None:
        super().__init__(f"'{container_type}' is frozen and does not support {operation}")
        self.container_type = container_type
        self.operation = operation
