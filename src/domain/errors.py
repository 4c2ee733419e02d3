"""Domain errors raised while building device configuration."""


class ConfigError(ValueError):
    """Configuration validation failure.

    Attributes:
        field: Canonical name of the offending raw-record field
        reason: Human-readable explanation of the violation
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def __repr__(self) -> str:
        return f"ConfigError(field={self.field!r}, reason={self.reason!r})"
