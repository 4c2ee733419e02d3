"""Timing policy entity - network timeout and poll spacing."""
from dataclasses import dataclass

from src.domain.errors import ConfigError


def _check_positive_int(field: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(field, "must be an integer number of milliseconds")
    if value <= 0:
        raise ConfigError(field, f"must be positive, got {value}")


@dataclass(frozen=True)
class TimingPolicy:
    """Timing parameters for an external poller.

    A poll interval shorter than the network timeout is allowed, but lets
    a new request start while the previous one is still in flight. Use
    ``allows_overlap`` to detect that case.

    Attributes:
        network_timeout_ms: Upper bound on one request's round trip
        poll_interval_ms: Minimum spacing between successive polls
    """
    network_timeout_ms: int
    poll_interval_ms: int

    def __post_init__(self):
        """Validate timing after initialization."""
        _check_positive_int("networkTimeoutMs", self.network_timeout_ms)
        _check_positive_int("pollIntervalMs", self.poll_interval_ms)

    @property
    def network_timeout(self) -> float:
        """Network timeout in seconds."""
        return self.network_timeout_ms / 1000.0

    @property
    def poll_interval(self) -> float:
        """Poll interval in seconds."""
        return self.poll_interval_ms / 1000.0

    @property
    def allows_overlap(self) -> bool:
        """Check if a poll may be issued before the previous one times out."""
        return self.poll_interval_ms < self.network_timeout_ms

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'networkTimeoutMs': self.network_timeout_ms,
            'pollIntervalMs': self.poll_interval_ms
        }
