"""Device endpoint entity - where poll requests are sent."""
import re
from dataclasses import dataclass

from src.domain.errors import ConfigError

MIN_PORT = 1
MAX_PORT = 65535

_DOTTED_QUAD = re.compile(r"^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$")


@dataclass(frozen=True)
class DeviceEndpoint:
    """Network address, port and request path of a relay controller.

    Attributes:
        address: Host identifier, either an IPv4 literal or a hostname
        port: TCP port the device listens on (1-65535)
        path: Request path on the device, always starting with '/'
    """
    address: str
    port: int
    path: str

    def __post_init__(self):
        """Validate endpoint after initialization."""
        if not isinstance(self.address, str) or not self.address:
            raise ConfigError("address", "must be a non-empty string")
        # bool is an int subclass; True is not a port
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ConfigError("port", "must be an integer")
        if not MIN_PORT <= self.port <= MAX_PORT:
            raise ConfigError("port", f"must be between {MIN_PORT} and {MAX_PORT}, got {self.port}")
        if not isinstance(self.path, str) or not self.path:
            raise ConfigError("path", "must be a non-empty string")
        if not self.path.startswith("/"):
            raise ConfigError("path", f"must start with '/', got {self.path!r}")

    @property
    def url(self) -> str:
        """Request URL an HTTP poller would target."""
        return f"http://{self.address}:{self.port}{self.path}"

    @property
    def is_ip_literal(self) -> bool:
        """Check whether the address is a dotted-quad IPv4 literal."""
        match = _DOTTED_QUAD.match(self.address)
        if not match:
            return False
        return all(int(octet) <= 255 for octet in match.groups())

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'address': self.address,
            'port': self.port,
            'path': self.path
        }
