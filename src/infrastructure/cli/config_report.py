"""Console rendering of a loaded device configuration.

Keeps formatting out of the entrypoint so main.py only parses arguments
and wires components.
"""
from __future__ import annotations

from src.domain.entities.device_config import DeviceConfiguration


def format_config_report(config: DeviceConfiguration) -> str:
    """Return a human-readable summary of endpoint, timing and channels."""
    endpoint = config.endpoint()
    timing = config.timing()
    outputs = config.outputs()

    lines = [
        f"Endpoint:      {endpoint.url}",
        f"Net timeout:   {timing.network_timeout_ms} ms",
        f"Poll interval: {timing.poll_interval_ms} ms",
    ]
    if timing.allows_overlap:
        lines.append("! Poll interval is shorter than the network timeout; requests may overlap.")

    lines.append(f"Outputs ({outputs.channel_count}):")
    width = len(str(outputs.channel_count))
    for index, label in outputs.channels():
        lines.append(f"  [{index:>{width}}] {label}")
    return "\n".join(lines)
