"""Device configuration aggregate - everything a poller needs."""
from dataclasses import dataclass

from src.domain.entities.device_endpoint import DeviceEndpoint
from src.domain.entities.timing_policy import TimingPolicy
from src.domain.entities.output_table import OutputTable


@dataclass(frozen=True)
class DeviceConfiguration:
    """Validated, read-only configuration of one relay controller.

    Built once at start-up and passed by reference to whichever component
    needs it. Nothing in it can change after construction.
    """
    device_endpoint: DeviceEndpoint
    timing_policy: TimingPolicy
    output_table: OutputTable

    def endpoint(self) -> DeviceEndpoint:
        return self.device_endpoint

    def timing(self) -> TimingPolicy:
        return self.timing_policy

    def outputs(self) -> OutputTable:
        return self.output_table

    def output_label(self, index: int) -> str:
        """Return the label of output channel ``index`` (1-based)."""
        return self.output_table.label(index)

    def to_dict(self) -> dict:
        """Convert back to a raw record with canonical field names."""
        return {
            **self.device_endpoint.to_dict(),
            **self.timing_policy.to_dict(),
            'outputNames': self.output_table.to_list()
        }
