"""Output table entity - labels of the controller's output channels."""
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from src.domain.errors import ConfigError

RESERVED_INDEX = 0


@dataclass(frozen=True)
class OutputTable:
    """Immutable table of output channel labels.

    Channels are numbered from 1. Position 0 holds a placeholder that must
    be present in storage but is never a valid lookup target.

    Attributes:
        labels: All stored labels, placeholder at position 0 included
    """
    labels: Tuple[str, ...]

    def __post_init__(self):
        """Validate labels after initialization."""
        if isinstance(self.labels, (str, bytes)) or not isinstance(self.labels, Sequence):
            raise ConfigError("outputNames", "must be a sequence of strings")
        # Freeze whatever sequence the caller handed in
        object.__setattr__(self, 'labels', tuple(self.labels))

        if len(self.labels) < 2:
            raise ConfigError(
                "outputNames",
                f"must hold the reserved entry 0 and at least one channel, got {len(self.labels)} entries"
            )
        if not all(isinstance(label, str) for label in self.labels):
            raise ConfigError("outputNames", "every entry must be a string")

        seen = {}
        for index, label in enumerate(self.labels[1:], start=1):
            if not label:
                raise ConfigError("outputNames", f"label at index {index} is empty")
            if label in seen:
                raise ConfigError(
                    "outputNames",
                    f"label {label!r} at index {index} duplicates index {seen[label]}"
                )
            seen[label] = index

    def __len__(self) -> int:
        """Stored length, placeholder included."""
        return len(self.labels)

    @property
    def channel_count(self) -> int:
        """Number of addressable channels."""
        return len(self.labels) - 1

    def label(self, index: int) -> str:
        """Return the label of channel ``index``.

        Raises:
            IndexError: If index is the reserved 0, negative, or past the end
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexError(f"output index must be an integer, got {index!r}")
        if index == RESERVED_INDEX:
            raise IndexError("output index 0 is reserved")
        if index < 0 or index >= len(self.labels):
            raise IndexError(f"output index {index} out of range 1..{self.channel_count}")
        return self.labels[index]

    def index_of(self, label: str) -> int:
        """Return the channel index carrying ``label``.

        Raises:
            KeyError: If no addressable channel has that label
        """
        for index, candidate in self.channels():
            if candidate == label:
                return index
        raise KeyError(label)

    def channels(self) -> Iterator[Tuple[int, str]]:
        """Iterate ``(index, label)`` for every addressable channel."""
        for index in range(1, len(self.labels)):
            yield index, self.labels[index]

    def to_list(self) -> list:
        """Convert to list for serialization, placeholder included."""
        return list(self.labels)
