"""Raw configuration record schema - strict shape and type checks."""
from typing import Any, Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

# Canonical field names in the order they are validated and reported
CANONICAL_FIELDS = (
    'address',
    'port',
    'path',
    'networkTimeoutMs',
    'pollIntervalMs',
    'outputNames',
)

# Every accepted spelling, mapped to its canonical name. The short names
# are the keys of the demo page's config.js.
FIELD_ALIASES: Dict[str, str] = {
    'address': 'address',
    'ipaddr': 'address',
    'port': 'port',
    'path': 'path',
    'switchurl': 'path',
    'networkTimeoutMs': 'networkTimeoutMs',
    'network_timeout_ms': 'networkTimeoutMs',
    'net_timeout': 'networkTimeoutMs',
    'pollIntervalMs': 'pollIntervalMs',
    'poll_interval_ms': 'pollIntervalMs',
    'poll_interval': 'pollIntervalMs',
    'outputNames': 'outputNames',
    'output_names': 'outputNames',
}

# Key names written back out to the demo page's config.js
LEGACY_KEYS: Dict[str, str] = {
    'address': 'ipaddr',
    'port': 'port',
    'path': 'switchurl',
    'networkTimeoutMs': 'net_timeout',
    'pollIntervalMs': 'poll_interval',
    'outputNames': 'output_names',
}


def _aliases(canonical: str) -> AliasChoices:
    return AliasChoices(*[alias for alias, name in FIELD_ALIASES.items() if name == canonical])


class RawDeviceConfig(BaseModel):
    """Raw device configuration record with strict type validation.

    Values are never coerced: a port given as ``"2000"`` or a timeout given
    as ``0.5`` is rejected. Range and content rules live on the domain
    entities; this model only guarantees presence and types.
    """
    model_config = ConfigDict(frozen=True, extra='ignore')

    address: StrictStr = Field(validation_alias=_aliases('address'))
    port: StrictInt = Field(validation_alias=_aliases('port'))
    path: StrictStr = Field(validation_alias=_aliases('path'))
    network_timeout_ms: StrictInt = Field(validation_alias=_aliases('networkTimeoutMs'))
    poll_interval_ms: StrictInt = Field(validation_alias=_aliases('pollIntervalMs'))
    output_names: List[StrictStr] = Field(validation_alias=_aliases('outputNames'))

    @field_validator('output_names', mode='before')
    @classmethod
    def _require_ordered_sequence(cls, value: Any) -> Any:
        # Lax list validation would also take sets, which have no order
        if not isinstance(value, (list, tuple)):
            raise ValueError("must be an ordered sequence of strings")
        return list(value)
