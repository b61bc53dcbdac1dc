"""
Classes
-------
Here are the classes of the iirtoolbox:

- `IIRFilter` (single-channel IIR filter for sample-by-sample processing)
- `RealtimeFilter` (abstract base of filters with a per-sample interface)
- `InvalidConfigurationError` (raised for invalid orders or coefficients)
- `ConfigurationFault` (constraint that was violated in a configuration)

"""

from .iir_filter import IIRFilter
from .realtime_filter import RealtimeFilter
from .exceptions import InvalidConfigurationError
from .enums import ConfigurationFault

__all__ = [
    "IIRFilter",
    "RealtimeFilter",
    "InvalidConfigurationError",
    "ConfigurationFault",
]
