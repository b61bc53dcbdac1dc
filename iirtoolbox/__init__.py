"""
# iirtoolbox

Single-channel IIR filtering with a sample-by-sample interface for realtime
processing.

"""

from .classes import (
    IIRFilter,
    RealtimeFilter,
    InvalidConfigurationError,
    ConfigurationFault,
)

__all__ = [
    "IIRFilter",
    "RealtimeFilter",
    "InvalidConfigurationError",
    "ConfigurationFault",
]

__version__ = "0.1dev"
