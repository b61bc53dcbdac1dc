from .enums import ConfigurationFault


class InvalidConfigurationError(ValueError):
    """Raised when a filter is constructed or configured with invalid
    parameters. The violated constraint is available as `fault`."""

    def __init__(self, fault: ConfigurationFault, message: str):
        super().__init__(message)
        self.fault = fault
