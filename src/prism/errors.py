"""Configuration error types.

Every error in prism is a programmer or configuration error detected at
registration, merge or compile time. Resolution itself never raises.
"""


class ConfigurationError(Exception):
    """Raised when a theme, plugin list or component declaration is invalid."""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        super().__init__(f"Prism: {message}")


class RegistryError(ConfigurationError):
    """Raised when a style registry is missing or has not been compiled."""


class PluginDefinitionError(ConfigurationError):
    """Raised when a plugin entry cannot be registered."""
