"""Errors raised while wiring the application together.

These surface at startup or when a container is built, never while serving
a request.
"""


class UtilError(Exception):
    """Base error for configuration and wiring problems."""


class ConfigurationError(UtilError):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting}: {reason}")


class DependencyInjectionError(UtilError):
    """No provider matches the requested component or implementation."""
