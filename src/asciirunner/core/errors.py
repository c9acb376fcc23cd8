"""Startup errors.

A collision is not an error; it ends the run through ``RunResult``.
"""


class ConfigurationError(Exception):
    """Viewport or gameplay parameters cannot produce a playable session."""


class ResourceExhaustedError(Exception):
    """The frame buffer could not be allocated."""
