"""Configuration management for tvremote.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides, including the plain ``PORT``
variable for the relay server.
"""

from tvremote.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
