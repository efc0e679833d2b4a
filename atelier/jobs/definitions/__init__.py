"""Job definitions - import all to register with global registry."""

from . import duplicates

__all__ = ["duplicates"]
