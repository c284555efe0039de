"""Watchtower logging core: severity scales, log entries, log writers and routing."""

__version__ = "0.0.1"