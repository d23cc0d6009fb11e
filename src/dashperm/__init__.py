"""dashperm - dashboard and folder permission service."""

__version__ = "0.1.0"
