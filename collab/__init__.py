"""Backend API for the brand and creator collaboration platform."""

__version__ = "0.1.0"
