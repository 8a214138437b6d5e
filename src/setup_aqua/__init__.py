"""setup-aqua: securely bootstrap aqua inside CI jobs."""

__version__ = "0.1.0"
