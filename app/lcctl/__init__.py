"""lcctl - settings and data folder maintenance for a sandboxed app launcher."""

__version__ = "0.1.0"
