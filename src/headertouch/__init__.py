"""headertouch - create files pre-populated with a configurable header."""

__version__ = "1.0.0"
