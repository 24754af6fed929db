"""Configuration file parsing for the touch command."""

from headertouch.config.model import Option, TouchConfig
from headertouch.config.parser import parse, parse_config_file

__all__ = ["Option", "TouchConfig", "parse", "parse_config_file"]
