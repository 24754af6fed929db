"""Turn a parsed TouchConfig into the text written to a new file."""

from headertouch.render.comment_prefixes import comment_prefix_for
from headertouch.render.placeholders import resolve
from headertouch.render.renderer import merge_options, render

__all__ = ["comment_prefix_for", "merge_options", "render", "resolve"]
