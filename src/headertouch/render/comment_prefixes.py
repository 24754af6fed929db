"""Line-comment tokens by file extension."""

from types import MappingProxyType

DEFAULT_COMMENT_PREFIX = "// "

COMMENT_PREFIXES = MappingProxyType({
    ".c": "// ",
    ".cpp": "// ",
    ".h": "// ",
    ".hpp": "// ",
    ".py": "# ",
    ".java": "// ",
    ".js": "// ",
    ".ts": "// ",
    ".rb": "# ",
    ".go": "// ",
    ".rs": "// ",
    ".cs": "// ",
    ".php": "// ",
    ".swift": "// ",
    ".kt": "// ",
    ".scala": "// ",
    ".sh": "# ",
    ".pl": "# ",
    ".r": "# ",
    ".lua": "-- ",
    ".sql": "-- ",
    ".asm": "; ",
    ".s": "; ",
    ".vb": "' ",
    ".vba": "' ",
    ".m": "// ",  # Objective-C, also MATLAB
    ".mm": "// ",
    ".erl": "% ",
    ".ex": "# ",
    ".exs": "# ",
    ".hs": "-- ",
    ".lisp": ";; ",
    ".clj": ";; ",
    ".scm": ";; ",
    ".f90": "!",
    ".f95": "!",
    ".f03": "!",
    ".ada": "-- ",
    ".pas": "// ",
    ".dart": "// ",
    ".coffee": "# ",
    ".groovy": "// ",
    ".nim": "# ",
    ".rkt": "; ",
    ".vhd": "-- ",
    ".vhdl": "-- ",
    ".pro": "% ",
    ".sml": "(* ",
    ".ml": "(* ",
    ".bat": "REM ",
    ".ps1": "# ",
})


def comment_prefix_for(extension: str) -> str:
    return COMMENT_PREFIXES.get(extension, DEFAULT_COMMENT_PREFIX)
