"""Terminal output helpers -- ANSI colors, entry lines, timestamped log lines.

Library modules log through the ``logging`` module; this module only
formats what the CLI prints or writes to its ``--log`` file.
"""

import sys
from datetime import datetime

from tiffentries.entries import Rational, TagEntry
from tiffentries.tiff.tags import ExifPart

_RESET = '\033[0m'
_DIM = '\033[2m'
_GREEN = '\033[32m'
_YELLOW = '\033[33m'
_MAGENTA = '\033[35m'
_CYAN = '\033[36m'
_BOLD_RED = '\033[1;31m'
_BOLD_CYAN = '\033[1;36m'
_BOLD_WHITE = '\033[1;37m'

_PART_COLORS = {
    ExifPart.IFD_TAGS: _CYAN,
    ExifPart.EXIF_TAGS: _YELLOW,
    ExifPart.GPS_TAGS: _MAGENTA,
    ExifPart.NONE: _DIM,
}

# Longest value preview printed per entry
_PREVIEW_LEN = 60


def _is_tty():
    """Check if stdout is a terminal (not piped)."""
    try:
        return sys.stdout.isatty()
    except AttributeError:
        return False


# Module-level flag -- set once at import time
_USE_COLOR = _is_tty()


def set_color_enabled(enabled: bool):
    """Override automatic color detection."""
    global _USE_COLOR
    _USE_COLOR = enabled


def _c(code: str, text: str) -> str:
    if _USE_COLOR:
        return f'{code}{text}{_RESET}'
    return text


# ---------------------------------------------------------------------------
# CLI formatting helpers
# ---------------------------------------------------------------------------

def cli_header(text: str) -> str:
    """Bold cyan header line."""
    return _c(_BOLD_CYAN, text)


def cli_success(text: str) -> str:
    """Green text for preserved entries and success."""
    return _c(_GREEN, text)


def cli_warning(text: str) -> str:
    """Yellow text for dropped tags."""
    return _c(_YELLOW, text)


def cli_error(text: str) -> str:
    """Red text for errors."""
    return _c(_BOLD_RED, text)


def cli_dim(text: str) -> str:
    """Dim text for secondary information."""
    return _c(_DIM, text)


def cli_bold(text: str) -> str:
    """Bold white text for emphasis."""
    return _c(_BOLD_WHITE, text)


def cli_part(part: ExifPart) -> str:
    """Classification group label, colored per group."""
    return _c(_PART_COLORS.get(part, _DIM), part.value)


def cli_separator() -> str:
    """A visual separator line."""
    return _c(_DIM, '─' * 60)


def format_value(value) -> str:
    """Short human-readable rendering of a tag value."""
    if isinstance(value, Rational):
        text = f'{value.numerator}/{value.denominator}'
    elif isinstance(value, (bytes, bytearray)):
        text = f'<{len(value)} bytes>'
    elif isinstance(value, (list, tuple)):
        text = '[' + ', '.join(format_value(v) for v in value) + ']'
    else:
        text = str(value)
    if len(text) > _PREVIEW_LEN:
        text = text[:_PREVIEW_LEN - 3] + '...'
    return text


def format_entry_line(entry: TagEntry) -> str:
    """One aligned line per entry: tag id, name, type, value."""
    return (f'{entry.tag:>6} {cli_bold(f"{entry.name:<26}")} '
            f'{cli_dim(f"{entry.data_type.name:<9}")} {format_value(entry.value)}')


# ---------------------------------------------------------------------------
# Log file formatting (always plain text with timestamps and levels)
# ---------------------------------------------------------------------------

def _timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log_info(msg: str) -> str:
    """Format a log file INFO line."""
    return f'[{_timestamp()}] [INFO]  {msg}'


def log_warn(msg: str) -> str:
    """Format a log file WARN line."""
    return f'[{_timestamp()}] [WARN]  {msg}'


def log_error(msg: str) -> str:
    """Format a log file ERROR line."""
    return f'[{_timestamp()}] [ERROR] {msg}'
