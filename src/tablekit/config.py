"""Environment-driven settings for tablekit.

Values come from the process environment, optionally seeded from a ``.env``
file at the project root.  An installed package has no such file next to its
source tree, so the nearest ``.env`` above the working directory is used
instead.  Malformed values fall back to their defaults.
"""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()


def _env_file(root: Path) -> str:
    """Path of the .env to load: the one under *root*, else the nearest above the cwd ("" if none)."""
    candidate = root / ".env"
    if candidate.is_file():
        return str(candidate)
    return find_dotenv(usecwd=True)


ENV_FILE = _env_file(ROOT)
if ENV_FILE:
    load_dotenv(ENV_FILE)

_FORMATS = ("markdown", "json", "html")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_setting(name: str, default: int, minimum: int) -> int:
    """Read an integer environment variable, falling back to *default* when missing or invalid."""
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d (must be >= %d); using %d", name, value, minimum, default)
        return default
    return value


def _choice_setting(name: str, default: str, choices: tuple[str, ...], upper: bool = False) -> str:
    """Read an enumerated environment variable, falling back to *default* when not one of *choices*."""
    raw = os.getenv(name, "").strip()
    value = raw.upper() if upper else raw.lower()
    if not value:
        return default
    if value not in choices:
        logger.warning("Ignoring %s=%r (expected one of %s); using %s", name, raw, ", ".join(choices), default)
        return default
    return value


# Maximum number of snapshots kept by the undo/redo history
HISTORY_LIMIT = _int_setting("TABLEKIT_HISTORY_LIMIT", 50, minimum=1)

# Output format selected when an editing session starts
DEFAULT_OUTPUT_FORMAT = _choice_setting("TABLEKIT_OUTPUT_FORMAT", "markdown", _FORMATS)

# Indentation of generated JSON (0 = compact single line)
JSON_INDENT = _int_setting("TABLEKIT_JSON_INDENT", 2, minimum=0)

# Logging level used by the command-line front end
LOG_LEVEL = _choice_setting("TABLEKIT_LOG_LEVEL", "INFO", _LOG_LEVELS, upper=True)
