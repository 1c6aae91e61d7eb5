"""
Session logging for ATLAS scripts (Tier 1, detailed logging).

Wraps loguru with a file + console sink pair per scoring session and a
provenance header, so a log file alone says which resume, job and
vocabulary produced a score. Context-specific wrappers with [context]
prefixes live in contexts/{context}/logger.py.

The scoring core only emits DEBUG records and the package disables its own
logger on import. Nothing is written until a script calls setup_logger().
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(phase: str, root: Optional[Path] = None) -> Path:
    """
    Directory for one scoring session, e.g. outs/logs/analyze_20251114_123456.

    Args:
        phase: Session phase ("analyze", "compare", ...)
        root: Parent directory (defaults to LOGS_PATH)
    """
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return (root or LOGS_PATH) / f"{phase}_{stamp}"


def _add_sinks(log_file: Path, console_level: str) -> None:
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    # File keeps everything; console is what the user asked to see
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Start a logging session for a context.

    Replaces any existing loguru sinks, re-enables the atlas logger, and
    writes the provenance header.

    Args:
        context_name: Context identifier, used as the log file name ("target")
        log_dir: Directory for this session (defaults to LOGS_PATH)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level echoed to stdout ("WARNING" keeps stdout
            clean for JSON output)

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger(
            context_name="target",
            log_dir=session_log_dir("analyze"),
            extra_provenance={"Resume": "resume.txt"},
        )
    """
    log_dir = Path(log_dir or LOGS_PATH)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("atlas")
    _add_sinks(log_file, console_level)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log who ran what, with which vocabulary.

    Standard fields are the script, full command, working directory, Python
    and ATLAS versions, and the taxonomy file in use.

    Args:
        extra_context: Additional key-value pairs to log
    """
    from atlas import __version__
    from atlas.utils.taxonomies import TAXONOMIES_PATH

    fields = {
        "Script": sys.argv[0],
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "ATLAS": __version__,
        "Taxonomies": TAXONOMIES_PATH,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in fields.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
