"""
External tools providing the raw text.

Both tools are run to completion with their whole output buffered; there is
no timeout. Output is decoded leniently since package descriptions are not
guaranteed to be valid UTF-8.
"""

import logging
import subprocess
from typing import List, Optional

from .config import get_config

logger = logging.getLogger(__name__)


class ToolError(Exception):
    """Raised when an external tool cannot be started."""

    def __init__(self, tool: str, reason: str):
        super().__init__(f"cannot run '{tool}': {reason}")
        self.tool = tool
        self.reason = reason


def run_tool(argv: List[str]) -> str:
    """Run a command and return its standard output as text.

    A non-zero exit status is not an error here: `apt-cache show` exits
    non-zero when some names have no candidate but still prints the rest.

    Args:
        argv: Command and arguments

    Returns:
        Decoded stdout (invalid UTF-8 replaced)

    Raises:
        ToolError: if the command cannot be launched
    """
    logger.debug(f"Running {' '.join(argv)}")
    try:
        proc = subprocess.run(argv, capture_output=True)
    except FileNotFoundError:
        raise ToolError(argv[0], "command not found") from None
    except OSError as e:
        raise ToolError(argv[0], e.strerror or str(e)) from e

    if proc.returncode != 0:
        logger.debug(f"{argv[0]} exited with code {proc.returncode}")

    return proc.stdout.decode('utf-8', errors='replace')


def query_index(config: Optional[dict] = None) -> str:
    """Return the package index paragraphs for the librust family."""
    config = config or get_config()
    return run_tool(config['index_command'])


def query_installed(config: Optional[dict] = None) -> str:
    """Return the installed-package listing."""
    config = config or get_config()
    return run_tool(config['installed_command'])
