"""
Clipboard Module
Copies text to the system clipboard through the platform's clipboard program.
"""

import asyncio
import logging
import shutil
from typing import List, Optional

from koolkit import conf
from koolkit.core.exceptions import ClipboardError, ClipboardUnavailableError

logger = logging.getLogger(__name__)


def find_clipboard_program() -> Optional[List[str]]:
    """
    Find the first clipboard program from conf.clipboard_programs on PATH.

    Returns:
        list[str] | None: Command line with the resolved executable, or None
    """
    for command in conf.clipboard_programs:
        executable = shutil.which(command[0])
        if executable:
            return [executable, *command[1:]]
    return None


async def copy_to_clipboard(text: str) -> None:
    """
    Copy text to the clipboard.

    Args:
        text: Text to copy

    Raises:
        ClipboardUnavailableError: If no clipboard program is installed
        ClipboardError: If the clipboard program fails
    """
    command = find_clipboard_program()
    if command is None:
        raise ClipboardUnavailableError("The Clipboard API is not available.")

    process = await asyncio.create_subprocess_exec(
        *command,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.DEVNULL,
        stderr=asyncio.subprocess.PIPE
    )
    _, stderr = await process.communicate(text.encode('utf-8'))

    if process.returncode != 0:
        error_msg = stderr.decode('utf-8', errors='replace').strip()
        raise ClipboardError(f"{command[0]} exited with code {process.returncode}: {error_msg}")

    logger.debug(f"Copied {len(text)} characters with {command[0]}")
