"""
Subprocess execution utilities with consistent error handling.
"""

import subprocess
from pathlib import Path

from assetpipe.utils.logging import logger


def run_command(
    cmd: list[str],
    description: str | None = None,
    *,
    cwd: Path | None = None,
    input: str | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run a subprocess command with consistent logging and error handling.

    Args:
        cmd: Command and arguments to run
        description: Optional description for logging
        cwd: Working directory for the command
        input: Text fed to the command's stdin
        check: Whether a non-zero exit status raises (default True)

    Returns:
        CompletedProcess result

    Raises:
        subprocess.CalledProcessError: If check is True and the command fails
        FileNotFoundError: If the executable is not installed
    """
    if description:
        logger.info(description)

    try:
        result = subprocess.run(
            cmd,
            check=check,
            capture_output=True,
            text=True,
            cwd=cwd,
            input=input,
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"Command failed: {' '.join(cmd)}")
        if e.stderr:
            logger.error(e.stderr.rstrip())
        raise

    if result.stderr:
        logger.debug(result.stderr)
    return result


def run_filter(cmd: list[str], source: str, *, cwd: Path | None = None) -> str:
    """
    Pipe source text through a command and return what it prints.

    Args:
        cmd: Command that reads stdin and writes the result to stdout
        source: Text to transform
        cwd: Working directory for the command

    Returns:
        The command's stdout
    """
    return run_command(cmd, cwd=cwd, input=source).stdout
