import logging
import shutil
import subprocess
from typing import Iterator

logger = logging.getLogger(__name__)


def have(tool: str) -> bool:
    """True iff `tool` resolves on PATH."""
    return shutil.which(tool) is not None


def output_lines(cmd: list[str]) -> Iterator[str]:
    """Yield the stdout lines of `cmd`, nothing if it fails or is missing.

    The command runs when iteration starts. stderr is discarded.
    """
    try:
        out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug("Query failed %s → %s", cmd, e)
        return
    yield from out.decode(errors="replace").splitlines()


def call(cmd: list[str]) -> bool:
    """Run `cmd` attached to the terminal; True on a zero exit status."""
    try:
        subprocess.check_call(cmd)
        return True
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug("Command failed %s → %s", cmd, e)
        return False
