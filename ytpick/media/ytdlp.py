"""
Runs yt-dlp: once to write the info JSON sidecar, once to download the selection.
"""

import logging
import shlex
import subprocess
import tempfile
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from ytpick.exceptions import DownloadError, ProbeError

log = logging.getLogger(__name__)

SIDECAR_SUFFIX = ".info.json"


@contextmanager
def workspace() -> Iterator[Path]:
    """
    A temporary working directory for the sidecar. It is removed on every exit
    path, including a cancelled selection or Ctrl+C.
    """
    with tempfile.TemporaryDirectory(prefix="ytpick-") as tmp:
        log.debug(f"Created working directory '{tmp}'")
        try:
            yield Path(tmp)
        finally:
            log.debug(f"Removing working directory '{tmp}'")


def _run(args: Sequence[str]) -> int:
    log.info(f"[dim]→ executing: {shlex.join(args)}[/dim]")
    try:
        completed = subprocess.run(args, check=False)
    except FileNotFoundError as e:
        raise ProbeError(f"Could not run '{args[0]}': {e}") from e
    return completed.returncode


def find_sidecar(workdir: Path) -> Path:
    """
    Returns the info JSON written into ``workdir``: the ``*.info.json`` file if
    there is one, else the first regular file.

    Raises:
        ProbeError: If the directory holds no file.
    """
    files = sorted(p for p in workdir.iterdir() if p.is_file())
    for path in files:
        if path.name.endswith(SIDECAR_SUFFIX):
            return path
    if files:
        return files[0]
    raise ProbeError(f"yt-dlp did not write an info JSON file into '{workdir}'.")


def probe(args: Sequence[str], workdir: Path) -> Path:
    """
    Runs the probe invocation and returns the sidecar it wrote.

    Raises:
        ProbeError: If yt-dlp fails or writes nothing.
    """
    returncode = _run(args)
    if returncode != 0:
        raise ProbeError(f"yt-dlp exited with status {returncode}: {shlex.join(args)}")
    return find_sidecar(workdir)


def download(args: Sequence[str]) -> None:
    """
    Runs the download invocation.

    Raises:
        DownloadError: If yt-dlp exits with a non-zero status.
    """
    try:
        returncode = _run(args)
    except ProbeError as e:
        raise DownloadError(str(e)) from e
    if returncode != 0:
        raise DownloadError(
            f"yt-dlp exited with status {returncode}: {shlex.join(args)}"
        )
