"""Open files with the operating system's default application."""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path
from typing import Callable

Launcher = Callable[[Path], None]


def launch_detached(path: Path) -> None:
    """Hand ``path`` to the desktop's default handler without waiting on it.

    Raises ``OSError`` when no handler could be started.
    """
    system = platform.system()
    if system == "Windows":
        os.startfile(str(path))  # type: ignore[attr-defined]
        return
    command = ["open", str(path)] if system == "Darwin" else ["xdg-open", str(path)]
    subprocess.Popen(
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
