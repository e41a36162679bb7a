# hostping/probe_runner.py
"""
Ping runner for hostping.

Behavior:
 - Runs the system `ping` once with the profile's arguments followed by the
   host, and waits for it to finish (no timeout beyond ping's own count).
 - Both output streams are captured as bytes; nothing is interpreted here.
 - A failure to start the process is returned as data, not raised.

ProbeRaw fields:
  exit_code, stdout, stderr          (process ran)
  spawn_error_kind, spawn_error      (process could not be started)
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Optional

from .outcome_kinds import SPAWN_NOT_FOUND, SPAWN_OTHER, SPAWN_PERMISSION_DENIED

logger = logging.getLogger(__name__)

PING_CMD = "ping"
NO_EXIT_CODE = -1


@dataclass(frozen=True)
class ProbeRaw:
    exit_code: Optional[int] = None
    stdout: bytes = b""
    stderr: bytes = b""
    spawn_error_kind: Optional[str] = None
    spawn_error: str = ""

    @classmethod
    def completed(cls, exit_code, stdout=b"", stderr=b""):
        return cls(exit_code=exit_code, stdout=stdout or b"", stderr=stderr or b"")

    @classmethod
    def spawn_failed(cls, kind, message):
        return cls(spawn_error_kind=kind, spawn_error=message)

    @property
    def spawned(self):
        return self.spawn_error_kind is None


def ping_command():
    return os.environ.get("HOSTPING_PING_CMD") or PING_CMD


def _spawn_error_kind(exc):
    if isinstance(exc, FileNotFoundError):
        return SPAWN_NOT_FOUND
    if isinstance(exc, PermissionError):
        return SPAWN_PERMISSION_DENIED
    return SPAWN_OTHER


def run_probe(host, profile):
    """
    Run the OS ping against host using profile's arguments.
    Returns a ProbeRaw.
    """
    cmd = profile.command(ping_command(), host)
    logger.debug("Running %s", cmd)

    try:
        # run() drains both pipes via communicate() and reaps the child
        completed = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except (OSError, ValueError) as e:
        kind = _spawn_error_kind(e)
        logger.debug("Process error: kind=%s message=%r", kind, e)
        return ProbeRaw.spawn_failed(kind, str(e))

    code = completed.returncode
    if code < 0:
        # killed by a signal
        code = NO_EXIT_CODE

    logger.debug(
        "Process result: status=%s stdout=%r stderr=%r",
        completed.returncode,
        completed.stdout,
        completed.stderr,
    )
    return ProbeRaw.completed(code, completed.stdout, completed.stderr)
