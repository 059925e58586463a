"""Bounded, cancellable subprocess calls for external tools."""

from __future__ import annotations

import logging
import subprocess
import threading
import time
from pathlib import Path

from godep.errors import CommandCancelled, ToolError
from godep.models import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

_POLL_INTERVAL = 0.05


def run_tool(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
    cancel: threading.Event | None = None,
) -> bytes:
    """Run ``cmd`` and return its standard output.

    The call is bounded by ``timeout`` seconds (``None`` waits forever) and
    aborts as soon as ``cancel`` is set. Whatever interrupts the wait, the
    child process is killed and reaped before the exception propagates. A
    non-zero exit status raises :class:`ToolError` carrying the captured
    standard error.
    """
    display = " ".join(cmd)
    logger.debug("running `%s` in %s", display, cwd or ".")

    if cancel is not None and cancel.is_set():
        raise CommandCancelled(f"`{display}` cancelled before start", command=cmd)

    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise ToolError(f"failed to run `{display}`: {e}", command=cmd) from e

    deadline = time.monotonic() + timeout if timeout is not None else None
    try:
        while True:
            try:
                stdout, stderr = proc.communicate(timeout=_POLL_INTERVAL)
                break
            except subprocess.TimeoutExpired:
                if cancel is not None and cancel.is_set():
                    raise CommandCancelled(f"`{display}` cancelled", command=cmd)
                if deadline is not None and time.monotonic() >= deadline:
                    raise ToolError(
                        f"`{display}` timed out after {timeout:g}s", command=cmd,
                    )
    except BaseException:
        # Cancellation, timeout or KeyboardInterrupt: never leave the child running.
        _kill(proc)
        raise

    err_text = stderr.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        raise ToolError(
            f"failed to run `{display}`: {err_text.strip()}: exit status {proc.returncode}",
            command=cmd,
            returncode=proc.returncode,
            stderr=err_text,
        )
    logger.debug("`%s` produced %d bytes", display, len(stdout))
    return stdout


def _kill(proc: subprocess.Popen) -> None:
    proc.kill()
    proc.communicate()
