from __future__ import annotations

import os
import subprocess

from packkit.config import RunSettings
from packkit.logging import err_console, get_logger

log = get_logger(__name__)


class CommandError(RuntimeError):
    def __init__(self, command: str, returncode: int | None, output: str) -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        status = returncode if returncode is not None else "not started"
        super().__init__(f"Command failed ({status}): {command}\n{output}".rstrip())


def _as_text(data: str | bytes | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data


def run_command(
    command: str,
    settings: RunSettings | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run ``command`` through the shell with stdout and stderr captured.

    On success the child's stderr is echoed to our stderr so warnings stay
    visible; stdout is returned on the CompletedProcess. Output is decoded
    as UTF-8 with undecodable bytes replaced.

    Raises CommandError on a non-zero exit, a timeout, or when the shell
    cannot be started. ``returncode`` is None for the last two, and
    ``output`` holds stdout followed by stderr.
    """
    settings = settings or RunSettings()
    env = None
    if settings.env is not None:
        env = {**os.environ, **settings.env}
    try:
        cp = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=settings.cwd,
            env=env,
            timeout=settings.timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        output = _as_text(exc.stdout) + _as_text(exc.stderr)
        raise CommandError(command, None, f"{output}\nTimed out after {settings.timeout}s".lstrip()) from exc
    except OSError as exc:
        raise CommandError(command, None, str(exc)) from exc
    if cp.returncode != 0:
        raise CommandError(command, cp.returncode, (cp.stdout or "") + (cp.stderr or ""))
    if cp.stderr:
        stream = err_console().file
        stream.write(cp.stderr)
        stream.flush()
    return cp


def exec_cmd_sync(command: str, settings: RunSettings | None = None) -> None:
    """Run ``command``; on any failure log it and end the process.

    The exit is a ``SystemExit``, which ends the whole process only when
    raised on the main thread. From a worker thread it ends that thread
    alone, so callers there must propagate it themselves.
    """
    settings = settings or RunSettings()
    try:
        run_command(command, settings)
    except CommandError as exc:
        log.error("Error executing command '%s': %s", command, exc.output)
        raise SystemExit(settings.exit_code) from exc
