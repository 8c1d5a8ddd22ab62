"""Fixture database reset via the project's external reset command."""

from __future__ import annotations

import logging
import shlex
import subprocess

import pytest

from config import get_config

logger = logging.getLogger(__name__)

# Outside pytest's own exit codes (0-5).
RESET_FAILURE_EXIT_CODE = 6


class FixtureResetError(RuntimeError):
    """The external reset command failed; later cases cannot assume a clean database."""

    def __init__(
        self,
        command: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        if returncode is None:
            reason = "could not be started"
        else:
            reason = f"exited with status {returncode}"
        super().__init__(
            f"Fixture database reset command `{command}` {reason}.\n"
            f"stdout:\n{stdout}\nstderr:\n{stderr}"
        )


def reset_database(command: str | None = None, cwd: str | None = None) -> None:
    """
    Return the fixture database to an empty, known state.

    Blocks until the command exits. There is no retry: a failed reset
    leaves the database in an unknown state.

    Args:
        command: Shell-style command line. Defaults to the configured
            ``RESET_DB_COMMAND``.
        cwd: Working directory for the command. Defaults to the configured
            ``RESET_DB_CWD``.

    Raises:
        FixtureResetError: If the command is missing or exits non-zero.
    """
    settings = get_config()
    command = command or settings.RESET_DB_COMMAND
    cwd = cwd or settings.RESET_DB_CWD

    logger.info("Resetting fixture database: %s", command)
    try:
        subprocess.run(
            shlex.split(command),
            check=True,
            text=True,
            capture_output=True,
            cwd=cwd,
        )
    except FileNotFoundError as exc:
        raise FixtureResetError(command, stderr=str(exc)) from exc
    except subprocess.CalledProcessError as exc:
        logger.error("Fixture database reset failed with status %s", exc.returncode)
        raise FixtureResetError(
            command,
            returncode=exc.returncode,
            stdout=exc.stdout or "",
            stderr=exc.stderr or "",
        ) from exc


def reset_database_or_exit(command: str | None = None, cwd: str | None = None) -> None:
    """
    Reset the fixture database, aborting the whole pytest run on failure.

    The abort message and exit code set a broken reset apart from ordinary
    assertion failures.
    """
    try:
        reset_database(command, cwd=cwd)
    except FixtureResetError as exc:
        pytest.exit(
            f"ABORTED: fixture database reset failed, remaining cases would not "
            f"start from a clean state.\n{exc}",
            returncode=RESET_FAILURE_EXIT_CODE,
        )
