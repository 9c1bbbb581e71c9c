"""External command execution with conditional sudo elevation."""

import os
import shutil
import subprocess
from collections.abc import Sequence
from typing import Protocol

from .errors import CommandExecutionError
from .logging_config import LOGGER
from .models import CommandResult


class CommandRunner(Protocol):
    """Runs one external command, optionally feeding bytes on stdin."""

    def run(self, argv: Sequence[str], stdin: bytes | None = None) -> CommandResult: ...


def is_privileged() -> bool:
    """Return True when running as root."""
    return os.geteuid() == 0


class SubprocessCommandRunner:
    """CommandRunner that starts real processes.

    Commands are wrapped in sudo unless the process already runs as root or
    sudo is not installed. Output is captured with stderr merged into stdout,
    except for commands fed on stdin: those echo their input (tee), so only
    stderr is kept.
    There is no timeout: a hung tool blocks the caller.
    """

    def __init__(self, use_sudo: bool = True, sudo_prompt: str = "Sudo password:") -> None:
        """Initialize runner.

        Args:
            use_sudo: Allow elevation through sudo when not root
            sudo_prompt: Prompt passed to sudo --prompt
        """
        self.use_sudo = use_sudo
        self.sudo_prompt = sudo_prompt
        self._warned_missing_sudo = False

    def build_argv(self, argv: Sequence[str]) -> list[str]:
        """Return argv with the sudo prefix applied when elevation is needed."""
        if not self.use_sudo or is_privileged():
            return list(argv)

        if shutil.which("sudo") is None:
            if not self._warned_missing_sudo:
                LOGGER.warning(
                    "sudo is not available and the process is not running as root; "
                    "trust store changes might fail"
                )
                self._warned_missing_sudo = True
            return list(argv)

        return ["sudo", f"--prompt={self.sudo_prompt}", "--", *argv]

    def run(self, argv: Sequence[str], stdin: bytes | None = None) -> CommandResult:
        """Run argv once and return its captured output.

        Raises:
            CommandExecutionError: If the command cannot start or exits non-zero
        """
        full_argv = self.build_argv(argv)
        LOGGER.info("Running: %s", " ".join(full_argv))

        if stdin is None:
            streams = {"stdout": subprocess.PIPE, "stderr": subprocess.STDOUT}
        else:
            streams = {"stdout": subprocess.DEVNULL, "stderr": subprocess.PIPE}

        try:
            completed = subprocess.run(full_argv, input=stdin, check=False, **streams)
        except OSError as e:
            raise CommandExecutionError(full_argv, reason=str(e)) from e

        captured = completed.stdout if stdin is None else completed.stderr
        output = (captured or b"").decode("utf-8", errors="replace")
        if completed.returncode != 0:
            raise CommandExecutionError(full_argv, output=output, returncode=completed.returncode)

        return CommandResult(argv=tuple(full_argv), output=output)


class DryRunCommandRunner:
    """CommandRunner that logs and records commands without running them."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], bytes | None]] = []

    def run(self, argv: Sequence[str], stdin: bytes | None = None) -> CommandResult:
        command = tuple(argv)
        self.calls.append((command, stdin))
        if stdin is None:
            LOGGER.info("Would run: %s", " ".join(command))
        else:
            LOGGER.info("Would run: %s (%d bytes on stdin)", " ".join(command), len(stdin))
        return CommandResult(argv=command)
