import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from ..exceptions import CommandFailedError, CommandTimeoutError

COMMAND_TIMEOUT_SECONDS = 30


class CommandRunner:
    """Runs external commands with a fixed timeout and captures their output."""

    def __init__(
        self,
        cwd: Optional[Union[str, Path]] = None,
        timeout: float = COMMAND_TIMEOUT_SECONDS,
    ):
        self.cwd = Path(cwd) if cwd is not None else None
        self.timeout = timeout

    def execute(self, args: Sequence[str]) -> str:
        """
        Run a command and return its standard output.

        Args:
            args: Command and its arguments, e.g. ["git", "show", "main:README.md"]

        Returns:
            Decoded stdout of the finished process

        Raises:
            CommandTimeoutError: The process was still running after the timeout
            CommandFailedError: The process exited non-zero or could not be started
        """
        command = shlex.join(args)

        try:
            process = subprocess.Popen(
                list(args),
                cwd=str(self.cwd) if self.cwd is not None else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                shell=False,
            )
        except OSError as e:
            raise CommandFailedError(command, str(e)) from e

        with process:
            try:
                stdout, stderr = process.communicate(timeout=self.timeout)
            except subprocess.TimeoutExpired as e:
                process.kill()
                # A grandchild may still hold the pipes open, so close our
                # ends instead of reading them to EOF
                process.stdout.close()
                process.stderr.close()
                process.wait()
                raise CommandTimeoutError(command, self.timeout) from e

        if process.returncode != 0:
            raise CommandFailedError(
                command, _decode(stderr).strip(), process.returncode
            )

        return _decode(stdout)


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")
