import logging
import shlex
import subprocess

logger = logging.getLogger(__name__)


class WpCliError(Exception):
    """A wp-cli command exited with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str):
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{shlex.join(args)!r} exited with {returncode}: {stderr.strip()}")


class WpCliUnavailable(Exception):
    """The wp-cli command could not be started."""


class WpCliProcess:
    def __init__(
        self,
        command: str = "wp",
        path: str | None = None,
        url: str | None = None,
        user: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize a new WpCliProcess."""
        self.process_args = shlex.split(command)
        self.path = path
        self.url = url
        self.user = user
        self.timeout = timeout

    def build_args(self, cmd: str, *args: str, url: str | None = None) -> list[str]:
        result = [*self.process_args, cmd, *args]
        if self.path:
            result.append(f"--path={self.path}")
        if url or self.url:
            result.append(f"--url={url or self.url}")
        if self.user:
            result.append(f"--user={self.user}")
        return result

    def run(self, cmd: str, *args: str, url: str | None = None) -> subprocess.CompletedProcess:
        """Run a command, returning the completed process whatever its exit status."""
        full_args = self.build_args(cmd, *args, url=url)
        logger.debug("+ %s", shlex.join(full_args))
        try:
            return subprocess.run(
                full_args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise WpCliUnavailable(f"Could not run {self.process_args[0]!r}: {e}") from e

    def run_cmd(self, cmd: str, *args: str, url: str | None = None) -> str:
        """Run a command and return the output."""
        completed = self.run(cmd, *args, url=url)
        if completed.returncode != 0:
            raise WpCliError(completed.args, completed.returncode, completed.stderr)
        return completed.stdout.strip()
