"""Subprocess execution with rich error context.

Wraps subprocess.run() so that failures surface as gnb errors whose message
names the operation that failed, the command line, the exit code, and any
output the command produced.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from gnb.core.errors import EnvironmentSetupError, GatewayError


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for the gateway layer.

    Output is always captured and decoded as UTF-8 text.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
            (e.g. "list local branches")
        cwd: Working directory for command execution
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        GatewayError: If check is True and the command exits non-zero
            or its output is not valid UTF-8
        EnvironmentSetupError: If the command binary cannot be started
    """
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stdout:
            stdout_stripped = e.stdout.strip()
            if stdout_stripped:
                error_msg += f"\nstdout: {stdout_stripped}"

        if e.stderr:
            stderr_stripped = e.stderr.strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise GatewayError(error_msg) from e

    except UnicodeDecodeError as e:
        # git allows arbitrary bytes in ref names
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}: output was not valid UTF-8"
        error_msg += f"\nCommand: {cmd_str}"
        raise GatewayError(error_msg) from e

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise EnvironmentSetupError(error_msg) from e
