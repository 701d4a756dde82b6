"""Subprocess helpers that attach operation context to failures."""

import logging
import os
import subprocess
import time
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy the current environment with interactive git prompts disabled."""
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising RuntimeError with context if it fails.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of the operation,
            used in the error message (e.g., "create tag 'v1.0.0'")
        cwd: Working directory for the command
        env: Environment for the command (defaults to a copy of os.environ
            with GIT_TERMINAL_PROMPT=0)

    Returns:
        The completed process with captured text output

    Raises:
        RuntimeError: If the command exits non-zero or cannot be started
    """
    description = " ".join(cmd)
    started = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            env=env if env is not None else copied_env_for_git_subprocess(),
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = f"Failed to {operation_context}"
        if stderr:
            message = f"{message}: {stderr}"
        raise RuntimeError(message) from e
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed to {operation_context}: {cmd[0]} not found") from e
    finally:
        logger.debug("%s (%.3fs)", description, time.monotonic() - started)
    return result
