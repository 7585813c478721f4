"""Subprocess helpers for commands that run inside the generated project."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path


def resolve_command(command: Sequence[str], env: Mapping[str, str] | None = None) -> list[str]:
    """Resolve the executable through PATH so shims like ``npm.cmd`` are found on Windows.

    When ``env`` is given its PATH is searched instead of the current process PATH.
    """
    if not command:
        raise ValueError("command must not be empty")
    executable, *args = command
    search_path = env.get("PATH", os.defpath) if env is not None else None
    return [shutil.which(executable, path=search_path) or executable, *args]


def run_streaming(
    command: Sequence[str],
    *,
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``command`` with the console attached and return its exit code.

    Raises FileNotFoundError when the executable does not exist.
    """
    completed = subprocess.run(
        resolve_command(command, env),
        cwd=cwd,
        env=dict(env) if env is not None else None,
        check=False,
    )
    return completed.returncode


def run_quiet(
    command: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``command`` with all output discarded and return its exit code."""
    completed = subprocess.run(
        resolve_command(command, env),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        env=dict(env) if env is not None else None,
        check=False,
    )
    return completed.returncode
