"""Starting child processes and talking to them through pipes."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def run_command(program: str, args: Sequence[str]) -> str:
    """Run ``program`` with ``args`` and return what it wrote to stdout.

    Raises RuntimeError if the program cannot be started.
    """
    try:
        completed = subprocess.run(
            [program, *args], stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        raise RuntimeError(f"failed to execute {program!r}") from exc
    return _decode(completed.stdout)


def pipe_through_cat(input: str) -> str:
    """Feed ``input`` to ``cat`` over a pipe and return its output."""
    completed = subprocess.run(
        ["cat"], input=input.encode("utf-8"), stdout=subprocess.PIPE, check=False
    )
    return _decode(completed.stdout)


def get_exit_code(command: str) -> int:
    """Run ``sh -c command`` and return its exit code, or -1 if it was killed by a signal."""
    completed = subprocess.run(["sh", "-c", command], check=False)
    code = completed.returncode
    return code if code >= 0 else -1


def run_command_with_result(program: str, args: Sequence[str]) -> str:
    """Run ``program`` with ``args`` and return its stdout.

    Any OSError from starting the process (missing program, permission
    denied and the like) propagates to the caller.
    """
    completed = subprocess.run(
        [program, *args], stdout=subprocess.PIPE, check=False
    )
    return _decode(completed.stdout)


def pipe_through_grep(pattern: str, input: str) -> str:
    """Filter ``input`` through ``grep pattern`` and return the matching lines."""
    completed = subprocess.run(
        ["grep", pattern],
        input=input.encode("utf-8"),
        stdout=subprocess.PIPE,
        check=False,
    )
    return _decode(completed.stdout)