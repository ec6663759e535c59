"""Build execution and build-to-source correlation."""

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..constants import BUILD_KEYWORD, BUILD_TIMEOUT
from ..errors import BuildError
from ..models import BuildCompleted

logger = logging.getLogger(__name__)

DEFAULT_COMPILERS = ("g++", "clang++", "c++")
DEFAULT_EXTENSIONS = (".cpp",)

# Flags whose next argument is never a source file
_FLAGS_WITH_VALUE = {"-o", "-I", "-L", "-l", "-D", "-include", "-isystem", "-MF", "-x"}


def extract_source_file(
    command: str,
    workspace_root: Path | None,
    compilers: Sequence[str] = DEFAULT_COMPILERS,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> str | None:
    """Find the source file compiled by a command line.

    Looks for the first compiler invocation (``g++ main.cpp -o main``) and
    returns its first source argument, resolved against the workspace root.
    Multi-file builds are attributed to the first source file only.

    Args:
        command: Shell command line of the build
        workspace_root: Root relative paths are resolved against
        compilers: Executable names that count as a compiler
        extensions: Source file suffixes

    Returns:
        Absolute path of the source file, or None if none can be found
    """
    try:
        tokens = shlex.split(command)
    except ValueError:
        logger.debug(f"Cannot tokenize build command: {command!r}")
        return None

    suffixes = tuple(ext.lower() for ext in extensions)
    in_compiler = False
    skip_next = False
    for token in tokens:
        if not in_compiler:
            in_compiler = Path(token).name in compilers
            continue
        if skip_next:
            skip_next = False
            continue
        if token in ("&&", "||", ";", "|"):
            in_compiler = False
            continue
        if token in _FLAGS_WITH_VALUE:
            skip_next = True
            continue
        if token.startswith("-") or not token.lower().endswith(suffixes):
            continue

        source = Path(token)
        if source.is_absolute():
            return str(source.resolve())
        if workspace_root is None:
            return None
        return str((workspace_root / source).resolve())
    return None


def is_build_success(event: BuildCompleted, keyword: str = BUILD_KEYWORD) -> bool:
    """True if event is a successful process whose label names a build."""
    return event.succeeded and keyword.lower() in event.label.lower()


def run_build(
    command: Sequence[str],
    cwd: Path,
    timeout: int | None = None,
    label: str = BUILD_KEYWORD,
) -> BuildCompleted:
    """Run a build command and report how it ended.

    Output is passed straight through to the terminal.

    Args:
        command: Program and arguments
        cwd: Working directory
        timeout: Timeout in seconds (default: BUILD_TIMEOUT)
        label: Task label attached to the resulting event

    Returns:
        BuildCompleted carrying the exit code and the command line

    Raises:
        BuildError: If the command is empty, not found, or times out
    """
    if not command:
        raise BuildError("No build command given")
    timeout = timeout or BUILD_TIMEOUT
    command_line = shlex.join(command)

    logger.debug(f"Running build: {command_line} in {cwd}")
    try:
        result = subprocess.run(list(command), cwd=cwd, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise BuildError(f"Build timed out after {timeout} seconds") from e
    except FileNotFoundError:
        raise BuildError(f"Command not found: {command[0]}") from None

    logger.debug(f"Build exited with code {result.returncode}")
    return BuildCompleted(exit_code=result.returncode, label=label, command=command_line)


def resolve_build_source(
    event: BuildCompleted,
    workspace_root: Path | None,
    compilers: Sequence[str] = DEFAULT_COMPILERS,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    fallback: str | None = None,
) -> str | None:
    """Decide which source file a successful build belongs to.

    The compiler invocation in the event's command wins; otherwise the
    fallback (usually the file currently being timed) is used.
    """
    if event.command:
        source = extract_source_file(event.command, workspace_root, compilers, extensions)
        if source is not None:
            return source
    return fallback
