from typing import Optional

from rich import print as rprint

from _engine.errors import GitCommandError, NoStagedChangesError
from .command import run_git_command


def get_staged_changes(cwd: Optional[str] = None) -> str:
    """
    Get the text of the staged changes (``git diff --cached``).

    Args:
        cwd (Optional[str]): Working tree to inspect. Defaults to the current directory.

    Returns:
        str: The unified diff of everything in the index.

    Raises:
        GitCommandError: git exited with a non-zero status.
        NoStagedChangesError: the diff is empty.
    """
    command = ["git", "diff", "--cached"]
    returncode, stdout, stderr = run_git_command(command, cwd=cwd, strip=False)

    if returncode != 0:
        raise GitCommandError(
            f"failed to get staged changes: '{' '.join(command)}' exited with {returncode}: {stderr}"
        )

    if not stdout.strip():
        raise NoStagedChangesError("no staged changes found")

    return stdout


def get_git_config(key: str, cwd: Optional[str] = None) -> str:
    """Return ``git config <key>``, or an empty string when it is unset."""
    returncode, stdout, stderr = run_git_command(["git", "config", key], cwd=cwd)
    if returncode != 0:
        rprint(f"[yellow]Git config '{key}' is not set.[/yellow]")
        return ""
    return stdout
