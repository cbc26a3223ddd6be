from .command import run_git_command
from .commit import create_commit
from .staged import get_git_config, get_staged_changes

__all__ = [
    "run_git_command",
    "create_commit",
    "get_git_config",
    "get_staged_changes",
]
