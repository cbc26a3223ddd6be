import os
from typing import Optional

import git

from _engine.errors import CommitError
from .staged import get_git_config


def create_commit(message: str, repo_path: Optional[str] = None) -> str:
    """
    Commit the current index with the given message.

    The repository is looked up from ``repo_path`` upwards, the way git itself
    finds ``.git``. Author and committer come from ``git config user.name`` and
    ``user.email``.

    Args:
        message (str): The final commit message.
        repo_path (Optional[str]): Directory inside the working tree. Defaults
                                   to the current working directory.

    Returns:
        str: Hex SHA of the new commit.

    Raises:
        CommitError: the repository could not be opened or the commit failed.
    """
    path = repo_path or os.getcwd()

    try:
        repo = git.Repo(path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise CommitError(f"failed to create commit: not a git repository: {path}") from e

    working_dir = repo.working_tree_dir
    author = git.Actor(
        get_git_config("user.name", cwd=working_dir),
        get_git_config("user.email", cwd=working_dir),
    )

    try:
        commit = repo.index.commit(message, author=author, committer=author)
    except (git.exc.GitError, OSError, ValueError) as e:
        raise CommitError(f"failed to create commit: {e}") from e
    finally:
        repo.close()

    return commit.hexsha
