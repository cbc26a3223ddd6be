import subprocess
from typing import List, Optional, Tuple

from _engine.console import console


def run_git_command(
    command: List[str], cwd: Optional[str] = None, strip: bool = True
) -> Tuple[int, str, str]:
    """
    Runs a git command and returns its return code, stdout, and stderr.

    Args:
        command (List[str]): The git command and its arguments as a list of strings.
                             Example: ["git", "diff", "--cached"]
        cwd (Optional[str]): Directory to run the command in. Defaults to the
                             current working directory.
        strip (bool): Strip surrounding whitespace from stdout. Pass False to
                      keep the output verbatim.

    Returns:
        Tuple[int, str, str]: A tuple containing the command's return code,
                              stdout (decoded string), and stderr (decoded string).
                              Returns (1, "", "Exception details") if git cannot be started.
    """
    try:
        # errors="replace" keeps binary hunks from aborting the decode
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            cwd=cwd,
        )
        stdout = result.stdout.strip() if strip else result.stdout
        return result.returncode, stdout, result.stderr.strip()
    except FileNotFoundError:
        error_msg = "Git command not found. Is Git installed and in your PATH?"
        console.print(f"[bold red]Error:[/bold red] {error_msg}")
        return 1, "", error_msg
    except OSError as e:
        error_msg = f"Exception running command {' '.join(command)}: {e}"
        console.print(f"[bold red]Error:[/bold red] {error_msg}")
        return 1, "", error_msg
