# Standard Library Imports
import sys
import argparse
from typing import List, Optional

# Third-Party Library Imports
from rich.panel import Panel
from rich.text import Text

# Internal Module Imports
from _engine.config import load_config, require_api_key
from _engine.console import console, print_banner
from _engine.deepseek import build_prompt_messages, stream_commit_message
from _engine.errors import AICommitError
from _engine.git import create_commit, get_staged_changes


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="git-aicommit",
        description="Generate commit messages using AI and optionally create commits with those messages.",
    )
    parser.add_argument(
        "-a",
        "--apply",
        action="store_true",
        help="Apply the AI-generated message to the new commit",
    )
    parser.add_argument(
        "--config",
        help="Path to the TOML config file. Default: ~/.config/git-aicommit/config.toml",
        type=str,
    )
    parser.add_argument(
        "--prompt",
        help="Custom system prompt for this run. Overrides the prompt from the config file.",
        type=str,
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Generate a commit message for the staged changes and, with ``--apply``,
    commit them with it.
    """
    args = parse_args(argv)

    config = load_config(args.config)
    api_key = require_api_key(config)

    changes = get_staged_changes()

    custom_prompt = args.prompt if args.prompt is not None else config.deepseek.prompt
    messages = build_prompt_messages(changes, custom_prompt)

    print_banner("AI Suggested Commit Message", console)

    full_message = stream_commit_message(
        api_key,
        messages,
        config.deepseek.temperature,
        console=console,
    )

    if args.apply:
        commit_id = create_commit(full_message.strip())
        print_banner("✅ Commit Successful", console)
        console.print(f"Commit ID: {commit_id}\n", markup=False, highlight=False)


def run() -> None:
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n[bold yellow]Operation cancelled by user.[/bold yellow]")
        sys.exit(0)
    except AICommitError as e:
        console.print(
            Panel(
                Text(str(e), style="yellow"),
                title="[bold red]Error[/bold red]",
                border_style="red",
            )
        )
        sys.exit(1)


# --- Entry Point ---
if __name__ == "__main__":
    run()
