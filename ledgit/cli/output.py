"""CLI output utilities and formatting."""

from colorama import Fore, Style

from ledgit.core.objects import Commit
from ledgit.core.states import FileState

BANNER = f"""
{Fore.YELLOW}╔════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}  {Fore.CYAN}{Style.BRIGHT}ledgit{Style.RESET_ALL}                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}  {Fore.WHITE}Content-addressed version control{Style.RESET_ALL}     {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚════════════════════════════════════════╝{Style.RESET_ALL}
"""

STATE_COLORS = {
    FileState.STAGED: Fore.GREEN,
    FileState.MODIFIED: Fore.RED,
    FileState.UNTRACKED: Fore.RED,
    FileState.TRACKED: Fore.WHITE,
}

STATE_HEADINGS = {
    FileState.STAGED: "Changes to be committed:",
    FileState.MODIFIED: "Changes not staged for commit:",
    FileState.UNTRACKED: "Untracked files:",
}


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def format_status(status: dict) -> list:
    """Render Repository.status() as output lines, one section per non-empty state."""
    lines = []
    for state, heading in STATE_HEADINGS.items():
        paths = status.get(state, [])
        if not paths:
            continue
        if lines:
            lines.append('')
        lines.append(heading)
        color = STATE_COLORS[state]
        for path in paths:
            lines.append(f"  {color}{state.value + ':':<12}{path}{Style.RESET_ALL}")
    if not lines:
        lines.append("nothing to commit, working tree clean")
    return lines


def format_commit(commit: Commit) -> list:
    """Render a commit as log lines."""
    lines = [f"{Fore.YELLOW}commit {commit.id}{Style.RESET_ALL}"]
    if commit.parent:
        lines.append(f"Parent: {commit.parent}")
    if commit.author:
        lines.append(f"Author: {commit.author}")
    lines.append(f"Date:   {commit.timestamp}")
    lines.append('')
    lines.extend(f"    {line}" for line in commit.message.split('\n'))
    lines.append('')
    for path in sorted(commit.snapshot):
        lines.append(f"    {commit.snapshot[path][:7]}  {path}")
    return lines
