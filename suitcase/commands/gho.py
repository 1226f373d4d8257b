"""Open a repository's Git remote in the default browser."""

from __future__ import annotations

from pathlib import Path

from suitcase.integrations.git import (
    get_remote_branches,
    get_remote_url,
    is_git_repo,
    to_browser_url,
)
from suitcase.integrations.shell import Shell
from suitcase.utils.errors import (
    NoRemotesConfiguredError,
    NotAGitRepositoryError,
    PathDoesNotExistError,
)
from suitcase.utils.logging import log_message
from suitcase.utils.progress import progress


def git_hub_open(
    shell: Shell,
    path: str = ".",
    remote: str = "origin",
    open_command: str = "open",
) -> str:
    """Open the browser page of ``remote`` for the repository at ``path``.

    Returns the URL that was opened.

    Raises:
        PathDoesNotExistError: If ``path`` is not an existing directory
        NotAGitRepositoryError: If ``path`` is not inside a Git working tree
        NoRemotesConfiguredError: If the repository has no remote branches
        GitOperationError: If ``remote`` has no URL
        ShellError: If the open command fails
    """
    repo_path = Path(path)
    if not repo_path.is_dir():
        raise PathDoesNotExistError(path)

    with progress("Checking current git folder"):
        is_repo = is_git_repo(shell, repo_path)
    if not is_repo:
        raise NotAGitRepositoryError(path)

    with progress("Getting remote branches"):
        remote_branches = get_remote_branches(shell, repo_path)
    if not remote_branches:
        raise NoRemotesConfiguredError(path)

    with progress("Getting remote url"):
        remote_url = get_remote_url(shell, repo_path, remote)

    url = to_browser_url(remote_url)
    log_message(f"remote url {remote_url} resolved to {url}")

    with progress("Opening repository"):
        shell.run(open_command, url)

    return url


__all__ = ["git_hub_open"]
