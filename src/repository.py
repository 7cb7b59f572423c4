"""Git-backed settings repository.

The local repository lives in a directory managed by setrepo. Its
configured remote is the upstream URL shown in the settings dialog.
All operations shell out to the git executable.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from constants import DEFAULT_BRANCH, DEFAULT_REMOTE_NAME
from model.sync_action import SyncType

log = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Raised when a git operation on the settings repository fails."""


class NoRemoteRepositoryError(RepositoryError):
    """Raised when the remote is not configured or cannot be reached."""


class AuthenticationError(RepositoryError):
    """Raised when the remote rejects our credentials."""


# Substrings of git's stderr (lowercased) used to classify failures
AUTH_FAILURE_MARKERS = (
    "authentication failed",
    "could not read username",
    "could not read password",
    "permission denied (publickey",
    "invalid username or password",
    "the requested url returned error: 401",
    "the requested url returned error: 403",
)
NO_REMOTE_MARKERS = (
    "does not appear to be a git repository",
    "repository not found",
    "could not resolve host",
    "no such remote",
    "unable to access",
)


def classify_git_error(command: list[str], stderr: str) -> RepositoryError:
    """Map a failed git invocation to the matching RepositoryError subclass."""
    message = stderr.strip() or f"git {' '.join(command)} failed"
    lowered = message.lower()
    if any(marker in lowered for marker in AUTH_FAILURE_MARKERS):
        return AuthenticationError(message)
    if any(marker in lowered for marker in NO_REMOTE_MARKERS):
        return NoRemoteRepositoryError(message)
    return RepositoryError(message)


class GitRepositoryManager:
    """Manage the local settings repository and its upstream remote."""

    def __init__(
        self,
        repository_dir: Path,
        remote_name: str = DEFAULT_REMOTE_NAME,
        branch: str = DEFAULT_BRANCH,
    ) -> None:
        self.repository_dir = Path(repository_dir)
        self.remote_name = remote_name
        self.branch = branch
        # Set when create_repository_if_needed made repository_dir itself
        self._created_dir = False

    @property
    def remote_ref(self) -> str:
        return f"{self.remote_name}/{self.branch}"

    def _git(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        """Run git inside the repository directory.

        Raises:
            RepositoryError: git is missing, or the command failed and check is set
        """
        command = list(args)
        log.debug(f"git {' '.join(command)}")
        try:
            result = subprocess.run(
                ["git", *command],
                cwd=self.repository_dir,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RepositoryError("git executable not found") from e
        if check and result.returncode != 0:
            raise classify_git_error(command, result.stderr)
        return result

    # =========================================================================
    # Repository lifecycle
    # =========================================================================

    def is_repository_exists(self) -> bool:
        return (self.repository_dir / ".git").is_dir()

    def create_repository_if_needed(self) -> bool:
        """Initialize the local repository. Returns True if it was created."""
        if self.is_repository_exists():
            return False
        if not self.repository_dir.exists():
            self.repository_dir.mkdir(parents=True)
            self._created_dir = True
        self._git("init")
        self._git("symbolic-ref", "HEAD", f"refs/heads/{self.branch}")
        log.info(f"Created settings repository at {self.repository_dir}")
        return True

    def delete_repository(self) -> None:
        """Remove what create_repository_if_needed made.

        The whole directory goes only if it was created here. A directory
        that existed before loses just its .git folder.
        """
        target = self.repository_dir if self._created_dir else self.repository_dir / ".git"
        if not target.exists():
            return
        shutil.rmtree(target)
        self._created_dir = False
        log.info(f"Deleted settings repository at {target}")

    # =========================================================================
    # Upstream
    # =========================================================================

    def _remote_exists(self) -> bool:
        result = self._git("remote")
        return self.remote_name in result.stdout.split()

    def get_upstream(self) -> str | None:
        """Return the configured remote URL, or None if there is none."""
        if not self.is_repository_exists():
            return None
        result = self._git("config", "--get", f"remote.{self.remote_name}.url", check=False)
        if result.returncode != 0:
            return None
        return result.stdout.rstrip("\n") or None

    def has_upstream(self) -> bool:
        return self.get_upstream() is not None

    def set_upstream(self, url: str | None) -> None:
        """Point the remote at url, or remove it when url is None."""
        if url is None:
            if self._remote_exists():
                self._git("remote", "remove", self.remote_name)
                log.info("Removed upstream")
            return
        if self._remote_exists():
            self._git("remote", "set-url", "--", self.remote_name, url)
        else:
            self._git("remote", "add", "--", self.remote_name, url)
        log.info(f"Set upstream to {url}")

    # =========================================================================
    # Sync
    # =========================================================================

    def _has_commits(self) -> bool:
        return self._git("rev-parse", "--verify", "--quiet", "HEAD", check=False).returncode == 0

    def _remote_branch_exists(self) -> bool:
        ref = f"refs/remotes/{self.remote_ref}"
        return self._git("rev-parse", "--verify", "--quiet", ref, check=False).returncode == 0

    def _fetch(self) -> None:
        self._git("fetch", self.remote_name)

    def sync(self, sync_type: SyncType) -> None:
        """Synchronize the local repository with the upstream.

        Raises:
            NoRemoteRepositoryError: No upstream is configured or it is unreachable
            AuthenticationError: The remote rejected the credentials
            RepositoryError: Any other git failure
        """
        if not self.is_repository_exists():
            raise RepositoryError(f"Settings repository does not exist: {self.repository_dir}")
        if not self.has_upstream():
            raise NoRemoteRepositoryError("Remote repository URL is not set")

        log.info(f"Sync {sync_type.value} with {self.remote_ref}")
        if sync_type is SyncType.MERGE:
            self._merge()
        elif sync_type is SyncType.OVERWRITE_LOCAL:
            self._reset_to_theirs()
        else:
            self._reset_to_mine()

    def _merge(self) -> None:
        self._fetch()
        if self._remote_branch_exists():
            self._git("merge", "--no-edit", "--allow-unrelated-histories", self.remote_ref)
        if self._has_commits():
            self._git("push", self.remote_name, f"HEAD:{self.branch}")

    def _reset_to_theirs(self) -> None:
        self._fetch()
        if not self._remote_branch_exists():
            raise RepositoryError(f"Remote branch {self.remote_ref} does not exist")
        self._git("reset", "--hard", self.remote_ref)

    def _reset_to_mine(self) -> None:
        if not self._has_commits():
            raise RepositoryError("Nothing to push: local repository has no commits")
        self._git("push", "--force", self.remote_name, f"HEAD:{self.branch}")
