import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@dataclass(slots=True)
class GitRepo:
    """A real git repository driven through the git command line.

    Commits get strictly increasing timestamps so history order is stable.
    """

    path: Path
    _clock: int = field(default=1_700_000_000)

    def git(self, *args: str) -> str:
        """Run a git command in the repository and return its stdout."""
        self._clock += 60
        env = {
            **os.environ,
            "GIT_AUTHOR_DATE": f"{self._clock} +0000",
            "GIT_COMMITTER_DATE": f"{self._clock} +0000",
        }
        result = subprocess.run(  # noqa: S603 - Safe: running git with controlled args
            ["git", *args],  # noqa: S607
            cwd=str(self.path),
            capture_output=True,
            text=True,
            check=False,
            env=env,
        )
        if result.returncode != 0:
            msg = f"git {' '.join(args)} failed: {result.stderr}"
            raise RuntimeError(msg)
        return result.stdout.strip()

    def commit(self, message: str) -> str:
        """Create an empty commit on the current branch and return its SHA."""
        _ = self.git("commit", "--allow-empty", "-q", "-m", message)
        return self.git("rev-parse", "HEAD")

    def branch(self, name: str, sha: str) -> None:
        _ = self.git("branch", name, sha)

    def checkout(self, ref: str) -> None:
        _ = self.git("checkout", "-q", ref)

    def detach(self, sha: str) -> None:
        _ = self.git("checkout", "-q", "--detach", sha)

    def tag(self, name: str, sha: str, *, annotated: bool = False) -> None:
        if annotated:
            _ = self.git("tag", "-a", name, "-m", f"Release {name}", sha)
        else:
            _ = self.git("tag", name, sha)

    def track(self, branch: str, remote: str = "origin") -> None:
        """Configure an upstream for a local branch."""
        _ = self.git("config", f"branch.{branch}.remote", remote)
        _ = self.git("config", f"branch.{branch}.merge", f"refs/heads/{branch}")

    def remote_branch(self, remote: str, name: str, sha: str) -> None:
        _ = self.git("update-ref", f"refs/remotes/{remote}/{name}", sha)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """Create an empty git repository with HEAD on an unborn main branch."""
    path = tmp_path / "repo"
    path.mkdir()
    repo = GitRepo(path)
    _ = repo.git("init", "-q")
    _ = repo.git("symbolic-ref", "HEAD", "refs/heads/main")
    _ = repo.git("config", "user.name", "Test User")
    _ = repo.git("config", "user.email", "test@example.com")
    _ = repo.git("config", "commit.gpgsign", "false")
    _ = repo.git("config", "tag.gpgsign", "false")
    return repo
