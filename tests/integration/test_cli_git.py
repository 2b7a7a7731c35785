"""Integration tests for the context command against a real repository."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from gitsemver.cli import EXIT_REPOSITORY_ERROR, EXIT_SUCCESS, create_app
from tests.integration.conftest import GitRepo


@pytest.fixture
def gitsemver_cli_with_exit_code(console: Console) -> Callable[..., int]:
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


class TestContextCommand:
    def test_json_output(
        self,
        git_repo: GitRepo,
        gitsemver_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        sha = git_repo.commit("Initial commit")
        git_repo.tag("v0.1.0", sha, annotated=True)

        exit_code = gitsemver_cli_with_exit_code(
            "context", "--repo", str(git_repo.path), "--json"
        )

        data = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_SUCCESS
        assert data["branch"]["canonical_name"] == "refs/heads/main"
        assert data["commit"]["sha"] == sha
        assert data["tagged_version"] == "0.1.0"

    def test_not_a_repository(
        self,
        tmp_path: Path,
        gitsemver_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        plain = tmp_path / "plain"
        plain.mkdir()

        exit_code = gitsemver_cli_with_exit_code("context", "--repo", str(plain))

        assert exit_code == EXIT_REPOSITORY_ERROR
        assert "Not inside a git repository" in capsys.readouterr().out
