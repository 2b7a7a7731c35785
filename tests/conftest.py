"""Shared test fixtures for gitsemver tests."""

from dataclasses import dataclass

import pytest
from rich.console import Console

from gitsemver.config import Config
from gitsemver.repository import Branch, Commit, FakeRepository


@dataclass(frozen=True, slots=True)
class MainlineScenario:
    """A small repository: main with two commits, feature branched off it.

    Graph:
        root <- second (main)
             <- feature_commit (feature/login)
    """

    repo: FakeRepository
    root: Commit
    second: Commit
    feature_commit: Commit
    main: Branch
    feature: Branch


@pytest.fixture
def scenario() -> MainlineScenario:
    repo = FakeRepository()
    root = repo.add_commit("Initial commit")
    second = repo.add_commit("Second commit", parents=[root])
    feature_commit = repo.add_commit("Add login", parents=[root])
    main = repo.add_branch("main", second, is_tracking=True)
    feature = repo.add_branch("feature/login", feature_commit, is_tracking=True)
    repo.checkout(main)
    return MainlineScenario(
        repo=repo,
        root=root,
        second=second,
        feature_commit=feature_commit,
        main=main,
        feature=feature,
    )


@pytest.fixture
def config() -> Config:
    return Config().with_defaults()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
