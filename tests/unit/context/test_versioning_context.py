"""Tests for versioning context construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from semantic_version import Version

from gitsemver.config import BranchConfig, Config, IncrementStrategy, VersioningMode
from gitsemver.context import DiagnosticsCollector, VersioningContext, build_context
from gitsemver.exceptions import BranchResolutionError, ConfigurationMissingError
from gitsemver.repository import DETACHED_HEAD_NAME, Branch, FakeRepository
from tests.conftest import MainlineScenario

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class TestBuildContext:
    def test_defaults_to_head(self, scenario: MainlineScenario, config: Config) -> None:
        context = build_context(scenario.repo, config)

        assert context.current_branch == scenario.main
        assert context.current_commit == scenario.second
        assert context.full_configuration is config
        assert context.repository is scenario.repo
        assert context.only_evaluate_tracked_branches is True

    def test_effective_configuration_for_branch(
        self, scenario: MainlineScenario, config: Config
    ) -> None:
        context = build_context(scenario.repo, config, branch_name="feature/login")

        assert context.current_branch == scenario.feature
        assert context.configuration.tag == "{BranchName}"
        assert context.configuration.increment is IncrementStrategy.INHERIT
        assert context.configuration.pre_release_weight == 30000

    def test_main_branch_configuration(self, scenario: MainlineScenario, config: Config) -> None:
        context = build_context(scenario.repo, config)

        assert context.configuration.increment is IncrementStrategy.PATCH
        assert context.configuration.versioning_mode is VersioningMode.CONTINUOUS_DELIVERY
        assert context.configuration.prevent_increment_of_merged_branch_version is True

    def test_explicit_commit_wins_over_branch_tip(
        self, scenario: MainlineScenario, config: Config
    ) -> None:
        context = build_context(
            scenario.repo, config, branch_name="main", commit_id=scenario.root.sha
        )

        assert context.current_commit == scenario.root
        assert context.current_branch == scenario.main

    def test_missing_commit_falls_back_to_tip(
        self, scenario: MainlineScenario, config: Config
    ) -> None:
        context = build_context(scenario.repo, config, commit_id="0" * 40)

        assert context.current_commit == scenario.second
        assert "commit_not_found" in [d.event for d in context.diagnostics]

    def test_friendly_name_resolves_branch(self, config: Config) -> None:
        repo = FakeRepository()
        root = repo.add_commit()
        main = repo.add_branch("main", root)
        release = repo.add_branch("release/2.0", repo.add_commit(parents=[root]))
        repo.checkout(main)

        context = build_context(repo, config, branch_name="release/2.0")

        assert context.current_branch == release
        assert context.current_branch.canonical_name == "refs/heads/release/2.0"
        assert context.configuration.is_release_branch is True

    def test_tagged_commit(self, scenario: MainlineScenario, config: Config) -> None:
        _ = scenario.repo.add_tag("v1.2.0", scenario.second)
        _ = scenario.repo.add_tag("v1.3.0-beta", scenario.second)
        _ = scenario.repo.add_tag("not-a-version", scenario.second)

        context = build_context(scenario.repo, config)

        assert context.current_commit_tagged_version == Version("1.3.0-beta")
        assert context.is_current_commit_tagged is True

    def test_untagged_commit(self, scenario: MainlineScenario, config: Config) -> None:
        _ = scenario.repo.add_tag("v1.0.0", scenario.root)

        context = build_context(scenario.repo, config)

        assert context.current_commit_tagged_version is None
        assert context.is_current_commit_tagged is False

    def test_tag_prefix_from_configuration(self, scenario: MainlineScenario) -> None:
        config = Config.from_dict({"tag-prefix": "release-"}).with_defaults()
        _ = scenario.repo.add_tag("release-4.0.0", scenario.second)

        context = build_context(scenario.repo, config)

        assert context.current_commit_tagged_version == Version("4.0.0")

    def test_detached_head_single_containing_branch(
        self, scenario: MainlineScenario, config: Config
    ) -> None:
        _ = scenario.repo.detach(scenario.feature_commit)

        context = build_context(scenario.repo, config)

        assert context.current_branch == scenario.feature
        assert context.configuration.tag == "{BranchName}"

    def test_detached_head_ambiguous_containment(
        self, scenario: MainlineScenario, config: Config
    ) -> None:
        _ = scenario.repo.detach(scenario.root)

        context = build_context(scenario.repo, config)

        assert context.current_branch.is_detached_head is True
        assert context.current_branch.canonical_name == DETACHED_HEAD_NAME
        assert context.current_commit == scenario.root

    def test_detached_head_untracked_branch_with_all_branches(self, config: Config) -> None:
        repo = FakeRepository()
        tip = repo.add_commit()
        develop = repo.add_branch("develop", tip)
        _ = repo.detach(tip)

        tracked = build_context(repo, config)
        untracked = build_context(repo, config, only_evaluate_tracked_branches=False)

        assert tracked.current_branch.is_detached_head is True
        assert untracked.current_branch == develop
        assert untracked.only_evaluate_tracked_branches is False

    def test_no_branch_raises(self, config: Config) -> None:
        with pytest.raises(BranchResolutionError):
            _ = build_context(FakeRepository(), config)

    def test_unset_required_value_raises(self, scenario: MainlineScenario) -> None:
        with pytest.raises(ConfigurationMissingError) as exc_info:
            _ = build_context(scenario.repo, Config())

        assert exc_info.value.field == "assembly_versioning_scheme"

    def test_custom_resolver(
        self, scenario: MainlineScenario, config: Config, mocker: MockerFixture
    ) -> None:
        resolver = mocker.Mock()
        resolver.resolve.return_value = BranchConfig(
            name="custom",
            versioning_mode=VersioningMode.MAINLINE,
            increment=IncrementStrategy.MAJOR,
            prevent_increment_of_merged_branch_version=False,
            track_merge_target=False,
            tracks_release_branches=False,
            is_release_branch=False,
        )

        context = build_context(scenario.repo, config, resolver=resolver)

        resolver.resolve.assert_called_once_with(scenario.main, config)
        assert context.configuration.versioning_mode is VersioningMode.MAINLINE
        assert context.configuration.pre_release_weight == 0

    def test_diagnostics_forwarded_and_recorded(
        self, scenario: MainlineScenario, config: Config
    ) -> None:
        sink = DiagnosticsCollector()

        context = build_context(scenario.repo, config, diagnostics=sink)

        assert sink.diagnostics == list(context.diagnostics)
        assert sink.events() == ["using_branch_tip"]

    def test_explicit_branch_handle(self, scenario: MainlineScenario, config: Config) -> None:
        context = build_context(scenario.repo, config, branch=scenario.feature)
        assert context.current_branch == scenario.feature

    def test_unborn_branch_handle_raises(self, scenario: MainlineScenario, config: Config) -> None:
        with pytest.raises(BranchResolutionError):
            _ = build_context(scenario.repo, config, branch=Branch.local("empty"))


class TestVersioningContext:
    def test_is_frozen(self, scenario: MainlineScenario, config: Config) -> None:
        context = build_context(scenario.repo, config)
        with pytest.raises(AttributeError):
            context.current_commit = scenario.root  # pyright: ignore[reportAttributeAccessIssue]

    def test_repeat_builds_are_equal(self, scenario: MainlineScenario, config: Config) -> None:
        first = build_context(scenario.repo, config, commit_id=scenario.root.sha)
        second = build_context(scenario.repo, config, commit_id=scenario.root.sha)

        assert first == second
        assert first.configuration == second.configuration
        assert first.repository_metadata_provider is not second.repository_metadata_provider

    def test_is_versioning_context(self, scenario: MainlineScenario, config: Config) -> None:
        assert isinstance(build_context(scenario.repo, config), VersioningContext)
