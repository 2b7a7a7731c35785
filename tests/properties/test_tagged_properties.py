"""Property-based tests for tagged version detection.

Invariants:
- The detected version is the maximum of the parsable tags on the commit
- Unparsable tags never change the result
- Tags on other commits never change the result
- Tag order never changes the result
"""

from hypothesis import given, strategies as st
from semantic_version import Version

from gitsemver.context import detect_tagged_version
from gitsemver.repository import FakeRepository

# =============================================================================
# Strategies
# =============================================================================

component = st.integers(min_value=0, max_value=50)
prerelease = st.none() | st.sampled_from(["alpha", "beta", "beta.2", "rc.1"])


@st.composite
def versions(draw: st.DrawFn) -> Version:
    text = f"{draw(component)}.{draw(component)}.{draw(component)}"
    label = draw(prerelease)
    if label is not None:
        text = f"{text}-{label}"
    return Version(text)


noise = st.sampled_from(["latest", "deployed", "not-a-version", "build-ok", "vnext"])


# =============================================================================
# Properties
# =============================================================================


@given(
    tagged=st.lists(versions(), min_size=1, max_size=6),
    junk=st.lists(noise, max_size=3, unique=True),
    elsewhere=st.lists(versions(), max_size=3),
)
def test_detects_maximum_tag_on_commit(
    tagged: list[Version], junk: list[str], elsewhere: list[Version]
) -> None:
    repo = FakeRepository()
    other = repo.add_commit()
    commit = repo.add_commit(parents=[other])
    for version in tagged:
        _ = repo.add_tag(f"v{version}", commit)
    for name in junk:
        _ = repo.add_tag(name, commit)
    for version in elsewhere:
        _ = repo.add_tag(f"v{version}", other)

    result = detect_tagged_version(repo, commit, "v")

    assert result == max(tagged)


@given(tagged=st.lists(versions(), min_size=1, max_size=6), data=st.data())
def test_tag_order_is_irrelevant(tagged: list[Version], data: st.DataObject) -> None:
    shuffled = data.draw(st.permutations(tagged))

    def detect(order: list[Version]) -> Version | None:
        repo = FakeRepository()
        commit = repo.add_commit()
        for version in order:
            _ = repo.add_tag(f"v{version}", commit)
        return detect_tagged_version(repo, commit, "v")

    assert detect(tagged) == detect(list(shuffled))
