"""Tests for GraphBuilder: index construction and reverse-edge resolution.

Covers the reference scenario (exact, v-hint, version-hint and no-version
references to a two-version family), ``.latest`` handling, fallbacks to
the latest version, unresolvable references, and map totality.
"""

from __future__ import annotations

import pytest

from revdeps.core.graph import (
    GraphBuilder,
    MatchKind,
    ReverseDependencyMap,
    build_reverse_dependencies,
)


# ===========================================================================
# Reference scenario
# ===========================================================================


class TestReferenceScenario:
    """C.D versions 1 and 2 with one consumer per reference style."""

    def test_exact_reference(self, reference_packages) -> None:
        result = GraphBuilder().build(reference_packages)
        assert "user.exact.1" in result["c.d.1"]

    def test_v_prefixed_reference(self, reference_packages) -> None:
        result = GraphBuilder().build(reference_packages)
        assert "user.fuzzy.1" in result["c.d.1"]
        assert "user.fuzzy.1" not in result["c.d.2"]

    def test_version_prefixed_reference(self, reference_packages) -> None:
        result = GraphBuilder().build(reference_packages)
        assert "user.prefix.1" in result["c.d.1"]

    def test_unversioned_reference_resolves_to_latest(self, reference_packages) -> None:
        result = GraphBuilder().build(reference_packages)
        assert "user.latest.1" in result["c.d.2"]
        assert "user.latest.1" not in result["c.d.1"]

    def test_complete_map(self, reference_packages) -> None:
        result = GraphBuilder().build(reference_packages)
        assert result.to_dict() == {
            "c.d.1": ["user.exact.1", "user.fuzzy.1", "user.prefix.1"],
            "c.d.2": ["user.latest.1"],
            "user.exact.1": [],
            "user.fuzzy.1": [],
            "user.latest.1": [],
            "user.prefix.1": [],
        }


# ===========================================================================
# Index construction
# ===========================================================================


class TestIndexConstruction:
    """Pass 1: identity index, version index, totality."""

    def test_every_package_has_an_entry(self, pkg) -> None:
        result = GraphBuilder().build([pkg("A", "One", "1"), pkg("B", "Two", "beta")])
        assert set(result) == {"a.one.1", "b.two.beta"}
        assert result["a.one.1"] == frozenset()

    def test_packages_without_creator_are_not_indexed(self, pkg) -> None:
        result = GraphBuilder().build([pkg("", "Loose", "1"), pkg("A", "B", "1")])
        assert set(result) == {"a.b.1"}

    def test_versions_sorted_descending(self, pkg) -> None:
        index = GraphBuilder().build_index([
            pkg("A", "B", "2"), pkg("A", "B", "10"), pkg("A", "B", "1"),
        ])
        assert [e.version for e in index.versions["a.b"]] == [10, 2, 1]
        assert index.latest("A.B") == "a.b.10"

    def test_numeric_not_lexicographic_order(self, pkg) -> None:
        """Version 10 beats version 9 even though "9" > "10" as text."""
        result = GraphBuilder().build([
            pkg("A", "B", "9"), pkg("A", "B", "10"), pkg("U", "C", "1", ["A.B.latest"]),
        ])
        assert result["a.b.10"] == {"u.c.1"}

    def test_non_numeric_versions_excluded_from_version_index(self, pkg) -> None:
        index = GraphBuilder().build_index([pkg("A", "B", "1.5"), pkg("A", "B", "1")])
        assert [e.identifier for e in index.versions["a.b"]] == ["a.b.1"]
        assert "a.b.1.5" in index.identity

    def test_duplicate_identifier_last_wins(self, pkg) -> None:
        first = pkg("A", "B", "1", ["X.Y.1"])
        second = pkg("a", "b", "1")
        index = GraphBuilder().build_index([first, second])
        assert index.identity["a.b.1"] is second
        assert index.duplicates == ("a.b.1",)

    def test_equal_versions_keep_input_order(self, pkg) -> None:
        """Stable sort: the first of two equal versions stays first."""
        index = GraphBuilder().build_index([
            pkg("A", "B", "01"), pkg("A", "B", "1"), pkg("A", "B", "0"),
        ])
        assert [e.identifier for e in index.versions["a.b"]] == ["a.b.01", "a.b.1", "a.b.0"]

    def test_equal_versions_latest_is_first_in_input(self, pkg) -> None:
        result = GraphBuilder().build([
            pkg("A", "B", "01"), pkg("A", "B", "1"), pkg("U", "C", "1", ["A.B"]),
        ])
        assert result["a.b.01"] == {"u.c.1"}
        assert result["a.b.1"] == frozenset()


# ===========================================================================
# Edge resolution
# ===========================================================================


class TestExactMatch:
    """A fully-qualified installed identifier always wins."""

    def test_case_insensitive(self, pkg) -> None:
        result = GraphBuilder().build([pkg("Ab", "Cd", "3"), pkg("U", "X", "1", ["aB.cD.3"])])
        assert result["ab.cd.3"] == {"u.x.1"}

    def test_exact_beats_latest(self, pkg) -> None:
        result = GraphBuilder().build([
            pkg("A", "B", "1"), pkg("A", "B", "2"), pkg("U", "X", "1", ["A.B.1"]),
        ])
        assert result["a.b.1"] == {"u.x.1"}
        assert result["a.b.2"] == frozenset()

    def test_exact_match_on_non_numeric_version(self, pkg) -> None:
        result = GraphBuilder().build([pkg("A", "B", "beta"), pkg("U", "X", "1", ["A.B.beta"])])
        assert result["a.b.beta"] == {"u.x.1"}

    def test_exact_match_on_package_named_latest(self, pkg) -> None:
        """An installed version literally called "latest" is an exact target."""
        result = GraphBuilder().build([
            pkg("A", "B", "latest"), pkg("A", "B", "5"), pkg("U", "X", "1", ["A.B.latest"]),
        ])
        assert result["a.b.latest"] == {"u.x.1"}
        assert result["a.b.5"] == frozenset()


class TestLatestSuffix:
    """``creator.package.latest`` targets the highest numeric version."""

    def test_latest_resolves_to_highest(self, pkg) -> None:
        index = GraphBuilder().build_index([
            pkg("A", "B", "3"), pkg("A", "B", "7"), pkg("U", "X", "1", ["A.B.latest"]),
        ])
        assert index.reverse_deps["a.b.7"] == {"u.x.1"}
        assert index.edges[0].kind is MatchKind.LATEST

    def test_latest_with_uppercase_suffix(self, pkg) -> None:
        result = GraphBuilder().build([pkg("A", "B", "3"), pkg("U", "X", "1", ["A.B.LATEST"])])
        assert result["a.b.3"] == {"u.x.1"}

    def test_latest_of_unknown_family_is_unresolved(self, pkg) -> None:
        index = GraphBuilder().build_index([pkg("U", "X", "1", ["No.Such.latest"])])
        assert index.edges == ()
        assert [u.dependency for u in index.unresolved] == ["No.Such.latest"]

    def test_latest_of_family_without_numeric_versions(self, pkg) -> None:
        """Only non-numeric versions installed: nothing to call latest."""
        index = GraphBuilder().build_index([
            pkg("A", "B", "beta"), pkg("U", "X", "1", ["A.B.latest"]),
        ])
        assert index.reverse_deps["a.b.beta"] == frozenset()
        assert len(index.unresolved) == 1


class TestFuzzyMatch:
    """Truncating base lookup with version hints and latest fallback."""

    @pytest.mark.parametrize("dep", ["C.D.v1", "C.D.version1", "C.D.V1", "C.D.1.extra"])
    def test_hint_selects_installed_version(self, pkg, dep: str) -> None:
        index = GraphBuilder().build_index([
            pkg("C", "D", "1"), pkg("C", "D", "2"), pkg("U", "X", "1", [dep]),
        ])
        assert index.reverse_deps["c.d.1"] == {"u.x.1"}
        assert index.edges[0].kind is MatchKind.VERSION_HINT

    def test_uninstalled_version_falls_back_to_latest(self, pkg) -> None:
        index = GraphBuilder().build_index([
            pkg("C", "D", "1"), pkg("C", "D", "2"), pkg("U", "Fall", "1", ["C.D.v3"]),
        ])
        assert index.reverse_deps["c.d.2"] == {"u.fall.1"}
        assert index.edges[0].kind is MatchKind.FALLBACK

    def test_non_numeric_suffix_falls_back_to_latest(self, pkg) -> None:
        result = GraphBuilder().build([
            pkg("C", "D", "1"), pkg("C", "D", "2"), pkg("U", "X", "1", ["C.D.beta"]),
        ])
        assert result["c.d.2"] == {"u.x.1"}

    def test_longest_base_wins(self, pkg) -> None:
        """``a.b.c`` is a more specific family than ``a.b``."""
        result = GraphBuilder().build([
            pkg("A", "B", "4"),
            pkg("A.B", "C", "2"),
            pkg("U", "X", "1", ["A.B.C.v2"]),
        ])
        assert result["a.b.c.2"] == {"u.x.1"}
        assert result["a.b.4"] == frozenset()

    def test_unknown_family_produces_no_edge(self, pkg) -> None:
        index = GraphBuilder().build_index([
            pkg("C", "D", "1"), pkg("U", "X", "1", ["Ghost.Pack.1"]),
        ])
        assert all(not consumers for consumers in index.reverse_deps.values())
        assert len(index.unresolved) == 1

    def test_unknown_creator_of_known_name_produces_no_edge(self, pkg) -> None:
        result = GraphBuilder().build([pkg("C", "D", "1"), pkg("U", "X", "1", ["Other.D.1"])])
        assert result["c.d.1"] == frozenset()


class TestConsumers:
    """Which packages act as consumers and how they are identified."""

    def test_self_dependency_is_recorded(self, pkg) -> None:
        result = GraphBuilder().build([pkg("A", "B", "1", ["A.B.1"])])
        assert result["a.b.1"] == {"a.b.1"}

    def test_consumer_without_creator_still_counts(self, pkg) -> None:
        result = GraphBuilder().build([pkg("A", "B", "1"), pkg("", "Loose", "2", ["A.B.1"])])
        assert result["a.b.1"] == {".loose.2"}

    def test_consumers_identified_in_lowercase(self, pkg) -> None:
        result = GraphBuilder().build([pkg("A", "B", "1"), pkg("Big", "User", "1", ["A.B.1"])])
        assert result["a.b.1"] == {"big.user.1"}

    def test_repeated_consumer_counted_once(self, pkg) -> None:
        result = GraphBuilder().build([
            pkg("A", "B", "1"), pkg("U", "X", "1", ["A.B.1", "A.B.v1", "a.b.latest"]),
        ])
        assert result.dependent_count("A.B.1") == 1

    def test_package_without_dependencies(self, pkg) -> None:
        index = GraphBuilder().build_index([pkg("A", "B", "1")])
        assert index.edges == ()
        assert index.unresolved == ()


class TestReverseDependencyMap:
    """The returned map is read-only and total."""

    def test_is_read_only(self, reference_packages) -> None:
        result = build_reverse_dependencies(reference_packages)
        assert isinstance(result, ReverseDependencyMap)
        with pytest.raises(TypeError):
            result["c.d.1"] = frozenset()  # type: ignore[index]
        with pytest.raises(AttributeError):
            result["c.d.1"].add("x")  # type: ignore[attr-defined]

    def test_dependents_lookup_is_case_insensitive(self, reference_packages) -> None:
        result = build_reverse_dependencies(reference_packages)
        assert result.dependents("C.D.2") == {"user.latest.1"}
        assert result.dependents("missing.pkg.1") == frozenset()

    def test_empty_input(self) -> None:
        result = GraphBuilder().build([])
        assert len(result) == 0
        assert result.to_dict() == {}

    def test_identity_index_is_read_only(self, reference_packages) -> None:
        index = GraphBuilder().build_index(reference_packages)
        with pytest.raises(TypeError):
            index.identity["x.y.1"] = reference_packages[0]  # type: ignore[index]
