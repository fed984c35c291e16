"""Tests for unknown-name detection and feature gates."""

import pytest

from lintlevels.catalog import Lint, LintGroup, MissingLint, build_catalog
from lintlevels.detector import ProblemKind, analyze, check_feature_gates, detect
from lintlevels.levels import Level, LevelSource


def test_reports_exactly_the_unknown_names(small_catalog):
    cfg = {
        "picky": "warn",
        "mystery": "deny",
        "cargo::pedantic": "allow",
        "clippy::picky": "warn",
        "another": "allow",
    }
    problems = detect(small_catalog, cfg)
    assert [p.raw_name for p in problems] == ["mystery", "clippy::picky", "another"]
    assert all(p.kind is ProblemKind.UNKNOWN_NAME for p in problems)


def test_problems_follow_config_order(small_catalog):
    problems = detect(small_catalog, {"zzz": "warn", "aaa": "warn", "mmm": "warn"})
    assert [p.raw_name for p in problems] == ["zzz", "aaa", "mmm"]


def test_default_severity_is_warn(catalog):
    problems = detect(catalog, {"this-lint-does-not-exist": "warn"})
    assert len(problems) == 1
    assert problems[0].raw_name == "this-lint-does-not-exist"
    assert problems[0].severity is Level.WARN


def test_unknown_lints_can_silence_itself(catalog):
    problems = detect(catalog, {"unknown_lints": "allow", "totally-bogus-name": "warn"})
    assert len(problems) == 1
    assert problems[0].raw_name == "totally-bogus-name"
    assert problems[0].severity is Level.ALLOW


def test_group_level_escalates_unknown_names(catalog):
    problems = detect(catalog, {"cargo::suspicious": "deny", "bogus": "warn"})
    assert problems[0].severity is Level.DENY


def test_lint_entry_beats_group_for_severity(catalog):
    problems = detect(catalog, {"suspicious": "deny", "unknown_lints": "warn", "bogus": "allow"})
    assert problems[0].severity is Level.WARN


def test_no_problems_for_clean_config(catalog):
    assert detect(catalog, {"unknown_lints": "deny", "style": "warn"}) == []


def test_similar_name_suggests_lint(catalog):
    (problem,) = detect(catalog, {"unknown-lints": "warn"})
    assert problem.candidate == "unknown_lints"
    assert problem.candidate_kind == "lint"


def test_similar_name_suggests_group(catalog):
    (problem,) = detect(catalog, {"cargo::test-dummy-unstable": "warn"})
    assert problem.candidate == "test_dummy_unstable"
    assert problem.candidate_kind == "group"


def test_no_suggestion_for_unrelated_name(catalog):
    (problem,) = detect(catalog, {"nothing-like-it": "warn"})
    assert problem.candidate is None
    assert problem.candidate_kind is None


def test_catalog_without_unknown_lints():
    catalog = build_catalog(
        [Lint(id="a", group="g", default_level=Level.WARN, description="a")],
        [LintGroup(id="g", default_level=Level.WARN, description="g")],
    )
    with pytest.raises(MissingLint):
        detect(catalog, {"bogus": "warn"})


def test_feature_gated_lint_without_feature(catalog):
    problems = check_feature_gates(catalog, {"im_a_teapot": "warn", "style": "deny"})
    assert len(problems) == 1
    assert problems[0].kind is ProblemKind.FEATURE_NOT_ENABLED
    assert problems[0].raw_name == "im_a_teapot"
    assert problems[0].feature == "test_dummy_unstable"
    assert problems[0].severity is Level.DENY


def test_feature_gated_group_with_feature_enabled(catalog):
    cfg = {"test_dummy_unstable": "warn", "cargo::im_a_teapot": "deny"}
    assert check_feature_gates(catalog, cfg, {"test_dummy_unstable"}) == []
    assert len(check_feature_gates(catalog, cfg)) == 2


def test_analyze_combines_results(catalog):
    report = analyze(catalog, {"bogus": "warn", "unknown_lints": "deny", "im_a_teapot": "warn"})
    assert report.levels["unknown_lints"] is Level.DENY
    assert report.levels["im_a_teapot"] is Level.WARN
    kinds = [p.kind for p in report.problems]
    assert kinds == [ProblemKind.UNKNOWN_NAME, ProblemKind.FEATURE_NOT_ENABLED]
    assert report.error_count == 2
    assert report.unknown_lints.source is LevelSource.LINT


def test_analyze_allow_problems_are_not_errors(catalog):
    report = analyze(catalog, {"unknown_lints": "allow", "bogus": "forbid"})
    assert len(report.problems) == 1
    assert report.error_count == 0


def test_problem_to_dict(catalog):
    (problem,) = detect(catalog, {"unknown-lints": "warn"})
    assert problem.to_dict() == {
        "kind": "unknown_name",
        "name": "unknown-lints",
        "severity": "warn",
        "candidate": "unknown_lints",
        "candidate_kind": "lint",
        "feature": None,
    }
