import pytest

from project_to_text import is_glob, matches, normalize_path


@pytest.mark.parametrize("raw, expected", [
    ("src/app.py", "src/app.py"),
    ("src\\app.py", "src/app.py"),
    ("./src/app.py", "src/app.py"),
    ("/src/app.py", "src/app.py"),
    ("src/lib/", "src/lib"),
    ("src//lib/./x", "src/lib/x"),
    ("", ""),
    (".", ""),
])
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_normalize_path_is_idempotent():
    once = normalize_path(".\\a\\b/")
    assert normalize_path(once) == once


def test_is_glob():
    assert is_glob("*.log")
    assert is_glob("file?.txt")
    assert not is_glob("node_modules")


def test_plain_name_matches_any_segment():
    assert matches("build", "build")
    assert matches("app/build/out.js", "build")
    assert matches("a/b/build", "build")
    assert not matches("builder/x.js", "build")


def test_glob_without_slash_matches_segments():
    assert matches("debug.log", "*.log")
    assert matches("logs/debug.log", "*.log")
    assert matches("pkg/demo.egg-info/PKG-INFO", "*.egg-info")
    assert not matches("debug.txt", "*.log")


def test_literal_with_slash_matches_segment_run():
    assert matches("vendor/bundle", "vendor/bundle")
    assert matches("app/vendor/bundle/gems/x.rb", "vendor/bundle")
    assert not matches("vendor/bundles/x", "vendor/bundle")
    assert not matches("vendor", "vendor/bundle")


def test_glob_with_slash_matches_path_or_ancestor():
    assert matches("src/gen/a.ts", "src/gen/*")
    assert matches("src/gen", "src/*")
    assert not matches("lib/gen/a.ts", "src/*")


def test_single_star_stays_in_one_segment():
    assert matches("src/app.js", "src/*.js")
    assert not matches("src/lib/deep.js", "src/*.js")
    assert not matches("src/lib/x.js", "src/?ib.js")


def test_double_star_spans_segments():
    assert matches("src/lib/deep.js", "src/**/*.js")
    assert matches("src/app.js", "src/**/*.js")
    assert not matches("test/app.js", "src/**/*.js")


def test_leading_double_star_matches_top_level():
    assert matches("cache", "**/cache")
    assert matches("deep/nested/cache/file", "**/cache")


def test_separators_do_not_matter():
    assert matches("app\\build\\out.js", "build")
    assert matches("app/vendor/bundle/x", "vendor\\bundle")


def test_empty_inputs_never_match():
    assert not matches("", "*")
    assert not matches("a.txt", "")
