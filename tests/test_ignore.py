import logging

from project_to_text import (
    DEFAULT_EXCLUSIONS,
    IgnoreEngine,
    IgnoreRule,
    RuleSource,
    load_ignore_file,
    parse_ignore_lines,
)


def engine_with(lines, root="/project", **kwargs):
    kwargs.setdefault("builtin_exclusions", ())
    return IgnoreEngine(root, parse_ignore_lines(lines), **kwargs)


class TestParseIgnoreLines:

    def test_skips_blanks_and_comments(self):
        rules = parse_ignore_lines(["", "# comment", "  ", "*.log", "  dist/  "])
        assert [r.pattern for r in rules] == ["*.log", "dist/"]

    def test_negation(self):
        rules = parse_ignore_lines(["build/", "!build/keep.txt"])
        assert rules == [
            IgnoreRule("build/", negate=False, source=RuleSource.IGNORE_FILE),
            IgnoreRule("build/keep.txt", negate=True, source=RuleSource.IGNORE_FILE),
        ]

    def test_lone_bang_is_dropped(self):
        assert parse_ignore_lines(["!"]) == []


class TestIgnoreFileRules:

    def test_negation_re_includes_file(self):
        engine = engine_with(["build/", "!build/keep.txt"])
        assert engine.is_ignored("build/keep.txt") is False
        assert engine.is_ignored("build/other.txt") is True

    def test_last_match_wins(self):
        engine = engine_with(["*.txt", "!important.txt", "important.txt"])
        assert engine.is_ignored("important.txt")

        engine = engine_with(["*.txt", "!important.txt"])
        assert not engine.is_ignored("important.txt")
        assert engine.is_ignored("notes.txt")

    def test_directory_only_rule(self):
        engine = engine_with(["logs/"])
        assert engine.is_ignored("logs", is_dir=True)
        assert not engine.is_ignored("logs", is_dir=False)
        assert engine.is_ignored("logs/today.txt")

    def test_anchored_rule(self):
        engine = engine_with(["/config.yml"])
        assert engine.is_ignored("config.yml")
        assert not engine.is_ignored("sub/config.yml")

    def test_non_matching_rules_leave_verdict(self):
        engine = engine_with(["*.tmp"])
        assert not engine.is_ignored("src/main.py")

    def test_invalid_rule_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            engine = engine_with(["bad\\", "*.bak"])
        assert engine.is_ignored("old.bak")
        assert "bad" in caplog.text
        assert [r.pattern for r in engine.rules] == ["*.bak"]


class TestExclusionLayers:

    def test_builtin_exclusions(self):
        engine = IgnoreEngine("/project")
        assert engine.is_ignored("node_modules", is_dir=True)
        assert engine.is_ignored("web/node_modules/react/index.js")
        assert engine.is_ignored("app/build", is_dir=True)
        assert engine.is_ignored("server.log")
        assert engine.is_ignored("yarn.lock")
        assert not engine.is_ignored("src/index.ts")

    def test_builtin_is_not_negatable(self):
        engine = IgnoreEngine("/project", parse_ignore_lines(["!node_modules/"]))
        assert engine.is_ignored("node_modules", is_dir=True)

    def test_custom_exclusions_are_ored(self):
        engine = engine_with([], custom_exclusions=["*.snap", "fixtures"])
        assert engine.is_ignored("tests/__snapshots__/a.snap")
        assert engine.is_ignored("tests/fixtures/data.json")
        assert not engine.is_ignored("tests/test_a.py")

    def test_rules_are_ordered_builtin_custom_ignore_file(self):
        engine = IgnoreEngine(
            "/project",
            parse_ignore_lines(["*.bak"]),
            custom_exclusions=["*.snap"],
            builtin_exclusions=[".git"],
        )
        assert [(r.pattern, r.source) for r in engine.rules] == [
            (".git", RuleSource.BUILT_IN),
            ("*.snap", RuleSource.CUSTOM),
            ("*.bak", RuleSource.IGNORE_FILE),
        ]

    def test_default_exclusions_cover_common_directories(self):
        for name in ("node_modules", ".git", "dist", "__pycache__", "vendor/bundle"):
            assert name in DEFAULT_EXCLUSIONS


class TestPaths:

    def test_absolute_paths_are_relativized(self, tmp_path):
        engine = engine_with(["secret.txt"], root=tmp_path)
        assert engine.is_ignored(tmp_path / "secret.txt")
        assert engine.is_ignored(str(tmp_path / "secret.txt"))

    def test_backslash_paths(self):
        engine = engine_with(["build/", "!build/keep.txt"])
        assert engine.is_ignored("build\\other.txt")
        assert not engine.is_ignored("build\\keep.txt")

    def test_root_itself_is_never_ignored(self, tmp_path):
        engine = engine_with(["*"], root=tmp_path)
        assert not engine.is_ignored(tmp_path, is_dir=True)

    def test_explain_reports_reason(self):
        engine = IgnoreEngine("/project", parse_ignore_lines(["*.bak"]), builtin_exclusions=["dist"])
        assert engine.explain("dist/app.js") == (True, "built-in pattern: dist")
        assert engine.explain("x.bak") == (True, "ignore-file rule: *.bak")
        assert engine.explain("x.py") == (False, "")


class TestLoading:

    def test_for_root_reads_ignore_file(self, make_tree):
        root = make_tree({".gitignore": "# generated\n*.gen\n", "a.gen": "x"})
        engine = IgnoreEngine.for_root(root)
        assert engine.is_ignored("a.gen")

    def test_custom_ignore_file_name(self, make_tree):
        root = make_tree({".ptignore": "private/\n", ".gitignore": "*.py\n"})
        engine = IgnoreEngine.for_root(root, ignore_file_name=".ptignore")
        assert engine.is_ignored("private", is_dir=True)
        assert not engine.is_ignored("main.py")

    def test_missing_ignore_file_is_empty(self, tmp_path):
        assert load_ignore_file(tmp_path / ".gitignore") == []
        engine = IgnoreEngine.for_root(tmp_path, builtin_exclusions=())
        assert not engine.is_ignored("anything.txt")

    def test_unreadable_ignore_file_is_empty(self, tmp_path, caplog):
        (tmp_path / ".gitignore").mkdir()
        with caplog.at_level(logging.WARNING):
            assert load_ignore_file(tmp_path / ".gitignore") == []
        assert "Could not read ignore-file" in caplog.text
