import pytest

from project_to_text import (
    InclusionClass,
    PathKind,
    Selection,
    classify,
    parse_selection,
    resolve_selection,
)


class TestClassify:

    def test_empty_selection_is_full(self):
        assert classify("any/path.txt", Selection()) is InclusionClass.FULL
        assert classify("any/path.txt", Selection(), directories_only=True) is InclusionClass.FULL

    def test_exact_file_match(self):
        selection = Selection(files={"src/app.py"})
        assert classify("src/app.py", selection) is InclusionClass.FULL
        assert classify("src/other.py", selection) is InclusionClass.PREVIEW

    def test_folder_prefix(self):
        selection = Selection(folders={"lib"})
        assert classify("lib/x.txt", selection) is InclusionClass.FULL
        assert classify("lib/deep/y.txt", selection) is InclusionClass.FULL
        assert classify("libx/y.txt", selection) is InclusionClass.PREVIEW

    def test_directories_only_omits_unselected(self):
        selection = Selection(folders={"lib"})
        assert classify("lib/x.txt", selection, directories_only=True) is InclusionClass.FULL
        assert classify("a.txt", selection, directories_only=True) is InclusionClass.OMITTED

    @pytest.mark.parametrize("entry", ["lib\\", "lib/", "./lib", "lib"])
    def test_folder_separators_are_equivalent(self, entry):
        selection = Selection(folders={entry})
        assert classify("lib\\x.txt", selection) is InclusionClass.FULL
        assert classify("lib/x.txt", selection) is InclusionClass.FULL

    def test_file_separators_are_equivalent(self):
        selection = Selection(files={"src\\app.py"})
        assert classify("src/app.py", selection) is InclusionClass.FULL
        assert classify(".\\src\\app.py", selection) is InclusionClass.FULL

    def test_classify_is_idempotent(self):
        selection = Selection(files={"a.txt"}, folders={"lib"})
        first = [classify(p, selection) for p in ("a.txt", "lib/b", "c")]
        second = [classify(p, selection) for p in ("a.txt", "lib/b", "c")]
        assert first == second


class TestSelection:

    def test_entries_are_normalized(self):
        selection = Selection(files={"./src\\a.py"}, folders={"lib/"})
        assert selection.files == frozenset({"src/a.py"})
        assert selection.folders == frozenset({"lib"})

    def test_empty(self):
        assert Selection().is_empty
        assert not Selection(files={"a"}).is_empty

    def test_merge(self):
        merged = Selection(files={"a"}).merge(Selection(folders={"b"}))
        assert merged == Selection(files={"a"}, folders={"b"})


class TestParseSelection:

    def test_blank_is_empty(self):
        assert parse_selection("").is_empty
        assert parse_selection("  ,  ").is_empty
        assert parse_selection(None).is_empty

    def test_trailing_slash_marks_folder(self):
        selection = parse_selection("src/, README.md, docs\\")
        assert selection.files == frozenset({"README.md"})
        assert selection.folders == frozenset({"src", "docs"})


class TestResolveSelection:

    def test_uses_on_disk_kind(self, make_tree):
        root = make_tree({"lib/b.txt": "b", "a.txt": "a"})
        selection = resolve_selection(root, ["lib", "a.txt"])
        assert selection.folders == frozenset({"lib"})
        assert selection.files == frozenset({"a.txt"})

    def test_missing_entries_follow_policy(self, make_tree):
        root = make_tree({"a.txt": "a"})
        assert resolve_selection(root, ["ghost"]).files == frozenset({"ghost"})

        selection = resolve_selection(root, ["ghost"], missing_as=PathKind.FOLDER)
        assert selection.folders == frozenset({"ghost"})
        assert not selection.files

    def test_trailing_slash_wins_over_disk(self, make_tree):
        root = make_tree({"notes": "a file named notes"})
        assert resolve_selection(root, ["notes/"]).folders == frozenset({"notes"})

    def test_blank_entries_are_skipped(self, tmp_path):
        assert resolve_selection(tmp_path, ["", "  "]).is_empty
