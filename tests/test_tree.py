import os

import pytest

from project_to_text import IgnoreEngine, TreeRenderer, list_directory, parse_ignore_lines


def render(root, max_depth=0, ignore_lines=(), builtin=()):
    engine = IgnoreEngine(root, parse_ignore_lines(ignore_lines), builtin_exclusions=builtin)
    lines = []
    TreeRenderer(root, engine, max_depth).render(lines)
    return lines


def test_basic_tree(make_tree):
    root = make_tree({"a.txt": "a", "lib/b.txt": "b", "lib/c.txt": "c"})
    assert render(root) == [
        "└── project/",
        "    ├── a.txt",
        "    └── lib/",
        "        ├── b.txt",
        "        └── c.txt",
    ]


def test_pipe_prefix_for_non_last_directory(make_tree):
    root = make_tree({"a/x.txt": "x", "b.txt": "b"})
    assert render(root) == [
        "└── project/",
        "    ├── a/",
        "    │   └── x.txt",
        "    └── b.txt",
    ]


def test_entries_sorted_by_name(make_tree):
    root = make_tree({"zeta.txt": "", "Alpha.txt": "", "beta/": ""})
    assert render(root)[1:] == [
        "    ├── Alpha.txt",
        "    ├── beta/",
        "    └── zeta.txt",
    ]


def test_ignored_entries_do_not_count_as_last(make_tree):
    root = make_tree({"a.txt": "a", "z.log": "z"})
    assert render(root, ignore_lines=["*.log"]) == [
        "└── project/",
        "    └── a.txt",
    ]


def test_builtin_exclusions_hide_directories(make_tree):
    root = make_tree({"node_modules/x/index.js": "", "src/main.js": ""})
    assert render(root, builtin=("node_modules",)) == [
        "└── project/",
        "    └── src/",
        "        └── main.js",
    ]


def test_depth_limit_emits_single_placeholder(make_tree):
    root = make_tree({"l1/l2/l3/l4/deep.txt": "x"})
    lines = render(root, max_depth=2)
    assert lines == [
        "└── project/",
        "    └── l1/",
        "        └── l2/",
        "            └── ...",
    ]
    assert sum(1 for line in lines if line.endswith("└── ...")) == 1


def test_zero_depth_is_unbounded(make_tree):
    root = make_tree({"l1/l2/l3/l4/deep.txt": "x"})
    assert render(root, max_depth=0)[-1] == "                    └── deep.txt"


def test_empty_directory(make_tree):
    root = make_tree({"empty/": ""})
    assert render(root) == ["└── project/", "    └── empty/"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_broken_symlink_is_skipped(make_tree):
    root = make_tree({"a.txt": "a"})
    (root / "dangling").symlink_to(root / "missing-target")
    assert render(root) == ["└── project/", "    └── a.txt"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlink_loop_is_listed_not_followed(make_tree):
    root = make_tree({"sub/a.txt": "a"})
    (root / "sub" / "loop").symlink_to(root, target_is_directory=True)
    lines = render(root)
    assert lines == [
        "└── project/",
        "    └── sub/",
        "        ├── a.txt",
        "        └── loop/",
    ]


def test_unreadable_directory_emits_marker(make_tree, monkeypatch):
    root = make_tree({"locked/secret.txt": "s", "ok.txt": "o"})
    real_iterdir = type(root).iterdir

    def fake_iterdir(self):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied")
        return real_iterdir(self)

    monkeypatch.setattr(type(root), "iterdir", fake_iterdir)
    lines = render(root)
    assert lines[1] == "    ├── locked/"
    assert lines[2].startswith("    │   └── [Error reading directory: ")
    assert lines[3] == "    └── ok.txt"


def test_list_directory_reports_relative_paths(make_tree):
    root = make_tree({"lib/b.txt": "b"})
    engine = IgnoreEngine(root, builtin_exclusions=())
    entries = list_directory(root / "lib", root, engine)
    assert [(e.name, e.relative, e.is_dir) for e in entries] == [("b.txt", "lib/b.txt", False)]
