#!/usr/bin/env python3
"""
Project To Text - Directory tree and file contents for LLM prompts

Walks a project directory and renders it as one text artifact: an ASCII tree
of every non-ignored entry, followed by the full content, a bounded preview,
or a declaration summary of each text file.

Architecture:
    CLI Args → Configuration → Ignore Engine ─┬→ Tree Renderer ─────┐
                                              └→ Content Assembler ─┴→ Output
                                                   ↑ Selection, Summarizer
"""

from __future__ import annotations

import argparse
import fnmatch
import logging
import os
import sys
import time
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import pathspec
import pyperclip

from code_summarizer import summarize

# =============================================================================
# VERSION MANAGEMENT
# =============================================================================

__version__ = "1.0.0"


def get_version() -> str:
    """Get version from package metadata or fallback to hardcoded."""
    try:
        return version("project-to-text")
    except PackageNotFoundError:
        return __version__


# =============================================================================
# CONSTANTS
# =============================================================================

class Defaults:
    """Default configuration values."""
    MAX_TREE_DEPTH = 10
    PREVIEW_LINES = 5
    IGNORE_FILE = ".gitignore"
    BINARY_SNIFF_BYTES = 8192


# Always excluded, ahead of any user pattern or ignore-file rule.
DEFAULT_EXCLUSIONS: Tuple[str, ...] = (
    # Version control
    "node_modules", ".git", ".svn", ".hg",
    # OS metadata
    ".DS_Store", "Thumbs.db",
    # IDE and tool state
    ".dart_tool", ".idea", ".vscode",
    # Build outputs
    "out", "dist", "build", ".gradle", ".cxx", ".externalNativeBuild", "target",
    # Logs and temp files
    "*.log", "*.tmp", "*.temp",
    # Framework caches
    ".cache", ".next", ".nuxt", ".output",
    # Environment files
    ".env", ".env.local", ".env.development", ".env.production",
    # Coverage
    "coverage", ".nyc_output",
    # Python
    ".pytest_cache", "__pycache__", "*.pyc", ".mypy_cache", ".tox", ".eggs",
    "*.egg-info",
    # Ruby
    ".bundle", "vendor/bundle",
    # Flutter
    ".flutter-plugins", ".flutter-plugins-dependencies", ".packages",
    "ephemeral", ".plugin_symlinks",
    # Lock files
    "pubspec.lock", "package-lock.json", "yarn.lock", "composer.lock",
    "Gemfile.lock", "poetry.lock",
)

BINARY_EXTENSIONS: FrozenSet[str] = frozenset({
    # Compiled
    ".pyc", ".pyo", ".pyd", ".so", ".o", ".a", ".lib", ".dylib", ".dll",
    ".exe", ".class", ".jar", ".war", ".wasm", ".bin",
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp", ".bmp", ".tiff",
    ".tif", ".psd",
    # Fonts
    ".woff", ".woff2", ".ttf", ".eot", ".otf",
    # Audio and video
    ".mp3", ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm", ".wav", ".ogg",
    # Archives
    ".zip", ".tar", ".gz", ".rar", ".7z", ".bz2", ".xz",
    # Documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    # Databases
    ".sqlite", ".db",
})

# Tree display glyphs
GLYPH_CHILD = "├──"
GLYPH_LAST = "└──"
GLYPH_PIPE = "│   "
GLYPH_SPACE = "    "

TREE_PLACEHOLDER = "..."
FILE_SEPARATOR = "=" * 48
TRUNCATION_MESSAGE = "[FILE TRUNCATED - showing {shown} of {total} lines]"

PYPROJECT_TABLE = "project-to-text"
PYPROJECT_KEYS: FrozenSet[str] = frozenset({
    "max-tree-depth",
    "preview-lines",
    "custom-exclusions",
    "summarize",
    "directories-only",
    "ignore-file",
})

PathLike = Union[str, "os.PathLike[str]"]


# =============================================================================
# ERRORS
# =============================================================================

class InvalidRootError(ValueError):
    """Raised when the root path is missing or is not a directory."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        super().__init__(f"Root is not a directory: {self.path}")


# =============================================================================
# ENUMS AND DATA MODELS
# =============================================================================

class RuleSource(Enum):
    """Where an ignore rule came from."""
    BUILT_IN = "built-in"
    CUSTOM = "custom"
    IGNORE_FILE = "ignore-file"


class InclusionClass(Enum):
    """How much of a file ends up in the output."""
    FULL = auto()
    PREVIEW = auto()
    OMITTED = auto()


class PathKind(Enum):
    """Kind assumed for a selection entry."""
    FILE = "file"
    FOLDER = "folder"


class OutputMode(Enum):
    """Output destination modes."""
    CLIPBOARD = auto()
    FILE = auto()
    STDOUT = auto()


@dataclass(frozen=True)
class IgnoreRule:
    """One exclusion or gitignore-style rule."""
    pattern: str
    negate: bool = False
    source: RuleSource = RuleSource.IGNORE_FILE


@dataclass(frozen=True)
class Selection:
    """Files and folders to render in full; everything else is previewed.

    Entries are normalized on construction, so ``lib\\x.txt``, ``./lib/x.txt``
    and ``lib/x.txt/`` all compare equal.
    """
    files: FrozenSet[str] = frozenset()
    folders: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        files = frozenset(p for p in map(normalize_path, self.files) if p)
        folders = frozenset(normalize_path(p) for p in self.folders)
        object.__setattr__(self, "files", files)
        object.__setattr__(self, "folders", folders)

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.folders

    def merge(self, other: Selection) -> Selection:
        return Selection(self.files | other.files, self.folders | other.folders)


@dataclass(frozen=True)
class TraversalOptions:
    """Immutable traversal configuration."""
    max_tree_depth: int = Defaults.MAX_TREE_DEPTH      # 0 = unbounded
    preview_lines: int = Defaults.PREVIEW_LINES
    custom_exclusions: Tuple[str, ...] = ()
    summarize: bool = False
    directories_only: bool = False
    ignore_file_name: str = Defaults.IGNORE_FILE

    def __post_init__(self) -> None:
        for name in ("max_tree_depth", "preview_lines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        exclusions = self.custom_exclusions
        if isinstance(exclusions, str):
            exclusions = (exclusions,)
        object.__setattr__(self, "custom_exclusions", tuple(str(p) for p in exclusions))

        if not self.ignore_file_name or "/" in self.ignore_file_name:
            raise ValueError(f"ignore_file_name must be a plain file name, got {self.ignore_file_name!r}")


@dataclass(frozen=True)
class RunConfig:
    """Everything a CLI run needs."""
    root: Path
    selection: Selection
    options: TraversalOptions
    output_mode: OutputMode
    output_file: Optional[Path]


@dataclass(frozen=True)
class DirEntry:
    """A visible child of a directory."""
    name: str
    path: Path
    relative: str
    is_dir: bool


@dataclass
class RenderResult:
    """Complete render output."""
    lines: List[str]
    file_count: int = 0
    full_count: int = 0
    preview_count: int = 0
    duration: float = 0.0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def describe(self, root_name: str) -> str:
        """One-line run summary, e.g. ``📁 app: 3 files (2 full, 1 preview), ...``."""
        breakdown = f"{self.full_count:,} full"
        if self.preview_count:
            breakdown += f", {self.preview_count:,} preview"
        return (
            f"📁 {root_name}: {self.file_count:,} files ({breakdown}), "
            f"{len(self.text):,} chars in {self.duration:.2f}s"
        )


# =============================================================================
# PATTERN MATCHING
# =============================================================================

def normalize_path(path: PathLike) -> str:
    """Forward slashes, no leading ``./`` or ``/``, no trailing slash."""
    text = os.fspath(path).replace("\\", "/")
    return "/".join(part for part in text.split("/") if part and part != ".")


def is_glob(pattern: str) -> bool:
    return any(char in pattern for char in "*?[")


def matches(candidate: PathLike, pattern: str) -> bool:
    """Check a relative path against a glob or literal exclusion pattern.

    A pattern without a slash is tested against every segment, so ``build``
    excludes any ``build`` directory and everything below it. A literal with a
    slash must appear as a whole run of segments. A glob with a slash is
    tested segment by segment against the path and each of its ancestors.
    """
    path = normalize_path(candidate)
    normalized = normalize_path(pattern)
    if not path or not normalized:
        return False

    segments = path.split("/")

    if "/" not in normalized:
        if is_glob(normalized):
            return any(fnmatch.fnmatch(segment, normalized) for segment in segments)
        return normalized in segments

    if not is_glob(normalized):
        return f"/{normalized}/" in f"/{path}/"

    parts = normalized.split("/")
    return any(_match_segments(segments[:index], parts) for index in range(1, len(segments) + 1))


def _match_segments(segments: List[str], parts: List[str]) -> bool:
    """``*`` and ``?`` stay inside one segment; only ``**`` spans segments."""
    if not parts:
        return not segments
    head, rest = parts[0], parts[1:]
    if head == "**":
        return any(_match_segments(segments[index:], rest) for index in range(len(segments) + 1))
    return bool(segments) and fnmatch.fnmatch(segments[0], head) and _match_segments(segments[1:], rest)


# =============================================================================
# IGNORE LAYERS (Strategy Pattern)
# =============================================================================

class IgnoreLayer(ABC):
    """Abstract base for one layer of the ignore engine."""

    @abstractmethod
    def check(self, relative: str, is_dir: bool) -> Tuple[bool, str]:
        """Check a normalized relative path. Returns (ignored, reason)."""
        pass


class ExclusionLayer(IgnoreLayer):
    """Built-in and custom patterns; any match excludes, nothing re-includes."""

    def __init__(self, rules: Sequence[IgnoreRule]):
        self.rules: Tuple[IgnoreRule, ...] = tuple(rules)

    def check(self, relative: str, is_dir: bool) -> Tuple[bool, str]:
        for rule in self.rules:
            if matches(relative, rule.pattern):
                return True, f"{rule.source.value} pattern: {rule.pattern}"
        return False, ""


class IgnoreFileLayer(IgnoreLayer):
    """Gitignore rules evaluated in file order, last match wins."""

    def __init__(self, rules: Sequence[IgnoreRule]):
        self.rules: List[IgnoreRule] = []
        self._specs: List[pathspec.PathSpec] = []

        for rule in rules:
            try:
                spec = pathspec.PathSpec.from_lines("gitwildmatch", [rule.pattern])
            except ValueError as e:
                logging.warning(f"Skipping invalid ignore rule '{rule.pattern}': {e}")
                continue
            self.rules.append(rule)
            self._specs.append(spec)

    def check(self, relative: str, is_dir: bool) -> Tuple[bool, str]:
        # Directory-only rules ("build/") need the trailing slash to match the directory itself
        candidate = f"{relative}/" if is_dir else relative
        ignored, reason = False, ""

        for rule, spec in zip(self.rules, self._specs):
            if spec.match_file(candidate):
                ignored = not rule.negate
                reason = f"ignore-file rule: {'!' if rule.negate else ''}{rule.pattern}"

        return ignored, reason


# =============================================================================
# IGNORE ENGINE
# =============================================================================

def parse_ignore_lines(lines: Iterable[str]) -> List[IgnoreRule]:
    """Parse gitignore-style lines into rules, skipping blanks and comments."""
    rules = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("!"):
            pattern = line[1:].strip()
            if pattern:
                rules.append(IgnoreRule(pattern, negate=True))
        else:
            rules.append(IgnoreRule(line))
    return rules


def load_ignore_file(path: Path) -> List[IgnoreRule]:
    """Load rules from an ignore-file. Missing or unreadable means no rules."""
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except FileNotFoundError:
        logging.debug(f"No ignore-file at {path}")
        return []
    except OSError as e:
        logging.warning(f"Could not read ignore-file {path}: {e}")
        return []

    rules = parse_ignore_lines(text.splitlines())
    logging.debug(f"Loaded {len(rules)} rules from {path}")
    return rules


class IgnoreEngine:
    """Answers "is this path ignored?" for any path under the root."""

    def __init__(
        self,
        root: PathLike,
        ignore_rules: Sequence[IgnoreRule] = (),
        custom_exclusions: Sequence[str] = (),
        builtin_exclusions: Sequence[str] = DEFAULT_EXCLUSIONS,
    ):
        self.root = Path(root)
        self.exclusion_rules: Tuple[IgnoreRule, ...] = tuple(
            [IgnoreRule(p, source=RuleSource.BUILT_IN) for p in builtin_exclusions]
            + [IgnoreRule(p, source=RuleSource.CUSTOM) for p in custom_exclusions]
        )
        self.ignore_file_layer = IgnoreFileLayer(ignore_rules)
        self.layers: List[IgnoreLayer] = [
            ExclusionLayer(self.exclusion_rules),
            self.ignore_file_layer,
        ]

    @classmethod
    def for_root(
        cls,
        root: PathLike,
        custom_exclusions: Sequence[str] = (),
        ignore_file_name: str = Defaults.IGNORE_FILE,
        builtin_exclusions: Sequence[str] = DEFAULT_EXCLUSIONS,
    ) -> IgnoreEngine:
        """Build an engine from the ignore-file found at the root."""
        root = Path(root)
        rules = load_ignore_file(root / ignore_file_name)
        return cls(root, rules, custom_exclusions, builtin_exclusions)

    @property
    def rules(self) -> List[IgnoreRule]:
        """All loaded rules, built-in first, in evaluation order."""
        return list(self.exclusion_rules) + self.ignore_file_layer.rules

    def relative(self, path: PathLike) -> str:
        """Make a path root-relative and normalized."""
        if os.path.isabs(path):
            try:
                path = Path(path).relative_to(self.root)
            except ValueError:
                pass
        return normalize_path(path)

    def explain(self, path: PathLike, is_dir: bool = False) -> Tuple[bool, str]:
        """Return (ignored, reason) for a path."""
        relative = self.relative(path)
        if not relative:
            return False, ""

        reason = ""
        for layer in self.layers:
            ignored, why = layer.check(relative, is_dir)
            if ignored:
                return True, why
            reason = why or reason
        return False, reason

    def is_ignored(self, path: PathLike, is_dir: bool = False) -> bool:
        return self.explain(path, is_dir)[0]


# =============================================================================
# SELECTION
# =============================================================================

def split_selection_text(text: Optional[str]) -> List[str]:
    """Split comma-separated selection text into stripped, non-empty entries."""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def parse_selection(text: Optional[str]) -> Selection:
    """Parse comma-separated entries; a trailing slash marks a folder."""
    files: List[str] = []
    folders: List[str] = []
    for item in split_selection_text(text):
        if item.endswith(("/", "\\")):
            folders.append(item)
        else:
            files.append(item)
    return Selection(frozenset(files), frozenset(folders))


def resolve_selection(
    root: PathLike,
    entries: Iterable[str],
    missing_as: PathKind = PathKind.FILE,
) -> Selection:
    """Resolve raw entries against the filesystem.

    An entry with a trailing slash is a folder. Otherwise an entry that exists
    takes its on-disk kind and one that does not exist falls back to
    ``missing_as``.
    """
    root = Path(root)
    files: List[str] = []
    folders: List[str] = []

    for raw in entries:
        item = raw.strip()
        if not item:
            continue
        if item.endswith(("/", "\\")):
            folders.append(item)
            continue

        candidate = root / normalize_path(item)
        if candidate.is_dir():
            folders.append(item)
        elif candidate.exists():
            files.append(item)
        elif missing_as is PathKind.FOLDER:
            logging.debug(f"Selection entry '{item}' not found, treating as folder")
            folders.append(item)
        else:
            logging.debug(f"Selection entry '{item}' not found, treating as file")
            files.append(item)

    return Selection(frozenset(files), frozenset(folders))


def classify(
    relative_path: PathLike,
    selection: Selection,
    directories_only: bool = False,
) -> InclusionClass:
    """Decide whether a file is fully included, previewed, or omitted."""
    if selection.is_empty:
        return InclusionClass.FULL

    path = normalize_path(relative_path)
    if path in selection.files:
        return InclusionClass.FULL

    for folder in selection.folders:
        if not folder or path == folder or path.startswith(f"{folder}/"):
            return InclusionClass.FULL

    return InclusionClass.OMITTED if directories_only else InclusionClass.PREVIEW


# =============================================================================
# DIRECTORY LISTING
# =============================================================================

def list_directory(directory: Path, root: Path, ignore: IgnoreEngine) -> List[DirEntry]:
    """List visible children sorted by name. Raises OSError if unreadable."""
    entries = []

    for item in sorted(directory.iterdir(), key=lambda p: p.name):
        relative = normalize_path(item.relative_to(root))
        try:
            if item.is_symlink() and not item.exists():
                logging.debug(f"Skipping broken symlink: {relative}")
                continue
            is_dir = item.is_dir()
        except OSError as e:
            logging.debug(f"Skipping {relative}: {e}")
            continue

        ignored, reason = ignore.explain(relative, is_dir=is_dir)
        if ignored:
            logging.debug(f"Excluded {relative}: {reason}")
            continue

        entries.append(DirEntry(item.name, item, relative, is_dir))

    return entries


def is_binary_path(path: Path) -> bool:
    return path.suffix.lower() in BINARY_EXTENSIONS


def has_null_bytes(path: Path) -> bool:
    """Sniff the head of a file for NUL bytes."""
    with open(path, "rb") as f:
        return b"\x00" in f.read(Defaults.BINARY_SNIFF_BYTES)


def split_lines(content: str) -> List[str]:
    """Split on line breaks only; form feeds and other separators stay in the line.

    A trailing newline does not start an extra line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


# =============================================================================
# TREE RENDERER
# =============================================================================

@dataclass(frozen=True)
class _TreeFrame:
    path: Path
    name: str
    is_dir: bool
    prefix: str
    is_last: bool
    depth: int
    ancestors: FrozenSet[str] = frozenset()


class TreeRenderer:
    """Renders the ignore-filtered directory tree as ASCII lines."""

    def __init__(self, root: Path, ignore: IgnoreEngine, max_depth: int = 0):
        self.root = root
        self.ignore = ignore
        self.max_depth = max_depth

    def render(self, buffer: List[str]) -> None:
        """Append tree lines to the buffer."""
        stack = [_TreeFrame(self.root, self.root.name or str(self.root), True, "", True, 0)]

        while stack:
            frame = stack.pop()
            connector = GLYPH_LAST if frame.is_last else GLYPH_CHILD

            if not frame.is_dir:
                buffer.append(f"{frame.prefix}{connector} {frame.name}")
                continue

            buffer.append(f"{frame.prefix}{connector} {frame.name}/")
            child_prefix = frame.prefix + (GLYPH_SPACE if frame.is_last else GLYPH_PIPE)

            if self.max_depth > 0 and frame.depth >= self.max_depth:
                buffer.append(f"{child_prefix}{GLYPH_LAST} {TREE_PLACEHOLDER}")
                continue

            real = os.path.realpath(frame.path)
            if real in frame.ancestors:
                logging.warning(f"Not following symlink loop at {frame.path}")
                continue

            try:
                entries = list_directory(frame.path, self.root, self.ignore)
            except OSError as e:
                logging.warning(f"Could not read directory {frame.path}: {e}")
                buffer.append(f"{child_prefix}{GLYPH_LAST} [Error reading directory: {e}]")
                continue

            ancestors = frame.ancestors | {real}
            for index in reversed(range(len(entries))):
                entry = entries[index]
                stack.append(_TreeFrame(
                    path=entry.path,
                    name=entry.name,
                    is_dir=entry.is_dir,
                    prefix=child_prefix,
                    is_last=index == len(entries) - 1,
                    depth=frame.depth + 1,
                    ancestors=ancestors,
                ))


# =============================================================================
# CONTENT ASSEMBLER
# =============================================================================

class ContentAssembler:
    """Selection-aware walk that appends one block per emitted file."""

    def __init__(
        self,
        root: Path,
        ignore: IgnoreEngine,
        selection: Selection,
        options: TraversalOptions,
        summarizer: Callable[[str, str], str] = summarize,
    ):
        self.root = root
        self.ignore = ignore
        self.selection = selection
        self.options = options
        self.summarizer = summarizer
        self.counts: Dict[InclusionClass, int] = {InclusionClass.FULL: 0, InclusionClass.PREVIEW: 0}

    def assemble(self, buffer: List[str]) -> int:
        """Append file blocks to the buffer. Returns the number of files emitted."""
        count = 0
        stack: List[Tuple[DirEntry, FrozenSet[str]]] = [
            (DirEntry(self.root.name, self.root, "", True), frozenset())
        ]

        while stack:
            entry, ancestors = stack.pop()

            if not entry.is_dir:
                inclusion = self._append_file(entry, buffer)
                if inclusion is not None:
                    self.counts[inclusion] += 1
                    count += 1
                continue

            real = os.path.realpath(entry.path)
            if real in ancestors:
                continue

            try:
                children = list_directory(entry.path, self.root, self.ignore)
            except OSError as e:
                logging.warning(f"Skipping unreadable directory {entry.path}: {e}")
                continue

            nested = ancestors | {real}
            stack.extend((child, nested) for child in reversed(children))

        return count

    def _append_file(self, entry: DirEntry, buffer: List[str]) -> Optional[InclusionClass]:
        """Append one file block. Returns how the file was included, or None if skipped."""
        if is_binary_path(entry.path):
            logging.debug(f"Skipping binary file: {entry.relative}")
            return None

        inclusion = classify(entry.relative, self.selection, self.options.directories_only)
        if inclusion is InclusionClass.OMITTED:
            logging.debug(f"Omitted {entry.relative}: not selected")
            return None

        try:
            if has_null_bytes(entry.path):
                logging.debug(f"Skipping binary file: {entry.relative}")
                return None
            content = entry.path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logging.warning(f"Could not read {entry.relative}: {e}")
            body = [f"[Error reading file: {e}]"]
        else:
            body = self._render_body(entry, content, inclusion)

        buffer.append(FILE_SEPARATOR)
        buffer.append(f"FILE: {entry.relative}{self._header_suffix(inclusion)}")
        buffer.append(FILE_SEPARATOR)
        buffer.extend(body)
        buffer.extend(["", ""])
        return inclusion

    def _render_body(self, entry: DirEntry, content: str, inclusion: InclusionClass) -> List[str]:
        if inclusion is InclusionClass.FULL:
            if self.options.summarize:
                content = self.summarizer(content, entry.path.suffix or entry.name)
            return split_lines(content)

        limit = self.options.preview_lines
        lines = split_lines(content)
        body = lines[:limit]
        if len(lines) > limit:
            body.append("...")
            body.append(TRUNCATION_MESSAGE.format(shown=limit, total=len(lines)))
        return body

    def _header_suffix(self, inclusion: InclusionClass) -> str:
        if inclusion is InclusionClass.PREVIEW:
            return " (preview only)"
        if self.selection.is_empty:
            return ""
        return " (fully included)"


# =============================================================================
# PROJECT RENDERING
# =============================================================================

def render_project(
    root_path: PathLike,
    selection: Optional[Selection] = None,
    options: Optional[TraversalOptions] = None,
    summarizer: Callable[[str, str], str] = summarize,
) -> RenderResult:
    """Render the tree and file contents of ``root_path``.

    Raises InvalidRootError when the root is missing or not a directory.
    """
    root = Path(root_path)
    if not root.is_dir():
        raise InvalidRootError(root)
    root = root.resolve()

    selection = selection or Selection()
    options = options or TraversalOptions()
    ignore = IgnoreEngine.for_root(root, options.custom_exclusions, options.ignore_file_name)

    start = time.time()
    lines: List[str] = ["Directory structure:"]
    TreeRenderer(root, ignore, options.max_tree_depth).render(lines)
    logging.info(f"Rendered tree of {root} in {time.time() - start:.3f}s")

    lines.extend(["", "", "Files Content:", ""])

    content_start = time.time()
    assembler = ContentAssembler(root, ignore, selection, options, summarizer)
    file_count = assembler.assemble(lines)
    logging.info(f"Assembled {file_count} files in {time.time() - content_start:.3f}s")

    return RenderResult(
        lines=lines,
        file_count=file_count,
        full_count=assembler.counts[InclusionClass.FULL],
        preview_count=assembler.counts[InclusionClass.PREVIEW],
        duration=time.time() - start,
    )


def generate_project_text(
    root_path: PathLike,
    selection: Optional[Selection] = None,
    options: Optional[TraversalOptions] = None,
) -> str:
    """Render a project directory into a single text artifact."""
    return render_project(root_path, selection, options).text


# =============================================================================
# CONFIGURATION BUILDER
# =============================================================================

def load_project_settings(root: Path) -> Dict[str, Any]:
    """Read the ``[tool.project-to-text]`` table from the root's pyproject.toml."""
    path = root / "pyproject.toml"
    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logging.warning(f"Could not read {path}: {e}")
        return {}

    table = data.get("tool", {}).get(PYPROJECT_TABLE, {})
    if not isinstance(table, dict):
        logging.warning(f"Ignoring [tool.{PYPROJECT_TABLE}] in {path}: not a table")
        return {}

    for key in sorted(set(table) - PYPROJECT_KEYS):
        logging.warning(f"Unknown key '{key}' in [tool.{PYPROJECT_TABLE}]")

    return table


class ConfigBuilder:
    """Builds RunConfig from CLI arguments layered over pyproject settings."""

    @staticmethod
    def from_args(args: argparse.Namespace) -> RunConfig:
        """Create config from parsed arguments."""
        root = Path(args.root_dir)
        if not root.is_dir():
            raise InvalidRootError(root)
        root = root.resolve()

        settings = load_project_settings(root)

        # Determine output mode
        if args.output:
            output_mode = OutputMode.FILE
        elif args.stdout or args.no_clipboard:
            output_mode = OutputMode.STDOUT
        else:
            output_mode = OutputMode.CLIPBOARD

        options = ConfigBuilder._build_options(args, settings)
        selection = ConfigBuilder._build_selection(args, root)

        return RunConfig(
            root=root,
            selection=selection,
            options=options,
            output_mode=output_mode,
            output_file=Path(args.output) if args.output else None,
        )

    @staticmethod
    def _build_options(args: argparse.Namespace, settings: Dict[str, Any]) -> TraversalOptions:
        """CLI values win over pyproject values; exclusions are concatenated."""

        def pick(cli_value: Any, key: str, default: Any) -> Any:
            if cli_value is not None:
                return cli_value
            return settings.get(key, default)

        exclusions = settings.get("custom-exclusions", [])
        if isinstance(exclusions, str):
            exclusions = [exclusions]

        return TraversalOptions(
            max_tree_depth=pick(args.max_depth, "max-tree-depth", Defaults.MAX_TREE_DEPTH),
            preview_lines=pick(args.preview_lines, "preview-lines", Defaults.PREVIEW_LINES),
            custom_exclusions=tuple(exclusions) + tuple(args.exclude or []),
            summarize=bool(pick(args.summarize, "summarize", False)),
            directories_only=bool(pick(args.directories_only, "directories-only", False)),
            ignore_file_name=pick(args.ignore_file, "ignore-file", Defaults.IGNORE_FILE),
        )

    @staticmethod
    def _build_selection(args: argparse.Namespace, root: Path) -> Selection:
        """Merge --select text with explicit --file and --folder entries."""
        missing_as = PathKind(args.missing_as)
        selection = resolve_selection(root, split_selection_text(args.select), missing_as)
        explicit = Selection(frozenset(args.file or []), frozenset(args.folder or []))
        return selection.merge(explicit)


# =============================================================================
# OUTPUT WRITER
# =============================================================================

class OutputWriter:
    """Delivers a render result to the destination chosen in a RunConfig.

    Each destination returns the confirmation line printed under the run
    summary on stderr, or None when nothing should be printed.
    """

    def __init__(self, config: RunConfig):
        self.config = config
        self._destinations: Dict[OutputMode, Callable[[str], Optional[str]]] = {
            OutputMode.FILE: self._to_file,
            OutputMode.STDOUT: self._to_stdout,
            OutputMode.CLIPBOARD: self._to_clipboard,
        }

    def write(self, result: RenderResult) -> bool:
        mode = self.config.output_mode
        try:
            confirmation = self._destinations[mode](result.text)
        except (OSError, pyperclip.PyperclipException) as e:
            print(f"❌ {mode.name.capitalize()} output failed: {e}", file=sys.stderr)
            return False

        if confirmation:
            print(result.describe(self.config.root.name), file=sys.stderr)
            print(confirmation, file=sys.stderr)
        return True

    def _to_file(self, text: str) -> Optional[str]:
        path = self.config.output_file
        if path is None:
            raise ValueError("File output needs an output path")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return f"✅ Written to {path}"

    def _to_stdout(self, text: str) -> Optional[str]:
        # stdout carries the artifact itself; no confirmation
        print(text)
        return None

    def _to_clipboard(self, text: str) -> Optional[str]:
        pyperclip.copy(text)
        return f"✅ {len(text):,} chars copied to clipboard"


# =============================================================================
# CLI PARSER
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="project-to-text",
        description="Render a project's directory tree and file contents as one text block",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  project-to-text                          # Current dir, copy to clipboard
  project-to-text ./app --stdout           # Print to stdout
  project-to-text --select "src/,README.md"  # Full src/ and README, preview the rest
  project-to-text --summarize -o ctx.txt   # Declarations only, write to file
  project-to-text --exclude "*.snap"       # Extra exclusion pattern
        """,
    )

    # Positional
    parser.add_argument(
        "root_dir",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Root project directory (default: current)",
    )

    # Selection
    sel = parser.add_argument_group("Selection")
    sel.add_argument("--select", metavar="TEXT", help="Comma-separated files and folders (folders end with /)")
    sel.add_argument("--file", action="append", metavar="PATH", help="File to include in full")
    sel.add_argument("--folder", action="append", metavar="PATH", help="Folder to include in full")
    sel.add_argument(
        "--missing-as",
        choices=[kind.value for kind in PathKind],
        default=PathKind.FILE.value,
        help="Kind assumed for --select entries that do not exist (default: file)",
    )
    sel.add_argument(
        "--directories-only",
        action="store_true",
        default=None,
        help="Omit unselected files instead of previewing them",
    )

    # Filtering
    filt = parser.add_argument_group("Filtering")
    filt.add_argument("--exclude", action="append", metavar="PATTERN", help="Extra exclusion pattern")
    filt.add_argument("--max-depth", type=int, metavar="N", help=f"Max tree depth, 0 = unbounded (default: {Defaults.MAX_TREE_DEPTH})")
    filt.add_argument("--ignore-file", metavar="NAME", help=f"Ignore-file name at the root (default: {Defaults.IGNORE_FILE})")

    # Content
    content = parser.add_argument_group("Content")
    content.add_argument("--preview-lines", type=int, metavar="N", help=f"Lines shown for previewed files (default: {Defaults.PREVIEW_LINES})")
    content.add_argument("--summarize", action="store_true", default=None, help="Keep declarations, drop function bodies")

    # Output options
    out = parser.add_argument_group("Output Options")
    out_excl = out.add_mutually_exclusive_group()
    out_excl.add_argument("-o", "--output", metavar="FILE", help="Write to file")
    out_excl.add_argument("--stdout", action="store_true", help="Print to stdout")
    out_excl.add_argument("--no-clipboard", action="store_true", help="Don't copy to clipboard")

    # Meta
    meta = parser.add_argument_group("Information")
    meta.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    meta.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    return parser


# =============================================================================
# MAIN
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = ConfigBuilder.from_args(args)
        result = render_project(config.root, config.selection, config.options)

        return 0 if OutputWriter(config).write(result) else 1

    except KeyboardInterrupt:
        print("\n⚠️ Interrupted", file=sys.stderr)
        return 130
    except InvalidRootError as e:
        logging.error(str(e))
        return 1
    except ValueError as e:
        logging.error(f"Invalid configuration: {e}")
        return 1
    except Exception as e:
        logging.exception("Critical error")
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
