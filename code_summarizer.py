#!/usr/bin/env python3
"""
Code Summarizer - Declaration skeletons for source files

Reduces source text to imports, declarations, signatures and comments while
dropping statement bodies. Line-oriented heuristics only, no parser: brace
depth and indentation are tracked per line to know where a body ends.

Architecture:
    line → mode ─┬→ NORMAL → pattern tables → emit / rewrite / drop
                 ├→ comment, docstring, continuation → emit
                 └→ skip-block, multi-line string → suppress
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, FrozenSet, List, Optional, Pattern, Tuple

# =============================================================================
# CONSTANTS
# =============================================================================

INDENT_STEP = 4
PLACEHOLDER = "..."
MAX_CLASSIFY_LENGTH = 1000

OPENERS = "([{"
CLOSERS = ")]}"

BRACE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".hh", ".hxx",
    ".cs", ".java", ".kt", ".kts", ".scala", ".groovy", ".gradle",
    ".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".mts", ".cts",
    ".go", ".rs", ".swift", ".dart", ".php", ".m", ".mm", ".zig",
})

INDENT_EXTENSIONS: FrozenSet[str] = frozenset({".py", ".pyi", ".pyw"})


class Family(Enum):
    """Language families by how bodies are delimited."""
    BRACE = auto()      # { ... }
    INDENT = auto()     # header: + indented block
    GENERIC = auto()    # either


@dataclass(frozen=True)
class CommentSyntax:
    """Comment and docstring tokens of a family."""
    line: Tuple[str, ...]
    block: Tuple[Tuple[str, str], ...]
    docstrings: Tuple[str, ...]


COMMENT_SYNTAX: Dict[Family, CommentSyntax] = {
    Family.BRACE: CommentSyntax(("//",), (("/*", "*/"),), ()),
    Family.INDENT: CommentSyntax(("#",), (), ('"""', "'''")),
    Family.GENERIC: CommentSyntax(("//", "#"), (("/*", "*/"),), ('"""', "'''")),
}


def detect_family(extension_hint: str) -> Family:
    """Map an extension (``.py``, ``py``) or file name (``main.py``) to a family."""
    hint = extension_hint.strip().lower()
    if "." in hint:
        hint = hint[hint.rfind("."):]
    elif hint:
        hint = f".{hint}"

    if hint in BRACE_EXTENSIONS:
        return Family.BRACE
    if hint in INDENT_EXTENSIONS:
        return Family.INDENT
    return Family.GENERIC


# =============================================================================
# PATTERN TABLES
# =============================================================================

_MODIFIER = (
    r"(?:export|default|declare|public|private|protected|internal|static|abstract"
    r"|final|sealed|open|override|virtual|async|unsafe|inline|extern|data|partial"
    r"|readonly|suspend|operator|infix|tailrec|synchronized|native|mutating|const"
    r"|case|implicit|annotation|inner|value|pub(?:\([^)]*\))?)"
)
_MODS = rf"(?:{_MODIFIER}\s+)*"

_STRING_RE = re.compile(
    r'"""|\'\'\'|"(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\'|`(?:\\.|[^`\\])*`'
)
_INLINE_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/")
_DOCSTRING_RE = re.compile(r"""^[rRuUbBfF]{0,2}(\"\"\"|''')""")

_IMPORT_PATTERNS: Tuple[Pattern[str], ...] = tuple(re.compile(p) for p in (
    r"^\s*import\b(?!\()",
    r"^\s*from\s+[\w.]+\s+import\b",
    r"^\s*#\s*(?:include|import)\b",
    r"^\s*using\s+(?:static\s+|namespace\s+)?[\w.:]+(?:\s*=\s*[\w.:<>]+)?\s*;",
    r"^\s*package\s+[\w.]+\s*;?\s*$",
    r"^\s*(?:pub(?:\([^)]*\))?\s+)?use\s+[\w:\\]+(?:::\{.*|\s+as\s+\w+\s*;|\s*;)\s*$",
    r"^\s*extern\s+crate\b",
    r"""^\s*(?:require|require_once|require_relative|include|include_once)\s*\(?\s*['"]""",
    r"^\s*(?:const|let|var|local)\s+[\w${}\s,:]+=\s*require\s*\(",
    r"""^\s*(?:library|part(?:\s+of)?)\s+[\w.'"/]+\s*;""",
))

_EXPORT_PATTERNS: Tuple[Pattern[str], ...] = tuple(re.compile(p) for p in (
    r"^\s*export\s*\*",
    r"^\s*export\s+(?:type\s+)?\{",
    r"^\s*export\s+default\s+[\w$.]+\s*;?\s*$",
    r"^\s*export\s*=",
    r"^\s*module\.exports\s*=\s*[\w$.]+\s*;?\s*$",
    r"^\s*(?:module\.)?exports\.[\w$]+\s*=\s*[\w$.]+\s*;?\s*$",
    r"^\s*__all__\s*(?::[^=]+)?=",
))

_DECORATOR_RE = re.compile(r"^\s*@[A-Za-z_]")
_ANNOTATION_RE = re.compile(r"@[A-Za-z_][\w.]*(?:\s*\([^()]*\))?")
_ATTRIBUTE_PATTERNS: Tuple[Pattern[str], ...] = tuple(re.compile(p) for p in (
    r"^\s*#!?\[",                                   # Rust
    r"^\s*\[[A-Z][\w.]*(?:\(.*\))?(?:,\s*\w.*)?\]\s*$",   # C#
))

_DECLARATIVE_RE = re.compile(
    rf"^\s*{_MODS}(?:interface|struct|enum|union|typedef)\b(?!\s*[=(:.,)])"
    rf"|^\s*{_MODS}type\s+[A-Za-z_]\w*\s+(?:struct|interface)\b"
)
_CONTAINER_RE = re.compile(
    rf"^\s*{_MODS}(?:class|trait|impl|namespace|module|mod|object|extension"
    rf"|protocol|record|actor|companion\s+object)\b(?!\s*[=(:.,;)\]])"
)
_TYPE_ALIAS_RE = re.compile(rf"^\s*{_MODS}(?:type|typealias)\s+[A-Za-z_][\w$]*\b(?!\s*[.(])")

_PY_DEF_RE = re.compile(r"^\s*(?:async\s+)?def\s+\w")
_KEYWORD_FUNC_RE = re.compile(
    rf"^\s*{_MODS}(?:function\b\s*\*?\s*[\w$(]|func\s+[\w(]"
    r"|(?:fn|fun|def|sub|proc)\s+[\w$<`]|procedure\s+\w)"
)
_ARROW_FUNC_RE = re.compile(
    rf"^\s*{_MODS}(?:(?:let|var|val)\s+)?[\w$]+\s*(?::[^=]+)?=\s*(?:async\s+)?"
    r"(?:function\b|\([^()]*\)\s*(?::[^=]+)?=>|[\w$]+\s*=>|\(\s*$)"
)
_CALLABLE_RE = re.compile(
    r"^\s*(?P<prefix>(?:[\w$<>\[\],.?*&:~@]+\s+)*?)[*&]*"
    r"(?P<name>[A-Za-z_$~][\w$~.:]*)\s*(?:<[^()]*>)?\s*\("
)
_SIGNATURE_TAIL_RE = re.compile(
    r"^\)\s*(?:const\s*|noexcept\s*|override\s*|throws\s+[\w.,\s]+?"
    r"|->\s*[\w<>\[\]:&*,' ]+?|:\s*[\w<>\[\]|.?,' ]+?)*\s*(?:\{\s*\}|[{;:])?\s*$"
)
_PAREN_BODY_RE = re.compile(r"=>\s*[(\[]$")

_ASSIGN_RE = re.compile(
    r"^(?P<lhs>\s*(?:[\w$<>\[\],.?@]+\s+)*[\w$.\[\]]*[\w$\]])"
    r"(?P<annot>\s*:\s*[^=]+?)?"
    r"\s*(?P<op>:=|=)(?![=>~])\s*(?P<rhs>\S.*)$"
)
_LITERAL_RE = re.compile(
    r"""^(?:[rRbBuUfF]{0,2}["'`]|[-+]?\.?\d"""
    r"|(?:true|false|True|False|null|nil|None|undefined|NaN|Infinity)\b"
    r"|new\s+[\w$.]|\.\.\.|[{\[(])"
)

_CONTROL_KEYWORDS: FrozenSet[str] = frozenset({
    "if", "else", "elif", "for", "foreach", "while", "do", "switch", "case",
    "catch", "try", "finally", "return", "throw", "new", "delete", "sizeof",
    "typeof", "instanceof", "await", "yield", "with", "using", "lock", "fixed",
    "match", "when", "until", "unless", "loop", "select", "defer", "go",
    "guard", "repeat", "print", "echo", "assert", "super", "not", "and", "or",
    "in", "is", "lambda", "raise", "goto", "del",
})

# "export default defineConfig({" is a call, not a declaration
_CALL_PREFIXES: FrozenSet[str] = frozenset({"export", "default"})


# =============================================================================
# STATE
# =============================================================================

class Mode(Enum):
    """What the current line belongs to."""
    NORMAL = auto()
    IN_BLOCK_COMMENT = auto()
    IN_DOCSTRING = auto()
    SKIPPING_BRACE_BLOCK = auto()
    SKIPPING_INDENT_BLOCK = auto()
    CONTINUATION = auto()       # multi-line header, emitted
    EMITTING_BLOCK = auto()     # declaration-only body, emitted
    SKIPPING_STRING = auto()    # multi-line string on a hidden right-hand side


class HeaderKind(Enum):
    """What a declaration header opens."""
    FUNCTION = auto()       # body skipped
    CONTAINER = auto()      # members summarized
    DECLARATIVE = auto()    # body emitted verbatim


@dataclass
class SummarizerState:
    """Per-file scanner state."""
    mode: Mode = Mode.NORMAL
    close_token: str = ""

    # Skip-blocks
    skip_depth: int = 0
    skip_indent: int = 0
    skip_comment: bool = False
    skip_string_token: str = ""
    emit_close: bool = False

    # Structure outside skip-blocks
    brace_count: int = 0
    container_stack: List[int] = field(default_factory=list)
    verbatim_depth: int = 0

    # Multi-line headers
    cont_depth: int = 0
    cont_braces: int = 0
    header_kind: Optional[HeaderKind] = None
    header_indent: int = 0

    # Allman style: header now, "{" on the next line
    awaiting: Optional[HeaderKind] = None
    awaiting_indent: int = 0

    @property
    def in_block_comment(self) -> bool:
        return self.mode is Mode.IN_BLOCK_COMMENT

    @property
    def in_docstring(self) -> bool:
        return self.mode is Mode.IN_DOCSTRING


# =============================================================================
# HELPERS
# =============================================================================

def _net(text: str, openers: str = OPENERS, closers: str = CLOSERS) -> int:
    return sum(text.count(c) for c in openers) - sum(text.count(c) for c in closers)


def _indent(line: str) -> int:
    expanded = line.expandtabs(INDENT_STEP)
    return len(expanded) - len(expanded.lstrip())


# =============================================================================
# SUMMARIZER
# =============================================================================

class Summarizer:
    """Line-by-line state machine producing a declaration skeleton."""

    def __init__(self, extension_hint: str = ""):
        self.family = detect_family(extension_hint)
        self.syntax = COMMENT_SYNTAX[self.family]
        self.state = SummarizerState()
        self.output: List[str] = []

    def run(self, content: str) -> str:
        for line in content.splitlines():
            self.feed(line)
        return "\n".join(self.output)

    def feed(self, line: str) -> None:
        """Consume one input line."""
        mode = self.state.mode
        if mode in (Mode.IN_BLOCK_COMMENT, Mode.IN_DOCSTRING):
            self._feed_comment(line)
        elif mode is Mode.SKIPPING_BRACE_BLOCK:
            self._feed_brace_skip(line)
        elif mode is Mode.SKIPPING_INDENT_BLOCK:
            self._feed_indent_skip(line)
        elif mode is Mode.SKIPPING_STRING:
            self._feed_string_skip(line)
        elif mode is Mode.CONTINUATION:
            self._feed_continuation(line)
        elif mode is Mode.EMITTING_BLOCK:
            self._feed_emitting(line)
        else:
            self._feed_normal(line)

    # -------------------------------------------------------------------------
    # Mode handlers
    # -------------------------------------------------------------------------

    def _feed_comment(self, line: str) -> None:
        self._emit(line)
        if self.state.close_token in line:
            self.state.mode = Mode.NORMAL

    def _feed_brace_skip(self, line: str) -> None:
        state = self.state
        if state.skip_comment:
            end = line.find("*/")
            if end < 0:
                return
            state.skip_comment = False
            line = line[end + 2:]

        code = self._code(line)
        if self.syntax.block and "/*" in code:
            code = code.split("/*", 1)[0]
            state.skip_comment = True

        state.skip_depth += _net(code)
        if state.skip_depth <= 0:
            state.mode = Mode.NORMAL
            state.skip_comment = False
            if state.emit_close:
                self._emit(line)

    def _feed_indent_skip(self, line: str) -> None:
        state = self.state
        if state.skip_string_token:
            if line.count(state.skip_string_token) % 2 == 1:
                state.skip_string_token = ""
            return

        if not line.strip():
            return

        if _indent(line) > state.skip_indent:
            for token in ('"""', "'''"):
                if line.count(token) % 2 == 1:
                    state.skip_string_token = token
                    break
            return

        state.mode = Mode.NORMAL
        self._feed_normal(line)

    def _feed_string_skip(self, line: str) -> None:
        if line.count(self.state.skip_string_token) % 2 == 1:
            self.state.skip_string_token = ""
            self.state.mode = Mode.NORMAL

    def _feed_continuation(self, line: str) -> None:
        state = self.state
        self._emit(line)
        code = self._code(line)
        tail = code.rstrip()
        braces = _net(code, "{", "}")

        if state.header_kind is None:
            state.cont_depth += _net(code)
            if state.cont_depth <= 0:
                state.mode = Mode.NORMAL
            return

        state.cont_depth += _net(code) - braces
        state.cont_braces += braces
        total = state.cont_depth + state.cont_braces

        if (state.header_kind is HeaderKind.FUNCTION
                and self.family is not Family.INDENT
                and total > 0
                and (tail.endswith("{") or _PAREN_BODY_RE.search(tail))):
            self._enter_skip(total, state.header_indent, placeholder=True)
            return

        if state.cont_depth <= 0:
            state.mode = Mode.NORMAL
            self._open_body(state.header_kind, state.header_indent, tail, state.cont_braces)

    def _feed_emitting(self, line: str) -> None:
        self._emit(line)
        self.state.verbatim_depth += _net(self._code(line))
        if self.state.verbatim_depth <= 0:
            self.state.mode = Mode.NORMAL

    def _feed_normal(self, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            return

        if self.state.awaiting is not None and self._feed_awaited(line, stripped):
            return

        code = self._code(line)
        if len(line) > MAX_CLASSIFY_LENGTH:
            self._drop(line, code)
            return

        for rule in (
            self._import,
            self._export,
            self._decorator,
            self._comment,
            self._type_declaration,
            self._function,
            self._assignment,
        ):
            if rule(line, stripped, code):
                return

        self._drop(line, code)

    def _feed_awaited(self, line: str, stripped: str) -> bool:
        """Handle the line after a header that had no opening brace."""
        state = self.state
        kind, state.awaiting = state.awaiting, None
        if not stripped.startswith("{"):
            return False

        self._emit(line)
        code = self._code(line)
        depth = _net(code)
        if kind is HeaderKind.FUNCTION:
            if depth > 0:
                self._enter_skip(depth, state.awaiting_indent, placeholder=True)
        elif kind is HeaderKind.CONTAINER:
            braces = _net(code, "{", "}")
            if braces > 0:
                state.container_stack.append(state.brace_count)
                state.brace_count += braces
        elif depth > 0:
            state.mode = Mode.EMITTING_BLOCK
            state.verbatim_depth = depth
        return True

    # -------------------------------------------------------------------------
    # Classification rules, in priority order
    # -------------------------------------------------------------------------

    def _import(self, line: str, stripped: str, code: str) -> bool:
        if not any(p.match(line) for p in _IMPORT_PATTERNS):
            return False
        self._emit(line)
        self._continue_if_open(code)
        return True

    def _export(self, line: str, stripped: str, code: str) -> bool:
        if not any(p.match(line) for p in _EXPORT_PATTERNS):
            return False
        self._emit(line)
        self._continue_if_open(code)
        return True

    def _decorator(self, line: str, stripped: str, code: str) -> bool:
        if _DECORATOR_RE.match(code):
            open_parens = _net(code)
            # "@Override public void run() {" is a declaration, not a bare annotation
            if _ANNOTATION_RE.sub("", code).strip() and open_parens <= 0:
                return False
        elif not (self.family is Family.BRACE
                  and any(p.match(line) for p in _ATTRIBUTE_PATTERNS)):
            return False

        self._emit(line)
        self._continue_if_open(code)
        return True

    def _comment(self, line: str, stripped: str, code: str) -> bool:
        syntax = self.syntax

        for opener, closer in syntax.block:
            if stripped.startswith(opener):
                self._emit(line)
                if closer not in stripped[len(opener):]:
                    self.state.mode = Mode.IN_BLOCK_COMMENT
                    self.state.close_token = closer
                return True

        if syntax.docstrings:
            match = _DOCSTRING_RE.match(stripped)
            if match:
                token = match.group(1)
                self._emit(line)
                if token not in stripped[match.end():]:
                    self.state.mode = Mode.IN_DOCSTRING
                    self.state.close_token = token
                return True

        if stripped.startswith(syntax.line):
            self._emit(line)
            return True
        return False

    def _type_declaration(self, line: str, stripped: str, code: str) -> bool:
        if _DECLARATIVE_RE.match(code) and "(" not in code.split("{", 1)[0]:
            kind = HeaderKind.DECLARATIVE
        elif _CONTAINER_RE.match(code):
            kind = HeaderKind.CONTAINER
        elif _TYPE_ALIAS_RE.match(code):
            kind = HeaderKind.DECLARATIVE
        else:
            return False

        self._emit(line)
        self._after_header(line, code, kind)
        return True

    def _function(self, line: str, stripped: str, code: str) -> bool:
        if not self._is_function(code):
            return False
        self._emit(line)
        self._after_header(line, code, HeaderKind.FUNCTION)
        return True

    def _assignment(self, line: str, stripped: str, code: str) -> bool:
        if "=" not in code:
            return False
        match = _ASSIGN_RE.match(code)
        if not match:
            return False

        lhs = match.group("lhs")
        if lhs.split()[0] in _CONTROL_KEYWORDS:
            return False
        rhs = match.group("rhs").strip()
        if not _LITERAL_RE.match(rhs):
            return False

        annotation = match.group("annot") or ""
        semicolon = ";" if code.rstrip().endswith(";") else ""
        self._emit(f"{lhs}{annotation} {match.group('op')} {PLACEHOLDER}{semicolon}")

        # The right-hand side may run on for several lines
        tokens = ('"""', "'''") if self.family is Family.INDENT else ('"""', "'''", "`")
        for token in tokens:
            if line.count(token) % 2 == 1:
                self.state.mode = Mode.SKIPPING_STRING
                self.state.skip_string_token = token
                return True

        depth = _net(rhs)
        if depth > 0:
            self._enter_skip(depth, 0, placeholder=False, emit_close=False)
        return True

    def _drop(self, line: str, code: str) -> None:
        """Discard a line but keep bracket and container bookkeeping."""
        state = self.state
        depth = _net(code)
        braces = _net(code, "{", "}")

        if self.family is Family.INDENT:
            if depth > 0:
                self._enter_skip(depth, 0, placeholder=False, emit_close=False)
            return

        parens = depth - braces
        if parens > 0:
            self._enter_skip(parens + max(braces, 0), 0, placeholder=False, emit_close=False)
            return

        state.brace_count = max(0, state.brace_count + braces)
        if braces < 0 and state.container_stack and state.brace_count <= state.container_stack[-1]:
            state.container_stack.pop()
            self._emit(line)

    # -------------------------------------------------------------------------
    # Headers and bodies
    # -------------------------------------------------------------------------

    def _is_function(self, code: str) -> bool:
        if self.family is Family.INDENT:
            return bool(_PY_DEF_RE.match(code))
        if _KEYWORD_FUNC_RE.match(code) or _ARROW_FUNC_RE.match(code):
            return True
        if "(" not in code:
            return False

        match = _CALLABLE_RE.match(code)
        if not match:
            return False

        name = re.split(r"[.:]", match.group("name"))[-1]
        words = match.group("prefix").split()
        if name in _CONTROL_KEYWORDS or any(w in _CONTROL_KEYWORDS for w in words):
            return False
        if _CALL_PREFIXES.intersection(words):
            return False

        tail = code.rstrip()
        if not words and not tail.endswith("{"):
            return False
        if _net(code, "(", ")") > 0:
            return True
        return bool(_SIGNATURE_TAIL_RE.match(tail[tail.rfind(")"):]))

    def _after_header(self, line: str, code: str, kind: HeaderKind) -> None:
        """Decide what follows an emitted declaration header."""
        state = self.state
        indent = _indent(line)
        tail = code.rstrip()
        depth = _net(code)
        braces = _net(code, "{", "}")

        if (kind is HeaderKind.FUNCTION
                and self.family is not Family.INDENT
                and depth > 0
                and (tail.endswith("{") or _PAREN_BODY_RE.search(tail))):
            self._enter_skip(depth, indent, placeholder=True)
            return

        if depth - braces > 0:
            state.mode = Mode.CONTINUATION
            state.header_kind = kind
            state.header_indent = indent
            state.cont_depth = depth - braces
            state.cont_braces = braces
            return

        self._open_body(kind, indent, tail, braces)

    def _open_body(self, kind: HeaderKind, indent: int, tail: str, braces: int) -> None:
        state = self.state

        if kind is HeaderKind.CONTAINER:
            if braces > 0 and self.family is not Family.INDENT:
                state.container_stack.append(state.brace_count)
                state.brace_count += braces
            elif self._awaits_brace(tail):
                self._await(kind, indent)
            return

        if kind is HeaderKind.DECLARATIVE:
            if braces > 0:
                state.mode = Mode.EMITTING_BLOCK
                state.verbatim_depth = braces
            elif self._awaits_brace(tail):
                self._await(kind, indent)
            return

        if braces > 0 and self.family is not Family.INDENT:
            self._enter_skip(braces, indent, placeholder=True)
        elif tail.endswith(":") and self.family is not Family.BRACE:
            state.mode = Mode.SKIPPING_INDENT_BLOCK
            state.skip_indent = indent
            state.skip_string_token = ""
            self._emit_placeholder(indent)
        elif self._awaits_brace(tail):
            self._await(kind, indent)

    def _awaits_brace(self, tail: str) -> bool:
        return self.family is Family.BRACE and not tail.endswith((";", "}", ","))

    def _await(self, kind: HeaderKind, indent: int) -> None:
        self.state.awaiting = kind
        self.state.awaiting_indent = indent

    def _enter_skip(
        self,
        depth: int,
        indent: int,
        placeholder: bool = True,
        emit_close: bool = True,
    ) -> None:
        state = self.state
        state.mode = Mode.SKIPPING_BRACE_BLOCK
        state.skip_depth = depth
        state.skip_comment = False
        state.emit_close = emit_close
        if placeholder:
            self._emit_placeholder(indent)

    def _continue_if_open(self, code: str) -> None:
        depth = _net(code)
        if depth > 0:
            self.state.mode = Mode.CONTINUATION
            self.state.header_kind = None
            self.state.cont_depth = depth

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _emit(self, line: str) -> None:
        self.output.append(line)

    def _emit_placeholder(self, indent: int) -> None:
        self.output.append(" " * (indent + INDENT_STEP) + PLACEHOLDER)

    def _code(self, line: str) -> str:
        """The line with string literals blanked and comments removed."""
        text = _STRING_RE.sub('""', line)
        if self.syntax.block:
            text = _INLINE_BLOCK_COMMENT_RE.sub(" ", text)
        for token in self.syntax.line:
            position = text.find(token)
            if position >= 0:
                text = text[:position]
        return text.rstrip()


# =============================================================================
# PUBLIC API
# =============================================================================

def summarize(content: str, extension_hint: str = "") -> str:
    """Reduce source text to its declarations.

    Keeps imports, exports, decorators, comments, type declarations and
    function signatures. Function bodies become a single ``...`` line and
    literal assignments become ``name = ...``. Anything else is dropped.
    Never raises: on an internal failure the content is returned unchanged.
    """
    if not content:
        return content
    try:
        return Summarizer(extension_hint).run(content)
    except Exception as e:
        logging.warning(f"Summarizer failed on {extension_hint or 'unknown'} content, keeping it whole: {e}")
        return content
