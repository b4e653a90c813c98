"""
Minimal Markdown reader for the notes.

We don't render Markdown here, we only need to know enough about a document's
structure to check it: where its headings are (and what anchors they produce),
which fenced code blocks it has, and which links it makes. Everything that sits
inside a code fence is opaque, so a ``# comment`` in a Python example is never
mistaken for a heading.

Only the parts of CommonMark the notes actually use are supported: ATX
headings, backtick/tilde fences, and inline ``[text](target)`` links.
"""
from __future__ import annotations

import re
from collections import Counter

from attrs import define, field
from django.utils.text import slugify

DEFAULT_SEPARATOR = "<!-- document-separator -->"

HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
FENCE_OPEN_RE = re.compile(r"^( {0,3})(`{3,}|~{3,})(.*)$")
FENCE_CLOSE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")
CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1")
LINK_RE = re.compile(r"!?\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


@define
class Heading:
    """
    An ATX heading, e.g. ``## Field lookups``
    """

    level: int
    title: str
    line: int
    anchor: str = ""


@define
class CodeBlock:
    """
    A fenced code block.

    ``language`` is the first word of the info string, lower-cased, and is
    empty when the fence has no info string.
    """

    language: str
    source: str
    line: int
    unclosed: bool = False


@define
class Link:
    """
    An inline link (or image) found in prose.
    """

    target: str
    line: int

    @property
    def is_internal(self) -> bool:
        return not (SCHEME_RE.match(self.target) or self.target.startswith("//"))

    @property
    def path(self) -> str:
        path = self.target.partition("#")[0]
        return path.partition("?")[0]

    @property
    def fragment(self) -> str:
        return self.target.partition("#")[2]


@define
class MarkdownParts:
    headings: list[Heading] = field(factory=list)
    code_blocks: list[CodeBlock] = field(factory=list)
    links: list[Link] = field(factory=list)


def heading_anchor(title: str) -> str:
    """
    Return the slug a heading title is addressed by, before de-duplication.

    Inline code and emphasis markers are dropped first so that
    "The ``objects`` manager" and "The objects manager" share an anchor.
    """
    return slugify(title.replace("`", "").replace("*", ""))


def parse_markdown(text: str) -> MarkdownParts:
    """
    Split ``text`` into its headings, fenced code blocks and links.

    Line numbers are 1-based. Repeated anchors get ``-1``, ``-2``... suffixes
    in document order, skipping any suffix another heading already uses.
    """
    parts = MarkdownParts()
    seen_anchors: Counter[str] = Counter()
    used_anchors: set[str] = set()

    fence = None  # (char, length, indent, language, start line, body lines)
    for lineno, line in enumerate(text.splitlines(), start=1):
        if fence is not None:
            char, length, indent, language, start, body = fence
            close = FENCE_CLOSE_RE.match(line)
            if close and close.group(1)[0] == char and len(close.group(1)) >= length:
                parts.code_blocks.append(
                    CodeBlock(language=language, source="\n".join(body), line=start)
                )
                fence = None
            else:
                body.append(_strip_indent(line, indent))
            continue

        opening = FENCE_OPEN_RE.match(line)
        if opening and not (opening.group(2)[0] == "`" and "`" in opening.group(3)):
            info = opening.group(3).strip()
            language = info.split()[0].lower() if info else ""
            fence = (
                opening.group(2)[0],
                len(opening.group(2)),
                len(opening.group(1)),
                language,
                lineno,
                [],
            )
            continue

        heading = HEADING_RE.match(line)
        if heading:
            title = heading.group(2).strip()
            base = heading_anchor(title)
            anchor = base
            while anchor in used_anchors:
                seen_anchors[base] += 1
                anchor = f"{base}-{seen_anchors[base]}"
            used_anchors.add(anchor)
            parts.headings.append(
                Heading(level=len(heading.group(1)), title=title, line=lineno, anchor=anchor)
            )

        # Links are collected from prose and headings alike. Mask inline code so
        # that `[x](y)` inside backticks is not a link.
        prose = CODE_SPAN_RE.sub(lambda m: " " * len(m.group(0)), line)
        for match in LINK_RE.finditer(prose):
            parts.links.append(Link(target=match.group(1), line=lineno))

    if fence is not None:
        _char, _length, _indent, language, start, body = fence
        parts.code_blocks.append(
            CodeBlock(language=language, source="\n".join(body), line=start, unclosed=True)
        )

    return parts


def split_sections(text: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """
    Return the pieces of ``text`` between separator marker lines.

    The marker must be the whole line, with no surrounding whitespace.
    Text with no marker comes back as a single piece.
    """
    sections: list[str] = []
    current: list[str] = []
    for line in text.splitlines():
        if line == separator:
            sections.append("\n".join(current))
            current = []
        else:
            current.append(line)
    sections.append("\n".join(current))
    return sections


def _strip_indent(line: str, indent: int) -> str:
    """
    Remove up to ``indent`` leading spaces, the way an indented fence does.
    """
    removable = len(line) - len(line.lstrip(" "))
    return line[min(indent, removable):]
