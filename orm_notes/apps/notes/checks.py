"""
Documentation-quality checks for the notes.

Each check looks at one Document at a time (with the whole Collection at hand
for cross-references) and yields every problem it finds as a LintError. To
add a check, subclass ``NoteCheck``, give it a unique ``name`` and implement
``run``, then add it to ``available_checks``.
"""
from __future__ import annotations

import ast
import json
import logging
import posixpath
import textwrap
from pathlib import Path
from typing import Iterator

import tomlkit
from django.utils.translation import gettext as _
from tomlkit.exceptions import TOMLKitError

from orm_notes.lib.markdown import CodeBlock, heading_anchor

from .data import Collection, Document, LintError

logger = logging.getLogger(__name__)

PYCON_PROMPTS = (">>> ", "... ")


class NoteCheck:
    """
    Base class to create checks
    """

    name = "note_check"

    def run(self, document: Document, collection: Collection) -> Iterator[LintError]:
        """
        Implement this to yield the problems found in ``document``.
        """
        raise NotImplementedError

    def error(self, document: Document, line: int, message: str) -> LintError:
        return LintError(check=self.name, path=document.path, line=line, message=message)


class StartsWithHeading(NoteCheck):
    """
    The first non-blank line of a note must be a heading.
    """

    name = "starts-with-heading"

    def run(self, document, collection):
        for lineno, line in enumerate(document.body.splitlines(), start=1):
            if not line.strip():
                continue
            if not document.headings or document.headings[0].line != lineno:
                yield self.error(document, lineno, _("Document does not begin with a heading"))
            return
        yield self.error(document, 1, _("Document is empty"))


class DuplicateHeading(NoteCheck):
    """
    No heading may be repeated at the same level within a note.
    """

    name = "duplicate-heading"

    def run(self, document, collection):
        first_seen: dict[tuple[int, str], int] = {}
        for heading in document.headings:
            # Compare anchors before de-duplication: "Examples" and "examples" clash.
            key = (heading.level, heading_anchor(heading.title))
            if key in first_seen:
                yield self.error(
                    document,
                    heading.line,
                    _("Duplicate heading '{title}' (first used on line {line})").format(
                        title=heading.title, line=first_seen[key],
                    ),
                )
            else:
                first_seen[key] = heading.line


class UnclosedFence(NoteCheck):
    """
    Every code fence must be closed.
    """

    name = "unclosed-fence"

    def run(self, document, collection):
        for block in document.code_blocks:
            if block.unclosed:
                yield self.error(document, block.line, _("Code fence is never closed"))


class CodeSyntax(NoteCheck):
    """
    Every fenced example must parse in the language it is labeled with.

    Languages we have no parser for (sql, shell, text...) are skipped.
    """

    name = "code-syntax"

    def run(self, document, collection):
        for block in document.code_blocks:
            if block.unclosed:
                # Already reported, and the body runs to the end of the file.
                continue
            validator_name = self.validators.get(block.language)
            if validator_name is None:
                logger.debug("%s:%d: no parser for %r examples", document.path, block.line, block.language)
                continue
            problem = getattr(self, validator_name)(block)
            if problem is not None:
                offset, message = problem
                yield self.error(
                    document,
                    block.line + offset,
                    _("Invalid {language} example: {message}").format(
                        language=block.language, message=message,
                    ),
                )

    @staticmethod
    def check_python(block: CodeBlock) -> tuple[int, str] | None:
        try:
            ast.parse(textwrap.dedent(block.source))
        except SyntaxError as error:
            return error.lineno or 1, error.msg
        return None

    @staticmethod
    def check_pycon(block: CodeBlock) -> tuple[int, str] | None:
        statements = []
        linenos = []
        for lineno, line in enumerate(block.source.splitlines(), start=1):
            # A bare prompt ends a compound statement; output lines are skipped.
            if line.rstrip() in (">>>", "..."):
                statements.append("")
                linenos.append(lineno)
            elif line.startswith(PYCON_PROMPTS):
                statements.append(line[4:])
                linenos.append(lineno)
        try:
            ast.parse("\n".join(statements))
        except SyntaxError as error:
            index = min(max((error.lineno or 1) - 1, 0), max(len(linenos) - 1, 0))
            return (linenos[index] if linenos else 1), error.msg
        return None

    @staticmethod
    def check_json(block: CodeBlock) -> tuple[int, str] | None:
        try:
            json.loads(block.source)
        except json.JSONDecodeError as error:
            return error.lineno, error.msg
        return None

    @staticmethod
    def check_toml(block: CodeBlock) -> tuple[int, str] | None:
        try:
            tomlkit.parse(block.source)
        except TOMLKitError as error:
            return getattr(error, "line", 1) or 1, str(error)
        return None

    # Fence language -> method used to validate it
    validators = {
        "python": "check_python",
        "py": "check_python",
        "python3": "check_python",
        "pycon": "check_pycon",
        "json": "check_json",
        "toml": "check_toml",
    }


class CrossReference(NoteCheck):
    """
    Every internal link must resolve to an existing note, and every fragment to
    a heading in that note.

    Links to files that are not notes (images, downloads) only need to exist.
    A target starting with ``/`` is taken from the docs root.
    """

    name = "cross-reference"

    def run(self, document, collection):
        for link in document.links:
            if not link.is_internal:
                continue
            if not link.path:
                target = document
            else:
                if link.path.startswith("/"):
                    resolved = posixpath.normpath(link.path.lstrip("/"))
                else:
                    resolved = posixpath.normpath(
                        posixpath.join(posixpath.dirname(document.path), link.path)
                    )
                if resolved.startswith("../") or resolved == "..":
                    yield self.error(
                        document, link.line,
                        _("Link '{target}' points outside the docs").format(target=link.target),
                    )
                    continue
                target = collection.find(resolved)
                if target is None:
                    if resolved.endswith(".md") or not (Path(collection.root) / resolved).exists():
                        yield self.error(
                            document, link.line,
                            _("Link '{target}' points to a missing document").format(target=link.target),
                        )
                    continue
            if link.fragment and link.fragment not in target.anchors:
                yield self.error(
                    document, link.line,
                    _("Link '{target}' points to a missing heading in '{path}'").format(
                        target=link.target, path=target.path,
                    ),
                )


# Add checks here, in the order they should run
available_checks: list[type[NoteCheck]] = [
    StartsWithHeading,
    DuplicateHeading,
    UnclosedFence,
    CodeSyntax,
    CrossReference,
]


def get_check(name: str) -> type[NoteCheck]:
    """
    Get the check class for the respective `name`

    Raise `ValueError` if no check found
    """
    for check in available_checks:
        if check.name == name:
            return check

    raise ValueError(_("Check not found: {name}").format(name=name))
