"""
Notes API

Load the Markdown notes from disk, put them in presentation order, assemble
them into a single document and lint them. Nothing here touches the
database; the docs root on disk is the only source of truth.
"""
from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import Iterable

from django.utils.translation import gettext as _

from .checks import NoteCheck, available_checks, get_check
from .data import Collection, Document, Folder, LintError
from .exceptions import DocumentNotFound, ManifestError
from .manifest import get_notes_setting, load_manifest

__all__ = [
    "get_docs_root",
    "load_collection",
    "get_document",
    "assemble",
    "lint_collection",
    "describe_errors",
]


log = getLogger(__name__)


def get_docs_root(root: str | Path | None = None) -> Path:
    """
    Return the docs root to use: ``root`` if given, else the ``DOCS_ROOT`` setting.
    """
    return Path(root or get_notes_setting("DOCS_ROOT")).resolve()


def load_collection(root: str | Path | None = None) -> Collection:
    """
    Read every note under ``root`` into a Collection.

    Folder and document order come from the manifest when it lists them, and
    from case-insensitive lexical order otherwise. Folders that exist on disk
    but are missing from a manifest's folder list are skipped with a warning.

    Raise ``DocumentNotFound`` if the root, a listed folder, or a listed
    document does not exist, and ``ManifestError`` for a broken manifest or
    one that points outside the docs root.
    """
    docs_root = get_docs_root(root)
    if not docs_root.is_dir():
        raise DocumentNotFound(str(docs_root))

    manifest = load_manifest(docs_root)
    collection = Collection(root=str(docs_root), title=manifest.title, separator=manifest.separator)

    on_disk = sorted(
        (child.name for child in docs_root.iterdir() if child.is_dir() and not child.name.startswith(".")),
        key=str.lower,
    )

    if manifest.folders is None:
        entries = [(name, "", None) for name in on_disk]
        # Notes placed directly in the root form an untitled leading folder.
        if _markdown_files(docs_root):
            entries.insert(0, ("", "", None))
    else:
        entries = [(entry.path, entry.title, entry.documents) for entry in manifest.folders]
        listed = {entry.path for entry in manifest.folders}
        for name in on_disk:
            if name not in listed:
                log.warning("Folder %s is not listed in the manifest and will be ignored", name)

    for folder_path, title, document_names in entries:
        folder_dir = docs_root / folder_path
        _check_inside(docs_root, folder_dir, folder_path)
        if not folder_dir.is_dir():
            raise DocumentNotFound(folder_path)
        folder = Folder(path=folder_path, title=title)
        if document_names is None:
            document_names = _markdown_files(folder_dir)
        for name in document_names:
            relative = f"{folder_path}/{name}" if folder_path else name
            file_path = docs_root / relative
            _check_inside(docs_root, file_path, relative)
            if not file_path.is_file():
                raise DocumentNotFound(relative)
            log.debug("Loading note %s", relative)
            folder.documents.append(
                Document.from_text(relative, folder_path, file_path.read_text(encoding="utf-8"))
            )
        collection.folders.append(folder)

    return collection


def get_document(collection: Collection, path: str) -> Document:
    """
    Return the note at ``path`` (relative to the docs root).

    Raise ``DocumentNotFound`` if there is no such note.
    """
    document = collection.find(path.strip("/"))
    if document is None:
        raise DocumentNotFound(path)
    return document


def assemble(collection: Collection) -> str:
    """
    Concatenate every note, in presentation order, into one Markdown string.

    Notes are joined with the separator marker on a line of its own. A folder
    with a title gets a level-1 heading before its first note, or on its own
    when it has no notes. The collection title (if any) opens the whole thing.
    """
    pieces: list[str] = []
    if collection.title:
        pieces.append(f"# {collection.title}\n")
    for folder in collection.folders:
        if folder.title and not folder.documents:
            pieces.append(f"# {folder.title}\n")
        for index, document in enumerate(folder.documents):
            body = document.body.strip("\n") + "\n"
            if index == 0 and folder.title:
                body = f"# {folder.title}\n\n{body}"
            pieces.append(body)
    return f"\n{collection.separator}\n\n".join(pieces)


def lint_collection(
    collection: Collection,
    checks: Iterable[str | type[NoteCheck]] | None = None,
) -> list[LintError]:
    """
    Run the given checks (all of them by default) over every note.

    Errors come back in presentation order: by note, then by check, then in
    the order each check found them. Raise ``ValueError`` for an unknown check
    name.
    """
    if checks is None:
        check_classes = list(available_checks)
    else:
        check_classes = [get_check(check) if isinstance(check, str) else check for check in checks]
    instances = [check_class() for check_class in check_classes]

    errors: list[LintError] = []
    for document in collection.documents:
        for check in instances:
            found = list(check.run(document, collection))
            if found:
                log.debug("%s: %d problem(s) from %s", document.path, len(found), check.name)
            errors.extend(found)
    return errors


def _check_inside(docs_root: Path, path: Path, listed: str) -> None:
    """
    Raise ``ManifestError`` if a manifest entry resolves outside ``docs_root``.
    """
    if not path.resolve().is_relative_to(docs_root):
        raise ManifestError(
            get_notes_setting("MANIFEST"),
            _("'{path}' is outside the docs root").format(path=listed),
        )


def _markdown_files(folder: Path) -> list[str]:
    return sorted(
        (child.name for child in folder.iterdir() if child.is_file() and child.suffix == ".md"),
        key=str.lower,
    )


def describe_errors(errors: list[LintError]) -> str:
    """
    One line per error, followed by a count.
    """
    lines = [str(error) for error in errors]
    lines.append(_("{count} problem(s) found").format(count=len(errors)))
    return "\n".join(lines)
