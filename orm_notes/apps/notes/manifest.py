"""
Settings and manifest handling for the notes.

The manifest is an optional ``docs.toml`` file at the docs root. It fixes the
order folders and documents are presented in, and gives folders their
human-readable titles. The content looks like:

    title = "Django ORM notes"
    separator = "<!-- document-separator -->"

    [[folders]]
    path = "the-model-layer"
    title = "The Model Layer"
    documents = ["models.md", "fields.md"]

Without a manifest every folder is used, in lexical order.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import tomlkit
from attrs import define
from django.conf import settings
from django.utils.translation import gettext as _
from tomlkit.exceptions import TOMLKitError

from orm_notes.lib.markdown import DEFAULT_SEPARATOR

from .exceptions import ManifestError

logger = logging.getLogger(__name__)

DEFAULT_DOCS_ROOT = Path(__file__).resolve().parents[3] / "docs"
DEFAULT_MANIFEST = "docs.toml"


def get_notes_setting(name: str) -> Any:
    """
    Return one key of the ``ORM_NOTES`` setting, falling back to our defaults.
    """
    defaults = {
        "DOCS_ROOT": DEFAULT_DOCS_ROOT,
        "MANIFEST": DEFAULT_MANIFEST,
        "SEPARATOR": DEFAULT_SEPARATOR,
    }
    notes_settings = getattr(settings, "ORM_NOTES", None) or {}
    return notes_settings.get(name, defaults[name])


@define
class FolderEntry:
    path: str
    title: str = ""
    # None means "every .md file in the folder, in lexical order"
    documents: list[str] | None = None


@define
class Manifest:
    title: str = ""
    separator: str = DEFAULT_SEPARATOR
    # None means there was no manifest, so folders are discovered on disk
    folders: list[FolderEntry] | None = None


def load_manifest(root: Path, name: str | None = None) -> Manifest:
    """
    Read the manifest in ``root``, if any.

    Raise ``ManifestError`` when the file exists but is not valid TOML or does
    not have the expected shape.
    """
    name = name or get_notes_setting("MANIFEST")
    separator = get_notes_setting("SEPARATOR")
    manifest_path = root / name
    if not manifest_path.is_file():
        logger.debug("No manifest at %s, discovering folders on disk", manifest_path)
        return Manifest(separator=separator)

    try:
        data = tomlkit.parse(manifest_path.read_text(encoding="utf-8")).unwrap()
    except TOMLKitError as error:
        raise ManifestError(name, str(error)) from error

    title = data.pop("title", "")
    separator = data.pop("separator", separator)
    if not isinstance(title, str):
        raise ManifestError(name, _("'title' must be a string"))
    if not isinstance(separator, str) or not separator.strip():
        raise ManifestError(name, _("'separator' must be a non-empty string"))

    raw_folders = data.pop("folders", None)
    folders = None
    if raw_folders is not None:
        if not isinstance(raw_folders, list):
            raise ManifestError(name, _("'folders' must be an array of tables"))
        folders = [_folder_entry(name, index, raw) for index, raw in enumerate(raw_folders)]

    return Manifest(title=title, separator=separator.strip(), folders=folders)


def _folder_entry(name: str, index: int, raw: Any) -> FolderEntry:
    """
    Validate one ``[[folders]]`` table
    """
    if not isinstance(raw, dict) or not isinstance(raw.get("path"), str) or not raw["path"]:
        raise ManifestError(name, _("folder #{index} needs a 'path'").format(index=index))
    documents = raw.get("documents")
    if documents is not None and (
        not isinstance(documents, list) or not all(isinstance(doc, str) for doc in documents)
    ):
        raise ManifestError(
            name,
            _("'documents' of folder '{path}' must be a list of file names").format(path=raw["path"]),
        )
    title = raw.get("title", "")
    if not isinstance(title, str):
        raise ManifestError(name, _("'title' of folder '{path}' must be a string").format(path=raw["path"]))
    return FolderEntry(path=raw["path"].strip("/"), title=title, documents=documents)
