"""
Tests for the manifest and the ORM_NOTES setting
"""
import ddt  # type: ignore[import]
from django.conf import settings
from django.test import SimpleTestCase, override_settings

from orm_notes.apps.notes.exceptions import DocumentNotFound, ManifestError, NotesError
from orm_notes.apps.notes.manifest import DEFAULT_DOCS_ROOT, get_notes_setting, load_manifest

from .utils import GOOD_MANIFEST, DocsTreeMixin


@ddt.ddt
class TestManifest(DocsTreeMixin, SimpleTestCase):
    """
    Test reading docs.toml
    """

    def test_no_manifest(self):
        manifest = load_manifest(self.docs_root)
        assert manifest.folders is None
        assert manifest.title == ""
        assert manifest.separator == "<!-- document-separator -->"

    def test_manifest(self):
        self.write_docs({}, GOOD_MANIFEST)
        manifest = load_manifest(self.docs_root)
        assert manifest.title == "Test notes"
        assert [(f.path, f.title, f.documents) for f in manifest.folders] == [
            ("models", "The Model Layer", ["models.md"]),
            ("relationships", "Relationships", None),
        ]

    def test_manifest_name(self):
        (self.docs_root / "order.toml").write_text('[[folders]]\npath = "a/"\n', encoding="utf-8")
        manifest = load_manifest(self.docs_root, "order.toml")
        assert [f.path for f in manifest.folders] == ["a"]

    @override_settings(ORM_NOTES={"SEPARATOR": "---8<---"})
    def test_separator_setting(self):
        assert load_manifest(self.docs_root).separator == "---8<---"
        self.write_docs({}, 'separator = "  <!-- split -->  "\n')
        assert load_manifest(self.docs_root).separator == "<!-- split -->"

    @ddt.data(
        ("title = [", "Invalid manifest 'docs.toml': "),
        ("title = 3", "Invalid manifest 'docs.toml': 'title' must be a string"),
        ('separator = " "', "Invalid manifest 'docs.toml': 'separator' must be a non-empty string"),
        ('folders = "models"', "Invalid manifest 'docs.toml': 'folders' must be an array of tables"),
        ('[[folders]]\ntitle = "No path"', "Invalid manifest 'docs.toml': folder #0 needs a 'path'"),
        (
            '[[folders]]\npath = "a"\ndocuments = "a.md"',
            "Invalid manifest 'docs.toml': 'documents' of folder 'a' must be a list of file names",
        ),
        (
            '[[folders]]\npath = "a"\ntitle = 1',
            "Invalid manifest 'docs.toml': 'title' of folder 'a' must be a string",
        ),
    )
    @ddt.unpack
    def test_invalid_manifest(self, content, expected):
        self.write_docs({}, content)
        with self.assertRaises(ManifestError) as ctx:
            load_manifest(self.docs_root)
        assert str(ctx.exception).startswith(expected)
        assert ctx.exception.path == "docs.toml"


class TestNotesSetting(SimpleTestCase):
    """
    Test the ORM_NOTES setting and its defaults
    """

    @override_settings()
    def test_defaults_without_setting(self):
        del settings.ORM_NOTES
        assert get_notes_setting("DOCS_ROOT") == DEFAULT_DOCS_ROOT
        assert get_notes_setting("MANIFEST") == "docs.toml"

    @override_settings(ORM_NOTES={"MANIFEST": "order.toml"})
    def test_partial_setting(self):
        assert get_notes_setting("MANIFEST") == "order.toml"
        assert get_notes_setting("SEPARATOR") == "<!-- document-separator -->"


class TestExceptions(SimpleTestCase):
    """
    Test the exception messages
    """

    def test_str_and_repr(self):
        error = DocumentNotFound("a/b.md")
        assert str(error) == "Document 'a/b.md' not found"
        assert repr(error) == "DocumentNotFound(Document 'a/b.md' not found)"
        assert isinstance(error, NotesError)
        assert repr(NotesError("boom")) == "NotesError(boom)"
