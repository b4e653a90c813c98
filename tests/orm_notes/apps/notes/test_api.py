"""
Tests for loading, assembling and linting a collection of notes
"""
import logging

from django.test import SimpleTestCase, override_settings

from orm_notes.apps.notes import api
from orm_notes.apps.notes.checks import CodeSyntax, DuplicateHeading
from orm_notes.apps.notes.exceptions import DocumentNotFound, ManifestError

from .utils import GOOD_MANIFEST, GOOD_NOTES, DocsTreeMixin


class TestLoadCollection(DocsTreeMixin, SimpleTestCase):
    """
    Test reading notes from disk in presentation order
    """

    def test_manifest_order(self):
        root = self.write_docs(GOOD_NOTES, GOOD_MANIFEST)
        collection = api.load_collection(root)
        assert collection.title == "Test notes"
        assert [folder.title for folder in collection.folders] == ["The Model Layer", "Relationships"]
        # "relationships" lists no documents, so its files are taken in lexical order
        assert [doc.path for doc in collection.documents] == [
            "models/models.md",
            "relationships/many-to-many.md",
            "relationships/many-to-one.md",
        ]
        document = collection.documents[0]
        assert document.folder == "models"
        assert document.title == "Models"
        assert document.code_blocks[0].language == "python"

    def test_lexical_order_without_manifest(self):
        root = self.write_docs({
            "b/z.md": "# Z\n",
            "b/A.md": "# A\n",
            "a/only.md": "# Only\n",
            "index.md": "# Index\n",
        })
        collection = api.load_collection(root)
        assert [folder.path for folder in collection.folders] == ["", "a", "b"]
        assert [doc.path for doc in collection.documents] == ["index.md", "a/only.md", "b/A.md", "b/z.md"]
        assert collection.separator == "<!-- document-separator -->"

    def test_unlisted_folder_is_skipped(self):
        notes = dict(GOOD_NOTES, **{"drafts/wip.md": "# WIP\n"})
        root = self.write_docs(notes, GOOD_MANIFEST)
        with self.assertLogs("orm_notes.apps.notes.api", level=logging.WARNING) as logs:
            collection = api.load_collection(root)
        assert "drafts" in logs.output[0]
        assert collection.find("drafts/wip.md") is None

    def test_missing_listed_document(self):
        root = self.write_docs(
            {"models/other.md": "# Other\n"},
            '[[folders]]\npath = "models"\ndocuments = ["models.md"]\n',
        )
        with self.assertRaises(DocumentNotFound) as ctx:
            api.load_collection(root)
        assert str(ctx.exception) == "Document 'models/models.md' not found"

    def test_missing_listed_folder(self):
        root = self.write_docs({"models/models.md": "# Models\n"}, '[[folders]]\npath = "nope"\n')
        with self.assertRaises(DocumentNotFound):
            api.load_collection(root)

    def test_manifest_entries_outside_the_root(self):
        outside = self.docs_root.parent / f"{self.docs_root.name}-outside.md"
        outside.write_text("# Outside\n", encoding="utf-8")
        self.addCleanup(outside.unlink)
        manifests = [
            '[[folders]]\npath = "../outside"\n',
            f'[[folders]]\npath = "models"\ndocuments = ["../../{outside.name}"]\n',
        ]
        for manifest in manifests:
            root = self.write_docs({"models/models.md": "# Models\n"}, manifest)
            with self.assertRaises(ManifestError) as ctx:
                api.load_collection(root)
            assert "is outside the docs root" in str(ctx.exception)

    def test_missing_root(self):
        with self.assertRaises(DocumentNotFound):
            api.load_collection(self.docs_root / "does-not-exist")

    def test_broken_manifest(self):
        root = self.write_docs(GOOD_NOTES, "title = \n")
        with self.assertRaises(ManifestError):
            api.load_collection(root)

    def test_root_from_settings(self):
        root = self.write_docs(GOOD_NOTES, GOOD_MANIFEST)
        with override_settings(ORM_NOTES={"DOCS_ROOT": str(root)}):
            collection = api.load_collection()
        assert len(collection.documents) == 3

    def test_get_document(self):
        collection = api.load_collection(self.write_docs(GOOD_NOTES, GOOD_MANIFEST))
        assert api.get_document(collection, "/models/models.md").title == "Models"
        with self.assertRaises(DocumentNotFound):
            api.get_document(collection, "models/nope.md")


class TestAssemble(DocsTreeMixin, SimpleTestCase):
    """
    Test concatenating the notes into one document
    """

    def test_assemble(self):
        collection = api.load_collection(self.write_docs(GOOD_NOTES, GOOD_MANIFEST))
        assembled = api.assemble(collection)
        marker = "<!-- document-separator -->"
        pieces = [piece.strip() for piece in assembled.split(marker)]
        assert len(pieces) == 4
        assert pieces[0] == "# Test notes"
        assert pieces[1].startswith("# The Model Layer\n\n# Models")
        assert pieces[2].startswith("# Relationships\n\n# Many-to-many")
        assert pieces[3].startswith("# Many-to-one")
        # Each marker is alone on its line
        assert all(line.strip() == marker for line in assembled.splitlines() if marker in line)

    def test_assemble_titled_folder_without_notes(self):
        manifest = GOOD_MANIFEST + '\n[[folders]]\npath = "querysets"\ntitle = "QuerySets"\ndocuments = []\n'
        (self.docs_root / "querysets").mkdir()
        assembled = api.assemble(api.load_collection(self.write_docs(GOOD_NOTES, manifest)))
        pieces = [piece.strip() for piece in assembled.split("<!-- document-separator -->")]
        assert pieces[-1] == "# QuerySets"

    def test_assemble_custom_separator(self):
        manifest = 'separator = "---8<---"\n' + GOOD_MANIFEST.replace('title = "Test notes"\n', "")
        collection = api.load_collection(self.write_docs(GOOD_NOTES, manifest))
        assembled = api.assemble(collection)
        assert assembled.count("\n---8<---\n") == 2
        assert assembled.startswith("# The Model Layer")


class TestLintCollection(DocsTreeMixin, SimpleTestCase):
    """
    Test running the checks over a collection
    """

    def test_clean_collection(self):
        collection = api.load_collection(self.write_docs(GOOD_NOTES, GOOD_MANIFEST))
        assert api.lint_collection(collection) == []

    def test_errors_in_presentation_order(self):
        root = self.write_docs({
            "a/first.md": "# First\n## Again\n## Again\n[x](second.md#nope)\n",
            "a/second.md": "Intro before the heading\n\n# Second\n\n```python\ndef broken(:\n```\n",
        })
        errors = api.lint_collection(api.load_collection(root))
        assert [(error.path, error.check) for error in errors] == [
            ("a/first.md", "duplicate-heading"),
            ("a/first.md", "cross-reference"),
            ("a/second.md", "starts-with-heading"),
            ("a/second.md", "code-syntax"),
        ]
        assert str(errors[0]) == "a/first.md:3: [duplicate-heading] Duplicate heading 'Again' (first used on line 2)"

    def test_selected_checks(self):
        root = self.write_docs({
            "a/first.md": "# First\n## Again\n## Again\n[x](second.md#nope)\n",
        })
        collection = api.load_collection(root)
        errors = api.lint_collection(collection, ["duplicate-heading"])
        assert [error.check for error in errors] == ["duplicate-heading"]
        errors = api.lint_collection(collection, [CodeSyntax, DuplicateHeading])
        assert [error.check for error in errors] == ["duplicate-heading"]

    def test_unknown_check(self):
        collection = api.load_collection(self.write_docs(GOOD_NOTES, GOOD_MANIFEST))
        with self.assertRaises(ValueError):
            api.lint_collection(collection, ["spelling"])

    def test_describe_errors(self):
        root = self.write_docs({"a/first.md": "# First\n## Again\n## Again\n"})
        errors = api.lint_collection(api.load_collection(root))
        assert api.describe_errors(errors).splitlines() == [
            "a/first.md:3: [duplicate-heading] Duplicate heading 'Again' (first used on line 2)",
            "1 problem(s) found",
        ]
