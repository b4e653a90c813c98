"""
Helpers for the notes tests
"""
from __future__ import annotations

import tempfile
from pathlib import Path
from textwrap import dedent

GOOD_MANIFEST = """\
title = "Test notes"

[[folders]]
path = "models"
title = "The Model Layer"
documents = ["models.md"]

[[folders]]
path = "relationships"
title = "Relationships"
"""

GOOD_NOTES = {
    "models/models.md": """\
        # Models

        A model maps to a table. See [many-to-one](../relationships/many-to-one.md#cascade-deletes).

        ```python
        class Blog(models.Model):
            name = models.CharField(max_length=100)
        ```
    """,
    "relationships/many-to-one.md": """\
        # Many-to-one

        ## Cascade deletes

        ```pycon
        >>> m.delete()
        (2, {'cars.Car': 1, 'cars.Manufacturer': 1})
        ```

        Back to [models](../models/models.md) or [up](#many-to-one).
    """,
    "relationships/many-to-many.md": """\
        # Many-to-many

        ```sql
        SELECT this is not checked;
        ```
    """,
}


class DocsTreeMixin:
    """
    Mixin that builds a throwaway docs root for each test.

    Call ``write_docs`` with a ``{relative path: markdown}`` dict (the markdown
    is dedented) and an optional manifest.
    """

    def setUp(self):
        super().setUp()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.docs_root = Path(tmp.name)

    def write_docs(self, notes: dict[str, str], manifest: str | None = None) -> Path:
        for relative, text in notes.items():
            path = self.docs_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(text), encoding="utf-8")
        if manifest is not None:
            (self.docs_root / "docs.toml").write_text(manifest, encoding="utf-8")
        return self.docs_root
