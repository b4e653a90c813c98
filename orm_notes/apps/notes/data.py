"""
Data models used by the notes app.

None of this is stored in the database: the notes live on disk as Markdown
files, and these classes are what we read them into.
"""
from __future__ import annotations

from attrs import define, field

from orm_notes.lib.markdown import DEFAULT_SEPARATOR, CodeBlock, Heading, Link, parse_markdown


@define
class Document:
    """
    One Markdown note.

    ``path`` is relative to the docs root and always uses forward slashes,
    e.g. "relationships/many-to-one.md".
    """

    path: str
    folder: str
    body: str
    headings: list[Heading] = field(factory=list)
    code_blocks: list[CodeBlock] = field(factory=list)
    links: list[Link] = field(factory=list)

    @classmethod
    def from_text(cls, path: str, folder: str, body: str) -> Document:
        parts = parse_markdown(body)
        return cls(
            path=path,
            folder=folder,
            body=body,
            headings=parts.headings,
            code_blocks=parts.code_blocks,
            links=parts.links,
        )

    @property
    def title(self) -> str:
        """
        The title of the first heading, or the file name for untitled notes.
        """
        if self.headings:
            return self.headings[0].title
        return self.path.rsplit("/", 1)[-1]

    @property
    def anchors(self) -> set[str]:
        return {heading.anchor for heading in self.headings}

    def __str__(self):
        return f"<{self.__class__.__name__}> ({self.path})"


@define
class Folder:
    """
    A topic folder, e.g. "The Model Layer"
    """

    path: str
    title: str = ""
    documents: list[Document] = field(factory=list)


@define
class Collection:
    """
    Every note under a docs root, in presentation order.
    """

    root: str
    title: str = ""
    separator: str = DEFAULT_SEPARATOR
    folders: list[Folder] = field(factory=list)

    @property
    def documents(self) -> list[Document]:
        return [document for folder in self.folders for document in folder.documents]

    def find(self, path: str) -> Document | None:
        for document in self.documents:
            if document.path == path:
                return document
        return None


@define
class LintError:
    """
    One documentation-quality problem.
    """

    check: str
    path: str
    line: int
    message: str

    def __str__(self):
        return f"{self.path}:{self.line}: [{self.check}] {self.message}"
