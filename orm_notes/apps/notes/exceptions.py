"""
Exceptions for loading and assembling the notes
"""
from __future__ import annotations

from django.utils.translation import gettext as _


class NotesError(Exception):
    """
    Base exception for the notes app
    """

    def __init__(self, message: str = ""):
        super().__init__()
        self.message = message

    def __str__(self):
        return str(self.message)

    def __repr__(self):
        return f"{self.__class__.__name__}({str(self)})"


class ManifestError(NotesError):
    """
    Exception used when the manifest can't be read or has the wrong shape
    """

    def __init__(self, path: str, message: str, **kargs):
        super().__init__(**kargs)
        self.path = path
        self.message = _("Invalid manifest '{path}': {message}").format(path=path, message=message)


class DocumentNotFound(NotesError):
    """
    Exception used when a document is referenced but does not exist
    """

    def __init__(self, path: str, **kargs):
        super().__init__(**kargs)
        self.path = path
        self.message = _("Document '{path}' not found").format(path=path)
