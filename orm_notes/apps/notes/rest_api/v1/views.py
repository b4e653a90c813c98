"""
Notes API Views
"""
from __future__ import annotations

import logging

from django.http import Http404, HttpResponse
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ViewSet

from ...api import assemble, get_document, load_collection
from ...data import Collection
from ...exceptions import DocumentNotFound, NotesError
from .serializers import DocumentDetailSerializer, DocumentSerializer

logger = logging.getLogger(__name__)


class NotesUnavailable(APIException):
    """
    The docs root or its manifest is broken, so no note can be served.
    """

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = _("The notes could not be loaded.")
    default_code = "notes_unavailable"


def _load_collection() -> Collection:
    try:
        return load_collection()
    except NotesError as err:
        logger.error("Could not load the notes: %s", err)
        raise NotesUnavailable(str(err)) from err


class DocumentView(ViewSet):
    """
    View to list or retrieve notes.

    **List Example Requests**
        GET notes/rest_api/v1/documents/
            - List every note in presentation order

    **Retrieve Example Requests**
        GET notes/rest_api/v1/documents/relationships/many-to-one.md/
            - Get one note, including its Markdown body

    **Retrieve Query Returns**
        * 200 - Success
        * 404 - No note at that path
        * 503 - The notes could not be loaded (broken manifest, missing folder...)
    """

    lookup_field = "path"
    lookup_value_regex = r".+\.md"

    def list(self, request: Request) -> Response:
        collection = _load_collection()
        serializer = DocumentSerializer(collection.documents, many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, path: str | None = None) -> Response:
        collection = _load_collection()
        try:
            document = get_document(collection, path or "")
        except DocumentNotFound as exc:
            raise Http404(str(exc)) from exc
        return Response(DocumentDetailSerializer(document).data)


class AssembledView(APIView):
    """
    View to get every note as one Markdown document.

    **Example Requests**
        GET notes/rest_api/v1/assembled/
    """

    def get(self, request: Request) -> HttpResponse:
        content = assemble(_load_collection())
        return HttpResponse(content, content_type="text/markdown; charset=utf-8")
