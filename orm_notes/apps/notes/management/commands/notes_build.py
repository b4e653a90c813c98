"""
Django management command to assemble the notes into one Markdown file
"""
import logging
import time
from pathlib import Path

from django.core.management import CommandError
from django.core.management.base import BaseCommand

from orm_notes.apps.notes.api import assemble, load_collection
from orm_notes.apps.notes.exceptions import NotesError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Django management command to write every note, in order, to a single file.
    """
    help = 'Assemble the notes into a single Markdown file.'

    def add_arguments(self, parser):
        parser.add_argument('file_name', type=str, help='The name of the output Markdown file')
        parser.add_argument(
            '--root',
            type=str,
            help='The docs root to assemble (defaults to the ORM_NOTES["DOCS_ROOT"] setting).',
            default=None,
        )

    def handle(self, *args, **options):
        file_name = options['file_name']
        root = options['root']
        if not file_name.lower().endswith(".md"):
            raise CommandError("Output file name must end with .md")
        try:
            start_time = time.time()
            collection = load_collection(root)
            Path(file_name).write_text(assemble(collection), encoding="utf-8")
            elapsed = time.time() - start_time
            message = (
                f'{len(collection.documents)} note(s) written to {file_name} '
                f'(assemble: {elapsed:.2f} seconds)'
            )
            self.stdout.write(self.style.SUCCESS(message))
        except NotesError as exc:
            raise CommandError(str(exc)) from exc
        except Exception as e:
            message = f"Failed to assemble notes into '{file_name}': {e}"
            logger.exception("Failed to write assembled notes to %s", file_name)
            raise CommandError(message) from e
