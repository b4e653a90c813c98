"""
Django management command to lint the notes
"""
import logging

from django.core.management import CommandError
from django.core.management.base import BaseCommand

from orm_notes.apps.notes.api import describe_errors, lint_collection, load_collection
from orm_notes.apps.notes.checks import available_checks
from orm_notes.apps.notes.exceptions import NotesError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Django management command to check the notes for documentation problems.
    """
    help = 'Check that every note starts with a heading, has no duplicate headings, ' \
           'no unclosed fences, only valid code examples and no broken cross-references.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--root',
            type=str,
            help='The docs root to lint (defaults to the ORM_NOTES["DOCS_ROOT"] setting).',
            default=None,
        )
        parser.add_argument(
            '--check',
            action='append',
            dest='checks',
            choices=[check.name for check in available_checks],
            help='Only run this check. May be given more than once.',
            default=None,
        )

    def handle(self, *args, **options):
        root = options['root']
        checks = options['checks']
        try:
            collection = load_collection(root)
            errors = lint_collection(collection, checks)
        except NotesError as exc:
            raise CommandError(str(exc)) from exc
        except Exception as e:
            logger.exception("Failed to lint notes in %s", root or "the default docs root")
            raise CommandError(f"Failed to lint notes: {e}") from e

        if errors:
            raise CommandError(describe_errors(errors))

        message = f'{len(collection.documents)} note(s) checked, no problems found'
        self.stdout.write(self.style.SUCCESS(message))
