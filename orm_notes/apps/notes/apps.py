"""
Django metadata for the Notes Django application.
"""
from django.apps import AppConfig


class NotesConfig(AppConfig):
    """
    Configuration for the Notes Django application.
    """

    name = "orm_notes.apps.notes"
    verbose_name = "ORM Notes > Notes"
    default_auto_field = "django.db.models.BigAutoField"
    label = "orm_notes"
