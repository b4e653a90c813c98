"""
Django metadata for the Examples Django application.
"""
from django.apps import AppConfig


class ExamplesConfig(AppConfig):
    """
    Configuration for the Examples Django application.

    These are the models the notes use for illustration. They are installed
    so that what the notes claim about them can be checked against a real
    database.
    """

    name = "orm_notes.apps.examples"
    verbose_name = "ORM Notes > Examples"
    default_auto_field = "django.db.models.BigAutoField"
    label = "orm_examples"
