"""
Notes API URLs.
"""

from django.urls import include, path

from .rest_api import urls

app_name = "orm_notes"
urlpatterns = [path("", include(urls))]
