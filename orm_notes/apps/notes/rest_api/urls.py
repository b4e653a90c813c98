"""
URLs for the Notes REST API
"""
from django.urls import include, path

urlpatterns = [path("v1/", include("orm_notes.apps.notes.rest_api.v1.urls"))]
