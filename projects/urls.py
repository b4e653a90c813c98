from django.urls import include, path

urlpatterns = [
    path("notes/rest_api/", include("orm_notes.apps.notes.urls")),
]
