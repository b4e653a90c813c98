"""
Notes API v1 URLs.
"""

from django.urls.conf import include, path
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter()
router.register("documents", views.DocumentView, basename="document")

urlpatterns = [
    path("", include(router.urls)),
    path("assembled/", views.AssembledView.as_view(), name="assembled"),
]
