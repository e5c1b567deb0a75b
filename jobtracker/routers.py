"""
API router that accepts paths with or without a trailing slash.
"""
from rest_framework.routers import DefaultRouter


class OptionalSlashRouter(DefaultRouter):
    """DefaultRouter matching both ``/jobs`` and ``/jobs/``."""

    include_format_suffixes = False

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = '/?'
