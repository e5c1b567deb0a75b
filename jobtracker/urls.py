"""
URL configuration for jobtracker project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include

from accounts.views import AuthViewSet
from experience.views import ExperienceViewSet
from jobs.views import JobViewSet
from lists.views import JobTagViewSet, SkillViewSet
from .routers import OptionalSlashRouter

# Create router and register viewsets
router = OptionalSlashRouter()
router.register(r'auth', AuthViewSet, basename='auth')
router.register(r'experiences', ExperienceViewSet, basename='experience')
router.register(r'jobs', JobViewSet, basename='job')
router.register(r'lists/skills', SkillViewSet, basename='skill')
router.register(r'lists/jobtags', JobTagViewSet, basename='jobtag')

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include(router.urls)),
]
