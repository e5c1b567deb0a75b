"""
Lists app models

Skill and JobTag: small titled records owned by one user and referenced
from experiences and jobs.
"""
from django.conf import settings
from django.db import models


class Skill(models.Model):
    """
    A reusable capability such as "SQL" or "Team leadership".

    Referenced by SkillDemonstration rows (experience side) and by the plain
    Requirement.skills join (job side).
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='skills',
    )
    title = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    class Meta:
        verbose_name = 'Skill'
        verbose_name_plural = 'Skills'
        ordering = ['title', 'id']


class JobTag(models.Model):
    """A label attached to jobs, e.g. "Remote" or "Backend"."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='job_tags',
    )
    title = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    class Meta:
        verbose_name = 'Job Tag'
        verbose_name_plural = 'Job Tags'
        ordering = ['title', 'id']
