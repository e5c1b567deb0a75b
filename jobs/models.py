"""
Jobs app models

Job: a posting the user is applying to, labelled with job tags.
Requirement: one line of a job's requirements, with the skills it asks for
and the experiences that answer it (RequirementMatch).
"""
from django.conf import settings
from django.db import models


class Job(models.Model):
    """
    A job posting tracked by a user.

    Requirements belong to exactly one job and are deleted with it; tags,
    skills and experiences are library entities and are never deleted
    through a job.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='jobs',
    )
    title = models.CharField(max_length=255)
    company = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    job_tags = models.ManyToManyField(
        'lists.JobTag',
        related_name='jobs',
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} at {self.company}"

    class Meta:
        verbose_name = 'Job'
        verbose_name_plural = 'Jobs'
        ordering = ['-created_at', '-id']


class Requirement(models.Model):
    """A single requirement of a job."""

    job = models.ForeignKey(
        Job,
        on_delete=models.CASCADE,
        related_name='requirements',
    )
    description = models.TextField()
    skills = models.ManyToManyField(
        'lists.Skill',
        related_name='requirements',
        blank=True,
    )
    matched_experiences = models.ManyToManyField(
        'experience.Experience',
        through='RequirementMatch',
        related_name='matched_requirements',
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.description[:80]

    class Meta:
        verbose_name = 'Requirement'
        verbose_name_plural = 'Requirements'
        ordering = ['id']


class RequirementMatch(models.Model):
    """
    Why an experience satisfies a requirement.

    The explanation is the raw material for a tailored application answer.
    """

    requirement = models.ForeignKey(
        Requirement,
        on_delete=models.CASCADE,
        related_name='matches',
    )
    experience = models.ForeignKey(
        'experience.Experience',
        on_delete=models.CASCADE,
        related_name='requirement_matches',
    )
    match_explanation = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.requirement} <- {self.experience}"

    class Meta:
        verbose_name = 'Requirement Match'
        verbose_name_plural = 'Requirement Matches'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['requirement', 'experience'],
                name='unique_requirement_experience_match',
            ),
        ]
