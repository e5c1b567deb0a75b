"""
Experience app models

Experience: one item of work or project history.
SkillDemonstration: why an experience shows a skill. The row carries its
own text, so it survives the deletion of its skill as an orphan
(``skill = NULL``) when that text is worth keeping.
"""
from django.conf import settings
from django.db import models


class Experience(models.Model):
    """
    A past role, project or achievement in the user's library.

    Linked to skills through SkillDemonstration rows and to job
    requirements through jobs.RequirementMatch.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='experiences',
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255, null=True, blank=True)
    position = models.CharField(max_length=255, null=True, blank=True)
    duration = models.CharField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    class Meta:
        verbose_name = 'Experience'
        verbose_name_plural = 'Experiences'
        ordering = ['-created_at', '-id']


class SkillDemonstration(models.Model):
    """
    Explanation of how an experience demonstrates a skill.

    ``skill`` is NULL for orphans. A non-null skill appears at most once
    per experience.
    """

    experience = models.ForeignKey(
        Experience,
        on_delete=models.CASCADE,
        related_name='skill_demonstrations',
    )
    skill = models.ForeignKey(
        'lists.Skill',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='demonstrations',
    )
    explanation = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @property
    def is_orphan(self) -> bool:
        return self.skill_id is None

    def __str__(self):
        skill = self.skill.title if self.skill_id else 'orphaned'
        return f"{self.experience.title} / {skill}"

    class Meta:
        verbose_name = 'Skill Demonstration'
        verbose_name_plural = 'Skill Demonstrations'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['experience', 'skill'],
                condition=models.Q(skill__isnull=False),
                name='unique_experience_skill_demonstration',
            ),
        ]
