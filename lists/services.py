"""
Lists Service Layer
Multi-step operations on the skill library.
"""
import logging
from typing import Dict

from django.db import transaction

from .models import Skill

logger = logging.getLogger(__name__)


class SkillService:
    """Deletion and usage reporting for skills."""

    @staticmethod
    def get_usage(skill: Skill) -> Dict[str, int]:
        """
        Count what references a skill.

        Args:
            skill: Skill instance, already checked for ownership

        Returns:
            ``{"experienceCount", "requirementCount"}``: demonstration rows
            pointing at the skill and requirements listing it
        """
        return {
            'experienceCount': skill.demonstrations.count(),
            'requirementCount': skill.requirements.count(),
        }

    @staticmethod
    def delete_skill(skill: Skill) -> Dict[str, int]:
        """
        Delete a skill without losing explanation text written against it.

        Each demonstration referencing the skill is either detached
        (``skill = NULL``, kept as an orphan) when its explanation has
        content, or deleted when it is empty. The skill row goes last, and
        requirement links to it are removed with it.

        Args:
            skill: Skill instance, already checked for ownership

        Returns:
            Counts of ``preserved`` and ``removed`` demonstrations
        """
        preserved = 0
        removed = 0

        with transaction.atomic():
            demonstrations = skill.demonstrations.select_for_update()
            for demo in demonstrations:
                if (demo.explanation or '').strip():
                    demo.skill = None
                    demo.save(update_fields=['skill', 'updated_at'])
                    preserved += 1
                else:
                    demo.delete()
                    removed += 1

            skill_id = skill.id
            skill.delete()

        logger.info(
            "Deleted skill %s; preserved %d orphaned demonstrations, removed %d empty ones",
            skill_id, preserved, removed,
        )
        return {'preserved': preserved, 'removed': removed}
