"""
Experience Service Layer
Handles the multi-step writes behind the experience endpoints: creating and
replacing demonstration sets, and the single-row demonstration operations.
"""
import logging
from typing import Dict, Iterable, List, Optional

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from jobtracker.exceptions import Conflict
from lists.models import Skill
from .models import Experience, SkillDemonstration

logger = logging.getLogger(__name__)

EXPERIENCE_FIELDS = ['title', 'description', 'location', 'position', 'duration']

DUPLICATE_SKILL_MESSAGE = (
    "This skill is already listed for this experience. "
    "Please edit the existing entry instead."
)


class ExperienceService:
    """Service for managing experiences and their skill demonstrations."""

    @staticmethod
    def get_owned_skills(user, skill_ids: Iterable[Optional[int]]) -> Dict[int, Skill]:
        """
        Load the user's skills by id.

        Args:
            user: Owner the skills must belong to
            skill_ids: Ids to load; None entries are ignored

        Returns:
            Mapping of id to Skill

        Raises:
            NotFound: If any id is missing or belongs to another user
        """
        wanted = {skill_id for skill_id in skill_ids if skill_id is not None}
        if not wanted:
            return {}

        skills = {skill.id: skill for skill in Skill.objects.filter(user=user, id__in=wanted)}
        missing = sorted(wanted - set(skills))
        if missing:
            raise NotFound(f"Skill {missing[0]} not found")
        return skills

    @staticmethod
    def should_skip(skill_id: Optional[int], explanation: str) -> bool:
        """A demonstration with neither a skill nor text is never stored."""
        return skill_id is None and not (explanation or '').strip()

    @staticmethod
    def _create_demonstrations(experience: Experience, demonstrations: List[Dict]) -> int:
        """
        Create demonstration rows for an experience from payload entries.

        Entries with no skill and no explanation are skipped; listing the
        same skill twice is a conflict.
        """
        skills = ExperienceService.get_owned_skills(
            experience.user,
            (demo.get('skillId') for demo in demonstrations),
        )

        seen = set()
        created = 0
        for demo in demonstrations:
            skill_id = demo.get('skillId')
            explanation = demo.get('explanation') or ''

            if ExperienceService.should_skip(skill_id, explanation):
                continue

            if skill_id is not None:
                if skill_id in seen:
                    raise Conflict(DUPLICATE_SKILL_MESSAGE)
                seen.add(skill_id)

            SkillDemonstration.objects.create(
                experience=experience,
                skill=skills.get(skill_id),
                explanation=explanation,
            )
            created += 1
        return created

    @staticmethod
    def create_experience(user, data: Dict) -> Experience:
        """
        Create an experience and its demonstrations in one transaction.

        Args:
            user: Owner of the new experience
            data: Validated ExperienceWriteSerializer data

        Returns:
            Created Experience
        """
        with transaction.atomic():
            experience = Experience.objects.create(
                user=user,
                **{field: data[field] for field in EXPERIENCE_FIELDS if field in data},
            )
            created = ExperienceService._create_demonstrations(
                experience, data.get('skillDemonstrations') or []
            )

        logger.info(
            "Created experience %s for user %s with %d demonstrations",
            experience.id, user.id, created,
        )
        return experience

    @staticmethod
    def update_experience(experience: Experience, data: Dict) -> Experience:
        """
        Update scalar fields and, when given, replace the demonstration set.

        The demonstration set is replaced wholesale (delete all, recreate)
        only when ``skillDemonstrations`` is present in ``data``. Scalar
        fields missing from ``data`` keep their current values.
        """
        with transaction.atomic():
            changed = [field for field in EXPERIENCE_FIELDS if field in data]
            for field in changed:
                setattr(experience, field, data[field])
            if changed:
                experience.save(update_fields=changed + ['updated_at'])

            if 'skillDemonstrations' in data:
                experience.skill_demonstrations.all().delete()
                created = ExperienceService._create_demonstrations(
                    experience, data['skillDemonstrations'] or []
                )
                logger.info(
                    "Replaced demonstrations of experience %s (%d rows)",
                    experience.id, created,
                )

        return experience

    @staticmethod
    def delete_experience(experience: Experience) -> None:
        """Delete an experience; its demonstrations and matches cascade."""
        experience_id = experience.id
        experience.delete()
        logger.info("Deleted experience %s", experience_id)

    @staticmethod
    def add_demonstration(
        experience: Experience,
        skill_id: Optional[int],
        explanation: str,
    ) -> SkillDemonstration:
        """
        Attach one demonstration to an experience.

        Raises:
            NotFound: If the skill is not the user's
            Conflict: If the experience already lists the skill
        """
        skills = ExperienceService.get_owned_skills(experience.user, [skill_id])

        with transaction.atomic():
            if skill_id is not None and experience.skill_demonstrations.filter(
                skill_id=skill_id
            ).exists():
                raise Conflict(DUPLICATE_SKILL_MESSAGE)

            demo = SkillDemonstration.objects.create(
                experience=experience,
                skill=skills.get(skill_id),
                explanation=explanation or '',
            )
        return demo

    @staticmethod
    def update_demonstration_explanation(
        experience: Experience,
        skill_id: int,
        explanation: str,
    ) -> SkillDemonstration:
        """
        Rewrite the explanation of the (experience, skill) demonstration.

        Raises:
            NotFound: If the experience does not list the skill
        """
        demo = experience.skill_demonstrations.filter(skill_id=skill_id).first()
        if demo is None:
            raise NotFound("Demonstration not found")

        demo.explanation = explanation
        demo.save(update_fields=['explanation', 'updated_at'])
        return demo

    @staticmethod
    def remove_demonstration(experience: Experience, skill_id: int) -> int:
        """
        Delete the (experience, skill) demonstration.

        Raises:
            NotFound: If the experience does not list the skill
        """
        deleted, _ = experience.skill_demonstrations.filter(skill_id=skill_id).delete()
        if not deleted:
            raise NotFound("Demonstration not found")
        return deleted

    @staticmethod
    def get_owned_demonstration(user, demo_id: int, for_update: bool = False) -> SkillDemonstration:
        """
        Load a demonstration by primary key, checking the parent experience
        belongs to ``user``.

        Raises:
            NotFound: If missing or owned by someone else
        """
        queryset = SkillDemonstration.objects.select_related('experience')
        if for_update:
            queryset = queryset.select_for_update()
        demo = queryset.filter(pk=demo_id).first()
        if demo is None or demo.experience.user_id != user.id:
            raise NotFound("Demonstration not found")
        return demo

    @staticmethod
    def reassign_demonstration(user, demo_id: int, skill_id: Optional[int]) -> SkillDemonstration:
        """
        Point a demonstration at another skill (or at none).

        Addressed by primary key so orphans can be re-attached. If another
        demonstration of the same experience already has the target skill,
        nothing is written.

        Raises:
            NotFound: If the demonstration or skill is not the user's
            Conflict: If the experience already lists the target skill
            ValidationError: If detaching would leave an empty orphan
        """
        with transaction.atomic():
            demo = ExperienceService.get_owned_demonstration(user, demo_id, for_update=True)
            skills = ExperienceService.get_owned_skills(user, [skill_id])

            if skill_id is not None:
                duplicate = (
                    SkillDemonstration.objects
                    .filter(experience_id=demo.experience_id, skill_id=skill_id)
                    .exclude(pk=demo.pk)
                    .exists()
                )
                if duplicate:
                    raise Conflict(DUPLICATE_SKILL_MESSAGE)
            elif ExperienceService.should_skip(None, demo.explanation):
                raise ValidationError(
                    "An empty demonstration cannot lose its skill; delete it instead."
                )

            demo.skill = skills.get(skill_id)
            demo.save(update_fields=['skill', 'updated_at'])

        logger.info("Reassigned demonstration %s to skill %s", demo.id, skill_id)
        return demo

    @staticmethod
    def delete_demonstration(user, demo_id: int) -> None:
        """Delete a demonstration by primary key (the only way to drop an orphan)."""
        demo = ExperienceService.get_owned_demonstration(user, demo_id)
        demo.delete()
