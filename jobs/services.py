"""
Job Service Layer
Builds and rebuilds a job's requirement tree: requirement rows, their skill
links and their experience matches.
"""
import logging
from typing import Dict, Iterable, List

from django.db import transaction
from rest_framework.exceptions import NotFound

from experience.models import Experience
from lists.models import JobTag, Skill
from .models import Job, Requirement, RequirementMatch

logger = logging.getLogger(__name__)

JOB_FIELDS = ['title', 'company', 'description']


def _load_owned(model, user, ids: Iterable[int], label: str) -> Dict:
    """
    Load ``model`` rows owned by ``user`` keyed by id.

    Raises:
        NotFound: If any id is missing or owned by another user
    """
    wanted = set(ids)
    if not wanted:
        return {}

    rows = {row.id: row for row in model.objects.filter(user=user, id__in=wanted)}
    missing = sorted(wanted - set(rows))
    if missing:
        raise NotFound(f"{label} {missing[0]} not found")
    return rows


class JobService:
    """Service for creating, replacing and deleting jobs."""

    @staticmethod
    def _create_requirements(job: Job, requirements: List[Dict]) -> int:
        """
        Create requirement rows with their skills and matches.

        Every referenced skill and experience is checked up front, so a bad
        id fails the whole call before anything is written.
        """
        skills = _load_owned(
            Skill,
            job.user_id,
            (skill_id for req in requirements for skill_id in req.get('skillIds') or []),
            'Skill',
        )
        experiences = _load_owned(
            Experience,
            job.user_id,
            (match['experienceId'] for req in requirements for match in req.get('matches') or []),
            'Experience',
        )

        for req_data in requirements:
            requirement = Requirement.objects.create(
                job=job,
                description=req_data['description'],
            )

            skill_ids = req_data.get('skillIds') or []
            if skill_ids:
                requirement.skills.set([skills[skill_id] for skill_id in skill_ids])

            for match in req_data.get('matches') or []:
                # a repeated experience keeps the last explanation
                RequirementMatch.objects.update_or_create(
                    requirement=requirement,
                    experience=experiences[match['experienceId']],
                    defaults={'match_explanation': match.get('matchExplanation') or ''},
                )

        return len(requirements)

    @staticmethod
    def create_job(user, data: Dict) -> Job:
        """
        Create a job with its tags and requirement tree in one transaction.

        Args:
            user: Owner of the new job
            data: Validated JobWriteSerializer data

        Returns:
            Created Job
        """
        with transaction.atomic():
            tags = _load_owned(JobTag, user, data.get('jobTagIds') or [], 'Job tag')

            job = Job.objects.create(
                user=user,
                **{field: data[field] for field in JOB_FIELDS if field in data},
            )
            if tags:
                job.job_tags.set(tags.values())

            count = JobService._create_requirements(job, data.get('requirements') or [])

        logger.info("Created job %s for user %s with %d requirements", job.id, user.id, count)
        return job

    @staticmethod
    def update_job(job: Job, data: Dict) -> Job:
        """
        Update a job and replace its requirement tree.

        Scalars are overwritten, the tag set is synced to ``jobTagIds`` when
        given, and every existing requirement is deleted and rebuilt from
        ``requirements``. Requirement ids do not survive an update. There
        is no version check: the last writer wins.
        """
        with transaction.atomic():
            for field in JOB_FIELDS:
                if field in data:
                    setattr(job, field, data[field])
            job.save()

            if 'jobTagIds' in data:
                tags = _load_owned(JobTag, job.user_id, data['jobTagIds'] or [], 'Job tag')
                job.job_tags.set(tags.values())

            removed, _ = Requirement.objects.filter(job=job).delete()
            count = JobService._create_requirements(job, data.get('requirements') or [])

        logger.info(
            "Replaced requirements of job %s (%d rows deleted incl. links, %d created)",
            job.id, removed, count,
        )
        return job

    @staticmethod
    def delete_job(job: Job) -> None:
        """Delete a job; requirements, skill links and matches cascade."""
        job_id = job.id
        job.delete()
        logger.info("Deleted job %s", job_id)
