from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from accounts.models import User
from experience.models import Experience, SkillDemonstration
from jobs.models import Job, Requirement
from lists.models import JobTag, Skill


class OwnedListTestCase(APITestCase):
    """Two users; requests go out as ``self.user`` unless switched."""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username='owner', password='owner-password-1')
        self.other = User.objects.create_user(username='intruder', password='intruder-password-1')
        self.authenticate(self.user)

    def authenticate(self, user) -> None:
        token, _ = Token.objects.get_or_create(user=user)
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token.key}')


class SkillEndpointTests(OwnedListTestCase):

    def test_list_only_returns_own_skills(self) -> None:
        Skill.objects.create(user=self.user, title='SQL')
        Skill.objects.create(user=self.other, title='Cobol')

        response = self.client.get('/lists/skills/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual([s['title'] for s in response.json()], ['SQL'])

    def test_create_and_rename(self) -> None:
        created = self.client.post('/lists/skills', {'title': 'SQL'})
        self.assertEqual(created.status_code, 201)
        skill_id = created.json()['id']
        self.assertEqual(Skill.objects.get(pk=skill_id).user, self.user)

        renamed = self.client.put(f'/lists/skills/{skill_id}', {'title': 'PostgreSQL'})
        self.assertEqual(renamed.status_code, 200)
        self.assertEqual(renamed.json(), {'message': 'Updated'})
        self.assertEqual(Skill.objects.get(pk=skill_id).title, 'PostgreSQL')

    def test_create_requires_title(self) -> None:
        response = self.client.post('/lists/skills/', {'title': '   '})

        self.assertEqual(response.status_code, 400)
        self.assertIn('title', response.json()['error'])

    def test_other_users_skill_is_not_found(self) -> None:
        foreign = Skill.objects.create(user=self.other, title='Cobol')

        self.assertEqual(self.client.get(f'/lists/skills/{foreign.id}/').status_code, 404)
        self.assertEqual(
            self.client.put(f'/lists/skills/{foreign.id}/', {'title': 'Mine now'}).status_code,
            404,
        )
        self.assertEqual(self.client.delete(f'/lists/skills/{foreign.id}/').status_code, 404)
        self.assertEqual(self.client.get(f'/lists/skills/{foreign.id}/usage/').status_code, 404)

        foreign.refresh_from_db()
        self.assertEqual(foreign.title, 'Cobol')

    def test_delete_preserves_demonstrations_with_text(self) -> None:
        skill = Skill.objects.create(user=self.user, title='SQL')
        experience = Experience.objects.create(user=self.user, title='DB Migration', description='')
        other_experience = Experience.objects.create(user=self.user, title='Reporting', description='')
        kept = SkillDemonstration.objects.create(
            experience=experience, skill=skill, explanation='Wrote migration scripts'
        )
        empty = SkillDemonstration.objects.create(
            experience=other_experience, skill=skill, explanation=''
        )
        blank = SkillDemonstration.objects.create(
            experience=Experience.objects.create(user=self.user, title='Misc', description=''),
            skill=skill,
            explanation='   ',
        )

        response = self.client.delete(f'/lists/skills/{skill.id}/')

        self.assertEqual(response.status_code, 200)
        self.assertFalse(Skill.objects.filter(pk=skill.id).exists())

        kept.refresh_from_db()
        self.assertIsNone(kept.skill_id)
        self.assertEqual(kept.explanation, 'Wrote migration scripts')
        self.assertFalse(SkillDemonstration.objects.filter(pk=empty.pk).exists())
        self.assertFalse(SkillDemonstration.objects.filter(pk=blank.pk).exists())

    def test_delete_removes_requirement_links_only(self) -> None:
        skill = Skill.objects.create(user=self.user, title='SQL')
        job = Job.objects.create(user=self.user, title='Backend Engineer', company='Acme')
        requirement = Requirement.objects.create(job=job, description='Know SQL')
        requirement.skills.add(skill)

        self.client.delete(f'/lists/skills/{skill.id}/')

        requirement.refresh_from_db()
        self.assertEqual(requirement.skills.count(), 0)

    def test_delete_twice(self) -> None:
        skill = Skill.objects.create(user=self.user, title='SQL')

        first = self.client.delete(f'/lists/skills/{skill.id}/')
        second = self.client.delete(f'/lists/skills/{skill.id}/')

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.status_code, 404)
        self.assertIn('error', second.json())

    def test_usage_counts(self) -> None:
        skill = Skill.objects.create(user=self.user, title='SQL')
        experience = Experience.objects.create(user=self.user, title='DB Migration', description='')
        SkillDemonstration.objects.create(experience=experience, skill=skill, explanation='Scripts')

        response = self.client.get(f'/lists/skills/{skill.id}/usage')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'experienceCount': 1, 'requirementCount': 0})

        job = Job.objects.create(user=self.user, title='Backend Engineer', company='Acme')
        Requirement.objects.create(job=job, description='Know SQL').skills.add(skill)
        Requirement.objects.create(job=job, description='Tune queries').skills.add(skill)

        response = self.client.get(f'/lists/skills/{skill.id}/usage/')
        self.assertEqual(response.json(), {'experienceCount': 1, 'requirementCount': 2})


class JobTagEndpointTests(OwnedListTestCase):

    def test_crud(self) -> None:
        created = self.client.post('/lists/jobtags/', {'title': 'Remote'})
        self.assertEqual(created.status_code, 201)
        tag_id = created.json()['id']

        self.assertEqual(
            [t['title'] for t in self.client.get('/lists/jobtags/').json()],
            ['Remote'],
        )

        self.client.put(f'/lists/jobtags/{tag_id}/', {'title': 'Hybrid'})
        self.assertEqual(JobTag.objects.get(pk=tag_id).title, 'Hybrid')

        deleted = self.client.delete(f'/lists/jobtags/{tag_id}/')
        self.assertEqual(deleted.status_code, 200)
        self.assertFalse(JobTag.objects.filter(pk=tag_id).exists())

    def test_delete_keeps_tagged_jobs(self) -> None:
        tag = JobTag.objects.create(user=self.user, title='Remote')
        job = Job.objects.create(user=self.user, title='Backend Engineer', company='Acme')
        job.job_tags.add(tag)

        self.client.delete(f'/lists/jobtags/{tag.id}/')

        self.assertTrue(Job.objects.filter(pk=job.pk).exists())
        self.assertEqual(job.job_tags.count(), 0)

    def test_other_users_tags_hidden(self) -> None:
        foreign = JobTag.objects.create(user=self.other, title='Onsite')

        self.assertEqual(self.client.get('/lists/jobtags/').json(), [])
        self.assertEqual(self.client.delete(f'/lists/jobtags/{foreign.id}/').status_code, 404)
        self.assertTrue(JobTag.objects.filter(pk=foreign.pk).exists())
