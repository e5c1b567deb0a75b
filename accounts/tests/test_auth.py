from django.test import TestCase
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from accounts.models import User
from experience.models import Experience, SkillDemonstration
from jobs.models import Job, Requirement, RequirementMatch
from lists.models import JobTag, Skill


class AuthEndpointTests(APITestCase):
    """Registration, login and bearer token validation."""

    def test_register_hashes_password(self) -> None:
        response = self.client.post('/auth/', {'username': 'ada', 'password': 'analytical-engine'})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['username'], 'ada')
        self.assertNotIn('password', response.json())

        user = User.objects.get(username='ada')
        self.assertNotEqual(user.password, 'analytical-engine')
        self.assertTrue(user.check_password('analytical-engine'))

    def test_register_duplicate_username(self) -> None:
        User.objects.create_user(username='ada', password='analytical-engine')

        response = self.client.post('/auth', {'username': 'ada', 'password': 'difference-engine'})

        self.assertEqual(response.status_code, 400)
        self.assertIn('username', response.json()['error'])

    def test_login_returns_token_usable_as_bearer(self) -> None:
        User.objects.create_user(username='ada', password='analytical-engine')

        response = self.client.post('/auth/login/', {'username': 'ada', 'password': 'analytical-engine'})
        self.assertEqual(response.status_code, 200)
        token = response.json()['accessToken']
        self.assertEqual(token, Token.objects.get(user__username='ada').key)

        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        me = self.client.get('/auth/auth/')
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()['username'], 'ada')

    def test_login_wrong_password(self) -> None:
        User.objects.create_user(username='ada', password='analytical-engine')

        response = self.client.post('/auth/login/', {'username': 'ada', 'password': 'nope-nope-nope'})

        self.assertEqual(response.status_code, 401)
        self.assertIn('error', response.json())

    def test_unauthenticated_requests_rejected(self) -> None:
        for path in ['/lists/skills/', '/lists/jobtags/', '/experiences/', '/jobs/', '/auth/auth/']:
            response = self.client.get(path)
            self.assertEqual(response.status_code, 401, path)
            self.assertIn('error', response.json())

    def test_invalid_token_rejected(self) -> None:
        self.client.credentials(HTTP_AUTHORIZATION='Bearer not-a-real-token')

        response = self.client.get('/experiences/')

        self.assertEqual(response.status_code, 401)

    def test_login_ignores_stale_bearer_header(self) -> None:
        User.objects.create_user(username='ada', password='analytical-engine')
        self.client.credentials(HTTP_AUTHORIZATION='Bearer revoked-token')

        response = self.client.post('/auth/login/', {'username': 'ada', 'password': 'analytical-engine'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['accessToken'], Token.objects.get(user__username='ada').key)

    def test_register_ignores_stale_bearer_header(self) -> None:
        self.client.credentials(HTTP_AUTHORIZATION='Bearer revoked-token')

        response = self.client.post('/auth/', {'username': 'grace', 'password': 'compiler-pioneer'})

        self.assertEqual(response.status_code, 201)
        self.assertTrue(User.objects.filter(username='grace').exists())

    def test_login_wrong_password_with_stale_bearer_header(self) -> None:
        User.objects.create_user(username='ada', password='analytical-engine')
        self.client.credentials(HTTP_AUTHORIZATION='Bearer revoked-token')

        response = self.client.post('/auth/login/', {'username': 'ada', 'password': 'nope-nope-nope'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'error': 'Wrong username or password.'})


class UserDeletionTests(TestCase):
    """Everything a user owns goes with the account."""

    def populate(self, user) -> dict:
        skill = Skill.objects.create(user=user, title='SQL')
        tag = JobTag.objects.create(user=user, title='Remote')
        experience = Experience.objects.create(user=user, title='DB Migration', description='')
        demo = SkillDemonstration.objects.create(experience=experience, skill=skill, explanation='Scripts')
        job = Job.objects.create(user=user, title='Backend Engineer', company='Acme')
        job.job_tags.add(tag)
        requirement = Requirement.objects.create(job=job, description='Know SQL')
        requirement.skills.add(skill)
        match = RequirementMatch.objects.create(
            requirement=requirement, experience=experience, match_explanation='Led it'
        )
        Token.objects.create(user=user)
        return {
            Skill: skill.pk,
            JobTag: tag.pk,
            Experience: experience.pk,
            SkillDemonstration: demo.pk,
            Job: job.pk,
            Requirement: requirement.pk,
            RequirementMatch: match.pk,
        }

    def test_delete_user_removes_owned_rows_only(self) -> None:
        leaving = User.objects.create_user(username='leaving', password='leaving-password-1')
        staying = User.objects.create_user(username='staying', password='staying-password-1')
        leaving_rows = self.populate(leaving)
        staying_rows = self.populate(staying)

        leaving_id = leaving.pk
        leaving.delete()

        for model, pk in leaving_rows.items():
            self.assertFalse(model.objects.filter(pk=pk).exists(), model.__name__)
        self.assertFalse(Token.objects.filter(user_id=leaving_id).exists())

        for model, pk in staying_rows.items():
            self.assertTrue(model.objects.filter(pk=pk).exists(), model.__name__)
        self.assertTrue(Token.objects.filter(user=staying).exists())
