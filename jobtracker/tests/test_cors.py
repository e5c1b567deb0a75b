from django.test import SimpleTestCase, override_settings


@override_settings(CORS_ALLOWED_ORIGINS=['http://localhost:3000'], CORS_ALLOW_ALL_ORIGINS=False)
class CorsTests(SimpleTestCase):
    """Preflight requests are answered by the middleware before any view runs."""

    def preflight(self, origin: str):
        return self.client.options(
            '/lists/skills/',
            HTTP_ORIGIN=origin,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS='authorization, content-type',
        )

    def test_allowed_origin_gets_cors_headers(self) -> None:
        response = self.preflight('http://localhost:3000')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:3000')
        self.assertIn('authorization', response['Access-Control-Allow-Headers'])

    def test_unknown_origin_gets_no_cors_headers(self) -> None:
        response = self.preflight('http://evil.example')

        self.assertNotIn('Access-Control-Allow-Origin', response)
