"""
HTTP client for the job tracker API.

Wraps a ``requests.Session``; the access token (from ``login`` or passed in)
is attached as a bearer header on every request. Failures raise
``JobTrackerAPIError`` carrying the status code and the server's
``{"error": ...}`` message.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class JobTrackerAPIError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class JobTrackerClient:
    """Client for the /auth, /lists, /experiences and /jobs endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict] = None,
        authenticated: bool = True,
    ) -> Any:
        headers = {"Accept": "application/json"}
        if authenticated and self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}/{path.lstrip('/')}"
        response = self.session.request(
            method,
            url,
            json=payload,
            headers=headers,
            timeout=self.timeout,
        )

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = body["error"]
            else:
                message = response.text or response.reason
            logger.warning("%s %s failed with %s: %s", method, url, response.status_code, message)
            raise JobTrackerAPIError(response.status_code, message)

        if not response.content:
            return None
        return response.json()

    # Auth

    def register(self, username: str, password: str) -> Dict:
        return self._request(
            "POST", "/auth/", {"username": username, "password": password}, authenticated=False
        )

    def login(self, username: str, password: str) -> Dict:
        """Log in and keep the returned token for subsequent requests."""
        data = self._request(
            "POST", "/auth/login/", {"username": username, "password": password}, authenticated=False
        )
        self.token = data["accessToken"]
        return data

    def current_user(self) -> Dict:
        return self._request("GET", "/auth/auth/")

    # Skills and job tags

    def list_skills(self) -> List[Dict]:
        return self._request("GET", "/lists/skills/")

    def create_skill(self, title: str) -> Dict:
        return self._request("POST", "/lists/skills/", {"title": title})

    def rename_skill(self, skill_id: int, title: str) -> Dict:
        return self._request("PUT", f"/lists/skills/{skill_id}/", {"title": title})

    def delete_skill(self, skill_id: int) -> Dict:
        return self._request("DELETE", f"/lists/skills/{skill_id}/")

    def skill_usage(self, skill_id: int) -> Dict:
        return self._request("GET", f"/lists/skills/{skill_id}/usage/")

    def list_job_tags(self) -> List[Dict]:
        return self._request("GET", "/lists/jobtags/")

    def create_job_tag(self, title: str) -> Dict:
        return self._request("POST", "/lists/jobtags/", {"title": title})

    def rename_job_tag(self, tag_id: int, title: str) -> Dict:
        return self._request("PUT", f"/lists/jobtags/{tag_id}/", {"title": title})

    def delete_job_tag(self, tag_id: int) -> Dict:
        return self._request("DELETE", f"/lists/jobtags/{tag_id}/")

    # Experiences

    def list_experiences(self) -> List[Dict]:
        return self._request("GET", "/experiences/")

    def get_experience(self, experience_id: int) -> Dict:
        return self._request("GET", f"/experiences/{experience_id}/")

    def create_experience(self, payload: Dict) -> Dict:
        return self._request("POST", "/experiences/", payload)

    def update_experience(self, experience_id: int, payload: Dict) -> Dict:
        """Omit ``skillDemonstrations`` from ``payload`` to leave them untouched."""
        return self._request("PUT", f"/experiences/{experience_id}/", payload)

    def delete_experience(self, experience_id: int) -> Dict:
        return self._request("DELETE", f"/experiences/{experience_id}/")

    def add_demonstration(self, experience_id: int, skill_id: Optional[int], explanation: str = "") -> Dict:
        return self._request(
            "POST",
            f"/experiences/{experience_id}/demo/",
            {"skillId": skill_id, "explanation": explanation},
        )

    def update_demonstration(self, experience_id: int, skill_id: int, explanation: str) -> Dict:
        return self._request(
            "PUT",
            f"/experiences/{experience_id}/demo/{skill_id}/",
            {"explanation": explanation},
        )

    def remove_demonstration(self, experience_id: int, skill_id: int) -> Dict:
        return self._request("DELETE", f"/experiences/{experience_id}/demo/{skill_id}/")

    def reassign_demonstration(self, demo_id: int, skill_id: Optional[int]) -> Dict:
        return self._request("PUT", f"/experiences/demo/{demo_id}/", {"SkillId": skill_id})

    def delete_demonstration(self, demo_id: int) -> Dict:
        return self._request("DELETE", f"/experiences/demo/{demo_id}/")

    # Jobs

    def list_jobs(self) -> List[Dict]:
        return self._request("GET", "/jobs/")

    def get_job(self, job_id: int) -> Dict:
        return self._request("GET", f"/jobs/{job_id}/")

    def create_job(self, payload: Dict) -> Dict:
        return self._request("POST", "/jobs/", payload)

    def update_job(self, job_id: int, payload: Dict) -> Dict:
        """``payload`` must carry the complete requirement list."""
        return self._request("PUT", f"/jobs/{job_id}/", payload)

    def delete_job(self, job_id: int) -> Dict:
        return self._request("DELETE", f"/jobs/{job_id}/")
