"""
HTTP client for the Job Board API.

Wraps every REST endpoint in a method, sends the stored bearer token with
each request and keeps the session up to date on login, registration and
logout.

Usage:
    client = JobBoardClient("http://localhost:5000")
    client.login("jane@example.com", "secret")
    for job in client.list_jobs(search="python"):
        print(job["title"])
"""

import logging
from typing import Any, BinaryIO, Dict, List, Optional
import httpx

from jobboard.client.session import SessionStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class JobBoardClient:
    """
    Args:
        base_url: Server root, e.g. "http://localhost:5000"
        session: Where the token and user are kept (in memory when omitted)
        http: Pre-built httpx.Client; its base_url is used instead of base_url
        api_prefix: Path prefix of the REST routes
        timeout: Request timeout in seconds for the default client
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        session: Optional[SessionStore] = None,
        http: Optional[httpx.Client] = None,
        api_prefix: str = "/api",
        timeout: float = 30.0,
    ):
        self.session = session if session is not None else SessionStore(path=None)
        self.http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self.api_prefix = api_prefix.rstrip("/")

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self.session.user

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        response = self.http.request(method, f"{self.api_prefix}{path}", headers=headers, **kwargs)

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            logger.debug(f"{method} {path} failed with {response.status_code}: {detail}")
            raise ApiError(response.status_code, detail)

        return response.json()

    def _store_login(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.session.save(data["token"], data["user"])
        return data["user"]

    # Auth

    def register(self, email: str, password: str, name: str, **fields) -> Dict[str, Any]:
        """Create an account and log in. Extra fields: role, username, gender, phone_number, location."""
        data = self._request("POST", "/auth/register", json={"email": email, "password": password, "name": name, **fields})
        return self._store_login(data)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._store_login(data)

    def logout(self) -> None:
        self.session.clear()

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/me")

    # Jobs

    def list_jobs(
        self,
        search: Optional[str] = None,
        company_id: Optional[int] = None,
        job_type: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"skip": skip, "limit": limit}
        if search:
            params["search"] = search
        if company_id is not None:
            params["company_id"] = company_id
        if job_type:
            params["type"] = job_type
        return self._request("GET", "/jobs", params=params)

    def get_job(self, job_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/jobs/{job_id}")

    def employer_jobs(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/jobs/employer")

    def create_job(self, **fields) -> Dict[str, Any]:
        return self._request("POST", "/jobs", json=fields)

    def update_job(self, job_id: int, **fields) -> Dict[str, Any]:
        return self._request("PUT", f"/jobs/{job_id}", json=fields)

    def delete_job(self, job_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/jobs/{job_id}")

    # Applications

    def apply(self, job_id: int, cover_letter: Optional[str] = None, resume_url: Optional[str] = None) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/applications",
            json={"job_id": job_id, "cover_letter": cover_letter, "resume_url": resume_url},
        )

    def my_applications(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/applications/my")

    def employer_applications(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/applications/employer")

    def job_applications(self, job_id: int) -> List[Dict[str, Any]]:
        return self._request("GET", f"/applications/job/{job_id}")

    def update_application_status(self, application_id: int, status: str) -> Dict[str, Any]:
        return self._request("PUT", f"/applications/{application_id}/status", json={"status": status})

    # Companies

    def create_company(self, name: str, **fields) -> Dict[str, Any]:
        return self._request("POST", "/companies", json={"name": name, **fields})

    def my_companies(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/companies/my-companies")

    def list_companies(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/companies")

    def get_company(self, company_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/companies/{company_id}")

    def update_company(self, company_id: int, **fields) -> Dict[str, Any]:
        return self._request("PUT", f"/companies/{company_id}", json=fields)

    # Profile

    def get_profile(self) -> Dict[str, Any]:
        return self._request("GET", "/users/profile")

    def update_profile(self, **fields) -> Dict[str, Any]:
        return self._request("PUT", "/users/profile", json=fields)

    # Upload

    def upload_file(self, file: BinaryIO, filename: str, content_type: str = "application/octet-stream") -> str:
        """Upload a file and return its public URL."""
        data = self._request("POST", "/upload", files={"file": (filename, file, content_type)})
        return data["url"]

    # Admin

    def admin_stats(self) -> Dict[str, int]:
        return self._request("GET", "/admin/stats")

    def admin_users(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/admin/users")

    def admin_get_user(self, user_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/admin/users/{user_id}")

    def admin_delete_user(self, user_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/admin/users/{user_id}")
