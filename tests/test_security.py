"""
Tests for security-critical paths.

Tests:
- Password hashing
- JWT issuance and validation
- Bearer token enforcement (401)
- Role enforcement (403)
"""

import time
from datetime import timedelta

import pytest
from jose import JWTError, jwt

from jobboard.core.config import settings
from jobboard.core.security import (
    create_access_token,
    create_user_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from jobboard.models.user import UserRole
from tests.conftest import auth_headers


class TestPasswordHashing:

    def test_hash_and_verify(self):
        hashed = get_password_hash("correct horse")

        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong horse", hashed)

    def test_long_passwords_truncated_to_bcrypt_limit(self):
        password = "a" * 100
        hashed = get_password_hash(password)

        assert verify_password(password, hashed)
        assert verify_password("a" * 72, hashed)


class TestTokens:

    def test_token_round_trip(self, candidate):
        payload = decode_token(create_user_token(candidate))

        assert payload["sub"] == str(candidate.id)
        assert payload["role"] == "CANDIDATE"

    def test_default_expiry_is_one_day(self):
        before = time.time()
        payload = jwt.get_unverified_claims(create_access_token({"sub": "1"}))

        assert payload["exp"] - before == pytest.approx(24 * 60 * 60, abs=5)

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-10))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_wrong_secret_rejected(self):
        token = jwt.encode({"sub": "1"}, "not-the-secret", algorithm=settings.ALGORITHM)

        with pytest.raises(JWTError):
            decode_token(token)


class TestBearerAuthentication:

    def test_missing_header_returns_401(self, client):
        response = client.get("/api/users/profile")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_garbage_token_returns_401(self, client):
        response = client.get("/api/users/profile", headers={"Authorization": "Bearer invalid.token.here"})

        assert response.status_code == 401

    def test_expired_token_returns_401(self, client, candidate):
        token = create_access_token({"sub": str(candidate.id), "role": "CANDIDATE"}, expires_delta=timedelta(seconds=-10))

        response = client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_without_subject_returns_401(self, client):
        token = create_access_token({"role": "ADMIN"})

        response = client.get("/api/admin/stats", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_for_deleted_user_returns_401(self, client, db_session, candidate):
        headers = auth_headers(candidate)
        db_session.delete(candidate)
        db_session.commit()

        response = client.get("/api/users/profile", headers=headers)

        assert response.status_code == 401


class TestRoleEnforcement:

    def test_candidate_cannot_post_jobs(self, client, candidate, sample_job_data):
        response = client.post("/api/jobs", json=sample_job_data, headers=auth_headers(candidate))

        assert response.status_code == 403

    def test_employer_cannot_apply(self, client, employer, make_job):
        job = make_job(employer)

        response = client.post("/api/applications", json={"job_id": job.id}, headers=auth_headers(employer))

        assert response.status_code == 403

    @pytest.mark.parametrize("role", [UserRole.CANDIDATE, UserRole.EMPLOYER])
    def test_admin_endpoints_require_admin(self, client, make_user, role):
        headers = auth_headers(make_user(role))

        for endpoint in ["/api/admin/stats", "/api/admin/users"]:
            response = client.get(endpoint, headers=headers)
            assert response.status_code == 403, f"{endpoint} should reject {role.value}"

    def test_admin_endpoints_require_authentication(self, client):
        for endpoint in ["/api/admin/stats", "/api/admin/users"]:
            response = client.get(endpoint)
            assert response.status_code == 401, f"{endpoint} should require auth"
