"""
Test suite for company endpoints.
"""

from tests.conftest import auth_headers


class TestCompanyCreation:

    def test_create_company(self, client, employer):
        response = client.post(
            "/api/companies",
            json={"name": "Initech", "description": "Software", "website": "https://initech.example", "location": "Austin"},
            headers=auth_headers(employer),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Initech"
        assert data["employer_id"] == employer.id

    def test_create_company_requires_name(self, client, employer):
        response = client.post("/api/companies", json={"description": "No name"}, headers=auth_headers(employer))

        assert response.status_code == 400
        assert "name" in response.json()["detail"]

    def test_candidates_cannot_create_companies(self, client, candidate):
        response = client.post("/api/companies", json={"name": "Nope"}, headers=auth_headers(candidate))

        assert response.status_code == 403


class TestCompanyListing:

    def test_my_companies_only_lists_own(self, client, employer, other_employer, make_company):
        make_company(employer, name="Mine")
        make_company(other_employer, name="Theirs")

        response = client.get("/api/companies/my-companies", headers=auth_headers(employer))

        assert response.status_code == 200
        assert [company["name"] for company in response.json()] == ["Mine"]

    def test_public_list_is_limited_to_ten_newest(self, client, employer, make_company):
        for i in range(12):
            make_company(employer, name=f"Company {i}")

        response = client.get("/api/companies")

        assert response.status_code == 200
        names = [company["name"] for company in response.json()]
        assert len(names) == 10
        assert names[0] == "Company 11"
        assert "Company 0" not in names

    def test_get_company_with_employer(self, client, employer, make_company):
        company = make_company(employer, name="Hooli")

        response = client.get(f"/api/companies/{company.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Hooli"
        assert data["employer"] == {"name": employer.name, "email": employer.email}

    def test_get_unknown_company(self, client):
        response = client.get("/api/companies/99999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Company not found"


class TestCompanyUpdate:

    def test_owner_updates_company(self, client, employer, make_company):
        company = make_company(employer, name="Old Name", location="Austin")

        response = client.put(
            f"/api/companies/{company.id}",
            json={"name": "New Name"},
            headers=auth_headers(employer),
        )

        assert response.status_code == 200
        assert response.json()["name"] == "New Name"
        assert response.json()["location"] == "Austin"

    def test_non_owner_cannot_update(self, client, employer, other_employer, make_company):
        company = make_company(employer)

        response = client.put(
            f"/api/companies/{company.id}",
            json={"name": "Taken Over"},
            headers=auth_headers(other_employer),
        )

        assert response.status_code == 403

    def test_name_cannot_be_cleared(self, client, employer, make_company):
        company = make_company(employer, name="Keep Me")

        response = client.put(
            f"/api/companies/{company.id}",
            json={"name": None, "website": None},
            headers=auth_headers(employer),
        )

        assert response.status_code == 400
        assert "name" in response.json()["detail"]
        assert client.get(f"/api/companies/{company.id}").json()["name"] == "Keep Me"

    def test_update_unknown_company(self, client, employer):
        response = client.put("/api/companies/99999", json={"name": "x"}, headers=auth_headers(employer))

        assert response.status_code == 404
