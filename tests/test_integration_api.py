"""
Integration tests for the HTTP API.
Requests go through the full application: routing, validation, session cookies and error handlers.
"""

import pytest
from httpx import AsyncClient

from homequest.repositories.saved_property import SavedPropertyRepository
from homequest.repositories.user import UserRepository
from homequest.seed import seed_database
from tests.conftest import (
    DEFAULT_PASSWORD,
    SESSION_COOKIE,
    login,
    assert_no_password,
    assert_error_body
)


class TestAuthenticationFlow:
    """Registration, login, session status and logout over HTTP."""

    @pytest.mark.asyncio
    async def test_register_login_me_logout(self, async_client: AsyncClient):
        register = await async_client.post(
            "/api/users/register",
            json={"username": "alice", "password": "secret1", "email": "alice@example.com", "name": "Alice"}
        )
        assert register.status_code == 201
        created = register.json()
        assert created["username"] == "alice"
        assert created["role"] == "user"
        assert_no_password(created)

        response = await login(async_client, "alice", "secret1")
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["username"] == "alice"
        assert_no_password(body["user"])

        set_cookie = response.headers["set-cookie"].lower()
        assert f"{SESSION_COOKIE.lower()}=" in set_cookie
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie

        me = await async_client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["id"] == created["id"]
        assert_no_password(me.json())

        status_response = await async_client.get("/api/auth/status")
        assert status_response.json()["isAuthenticated"] is True
        assert status_response.json()["user"]["username"] == "alice"

        logout = await async_client.post("/api/auth/logout")
        assert logout.status_code == 200
        assert logout.json() == {"message": "Logout successful"}

        after = await async_client.get("/api/auth/status")
        assert after.json() == {"isAuthenticated": False, "user": None}

    @pytest.mark.asyncio
    async def test_logout_cookie_no_longer_valid(self, async_client: AsyncClient, test_user):
        await login(async_client)
        token = async_client.cookies.get(SESSION_COOKIE)

        await async_client.post("/api/auth/logout")

        async_client.cookies.clear()
        async_client.cookies.set(SESSION_COOKIE, token)
        response = await async_client.get("/api/auth/me")
        assert_error_body(response, 401)

    @pytest.mark.asyncio
    async def test_me_requires_session(self, async_client: AsyncClient):
        response = await async_client.get("/api/auth/me")

        assert_error_body(response, 401, "Unauthorized, please log in")

    @pytest.mark.asyncio
    async def test_forged_cookie_is_unauthenticated(self, async_client: AsyncClient, test_user):
        async_client.cookies.set(SESSION_COOKIE, "forged-value")

        status_response = await async_client.get("/api/auth/status")
        me = await async_client.get("/api/auth/me")

        assert status_response.status_code == 200
        assert status_response.json()["isAuthenticated"] is False
        assert me.status_code == 401

    @pytest.mark.asyncio
    async def test_logout_without_session(self, async_client: AsyncClient):
        response = await async_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json()["message"] == "Logout successful"

    @pytest.mark.asyncio
    async def test_duplicate_username(self, async_client: AsyncClient, test_user, session_factory):
        response = await async_client.post(
            "/api/users/register",
            json={"username": "alice", "password": "another"}
        )

        assert_error_body(response, 409, "Username already exists")
        async with session_factory() as session:
            assert await UserRepository(session).count() == 1

    @pytest.mark.asyncio
    async def test_duplicate_username_past_precheck(
        self, async_client: AsyncClient, test_user, session_factory, monkeypatch
    ):
        async def not_found(self, username):
            return None

        monkeypatch.setattr(UserRepository, "get_user_by_username", not_found)

        response = await async_client.post(
            "/api/users/register",
            json={"username": "alice", "password": "another"}
        )

        assert_error_body(response, 409, "Username already exists")
        async with session_factory() as session:
            assert await UserRepository(session).count() == 1

    @pytest.mark.asyncio
    async def test_register_missing_password(self, async_client: AsyncClient):
        response = await async_client.post("/api/users/register", json={"username": "alice"})

        data = assert_error_body(response, 400, "Invalid user data")
        assert data["code"] == "VALIDATION_ERROR"
        assert any(error["field"] == "password" for error in data["errors"])

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, async_client: AsyncClient, test_user):
        response = await async_client.post(
            "/api/auth/login",
            json={"username": "alice", "password": "nope"}
        )

        assert_error_body(response, 401, "Incorrect password.")
        assert SESSION_COOKIE not in response.cookies

    @pytest.mark.asyncio
    async def test_login_unknown_username(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/auth/login",
            json={"username": "ghost", "password": "nope"}
        )

        assert_error_body(response, 401, "Incorrect username.")

    @pytest.mark.asyncio
    async def test_login_missing_fields(self, async_client: AsyncClient):
        response = await async_client.post("/api/auth/login", json={"username": "alice"})

        assert_error_body(response, 400, "Invalid login data")

    @pytest.mark.asyncio
    async def test_login_twice_rotates_session(self, async_client: AsyncClient, test_user):
        await login(async_client)
        first = async_client.cookies.get(SESSION_COOKIE)

        await login(async_client)
        second = async_client.cookies.get(SESSION_COOKIE)

        assert first != second
        async_client.cookies.clear()
        async_client.cookies.set(SESSION_COOKIE, first)
        assert (await async_client.get("/api/auth/me")).status_code == 401


class TestPropertyEndpoints:
    """Listing, filtering and detail endpoints."""

    @pytest.mark.asyncio
    async def test_list_all(self, async_client: AsyncClient, sample_listings):
        response = await async_client.get("/api/properties")

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == [p.id for p in sample_listings]
        assert "priceUnit" in data[0]
        assert "isNewLaunch" in data[0]

    @pytest.mark.asyncio
    async def test_empty_catalogue(self, async_client: AsyncClient):
        response = await async_client.get("/api/properties")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_filter_combination(self, async_client: AsyncClient, sample_listings):
        response = await async_client.get(
            "/api/properties",
            params={"city": "Mumbai", "category": "buy", "bedrooms": 3}
        )

        titles = [p["title"] for p in response.json()]
        assert titles == ["Bandra Flat", "Juhu Villa"]

    @pytest.mark.asyncio
    async def test_price_bounds_inclusive(self, async_client: AsyncClient, sample_listings):
        response = await async_client.get(
            "/api/properties",
            params={"minPrice": 12500000, "maxPrice": 17500000}
        )

        titles = {p["title"] for p in response.json()}
        assert titles == {"Bandra Flat", "Pune Office"}

    @pytest.mark.asyncio
    async def test_area_and_status_filters(self, async_client: AsyncClient, sample_listings):
        by_area = await async_client.get("/api/properties", params={"minArea": 1000, "maxArea": 2000})
        sold = await async_client.get("/api/properties", params={"status": "sold"})

        assert {p["title"] for p in by_area.json()} == {"Bandra Flat", "Pune Office"}
        assert [p["title"] for p in sold.json()] == ["Powai Studio"]

    @pytest.mark.asyncio
    async def test_filter_type_and_location(self, async_client: AsyncClient, sample_listings):
        villas = await async_client.get("/api/properties", params={"type": "villa"})
        juhu = await async_client.get("/api/properties", params={"location": "Juhu"})

        assert [p["title"] for p in villas.json()] == ["Juhu Villa"]
        assert [p["title"] for p in juhu.json()] == ["Juhu Villa"]

    @pytest.mark.asyncio
    async def test_blank_city_and_location_ignored(self, async_client: AsyncClient, sample_listings):
        response = await async_client.get("/api/properties", params={"city": "", "location": ""})

        assert response.status_code == 200
        assert len(response.json()) == len(sample_listings)

    @pytest.mark.asyncio
    async def test_invalid_filter_value(self, async_client: AsyncClient):
        response = await async_client.get("/api/properties", params={"category": "castle"})

        data = assert_error_body(response, 400, "Invalid filter parameters")
        assert data["errors"][0]["field"] == "category"

    @pytest.mark.asyncio
    async def test_non_numeric_price(self, async_client: AsyncClient):
        response = await async_client.get("/api/properties", params={"minPrice": "cheap"})

        data = assert_error_body(response, 400, "Invalid filter parameters")
        assert data["errors"][0]["field"] == "minPrice"

    @pytest.mark.asyncio
    async def test_featured(self, async_client: AsyncClient, sample_listings):
        response = await async_client.get("/api/properties/featured")

        assert response.status_code == 200
        assert {p["title"] for p in response.json()} == {"Bandra Flat", "Juhu Villa", "Pune Office"}
        assert all(p["featured"] for p in response.json())

    @pytest.mark.asyncio
    async def test_featured_limit(self, async_client: AsyncClient, sample_listings):
        response = await async_client.get("/api/properties/featured", params={"limit": 2})

        assert len(response.json()) == 2

    @pytest.mark.asyncio
    async def test_large_limit_accepted(self, async_client: AsyncClient, sample_listings):
        featured = await async_client.get("/api/properties/featured", params={"limit": 500})
        mumbai = await async_client.get("/api/properties/city/Mumbai", params={"limit": 500})

        assert featured.status_code == 200
        assert len(featured.json()) == 3
        assert mumbai.status_code == 200
        assert len(mumbai.json()) == 4

    @pytest.mark.asyncio
    async def test_by_city(self, async_client: AsyncClient, sample_listings):
        pune = await async_client.get("/api/properties/city/Pune")
        nowhere = await async_client.get("/api/properties/city/Atlantis")

        assert [p["title"] for p in pune.json()] == ["Pune Office"]
        assert nowhere.status_code == 200
        assert nowhere.json() == []

    @pytest.mark.asyncio
    async def test_get_property(self, async_client: AsyncClient, sample_listings):
        target = sample_listings[1]

        response = await async_client.get(f"/api/properties/{target.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == target.id
        assert data["type"] == "villa"
        assert data["agentId"] == target.agent_id

    @pytest.mark.asyncio
    async def test_get_property_not_found(self, async_client: AsyncClient):
        response = await async_client.get("/api/properties/9999")

        data = assert_error_body(response, 404, "Property not found")
        assert data["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_get_property_invalid_id(self, async_client: AsyncClient):
        response = await async_client.get("/api/properties/abc")

        assert_error_body(response, 400, "Invalid property ID")

    @pytest.mark.asyncio
    async def test_seeded_catalogue(self, async_client: AsyncClient, db_session):
        assert await seed_database(db_session) is True

        everything = await async_client.get("/api/properties")
        featured_mumbai = await async_client.get(
            "/api/properties",
            params={"city": "Mumbai", "featured": "true"}
        )
        rentals = await async_client.get("/api/properties", params={"category": "rent"})

        assert len(everything.json()) == 8
        assert len(featured_mumbai.json()) == 3
        assert all(p["city"] == "Mumbai" and p["featured"] for p in featured_mumbai.json())
        assert {p["title"] for p in rentals.json()} == {"Green Valley Apartment", "Harmony Towers"}


class TestAgentEndpoints:

    @pytest.mark.asyncio
    async def test_list_agents(self, async_client: AsyncClient, test_agent):
        response = await async_client.get("/api/agents")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Aditya Kumar"
        assert data[0]["reviewCount"] == 10

    @pytest.mark.asyncio
    async def test_list_agents_large_limit(self, async_client: AsyncClient, test_agent):
        response = await async_client.get("/api/agents", params={"limit": 500})

        assert response.status_code == 200
        assert len(response.json()) == 1

    @pytest.mark.asyncio
    async def test_get_agent(self, async_client: AsyncClient, test_agent):
        response = await async_client.get(f"/api/agents/{test_agent.id}")

        assert response.status_code == 200
        assert response.json()["email"] == test_agent.email

    @pytest.mark.asyncio
    async def test_agent_not_found(self, async_client: AsyncClient):
        response = await async_client.get("/api/agents/42")

        assert_error_body(response, 404, "Agent not found")


class TestEnquiryEndpoints:

    @pytest.mark.asyncio
    async def test_create_enquiry(self, async_client: AsyncClient, sample_listings, test_agent):
        payload = {
            "name": "Priya Nair",
            "email": "priya@example.com",
            "phone": "9876543210",
            "message": "Is the flat still available for a visit on Saturday?",
            "interest": "buy",
            "propertyId": sample_listings[0].id,
            "agentId": test_agent.id
        }

        response = await async_client.post("/api/enquiries", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["propertyId"] == sample_listings[0].id
        assert data["createdAt"] is not None

    @pytest.mark.asyncio
    async def test_create_enquiry_without_login_or_links(self, async_client: AsyncClient):
        response = await async_client.post("/api/enquiries", json={
            "name": "Rahul",
            "email": "rahul@example.com",
            "phone": "9123456789",
            "message": "Please call me about rentals in Andheri."
        })

        assert response.status_code == 201
        assert response.json()["propertyId"] is None

    @pytest.mark.asyncio
    async def test_invalid_enquiry(self, async_client: AsyncClient):
        response = await async_client.post("/api/enquiries", json={
            "name": "R",
            "email": "not-an-email",
            "phone": "123",
            "message": "short"
        })

        data = assert_error_body(response, 400, "Invalid enquiry data")
        fields = {error["field"] for error in data["errors"]}
        assert {"name", "email", "phone", "message"} <= fields


class TestProfileEndpoints:

    @pytest.mark.asyncio
    async def test_update_own_profile(self, async_client: AsyncClient, test_user):
        await login(async_client)

        response = await async_client.patch(
            f"/api/users/{test_user.id}",
            json={"name": "Alice Cooper", "phone": "9000000001"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Profile updated successfully"
        assert data["user"]["name"] == "Alice Cooper"
        assert data["user"]["phone"] == "9000000001"
        assert data["user"]["email"] == "alice@example.com"
        assert_no_password(data["user"])

    @pytest.mark.asyncio
    async def test_cannot_change_role_or_username(self, async_client: AsyncClient, test_user):
        await login(async_client)

        response = await async_client.patch(
            f"/api/users/{test_user.id}",
            json={"role": "admin", "username": "root", "name": "Alice"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "user"
        assert response.json()["user"]["username"] == "alice"

    @pytest.mark.asyncio
    async def test_update_other_profile_forbidden(self, async_client: AsyncClient, test_user, other_user):
        await login(async_client)

        response = await async_client.patch(f"/api/users/{other_user.id}", json={"name": "Hacked"})

        data = assert_error_body(response, 403, "You can only update your own profile")
        assert data["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_ownership_checked_before_body(self, async_client: AsyncClient, test_user, other_user):
        await login(async_client)

        response = await async_client.patch(f"/api/users/{other_user.id}", json={"name": "X"})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_update_requires_login(self, async_client: AsyncClient, test_user):
        response = await async_client.patch(f"/api/users/{test_user.id}", json={"name": "Alice"})

        assert_error_body(response, 401)

    @pytest.mark.asyncio
    async def test_invalid_profile_data(self, async_client: AsyncClient, test_user):
        await login(async_client)

        response = await async_client.patch(f"/api/users/{test_user.id}", json={"email": "nope"})

        assert_error_body(response, 400, "Invalid profile data")

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user(self, async_client: AsyncClient, test_user, user_repository):
        await user_repository.create_user({
            "username": "carol",
            "password": DEFAULT_PASSWORD,
            "email": "carol@example.com"
        })
        await login(async_client)

        response = await async_client.patch(
            f"/api/users/{test_user.id}",
            json={"email": "carol@example.com"}
        )

        assert_error_body(response, 409, "Email already exists")


class TestSavedPropertyEndpoints:

    @pytest.mark.asyncio
    async def test_requires_login(self, async_client: AsyncClient):
        assert (await async_client.get("/api/saved-properties")).status_code == 401
        assert (await async_client.post("/api/saved-properties", json={"propertyId": 1})).status_code == 401
        assert (await async_client.get("/api/saved-properties/1/check")).status_code == 401

    @pytest.mark.asyncio
    async def test_save_is_idempotent(
        self, async_client: AsyncClient, test_user, sample_listings, session_factory
    ):
        await login(async_client)
        property_id = sample_listings[0].id

        first = await async_client.post("/api/saved-properties", json={"propertyId": property_id})
        second = await async_client.post("/api/saved-properties", json={"propertyId": property_id})

        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["id"] == second.json()["id"]
        assert first.json()["userId"] == test_user.id
        async with session_factory() as session:
            assert await SavedPropertyRepository(session).count() == 1

    @pytest.mark.asyncio
    async def test_save_missing_property(self, async_client: AsyncClient, test_user):
        await login(async_client)

        response = await async_client.post("/api/saved-properties", json={"propertyId": 999})

        assert_error_body(response, 404, "Property not found")

    @pytest.mark.asyncio
    async def test_save_invalid_body(self, async_client: AsyncClient, test_user):
        await login(async_client)

        response = await async_client.post("/api/saved-properties", json={"propertyId": "abc"})

        assert_error_body(response, 400, "Invalid property data")

    @pytest.mark.asyncio
    async def test_list_newest_first(
        self, async_client: AsyncClient, test_user, sample_listings, session_factory
    ):
        await login(async_client)
        first, second = sample_listings[2], sample_listings[0]
        await async_client.post("/api/saved-properties", json={"propertyId": first.id})
        await async_client.post("/api/saved-properties", json={"propertyId": second.id})

        response = await async_client.get("/api/saved-properties")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [second.id, first.id]
        assert response.json()[0]["title"] == "Bandra Flat"

    @pytest.mark.asyncio
    async def test_check_and_unsave(self, async_client: AsyncClient, test_user, sample_listings):
        await login(async_client)
        property_id = sample_listings[0].id
        await async_client.post("/api/saved-properties", json={"propertyId": property_id})

        saved = await async_client.get(f"/api/saved-properties/{property_id}/check")
        removed = await async_client.delete(f"/api/saved-properties/{property_id}")
        after = await async_client.get(f"/api/saved-properties/{property_id}/check")

        assert saved.json() == {"isSaved": True}
        assert removed.status_code == 200
        assert removed.json()["message"] == "Property removed from saved list successfully"
        assert after.json() == {"isSaved": False}

    @pytest.mark.asyncio
    async def test_unsave_not_saved_still_succeeds(self, async_client: AsyncClient, test_user):
        await login(async_client)

        response = await async_client.delete("/api/saved-properties/12345")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_bookmarks_are_per_user(
        self, async_client: AsyncClient, test_user, other_user, sample_listings
    ):
        await login(async_client, "bob")
        await async_client.post("/api/saved-properties", json={"propertyId": sample_listings[0].id})

        await login(async_client, "alice")
        response = await async_client.get("/api/saved-properties")
        check = await async_client.get(f"/api/saved-properties/{sample_listings[0].id}/check")

        assert response.json() == []
        assert check.json() == {"isSaved": False}


class TestHealthEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_root(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert response.json()["api_prefix"] == "/api"
