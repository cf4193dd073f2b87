"""Tests for dashboard HTTP routes."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from shared.cache import tag_key
from shared.models.framework import (
    FrameworkPage,
    FrameworkProgress,
    FrameworkView,
    OrganizationFrameworkView,
)


LOAD_PAGE = "services.dashboard.routes.frameworks.load_framework_page"


@pytest.fixture
def page() -> FrameworkPage:
    return FrameworkPage(
        framework=FrameworkView(id="fw-1", name="SOC 2"),
        organization_framework=OrganizationFrameworkView(
            id="of-1", organization_id="org-1", framework_id="fw-1"
        ),
        categories=[],
        progress=FrameworkProgress(),
    )


class TestFrameworkPageRoute:
    """Tests for GET /frameworks/{framework_id}."""

    @pytest.mark.asyncio
    async def test_no_session_redirects_to_login(self, dashboard_client: AsyncClient) -> None:
        with patch(LOAD_PAGE, AsyncMock()) as load_page:
            response = await dashboard_client.get("/frameworks/fw-1")

        assert response.status_code == 307
        assert response.headers["location"] == "/login"
        load_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_token_redirects_to_login(self, dashboard_client: AsyncClient) -> None:
        response = await dashboard_client.get(
            "/frameworks/fw-1",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 307
        assert response.headers["location"] == "/login"

    @pytest.mark.asyncio
    async def test_no_organization_redirects_to_login(
        self, dashboard_client: AsyncClient, make_auth_headers
    ) -> None:
        with patch(LOAD_PAGE, AsyncMock()) as load_page:
            response = await dashboard_client.get("/frameworks/fw-1", headers=make_auth_headers())

        assert response.status_code == 307
        assert response.headers["location"] == "/login"
        load_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_framework_redirects_home(
        self, dashboard_client: AsyncClient, auth_headers
    ) -> None:
        with patch(LOAD_PAGE, AsyncMock(return_value=None)) as load_page:
            response = await dashboard_client.get("/frameworks/fw-404", headers=auth_headers)

        assert response.status_code == 307
        assert response.headers["location"] == "/"
        load_page.assert_awaited_once_with("fw-404", "org-1")

    @pytest.mark.asyncio
    async def test_renders_page(self, dashboard_client: AsyncClient, auth_headers, page) -> None:
        with patch(LOAD_PAGE, AsyncMock(return_value=page)):
            response = await dashboard_client.get("/frameworks/fw-1", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["framework"]["name"] == "SOC 2"
        assert data["organization_framework"]["organization_id"] == "org-1"
        assert data["progress"]["total_controls"] == 0


class TestCacheRoutes:
    """Tests for POST /api/v1/cache/invalidate."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, dashboard_client: AsyncClient) -> None:
        response = await dashboard_client.post("/api/v1/cache/invalidate", json={})

        assert response.status_code == 401
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_requires_admin(self, dashboard_client: AsyncClient, auth_headers) -> None:
        response = await dashboard_client.post(
            "/api/v1/cache/invalidate",
            json={},
            headers=auth_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_invalidates_all_tags_by_default(
        self, dashboard_client: AsyncClient, make_auth_headers, fake_redis
    ) -> None:
        fake_redis.values["cache:some.query:abc"] = "{}"
        fake_redis.sets[tag_key("framework-cache")] = {"cache:some.query:abc"}

        response = await dashboard_client.post(
            "/api/v1/cache/invalidate",
            json={},
            headers=make_auth_headers(organization_id="org-1", roles=["admin"]),
        )

        assert response.status_code == 200
        assert response.json()["data"] == {
            "framework-cache": 1,
            "org-framework-cache": 0,
            "framework-categories-cache": 0,
        }
        assert fake_redis.values == {}

    @pytest.mark.asyncio
    async def test_invalidates_selected_tags(
        self, dashboard_client: AsyncClient, make_auth_headers
    ) -> None:
        response = await dashboard_client.post(
            "/api/v1/cache/invalidate",
            json={"tags": ["org-framework-cache"]},
            headers=make_auth_headers(roles=["owner"]),
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"org-framework-cache": 0}

    @pytest.mark.asyncio
    async def test_rejects_empty_tag_list(self, dashboard_client: AsyncClient, make_auth_headers) -> None:
        response = await dashboard_client.post(
            "/api/v1/cache/invalidate",
            json={"tags": []},
            headers=make_auth_headers(roles=["admin"]),
        )

        assert response.status_code == 422
