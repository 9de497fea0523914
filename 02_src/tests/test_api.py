"""Tests for the HTTP API."""

import httpx
import pytest
import pytest_asyncio

from dicelog.api import create_fastapi_app


@pytest_asyncio.fixture
async def client(application):
    """HTTP client bound to a started application."""
    fastapi_app = create_fastapi_app(application)
    transport = httpx.ASGITransport(app=fastapi_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestDiceRoutes:
    """Tests for /api/dice routes."""

    @pytest.mark.asyncio
    async def test_roll(self, client):
        """Test a single throw."""
        response = await client.post("/api/dice/roll")
        assert response.status_code == 200
        data = response.json()
        assert 1 <= data["first_die"] <= 6
        assert 1 <= data["second_die"] <= 6
        assert data["total"] == data["first_die"] + data["second_die"]

    @pytest.mark.asyncio
    async def test_roll_many(self, client):
        """Test rolling 100 times."""
        response = await client.post("/api/dice/roll-many", params={"count": 100})
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 100
        assert 200 <= data["roll_total"] <= 1200
        assert data["total_throws"] == 100

    @pytest.mark.asyncio
    async def test_roll_many_rejects_bad_count(self, client):
        """Test validation of the count parameter."""
        response = await client.post("/api/dice/roll-many", params={"count": 0})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_clear(self, client):
        """Test clearing the running total."""
        await client.post("/api/dice/roll-many", params={"count": 5})
        response = await client.post("/api/dice/clear")
        assert response.status_code == 200
        assert response.json() == {"roll_total": 0}

    @pytest.mark.asyncio
    async def test_divide_by_zero_is_logged_and_surfaced(self, client, application):
        """Test that the fault becomes a 500 and an exception event."""
        response = await client.post("/api/dice/divide-by-zero")
        assert response.status_code == 500

        records = application.recent_events.records()
        assert len(records) == 1
        assert records[0].has_exception
        assert "ZeroDivisionError" in records[0].exception_detail


class TestObservabilityRoutes:
    """Tests for /api/events and /api/health."""

    @pytest.mark.asyncio
    async def test_events_after_batch(self, client):
        """Test that the batch event is listed."""
        await client.post("/api/dice/roll-many", params={"count": 99})

        response = await client.get("/api/events")
        assert response.status_code == 200
        events = response.json()
        assert len(events) == 1
        assert events[0]["source_name"] == "DiceThrowLibrary"
        assert events[0]["level"] == "Informational"
        assert events[0]["message"] == (
            "DiceThrowLibrary has generated 100 total throws this run."
        )

    @pytest.mark.asyncio
    async def test_events_min_level(self, client, application):
        """Test filtering by minimum level."""
        application.source.info("info")
        application.source.error("error")

        response = await client.get("/api/events", params={"min_level": "Error"})
        assert [e["message"] for e in response.json()] == ["error"]

    @pytest.mark.asyncio
    async def test_events_invalid_level(self, client):
        """Test that an unknown level is rejected."""
        response = await client.get("/api/events", params={"min_level": "loud"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_health(self, client, application):
        """Test the health route."""
        response = await client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["sources"] == ["DiceThrowLibrary"]
        assert data["listeners"] == application.channel.listener_count()


class TestEventsEmptyBuffer:
    """Tests for /api/events while the buffer is empty."""

    @pytest.mark.asyncio
    async def test_events_on_fresh_app(self, client):
        """Test that a started app with no events lists nothing."""
        response = await client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_events_after_clear(self, client):
        """Test that listing still works once the buffer is cleared."""
        await client.post("/api/dice/roll-many", params={"count": 99})
        await client.post("/api/dice/clear")

        response = await client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == []


class TestCors:
    """Tests for CORS configuration."""

    @pytest.mark.asyncio
    async def test_no_cors_by_default(self, client):
        """Test that no CORS headers are sent without configured origins."""
        response = await client.get(
            "/api/health", headers={"Origin": "http://localhost:5173"}
        )
        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_configured_origin_allowed(self, settings):
        """Test that configured origins get CORS headers."""
        from dicelog.app import Application

        settings.cors_origins = ["http://dashboard.local"]
        app = Application(settings)
        await app.start()
        try:
            transport = httpx.ASGITransport(app=create_fastapi_app(app))
            async with httpx.AsyncClient(
                transport=transport, base_url="http://test"
            ) as c:
                response = await c.get(
                    "/api/health", headers={"Origin": "http://dashboard.local"}
                )
            assert response.headers["access-control-allow-origin"] == (
                "http://dashboard.local"
            )
        finally:
            await app.stop()
