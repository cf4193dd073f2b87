"""
Unit tests for third-party integration clients.

All HTTP traffic goes through httpx.MockTransport.
"""

import json

import httpx
import pytest

from shared.integrations import (
    AnalyticsClient,
    ConfigurationError,
    DiscordWebhook,
    ExternalServiceError,
    ResendClient,
    TriggerClient,
)
from services.jobs.tasks.introduction import IntroductionEmailPayload


def recording_transport(
    requests: list[httpx.Request],
    responses: list[httpx.Response],
) -> httpx.MockTransport:
    """Record each request and answer with the next queued response."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return responses.pop(0)

    return httpx.MockTransport(handler)


class TestResendClient:
    """Tests for ResendClient."""

    def test_missing_api_key(self) -> None:
        with pytest.raises(ConfigurationError, match="missing API key"):
            ResendClient(api_key="")

    @pytest.mark.asyncio
    async def test_list_contacts(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(
            requests,
            [
                httpx.Response(
                    200,
                    json={
                        "object": "list",
                        "data": [
                            {"id": "c1", "email": "alice@example.com", "first_name": "Alice"},
                            {"id": "c2", "email": "bob@example.com"},
                        ],
                    },
                )
            ],
        )

        async with ResendClient(api_key="re_test", api_url="https://resend.test", transport=transport) as resend:
            contacts = await resend.list_contacts("aud-1")

        assert [c.email for c in contacts] == ["alice@example.com", "bob@example.com"]
        assert requests[0].url.path == "/audiences/aud-1/contacts"
        assert requests[0].headers["Authorization"] == "Bearer re_test"

    @pytest.mark.asyncio
    async def test_list_contacts_empty(self) -> None:
        transport = recording_transport([], [httpx.Response(200, json={"data": None})])

        async with ResendClient(api_key="re_test", transport=transport) as resend:
            assert await resend.list_contacts("aud-1") == []

    @pytest.mark.asyncio
    async def test_create_contact(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(201, json={"id": "c9"})])

        async with ResendClient(api_key="re_test", transport=transport) as resend:
            contact_id = await resend.create_contact("aud-1", email="alice@example.com", first_name="Alice")

        body = json.loads(requests[0].content)
        assert contact_id == "c9"
        assert requests[0].method == "POST"
        assert body == {"email": "alice@example.com", "unsubscribed": False, "first_name": "Alice"}

    @pytest.mark.asyncio
    async def test_send_email(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(200, json={"id": "em_1"})])

        async with ResendClient(api_key="re_test", transport=transport) as resend:
            email_id = await resend.send_email(
                to=["alice@example.com"],
                subject="Welcome",
                text="Hello",
                from_address="Bubba <hello@bubba.test>",
            )

        body = json.loads(requests[0].content)
        assert email_id == "em_1"
        assert requests[0].url.path == "/emails"
        assert body["from"] == "Bubba <hello@bubba.test>"
        assert "html" not in body

    @pytest.mark.asyncio
    async def test_client_error_is_not_retried(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(401, json={"message": "bad key"})])

        async with ResendClient(api_key="re_test", transport=transport, retry_backoff_seconds=0) as resend:
            with pytest.raises(ExternalServiceError) as exc_info:
                await resend.list_contacts("aud-1")

        assert exc_info.value.status_code == 401
        assert exc_info.value.transient is False
        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_transient_read_is_retried(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(
            requests,
            [
                httpx.Response(503),
                httpx.Response(429),
                httpx.Response(200, json={"data": []}),
            ],
        )

        async with ResendClient(
            api_key="re_test",
            transport=transport,
            max_retries=3,
            retry_backoff_seconds=0,
        ) as resend:
            contacts = await resend.list_contacts("aud-1")

        assert contacts == []
        assert len(requests) == 3

    @pytest.mark.asyncio
    async def test_retries_are_bounded(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(500) for _ in range(5)])

        async with ResendClient(
            api_key="re_test",
            transport=transport,
            max_retries=2,
            retry_backoff_seconds=0,
        ) as resend:
            with pytest.raises(ExternalServiceError) as exc_info:
                await resend.list_contacts("aud-1")

        assert exc_info.value.transient is True
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_writes_are_not_retried(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(503), httpx.Response(201, json={"id": "c1"})])

        async with ResendClient(api_key="re_test", transport=transport, retry_backoff_seconds=0) as resend:
            with pytest.raises(ExternalServiceError):
                await resend.create_contact("aud-1", email="alice@example.com")

        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with ResendClient(
            api_key="re_test",
            transport=httpx.MockTransport(handler),
            max_retries=1,
        ) as resend:
            with pytest.raises(ExternalServiceError) as exc_info:
                await resend.list_contacts("aud-1")

        assert exc_info.value.service == "resend"
        assert exc_info.value.transient is True

    @pytest.mark.asyncio
    async def test_non_json_listing(self) -> None:
        transport = recording_transport([], [httpx.Response(200, text="<html>ok</html>")])

        async with ResendClient(api_key="re_test", transport=transport) as resend:
            with pytest.raises(ExternalServiceError) as exc_info:
                await resend.list_contacts("aud-1")

        assert exc_info.value.service == "resend"
        assert exc_info.value.transient is False

    @pytest.mark.asyncio
    async def test_created_contact_without_id(self) -> None:
        transport = recording_transport([], [httpx.Response(201, json={"object": "contact"})])

        async with ResendClient(api_key="re_test", transport=transport) as resend:
            with pytest.raises(ExternalServiceError):
                await resend.create_contact("aud-1", email="alice@example.com")


class TestTriggerClient:
    """Tests for TriggerClient."""

    def test_missing_secret_key(self) -> None:
        with pytest.raises(ConfigurationError, match="missing secret key"):
            TriggerClient(secret_key="")

    @pytest.mark.asyncio
    async def test_trigger_with_model_payload(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(200, json={"id": "run_123"})])

        async with TriggerClient(secret_key="tr_test", api_url="https://trigger.test", transport=transport) as jobs:
            handle = await jobs.trigger(
                "introduction-email",
                IntroductionEmailPayload(email="alice@example.com"),
            )

        assert handle.id == "run_123"
        assert handle.task_id == "introduction-email"
        assert requests[0].url.path == "/api/v1/tasks/introduction-email/trigger"
        assert json.loads(requests[0].content) == {"payload": {"email": "alice@example.com"}}

    @pytest.mark.asyncio
    async def test_trigger_failure(self) -> None:
        transport = recording_transport([], [httpx.Response(500)])

        async with TriggerClient(secret_key="tr_test", transport=transport) as jobs:
            with pytest.raises(ExternalServiceError) as exc_info:
                await jobs.trigger("new-organization", {"organization_id": "x"})

        assert exc_info.value.service == "trigger"

    @pytest.mark.asyncio
    async def test_html_success_body(self) -> None:
        transport = recording_transport([], [httpx.Response(200, text="<html>ok</html>")])

        async with TriggerClient(secret_key="tr_test", transport=transport) as jobs:
            with pytest.raises(ExternalServiceError) as exc_info:
                await jobs.trigger("introduction-email", {"email": "alice@example.com"})

        assert exc_info.value.service == "trigger"
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_body_without_run_id(self) -> None:
        transport = recording_transport([], [httpx.Response(200, json={"status": "queued"})])

        async with TriggerClient(secret_key="tr_test", transport=transport) as jobs:
            with pytest.raises(ExternalServiceError):
                await jobs.trigger("introduction-email", {"email": "alice@example.com"})


class TestDiscordWebhook:
    """Tests for DiscordWebhook."""

    @pytest.mark.asyncio
    async def test_notify_posts_content(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(204)])
        url = "https://discord.test/api/webhooks/1/abc"

        async with DiscordWebhook(url, transport=transport) as webhook:
            await webhook.notify("New waitlist signup: alice@example.com")

        assert str(requests[0].url) == url
        assert json.loads(requests[0].content) == {"content": "New waitlist signup: alice@example.com"}

    @pytest.mark.asyncio
    async def test_notify_failure(self) -> None:
        transport = recording_transport([], [httpx.Response(404)])

        async with DiscordWebhook("https://discord.test/hook", transport=transport) as webhook:
            with pytest.raises(ExternalServiceError):
                await webhook.notify("hello")

    @pytest.mark.asyncio
    async def test_malformed_url(self) -> None:
        webhook_url = "http://exa mple.com:abc/hook"
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(204)])

        async with DiscordWebhook(webhook_url, transport=transport) as webhook:
            with pytest.raises(ExternalServiceError) as exc_info:
                await webhook.notify("hello")

        assert exc_info.value.service == "discord"
        assert requests == []


class TestAnalyticsClient:
    """Tests for AnalyticsClient."""

    @pytest.mark.asyncio
    async def test_disabled_without_credentials(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [])

        async with AnalyticsClient(client_id="", client_secret="", transport=transport) as analytics:
            await analytics.track("alice@example.com", "waitlist_signup")

        assert analytics.enabled is False
        assert requests == []

    @pytest.mark.asyncio
    async def test_track_event(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(requests, [httpx.Response(200, json={})])

        async with AnalyticsClient(
            client_id="op_id",
            client_secret="op_secret",
            api_url="https://openpanel.test",
            transport=transport,
        ) as analytics:
            await analytics.track(
                "alice@example.com",
                "waitlist_signup",
                {"channel": "web", "email": "alice@example.com"},
            )

        request = requests[0]
        assert request.url.path == "/track"
        assert request.headers["openpanel-client-id"] == "op_id"
        assert json.loads(request.content) == {
            "type": "track",
            "payload": {
                "name": "waitlist_signup",
                "profileId": "alice@example.com",
                "properties": {"channel": "web", "email": "alice@example.com"},
            },
        }

    @pytest.mark.asyncio
    async def test_track_failure_propagates(self) -> None:
        transport = recording_transport([], [httpx.Response(500)])

        async with AnalyticsClient(client_id="op_id", client_secret="op_secret", transport=transport) as analytics:
            with pytest.raises(ExternalServiceError):
                await analytics.track("alice@example.com", "waitlist_signup")
