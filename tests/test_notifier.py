"""Tests for the notifier module.

Tests cover:
- SlackWebhookNotifier against a mocked webhook
- MockNotifier recording and failure modes
- get_notifier factory function
"""

import json

import httpx
import pytest
import respx

from foosball_ratings import Attachment, AttachmentColor, DeliveryError, SlackMessage
from foosball_ratings.notifier import (
    BaseNotifier,
    MockNotifier,
    SlackWebhookNotifier,
    get_notifier,
)

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.fixture
def webhook():
    """Mocked Slack webhook endpoint."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def message() -> SlackMessage:
    return SlackMessage(
        username="csocso-sans-bot",
        icon_emoji=":soccer:",
        channel="#foosball",
        attachments=[
            Attachment(
                color=AttachmentColor.YELLOW,
                text="alice: 1000 → 1000 (+0)",
                pretext="Rating changes after alice vs bob match:",
            ),
            Attachment(color=AttachmentColor.YELLOW, text="bob: 1000 → 1000 (+0)"),
        ],
    )


class TestSlackWebhookNotifier:
    """Tests for SlackWebhookNotifier."""

    @pytest.mark.asyncio
    async def test_posts_payload(self, webhook: respx.MockRouter, message: SlackMessage) -> None:
        """Test the message is posted as JSON to the webhook."""
        route = webhook.post(WEBHOOK_URL).mock(return_value=httpx.Response(200, text="ok"))

        async with SlackWebhookNotifier(WEBHOOK_URL) as notifier:
            await notifier.send(message)

        assert route.called
        body = json.loads(route.calls.last.request.content)
        assert body == message.to_payload()
        assert body["attachments"][0]["color"] == "#ffef60"

    @pytest.mark.asyncio
    async def test_error_status_raises(self, webhook: respx.MockRouter, message: SlackMessage) -> None:
        """Test a non-2xx response raises DeliveryError with the status."""
        webhook.post(WEBHOOK_URL).mock(return_value=httpx.Response(403, text="invalid_token"))

        async with SlackWebhookNotifier(WEBHOOK_URL) as notifier:
            with pytest.raises(DeliveryError) as exc_info:
                await notifier.send(message)

        assert exc_info.value.status_code == 403
        assert "invalid_token" in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [301, 302, 204])
    async def test_non_200_family(self, webhook: respx.MockRouter, message: SlackMessage, status: int) -> None:
        """Test redirects are failures and other 2xx responses are deliveries."""
        webhook.post(WEBHOOK_URL).mock(
            return_value=httpx.Response(status, headers={"location": "https://hooks.example/moved"})
        )

        async with SlackWebhookNotifier(WEBHOOK_URL) as notifier:
            if status < 300:
                await notifier.send(message)
            else:
                with pytest.raises(DeliveryError) as exc_info:
                    await notifier.send(message)
                assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, webhook: respx.MockRouter, message: SlackMessage) -> None:
        """Test a connection failure raises DeliveryError."""
        webhook.post(WEBHOOK_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        async with SlackWebhookNotifier(WEBHOOK_URL) as notifier:
            with pytest.raises(DeliveryError, match="connection refused") as exc_info:
                await notifier.send(message)

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self, webhook: respx.MockRouter, message: SlackMessage) -> None:
        """Test a client passed in is not closed by the notifier."""
        webhook.post(WEBHOOK_URL).mock(return_value=httpx.Response(200))

        async with httpx.AsyncClient() as client:
            notifier = SlackWebhookNotifier(WEBHOOK_URL, client=client)
            await notifier.send(message)
            await notifier.close()
            assert not client.is_closed

    @pytest.mark.asyncio
    async def test_name_property(self) -> None:
        assert SlackWebhookNotifier(WEBHOOK_URL).name == "slack"

    @pytest.mark.asyncio
    async def test_close_without_send(self) -> None:
        """Test close is safe before any request was made."""
        await SlackWebhookNotifier(WEBHOOK_URL).close()


class TestMockNotifier:
    """Tests for MockNotifier."""

    @pytest.mark.asyncio
    async def test_records_messages(self, message: SlackMessage) -> None:
        notifier = MockNotifier()
        await notifier.send(message)
        assert notifier.sent == [message]

    @pytest.mark.asyncio
    async def test_fail_mode(self, message: SlackMessage) -> None:
        notifier = MockNotifier(fail=True, error_message="channel_not_found")
        with pytest.raises(DeliveryError, match="channel_not_found"):
            await notifier.send(message)
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_context_manager_closes(self) -> None:
        async with MockNotifier() as notifier:
            assert notifier.name == "mock"
        assert notifier.closed


class TestGetNotifier:
    """Tests for get_notifier factory."""

    def test_get_mock(self) -> None:
        notifier = get_notifier("mock")
        assert isinstance(notifier, MockNotifier)
        assert isinstance(notifier, BaseNotifier)

    def test_get_slack_with_kwargs(self) -> None:
        notifier = get_notifier("slack", webhook_url=WEBHOOK_URL, timeout=3.0)
        assert isinstance(notifier, SlackWebhookNotifier)
        assert notifier.timeout == 3.0

    def test_unknown_notifier(self) -> None:
        with pytest.raises(ValueError, match="Unknown notifier"):
            get_notifier("carrier-pigeon")
