"""Integration tests for the NiceGUI chat page.

Drives the page with NiceGUI's simulated user; the backend call is replaced
by an echo transport so only the page wiring is under test.
"""

import pytest
from nicegui.testing import User

import wormchat.ui.chat_page as chat_page
from tests.conftest import TEST_EMAIL
from wormchat.client.transport import CHAT_ENDPOINT, ChatTransport
from wormchat.models.schemas import WormChatResponse


@pytest.fixture
def transports(user: User, monkeypatch: pytest.MonkeyPatch) -> list[ChatTransport]:
    """Swap the page's transport for one that echoes the message back.

    Returns:
        Every transport the page created, in order.
    """
    created: list[ChatTransport] = []

    class EchoTransport(ChatTransport):
        def __init__(self, *args, **kwargs) -> None:
            super().__init__(*args, **kwargs)
            created.append(self)

        async def send(
            self, text: str, email: str, conversation_id: str | None = None
        ) -> WormChatResponse:
            return WormChatResponse(id="conv-1", output_text=f"echo: {text}")

    monkeypatch.setattr("wormchat.ui.chat_page.ChatTransport", EchoTransport)
    monkeypatch.setenv("API_BASE_URL", "")
    monkeypatch.setenv("API_KEY", "")
    return created


async def log_in(user: User) -> None:
    await user.open("/")
    user.find(marker="email-input").type(TEST_EMAIL)
    user.find(marker="login").click()
    await user.should_see("New conversation")


class TestLoginScreen:
    async def test_empty_email_shows_validation_message(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        """Submitting without an email stays on the login screen."""
        await user.open("/")

        user.find(marker="login").click()

        await user.should_see("Please enter your email address")
        await user.should_see(marker="email-input")
        await user.should_not_see("New conversation")

    async def test_whitespace_email_is_rejected(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        await user.open("/")

        user.find(marker="email-input").type("   ")
        user.find(marker="login").click()

        await user.should_see("Please enter your email address")
        await user.should_not_see("New conversation")

    async def test_login_shows_chat_screen(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        await log_in(user)

        await user.should_see(TEST_EMAIL)
        await user.should_see("Welcome to WormChat")
        await user.should_not_see(marker="email-input")


class TestChatScreen:
    async def test_logout_returns_to_login_screen(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        await log_in(user)

        user.find(marker="logout").click()

        await user.should_see(marker="email-input")
        await user.should_not_see("New conversation")

    async def test_send_renders_reply(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        await log_in(user)

        user.find(marker="message-input").type("Hello")
        user.find(marker="send").click()

        await user.should_see("echo: Hello")

    async def test_new_conversation_clears_messages(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        await log_in(user)
        user.find(marker="message-input").type("Hello")
        user.find(marker="send").click()
        await user.should_see("echo: Hello")

        user.find("New conversation").click()

        await user.should_not_see("echo: Hello")
        await user.should_see("Welcome to WormChat")


class TestBackendUrl:
    async def test_defaults_to_page_origin(
        self, user: User, transports: list[ChatTransport]
    ) -> None:
        """Without API_BASE_URL the backend is the origin that served the page."""
        await log_in(user)

        assert transports[-1].url == f"http://test{CHAT_ENDPOINT}"

    async def test_configured_base_url_wins(
        self,
        user: User,
        transports: list[ChatTransport],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("API_BASE_URL", "https://worm.example.net/")

        await log_in(user)

        assert transports[-1].url == f"https://worm.example.net{CHAT_ENDPOINT}"
