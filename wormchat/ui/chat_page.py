"""NiceGUI chat interface with a local email login."""

from collections.abc import Callable

from fastapi import Request
from nicegui import app, ui

from wormchat.chat.conversation import Conversation
from wormchat.client.transport import ChatTransport
from wormchat.config import get_settings
from wormchat.models.schemas import ChatMessage, Role
from wormchat.session.state import LoginError, SessionState
from wormchat.session.storage import MappingStore

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f4f4f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: #18181b; }

    .message-user {
        background: #18181b;
        color: #f4f4f5;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-assistant {
        background: white;
        color: #18181b;
        border: 1px solid #e4e4e7;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: #e4e4e7; }
    .avatar-assistant { background: #18181b; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #a1a1aa;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.15s; }
    .typing-dot:nth-child(3) { animation-delay: 0.3s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .error-banner {
        background: #fef2f2;
        border: 1px solid #fecaca;
        color: #b91c1c;
        border-radius: 8px;
    }

    .send-btn { background: #18181b !important; color: white !important; }

    /* Markdown styling */
    .message-assistant p { margin: 0.5rem 0; }
    .message-assistant pre {
        margin: 0.5rem 0;
        background: #f4f4f5;
        border-radius: 6px;
        padding: 0.75rem;
        overflow-x: auto;
    }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
    .message-assistant ul, .message-assistant ol { margin: 0.5rem 0; padding-left: 1.25rem; }
</style>
"""


def render_avatar(role: Role) -> None:
    css = "avatar-user" if role is Role.USER else "avatar-assistant"
    icon = "person" if role is Role.USER else "smart_toy"
    color = "text-zinc-600" if role is Role.USER else "text-white"
    with ui.element("div").classes(
        f"w-8 h-8 shrink-0 rounded-full flex items-center justify-center {css}"
    ):
        ui.icon(icon).classes(f"{color} text-base")


def render_message(msg: ChatMessage) -> None:
    is_user = msg.role is Role.USER
    align = "justify-end" if is_user else "justify-start"

    with ui.row().classes(f"w-full {align} gap-3 items-start no-wrap"):
        if not is_user:
            render_avatar(Role.ASSISTANT)
        if is_user:
            # Plain text for the user, markdown for the assistant
            ui.label(msg.content).classes("message-user max-w-[70%] px-4 py-3 text-sm")
        else:
            with ui.element("div").classes("message-assistant max-w-[70%] px-4 py-1"):
                ui.markdown(msg.content).classes("text-sm leading-relaxed")
        if is_user:
            render_avatar(Role.USER)


def render_typing_indicator() -> None:
    with ui.row().classes("w-full justify-start gap-3 items-start"):
        render_avatar(Role.ASSISTANT)
        with ui.element("div").classes("message-assistant px-4 py-3"):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")


def render_login_screen(session: SessionState, on_login: Callable[[], None]) -> None:
    """Email form that unlocks the chat screen."""
    with (
        ui.column().classes("w-full min-h-screen items-center justify-center p-4"),
        ui.card().classes("w-full max-w-md items-center gap-4 p-6"),
    ):
        with ui.element("div").classes(
            "w-16 h-16 rounded-full flex items-center justify-center avatar-assistant"
        ):
            ui.icon("chat").classes("text-white text-3xl")
        ui.label("WormChat").classes("text-2xl font-semibold")
        ui.label(
            "Enter your email address to start chatting with the AI assistant"
        ).classes("text-sm text-gray-500 text-center")

        email_input = (
            ui.input(placeholder="example@email.com")
            .props("outlined dense autofocus")
            .classes("w-full")
            .mark("email-input")
        )
        error_label = ui.label().classes("text-sm text-red-500 self-start")
        error_label.set_visibility(False)

        def submit() -> None:
            try:
                session.login(email_input.value or "")
            except LoginError as e:
                error_label.set_text(e.message)
                error_label.set_visibility(True)
                return
            on_login()

        email_input.on("keydown.enter", submit)
        ui.button("Log in", on_click=submit).classes("w-full send-btn").mark("login")


def render_chat_screen(
    session: SessionState,
    transport: ChatTransport,
    on_logout: Callable[[], None],
) -> None:
    """Header, message list and input for a logged-in user."""
    messages_container: ui.column
    scroll: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not conversation.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Welcome to WormChat").classes("text-lg text-gray-600")
                    ui.label(
                        "Type a message to start a conversation with the AI assistant"
                    ).classes("text-sm text-gray-400")
            for msg in conversation.messages:
                render_message(msg)
            if conversation.is_loading:
                render_typing_indicator()
            if conversation.error:
                ui.label(conversation.error).classes("w-full error-banner p-4 text-sm")
        input_field.set_enabled(not conversation.is_loading)
        send_btn.set_enabled(not conversation.is_loading)
        scroll.scroll_to(percent=1.0)

    conversation = Conversation(session, transport, on_change=refresh_messages)

    async def send_message() -> None:
        text = input_field.value or ""
        if not conversation.can_send(text):
            return
        input_field.value = ""
        await conversation.send(text)

    def logout() -> None:
        session.logout()
        on_logout()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("chat").classes("text-white text-3xl")
                ui.label("WormChat").classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-2"):
                ui.label(session.email or "").classes("text-xs text-white/70 gt-xs")
                ui.button(
                    "New conversation", on_click=conversation.start_new_conversation
                ).props("outline dense no-caps color=white")
                ui.button(icon="logout", on_click=logout).props(
                    "flat round dense color=white"
                ).mark("logout").tooltip("Log out")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-zinc-50") as scroll,
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t no-wrap"):
            input_field = (
                ui.input(placeholder="Type a message...")
                .props("outlined dense")
                .classes("flex-grow")
                .mark("message-input")
                .on("keydown.enter", send_message)
            )
            send_btn = (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated")
                .classes("send-btn")
                .mark("send")
            )

    refresh_messages()


@ui.page("/")
def chat_page(request: Request) -> None:
    """Main page: login screen or chat screen depending on the stored email."""
    ui.add_head_html(CUSTOM_CSS)

    settings = get_settings()
    session = SessionState(MappingStore(app.storage.user))
    transport = ChatTransport(
        # Same origin as the page when no backend URL is configured
        base_url=settings.api_base_url or str(request.base_url),
        api_key=settings.api_key,
        timeout=settings.request_timeout,
    )

    root = ui.column().classes("w-full gap-0")

    def show_screen() -> None:
        root.clear()
        with root:
            if session.is_logged_in:
                render_chat_screen(session, transport, on_logout=show_screen)
            else:
                render_login_screen(session, on_login=show_screen)

    show_screen()
