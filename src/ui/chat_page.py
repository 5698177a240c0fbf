"""NiceGUI chat interface with a simulated typing reveal."""

from nicegui import Client, ui

from src.client.config import ClientConfig, get_client_config
from src.client.exchange import ChatExchange
from src.models.schemas import ChatMessage, Role
from src.session.controller import SessionController
from src.session.state import SessionState

PAGE_TITLE = "Fast API TestBot"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=Playfair+Display:wght@500&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .app-container {
        border-radius: 24px;
        box-shadow: 0 20px 40px rgba(0, 0, 0, 0.25);
        overflow: hidden;
    }

    .title { font-family: 'Playfair Display', serif; letter-spacing: 0.025em; }

    .message-user {
        background: #3182ce;
        border: 1px solid #2b6cb0;
        color: white;
        border-radius: 16px;
    }

    .message-assistant {
        background: #edf2f7;
        border: 1px solid #e2e8f0;
        color: #1a202c;
        border-radius: 16px;
    }
    .body--dark .message-assistant {
        background: rgba(255, 255, 255, 0.06);
        border-color: rgba(255, 255, 255, 0.16);
        color: rgba(255, 255, 255, 0.92);
    }

    .message-text { white-space: pre-wrap; }

    .typing-dot {
        width: 6px; height: 6px;
        background: #a0aec0;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-4px); }
    }
</style>
"""


class NiceGuiNotifier:
    """Shows controller errors as toasts on one browser client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def notify(self, message: str, duration: float) -> None:
        with self._client:
            ui.notify(
                message,
                type="negative",
                caption="Error",
                timeout=int(duration * 1000),
                close_button=True,
            )


class RenderedHistory:
    """Remembers the history shape the message list was last drawn for.

    While a reply is revealed only the last bubble's text changes, so the
    page updates that one label instead of rebuilding every bubble.
    """

    def __init__(self) -> None:
        self.length = -1
        self.generation = -1
        self.revealing = False

    def mark(self, state: SessionState) -> None:
        self.length = len(state.history)
        self.generation = state.generation
        self.revealing = state.revealing is not None

    def needs_redraw(self, state: SessionState) -> bool:
        """True unless the only possible change is the last message's text."""
        return (
            len(state.history) != self.length
            or state.generation != self.generation
            or (state.revealing is not None) != self.revealing
        )


def build_controller(client: Client, config: ClientConfig | None = None) -> SessionController:
    """Create the session controller for one page visit."""
    config = config or get_client_config()
    exchange = ChatExchange(config.base_url, timeout=config.request_timeout)
    return SessionController(exchange, NiceGuiNotifier(client), config=config)


@ui.page("/")
def chat_page(client: Client) -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    dark = ui.dark_mode(True)
    controller = build_controller(client)
    state = controller.state

    scroll_area: ui.scroll_area
    send_btn: ui.button

    def render_typing_dots() -> None:
        with ui.row().classes("gap-1 mt-2"):
            for _ in range(3):
                ui.element("div").classes("typing-dot")

    rendered = RenderedHistory()
    last_label: ui.label | None = None

    def render_message(msg: ChatMessage) -> ui.label:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes("max-w-[80%] md:max-w-[60%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 shadow-lg {bubble}"):
                    content_label = ui.label(msg.content).classes("message-text text-base")
                    if msg.is_revealing:
                        render_typing_dots()
                ui.label(msg.time_label).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
        return content_label

    @ui.refreshable
    def messages_view() -> None:
        nonlocal last_label
        last_label = None
        for msg in state.history:
            last_label = render_message(msg)
        rendered.mark(state)

    def on_state_change() -> None:
        if rendered.needs_redraw(state) or last_label is None:
            messages_view.refresh()
        else:
            # Live bubble only
            last_label.set_text(state.last.content)
        if state.busy:
            send_btn.props("loading")
        else:
            send_btn.props(remove="loading")
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await controller.send()

    def new_chat() -> None:
        controller.start_new()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-0 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem); max-height: 900px"
        ),
    ):
            # Header
            with ui.row().classes("w-full px-4 py-3 items-center justify-between border-b"):
                ui.button(
                    icon="dark_mode", on_click=dark.toggle
                ).props("flat round").tooltip("Toggle color mode")
                ui.label(PAGE_TITLE).classes("title text-xl")
                ui.button("New Chat", on_click=new_chat).props("flat no-caps")

            ui.label().bind_text_from(
                state, "conversation_id", lambda cid: f"Conversation #{cid}"
            ).bind_visibility_from(
                state, "conversation_id", lambda cid: cid is not None
            ).classes("text-xs text-gray-400 self-end px-4")

            # Messages
            with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                with ui.column().classes("w-full p-4 gap-6"):
                    messages_view()

            # Input
            with ui.row().classes("w-full p-4 gap-3 items-center border-t no-wrap"):
                (
                    ui.input(placeholder="Type your message...")
                    .props("outlined dense")
                    .classes("flex-grow")
                    .bind_value(controller, "draft")
                    .on("keydown.enter", send_message)
                )
                send_btn = (
                    ui.button("Send", on_click=send_message)
                    .props("unelevated no-caps color=primary")
                    .classes("px-8")
                )

    unsubscribe = state.subscribe(on_state_change)
    client.on_disconnect(unsubscribe)
