"""NiceGUI chat interface for asking questions about an uploaded PDF."""

import os

from nicegui import app, events, ui

from src.chat.controller import ConversationController
from src.chat.models import Message, Role
from src.chat.session import get_session_registry
from src.credentials.models import ProviderName
from src.ingestion.ingestor import PDF_CONTENT_TYPE
from src.ingestion.models import UploadedFile
from src.models.schemas import MAX_MESSAGE_LENGTH

PROVIDER_OPTIONS = {
    ProviderName.OPENAI.value: "OpenAI",
    ProviderName.ANTHROPIC.value: "Anthropic",
    ProviderName.GOOGLE.value: "Google AI",
}

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }
    .header { background: linear-gradient(135deg, #0f766e 0%, #1d4ed8 100%); }

    .message-user {
        background: #1d4ed8;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #1d4ed8;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }
    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


@ui.page("/")
async def chat_page() -> None:
    """Main chat page. One controller per page visit; keys persist per browser."""
    ui.add_head_html(CUSTOM_CSS)
    controller: ConversationController = get_session_registry().create_controller(
        app.storage.user
    )
    await controller.restore()

    messages_container: ui.column
    typing_row: ui.row
    input_field: ui.textarea
    send_btn: ui.button
    document_label: ui.label
    provider_label: ui.label

    def render_message(msg: Message) -> None:
        is_user = msg.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[75%] px-4 py-3 {bubble}"):
                if is_user:
                    ui.label(msg.content).classes("text-sm whitespace-pre-wrap")
                else:
                    ui.markdown(msg.content).classes("text-sm")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not len(controller.transcript):
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("picture_as_pdf").classes("text-5xl text-gray-300")
                    ui.label("Upload a PDF to start").classes("text-lg text-gray-400")
            for msg in controller.transcript:
                render_message(msg)

    def refresh_status() -> None:
        typing_row.set_visibility(controller.is_busy)
        if controller.is_busy:
            send_btn.disable()
        else:
            send_btn.enable()
        document_label.set_text(controller.document.name if controller.document else "No document")
        provider_label.set_text(
            PROVIDER_OPTIONS[controller.provider.value] if controller.provider else "No provider"
        )

    def report_error() -> None:
        if controller.error:
            ui.notify(controller.error, type="negative")
        if controller.credentials_required:
            credential_dialog.open()

    def on_transcript_change() -> None:
        # The input is only cleared once its message is accepted
        if controller.transcript.messages[-1].role == Role.USER:
            input_field.value = ""
        refresh_messages()
        refresh_status()

    controller.on_change = on_transcript_change

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.is_busy:
            return

        await controller.submit(text)
        refresh_status()
        report_error()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        upload = UploadedFile(
            name=e.file.name,
            content_type=e.file.content_type,
            data=await e.file.read(),
        )
        uploader.reset()
        if controller.is_busy:
            ui.notify("Wait for the current response before uploading", type="warning")
            return
        await controller.upload(upload)
        refresh_status()
        report_error()

    async def save_credentials() -> None:
        if await controller.configure(provider_select.value, key_input.value or ""):
            key_input.value = ""
            credential_dialog.close()
            refresh_status()
            ui.notify(f"{PROVIDER_OPTIONS[controller.provider.value]} is ready", type="positive")
        else:
            ui.notify(controller.error, type="negative")

    # === Credential dialog ===
    with ui.dialog() as credential_dialog, ui.card().classes("w-96"):
        ui.label("Choose AI Provider & Enter API Key").classes("text-lg font-semibold")
        ui.label("Select your preferred AI provider and enter your API key.").classes(
            "text-sm text-gray-500"
        )
        provider_select = ui.select(
            PROVIDER_OPTIONS,
            value=(controller.provider or ProviderName.OPENAI).value,
            label="AI Provider",
        ).classes("w-full")
        key_input = ui.input("API Key", password=True, password_toggle_button=True).classes(
            "w-full"
        )
        ui.button("Save", on_click=save_credentials).classes("self-end")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("description").classes("text-white text-3xl")
                ui.label("PDF Chat").classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-3"):
                provider_label = ui.label().classes("text-xs text-white/80")
                ui.button(icon="key", on_click=credential_dialog.open).props(
                    "flat round color=white"
                )

        # Document
        with ui.row().classes("w-full px-5 py-2 items-center gap-3 border-b"):
            uploader = (
                ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                .props(f"accept={PDF_CONTENT_TYPE} flat dense label='Upload PDF'")
                .classes("w-56")
            )
            document_label = ui.label().classes("text-sm text-gray-500")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")
            with ui.row().classes("gap-1 px-4") as typing_row:
                for _ in range(3):
                    ui.element("div").classes("typing-dot")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            input_field = (
                ui.textarea(placeholder="Ask about your PDF...")
                .props(f"autogrow borderless dense rows=1 maxlength={MAX_MESSAGE_LENGTH}")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    refresh_messages()
    refresh_status()
    report_error()


def main() -> None:
    ui.run(
        title="PDF Chat",
        port=8080,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "pdf-chat-secret"),
    )


if __name__ == "__main__":
    main()
