# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""YouTube Thumbnail Generator Page."""

import logging
import uuid

import mesop as me

from common.analytics import log_page_view, track_click
from common.error_handling import ImageReadError
from common.utils import read_uploaded_image
from components.header import header
from components.thumbnail_display.thumbnail_display import thumbnail_display
from components.thumbnail_input_form.thumbnail_input_form import thumbnail_input_form
from config.thumbnail_prompts import IMAGE_READ_FAILED_MESSAGE
from models.thumbnail import GenerationLifecycle, ImagePayload, LifecycleStatus
from services.thumbnail_service import ThumbnailOrchestrator
from state.state import AppState
from state.thumbnail_state import PageState

logger = logging.getLogger(__name__)


def on_load(e: me.LoadEvent):
    app_state = me.state(AppState)
    if not app_state.session_id:
        app_state.session_id = str(uuid.uuid4())
    app_state.current_page = "/"
    log_page_view()


@me.page(
    path="/",
    title="AI YouTube Thumbnail Generator",
    on_load=on_load,
)
def page():
    thumbnail_page_content()


def thumbnail_page_content():
    state = me.state(PageState)
    lifecycle = lifecycle_from_state(state)

    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            gap=32,
            padding=me.Padding.symmetric(vertical=48, horizontal=24),
            max_width=1200,
            margin=me.Margin.symmetric(horizontal="auto"),
        )
    ):
        header(
            "AI YouTube Thumbnail Generator",
            "smart_display",
            subtitle="Turn a video title and a headshot into a click-worthy thumbnail.",
        )

        with me.box(style=me.Style(display="flex", flex_direction="row", gap=32, flex_wrap="wrap")):
            with me.box(style=me.Style(flex_basis="360px", flex_grow=1)):
                thumbnail_input_form(
                    video_title=state.video_title,
                    headshot_preview_url=state.headshot_preview_url,
                    headshot_filename=state.headshot_filename,
                    is_loading=lifecycle.is_loading,
                    on_title_blur=on_title_blur,
                    on_upload=on_upload_headshot,
                    on_generate=on_generate_click,
                )
            with me.box(style=me.Style(flex_basis="480px", flex_grow=2)):
                me.text("3. Your Thumbnail", type="headline-6")
                thumbnail_display(lifecycle)

        me.text(
            "Powered by Gemini API. Designed for content creators.",
            style=me.Style(text_align="center", font_size=14, color=me.theme_var("outline")),
        )


# --- State mapping ---

def lifecycle_from_state(state: PageState) -> GenerationLifecycle:
    status = LifecycleStatus(state.status)
    return GenerationLifecycle(
        status=status,
        result=state.generated_thumbnail or None,
        error_message=state.error_message or None,
        loading_message=state.loading_message,
    )


def apply_lifecycle(state: PageState, lifecycle: GenerationLifecycle):
    state.status = lifecycle.status.value
    state.generated_thumbnail = lifecycle.result or ""
    state.error_message = lifecycle.error_message or ""
    state.loading_message = lifecycle.loading_message


def headshot_from_state(state: PageState) -> ImagePayload | None:
    if not state.headshot_base64:
        return None
    return ImagePayload(
        base64=state.headshot_base64,
        mime_type=state.headshot_mime_type,
        preview_url=state.headshot_preview_url,
    )


# --- Event Handlers ---

def on_title_blur(e: me.InputBlurEvent):
    state = me.state(PageState)
    state.video_title = e.value


def on_upload_headshot(e: me.UploadEvent):
    state = me.state(PageState)
    file = e.files[0]
    try:
        payload = read_uploaded_image(file)
    except ImageReadError as ex:
        logger.warning(f"Headshot upload failed: {ex}")
        lifecycle = lifecycle_from_state(state)
        if not lifecycle.is_loading:
            apply_lifecycle(state, lifecycle.fail(IMAGE_READ_FAILED_MESSAGE))
        yield
        return

    state.headshot_base64 = payload.base64
    state.headshot_mime_type = payload.mime_type
    state.headshot_preview_url = payload.preview_url
    state.headshot_filename = file.name
    yield


@track_click(element_id="thumbnail_generate_button")
def on_generate_click(e: me.ClickEvent):
    state = me.state(PageState)
    orchestrator = ThumbnailOrchestrator()
    snapshots = orchestrator.generate(
        lifecycle_from_state(state),
        state.video_title,
        headshot_from_state(state),
    )
    for lifecycle in snapshots:
        apply_lifecycle(state, lifecycle)
        yield
