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

from dataclasses import dataclass

import mesop as me

from common.utils import create_data_url
from models.thumbnail import GenerationLifecycle, LifecycleStatus

PLACEHOLDER_TEXT = "Your generated thumbnail will appear here."

DISPLAY_BOX_STYLE = me.Style(
    width="100%",
    aspect_ratio="16 / 9",
    border=me.Border.all(
        me.BorderSide(width=2, style="dashed", color=me.theme_var("outline-variant")),
    ),
    border_radius=12,
    display="flex",
    align_items="center",
    justify_content="center",
    flex_direction="column",
    gap=16,
    overflow="hidden",
)


@dataclass(frozen=True)
class ThumbnailView:
    kind: str  # "placeholder", "loading", "error" or "image"
    text: str = ""
    image_src: str = ""


def present(lifecycle: GenerationLifecycle) -> ThumbnailView:
    """Maps a lifecycle snapshot to what the display shows."""
    if lifecycle.status is LifecycleStatus.LOADING:
        return ThumbnailView(kind="loading", text=lifecycle.loading_message)
    if lifecycle.status is LifecycleStatus.FAILED:
        return ThumbnailView(kind="error", text=lifecycle.error_message or "")
    if lifecycle.status is LifecycleStatus.SUCCEEDED and lifecycle.result:
        return ThumbnailView(kind="image", image_src=create_data_url(lifecycle.result))
    return ThumbnailView(kind="placeholder", text=PLACEHOLDER_TEXT)


@me.component
def thumbnail_display(lifecycle: GenerationLifecycle):
    """Shows the loading message, the error or the generated thumbnail."""
    view = present(lifecycle)
    with me.box(style=DISPLAY_BOX_STYLE):
        if view.kind == "loading":
            me.progress_spinner()
            me.text(view.text, style=me.Style(color=me.theme_var("on-surface-variant")))
        elif view.kind == "error":
            me.icon("error", style=me.Style(color=me.theme_var("error"), font_size=36))
            me.text(
                view.text,
                style=me.Style(color=me.theme_var("error"), text_align="center", padding=me.Padding.all(16)),
            )
        elif view.kind == "image":
            me.image(
                src=view.image_src,
                style=me.Style(width="100%", height="100%", object_fit="contain"),
            )
        else:
            me.icon("image", style=me.Style(font_size=36, color=me.theme_var("outline")))
            me.text(view.text, style=me.Style(color=me.theme_var("on-surface-variant")))
