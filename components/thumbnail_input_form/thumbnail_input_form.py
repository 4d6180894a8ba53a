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
"""
Form collecting the video title and the headshot.
"""

from typing import Callable

import mesop as me

from config.thumbnail_prompts import ACCEPTED_IMAGE_TYPES

IMAGE_PLACEHOLDER_STYLE = me.Style(
    width="100%",
    height=240,
    border=me.Border.all(
        me.BorderSide(width=2, style="dashed", color=me.theme_var("outline-variant")),
    ),
    border_radius=8,
    display="flex",
    align_items="center",
    justify_content="center",
    flex_direction="column",
    gap=8,
)


@me.component
def thumbnail_input_form(
    video_title: str,
    headshot_preview_url: str,
    headshot_filename: str,
    is_loading: bool,
    on_title_blur: Callable,
    on_upload: Callable,
    on_generate: Callable,
):
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            gap=16,
            padding=me.Padding.all(24),
            border_radius=12,
            background=me.theme_var("surface-container-low"),
        )
    ):
        me.text("1. Video Title", type="headline-6")
        me.input(
            label="Video Title",
            placeholder="e.g., My Epic Vlog",
            value=video_title,
            on_blur=on_title_blur,
            disabled=is_loading,
            style=me.Style(width="100%"),
        )

        me.text("2. Your Headshot", type="headline-6")
        me.uploader(
            label="Upload Headshot",
            on_upload=on_upload,
            accepted_file_types=ACCEPTED_IMAGE_TYPES,
            disabled=is_loading,
            style=me.Style(width="100%"),
        )
        with me.box(style=IMAGE_PLACEHOLDER_STYLE):
            if headshot_preview_url:
                me.image(
                    src=headshot_preview_url,
                    style=me.Style(height="100%", width="100%", border_radius=8, object_fit="contain"),
                )
            else:
                me.icon("face")
                me.text("Add a headshot")
        if headshot_filename:
            me.text(headshot_filename, style=me.Style(font_size=12, color=me.theme_var("on-surface-variant")))

        me.button(
            "Generating..." if is_loading else "Generate Thumbnail",
            on_click=on_generate,
            type="flat",
            disabled=is_loading,
            style=me.Style(width="100%"),
        )
