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

import mesop as me


@me.component
def header(title: str, icon: str, subtitle: str = ""):
    """Page header with an icon, title and optional subtitle."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            gap=8,
            text_align="center",
        )
    ):
        with me.box(style=me.Style(display="flex", align_items="center", gap=12)):
            me.icon(icon, style=me.Style(font_size=36, color=me.theme_var("primary")))
            me.text(title, type="headline-4", style=me.Style(margin=me.Margin.all(0)))
        if subtitle:
            me.text(
                subtitle,
                style=me.Style(color=me.theme_var("on-surface-variant"), font_size=16),
            )
