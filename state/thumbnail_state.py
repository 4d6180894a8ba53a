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

from models.thumbnail import LifecycleStatus


@me.stateclass
class PageState:
    """Thumbnail Generator Page State"""

    # Input
    video_title: str = ""
    headshot_base64: str = ""
    headshot_mime_type: str = ""
    headshot_preview_url: str = ""
    headshot_filename: str = ""

    # Generation lifecycle
    status: str = LifecycleStatus.IDLE.value
    generated_thumbnail: str = ""
    error_message: str = ""
    loading_message: str = ""
