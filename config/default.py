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

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


@dataclass
class Default:
    """Defaults class"""

    # Gen AI
    PROJECT_ID: str = os.environ.get("PROJECT_ID") or os.environ.get(
        "GOOGLE_CLOUD_PROJECT", ""
    )
    LOCATION: str = os.environ.get("LOCATION", "us-central1")
    # When set, the Gemini Developer API is used instead of Vertex AI.
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_IMAGE_GEN_MODEL: str = os.environ.get(
        "GEMINI_IMAGE_GEN_MODEL", "gemini-2.5-flash-image"
    )

    # Thumbnail
    THUMBNAIL_ASPECT_RATIO: str = os.environ.get("THUMBNAIL_ASPECT_RATIO", "16:9")
    LOADING_MESSAGE_INTERVAL_SECONDS: float = float(
        os.environ.get("LOADING_MESSAGE_INTERVAL_SECONDS", "2.5")
    )
    # Worker threads shared by all sessions for Gemini calls.
    THUMBNAIL_MAX_WORKERS: int = int(os.environ.get("THUMBNAIL_MAX_WORKERS", "4"))

    APP_ENV: str = os.environ.get("APP_ENV", "local")
