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
"""User-facing copy for the thumbnail generator."""

THUMBNAIL_PROMPT_TEMPLATE = (
    "Create an eye-catching YouTube thumbnail for a video titled \"{title}\". "
    "Feature the person from the provided headshot as the main subject, keeping "
    "their face recognizable and expressive. Add the video title as bold, highly "
    "legible text, use vibrant high-contrast colors and a dynamic composition "
    "that makes viewers want to click."
)

LOADING_MESSAGES = (
    "Warming up the AI's creative circuits...",
    "Designing a scroll-stopping masterpiece...",
    "Optimizing for maximum clicks...",
    "Adding a touch of viral magic...",
    "Finalizing the pixels...",
)

VALIDATION_MESSAGE = "Please provide both a video title and a headshot."
GENERATION_FAILED_MESSAGE = (
    "Failed to generate thumbnail. Please check your API key and try again."
)
IMAGE_READ_FAILED_MESSAGE = (
    "Could not read the selected image. Please choose another file."
)

ACCEPTED_IMAGE_TYPES = ["image/jpeg", "image/png", "image/webp"]
