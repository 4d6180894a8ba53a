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
"""Gemini image generation for video thumbnails."""

import base64
import logging

from google import genai
from google.genai import types

from common.analytics import track_model_call
from common.error_handling import GenerationError
from common.utils import get_image_dimensions_from_base64
from config.default import Default as cfg
from config.gemini_image_models import get_gemini_image_model_config
from config.thumbnail_prompts import THUMBNAIL_PROMPT_TEMPLATE
from models.requests import ThumbnailGenerationRequest

logger = logging.getLogger(__name__)


def init_client() -> genai.Client:
    """Initializes the GenAI client.

    Uses the Gemini Developer API when GEMINI_API_KEY is configured and
    Vertex AI otherwise.
    """
    config = cfg()
    if config.GEMINI_API_KEY:
        return genai.Client(api_key=config.GEMINI_API_KEY)
    return genai.Client(
        vertexai=True, project=config.PROJECT_ID, location=config.LOCATION
    )


def _build_generation_config(model_name: str) -> types.GenerateContentConfig:
    aspect_ratio = cfg().THUMBNAIL_ASPECT_RATIO
    model_config = get_gemini_image_model_config(model_name)
    image_config = None
    if model_config and model_config.supports_aspect_ratio(aspect_ratio):
        image_config = types.ImageConfig(aspect_ratio=aspect_ratio)
    else:
        logger.warning(
            f"Aspect ratio {aspect_ratio} not known to be supported by {model_name}; using model default."
        )
    return types.GenerateContentConfig(
        response_modalities=["IMAGE", "TEXT"],
        image_config=image_config,
    )


def extract_image_base64(response: types.GenerateContentResponse) -> str:
    """Returns the first inline image of a response as base64 text.

    Raises:
        GenerationError: If the response carries no image.
    """
    for candidate in response.candidates or []:
        if not candidate.content or not candidate.content.parts:
            continue
        for part in candidate.content.parts:
            if part.inline_data and part.inline_data.data:
                if part.inline_data.mime_type != "image/png":
                    # The display renders results as image/png.
                    logger.warning(
                        f"Model returned {part.inline_data.mime_type}, expected image/png"
                    )
                return base64.b64encode(part.inline_data.data).decode("ascii")
            if part.text:
                logger.info(f"Model returned text alongside the image: {part.text}")

    block_reason = None
    if response.prompt_feedback:
        block_reason = response.prompt_feedback.block_reason
    raise GenerationError(
        f"The model response did not contain an image (block reason: {block_reason})."
    )


def generate_thumbnail(title: str, image_base64: str, mime_type: str) -> str:
    """Generates a thumbnail image from a video title and a headshot.

    Args:
        title: The video title to feature on the thumbnail.
        image_base64: The headshot image, base64 encoded.
        mime_type: The headshot media type (e.g., "image/png").

    Returns:
        The generated thumbnail, base64 encoded.
    """
    request = ThumbnailGenerationRequest(
        title=title, image_base64=image_base64, mime_type=mime_type
    )
    client = init_client()
    model_name = cfg().GEMINI_IMAGE_GEN_MODEL

    image_bytes = request.image_bytes()
    contents = [
        types.Part.from_bytes(data=image_bytes, mime_type=request.mime_type),
        THUMBNAIL_PROMPT_TEMPLATE.format(title=request.title),
    ]

    logger.info(f"Calling {model_name} for thumbnail '{request.title}'")
    with track_model_call(
        model_name, mime_type=request.mime_type, headshot_bytes=len(image_bytes)
    ):
        response = client.models.generate_content(
            model=model_name,
            contents=contents,
            config=_build_generation_config(model_name),
        )
        thumbnail = extract_image_base64(response)

    logger.info(f"Thumbnail generated, dimensions: {get_image_dimensions_from_base64(thumbnail)}")
    return thumbnail
