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

import base64
import logging
from unittest import mock

import pydantic
import pytest
from google.genai import types

from common.error_handling import GenerationError
from models import gemini


def _response(*parts):
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


@pytest.fixture
def fake_client(monkeypatch, png_bytes):
    client = mock.Mock()
    client.models.generate_content.return_value = _response(
        types.Part(text="Here is your thumbnail."),
        types.Part(inline_data=types.Blob(data=png_bytes, mime_type="image/png")),
    )
    monkeypatch.setattr(gemini, "init_client", lambda: client)
    return client


def test_extract_image_base64_returns_first_image(png_bytes):
    response = _response(types.Part(inline_data=types.Blob(data=png_bytes, mime_type="image/png")))
    assert base64.b64decode(gemini.extract_image_base64(response)) == png_bytes


def test_extract_image_base64_without_image_raises():
    with pytest.raises(GenerationError):
        gemini.extract_image_base64(_response(types.Part(text="I can't do that.")))
    with pytest.raises(GenerationError):
        gemini.extract_image_base64(types.GenerateContentResponse(candidates=[]))


def test_generate_thumbnail_sends_headshot_and_title(fake_client, png_bytes):
    encoded = base64.b64encode(png_bytes).decode("ascii")

    result = gemini.generate_thumbnail("My Epic Vlog", encoded, "image/png")

    assert base64.b64decode(result) == png_bytes
    kwargs = fake_client.models.generate_content.call_args.kwargs
    image_part, prompt = kwargs["contents"]
    assert image_part.inline_data.data == png_bytes
    assert image_part.inline_data.mime_type == "image/png"
    assert '"My Epic Vlog"' in prompt
    assert kwargs["config"].response_modalities == ["IMAGE", "TEXT"]
    assert kwargs["config"].image_config.aspect_ratio == "16:9"


def test_generate_thumbnail_rejects_bad_request(fake_client):
    with pytest.raises(pydantic.ValidationError):
        gemini.generate_thumbnail("", "aW1n", "image/png")
    with pytest.raises(pydantic.ValidationError):
        gemini.generate_thumbnail("Title", "not base64!", "image/png")
    with pytest.raises(pydantic.ValidationError):
        gemini.generate_thumbnail("Title", "aW1n", "text/plain")
    fake_client.models.generate_content.assert_not_called()


def test_generate_thumbnail_propagates_api_errors(fake_client):
    fake_client.models.generate_content.side_effect = RuntimeError("API key not valid")
    with pytest.raises(RuntimeError, match="API key not valid"):
        gemini.generate_thumbnail("Title", "aW1n", "image/png")


def test_non_png_result_is_flagged(caplog, png_bytes):
    response = _response(types.Part(inline_data=types.Blob(data=png_bytes, mime_type="image/jpeg")))
    with caplog.at_level(logging.WARNING, logger="models.gemini"):
        gemini.extract_image_base64(response)
    assert "image/jpeg" in caplog.text


def test_png_result_is_not_flagged(caplog, png_bytes):
    response = _response(types.Part(inline_data=types.Blob(data=png_bytes, mime_type="image/png")))
    with caplog.at_level(logging.WARNING, logger="models.gemini"):
        gemini.extract_image_base64(response)
    assert "expected image/png" not in caplog.text
