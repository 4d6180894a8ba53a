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
import binascii

from pydantic import BaseModel, Field, field_validator


class ThumbnailGenerationRequest(BaseModel):
    """
    Defines the contract for a thumbnail generation request.
    This schema is what the UI hands to the model layer.
    """

    title: str = Field(..., min_length=1)
    image_base64: str = Field(..., min_length=1)
    mime_type: str = Field(..., pattern=r"^image/[\w.+-]+$")

    @field_validator("image_base64")
    @classmethod
    def _must_be_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"image_base64 is not valid base64: {e}") from e
        return value

    def image_bytes(self) -> bytes:
        return base64.b64decode(self.image_base64)
