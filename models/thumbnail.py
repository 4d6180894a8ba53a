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
"""Data model for one thumbnail generation attempt."""

from __future__ import annotations

import base64
import enum
from dataclasses import dataclass, replace
from typing import Optional

from common.error_handling import InvalidTransitionError


class LifecycleStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ImagePayload:
    """A selected headshot, encoded for both the model call and the preview."""

    base64: str
    mime_type: str
    preview_url: str

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str) -> ImagePayload:
        encoded = base64.b64encode(content).decode("ascii")
        return cls(
            base64=encoded,
            mime_type=mime_type,
            preview_url=f"data:{mime_type};base64,{encoded}",
        )

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.base64)


@dataclass(frozen=True)
class GenerationLifecycle:
    """Immutable snapshot of the generation state machine.

    idle -> loading -> succeeded | failed, and back to loading on the next
    submit. Validation failures go straight to failed from any state other
    than loading. Each transition returns a new snapshot.
    """

    status: LifecycleStatus = LifecycleStatus.IDLE
    result: Optional[str] = None
    error_message: Optional[str] = None
    loading_message: str = ""

    @property
    def is_loading(self) -> bool:
        return self.status is LifecycleStatus.LOADING

    def begin(self, loading_message: str) -> GenerationLifecycle:
        """Enters loading, clearing any previous result and error."""
        if self.is_loading:
            raise InvalidTransitionError(self.status.value, "begin")
        return GenerationLifecycle(
            status=LifecycleStatus.LOADING, loading_message=loading_message
        )

    def advance(self, loading_message: str) -> GenerationLifecycle:
        if not self.is_loading:
            raise InvalidTransitionError(self.status.value, "advance")
        return replace(self, loading_message=loading_message)

    def succeed(self, result: str) -> GenerationLifecycle:
        if not self.is_loading:
            raise InvalidTransitionError(self.status.value, "succeed")
        return GenerationLifecycle(status=LifecycleStatus.SUCCEEDED, result=result)

    def fail(self, error_message: str) -> GenerationLifecycle:
        return GenerationLifecycle(
            status=LifecycleStatus.FAILED, error_message=error_message
        )
