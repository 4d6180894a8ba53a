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


class GenerationError(Exception):
    """Custom exception for thumbnail generation errors."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ImageReadError(Exception):
    """Raised when an uploaded headshot cannot be read."""
    pass


class InvalidTransitionError(Exception):
    """Raised on a lifecycle transition the generation flow does not allow."""

    def __init__(self, current: str, transition: str):
        self.current = current
        self.transition = transition
        super().__init__(f"Cannot {transition} while {current}")
