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
"""Drives one thumbnail generation attempt and its loading narration."""

import concurrent.futures
import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence

from common.analytics import log_generation_outcome
from common.error_handling import GenerationError
from config.default import Default as cfg
from config.thumbnail_prompts import (
    GENERATION_FAILED_MESSAGE,
    LOADING_MESSAGES,
    VALIDATION_MESSAGE,
)
from models.gemini import generate_thumbnail
from models.thumbnail import GenerationLifecycle, ImagePayload

logger = logging.getLogger(__name__)

# (title, image_base64, mime_type) -> thumbnail base64
GenerationClient = Callable[[str, str, str], str]

# Shared by every session. Requests beyond THUMBNAIL_MAX_WORKERS queue until a
# worker frees up; the page keeps narrating while they wait.
_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=cfg().THUMBNAIL_MAX_WORKERS, thread_name_prefix="thumbnail"
)


class ProgressNarrator:
    """Cycles through status messages while a generation is loading."""

    def __init__(self, messages: Sequence[str] = LOADING_MESSAGES):
        if not messages:
            raise ValueError("ProgressNarrator needs at least one message")
        self._messages = tuple(messages)
        self._index = 0
        self._running = False

    @property
    def current(self) -> str:
        return self._messages[self._index]

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> str:
        self._index = 0
        self._running = True
        return self.current

    def advance(self) -> str:
        """Moves to the next message, wrapping around. No-op once stopped."""
        if self._running:
            self._index = (self._index + 1) % len(self._messages)
        return self.current

    def stop(self):
        self._running = False

    @contextmanager
    def running(self):
        self.start()
        try:
            yield self
        finally:
            self.stop()


class ThumbnailOrchestrator:
    """Runs the idle -> loading -> succeeded/failed flow for one page session.

    `generate` is a generator so Mesop handlers can push every snapshot to the
    browser with a `yield`. Create one orchestrator per attempt; the narrator
    it owns is not shared between sessions.
    """

    def __init__(
        self,
        client: GenerationClient = generate_thumbnail,
        messages: Sequence[str] = LOADING_MESSAGES,
        interval_seconds: Optional[float] = None,
        executor: Optional[concurrent.futures.Executor] = None,
    ):
        self._client = client
        self.narrator = ProgressNarrator(messages)
        if interval_seconds is None:
            interval_seconds = cfg().LOADING_MESSAGE_INTERVAL_SECONDS
        if interval_seconds <= 0:
            raise ValueError(
                f"Loading message interval must be positive, got {interval_seconds}"
            )
        self._interval = interval_seconds
        self._executor = executor or _executor

    def generate(
        self,
        lifecycle: GenerationLifecycle,
        title: str,
        headshot: Optional[ImagePayload],
    ) -> Iterator[GenerationLifecycle]:
        """Yields each lifecycle snapshot of one generation attempt.

        The last snapshot is always terminal (succeeded or failed), except
        when a generation is already loading: the request is then ignored and
        nothing is yielded.
        """
        if lifecycle.is_loading:
            logger.info("Ignoring generate request while a thumbnail is in flight.")
            return

        if not title or headshot is None:
            yield lifecycle.fail(VALIDATION_MESSAGE)
            return

        start_time = time.time()
        loading_updates = 0
        with self.narrator.running() as narrator:
            lifecycle = lifecycle.begin(narrator.current)
            yield lifecycle

            future = self._executor.submit(
                self._client, title, headshot.base64, headshot.mime_type
            )
            while True:
                done, _ = concurrent.futures.wait([future], timeout=self._interval)
                if done:
                    break
                lifecycle = lifecycle.advance(narrator.advance())
                loading_updates += 1
                yield lifecycle

        try:
            result = future.result()
            if not result:
                raise GenerationError("Generation client returned an empty image.")
        except Exception as e:
            logger.error(f"Thumbnail generation failed for '{title}': {e}", exc_info=True)
            log_generation_outcome(
                "failure", (time.time() - start_time) * 1000, loading_updates
            )
            yield lifecycle.fail(GENERATION_FAILED_MESSAGE)
            return

        logger.info(f"Thumbnail generated for '{title}'.")
        log_generation_outcome(
            "success", (time.time() - start_time) * 1000, loading_updates
        )
        yield lifecycle.succeed(result)
