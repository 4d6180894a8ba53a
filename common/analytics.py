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
"""Structured analytics events for the thumbnail generator.

Every event is one JSON log line carrying `event_type`, the page and the
session, plus the fields listed on each helper below.
"""

import functools
import json
import logging
import os
import time
from contextlib import contextmanager

import mesop as me
from google.cloud import logging as cloud_logging

from state.state import AppState


class JsonFormatter(logging.Formatter):
    """Renders a record and its `event` fields as a single JSON object."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "event", {}))
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Returns an INFO logger writing JSON lines.

    On Cloud Run (K_SERVICE is set) the Cloud Logging handler is attached so
    the fields become structured log entries.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        if os.environ.get("K_SERVICE"):
            handler = cloud_logging.Client().get_default_handler()
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger


analytics_logger = get_logger("thumbnail_studio.analytics")


def _session_context() -> dict:
    try:
        state = me.state(AppState)
        return {"page_name": state.current_page, "session_id": state.session_id}
    except Exception:
        # me.state is unavailable outside a request context (e.g. worker threads)
        return {"page_name": "unknown", "session_id": "unknown"}


def _emit(event_type: str, message: str, **fields):
    event = {"event_type": event_type, **_session_context(), **fields}
    analytics_logger.info(message, extra={"event": event})


def log_page_view():
    """page_view: no extra fields."""
    _emit("page_view", "Page view")


def track_click(element_id: str):
    """ui_click: `element_id`. Decorates a Mesop event handler."""
    def decorator(handler_function):
        @functools.wraps(handler_function)
        def wrapper(*args, **kwargs):
            _emit("ui_click", f"UI Click: {element_id}", element_id=element_id)
            return handler_function(*args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def track_model_call(model_name: str, mime_type: str, headshot_bytes: int):
    """model_call: `model_name`, `status`, `duration_ms`, `mime_type`,
    `headshot_bytes` and, on failure, `error`. Re-raises failures."""
    start_time = time.time()
    fields = {"model_name": model_name, "mime_type": mime_type, "headshot_bytes": headshot_bytes}
    try:
        yield
    except Exception as e:
        duration_ms = round((time.time() - start_time) * 1000, 2)
        _emit("model_call", f"Model Call: {model_name} (failure)",
              status="failure", duration_ms=duration_ms, error=str(e), **fields)
        raise
    duration_ms = round((time.time() - start_time) * 1000, 2)
    _emit("model_call", f"Model Call: {model_name} (success)",
          status="success", duration_ms=duration_ms, **fields)


def log_generation_outcome(status: str, duration_ms: float, loading_updates: int):
    """thumbnail_generation: terminal `status`, `duration_ms` and the number of
    narrator updates pushed while loading."""
    _emit(
        "thumbnail_generation",
        f"Thumbnail generation {status}",
        status=status,
        duration_ms=round(duration_ms, 2),
        loading_updates=loading_updates,
    )
