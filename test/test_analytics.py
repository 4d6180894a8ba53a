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

import json
import logging

import pytest

from common import analytics


def _events(caplog, event_type):
    return [r.event for r in caplog.records if getattr(r, "event", {}).get("event_type") == event_type]


def test_json_formatter_merges_event_fields():
    record = logging.LogRecord("thumbnail_studio.analytics", logging.INFO, __file__, 1, "Page view", None, None)
    record.event = {"event_type": "page_view", "session_id": "s-1"}

    line = json.loads(analytics.JsonFormatter().format(record))

    assert line["message"] == "Page view"
    assert line["event_type"] == "page_view"
    assert line["session_id"] == "s-1"


def test_track_model_call_logs_success(caplog):
    with caplog.at_level(logging.INFO, logger="thumbnail_studio.analytics"):
        with analytics.track_model_call("gemini-2.5-flash-image", mime_type="image/png", headshot_bytes=10):
            pass

    [event] = _events(caplog, "model_call")
    assert event["status"] == "success"
    assert event["mime_type"] == "image/png"
    assert event["headshot_bytes"] == 10
    assert "session_id" in event


def test_track_model_call_logs_and_reraises_failure(caplog):
    with caplog.at_level(logging.INFO, logger="thumbnail_studio.analytics"):
        with pytest.raises(RuntimeError):
            with analytics.track_model_call("gemini-2.5-flash-image", mime_type="image/png", headshot_bytes=10):
                raise RuntimeError("quota exceeded")

    [event] = _events(caplog, "model_call")
    assert event["status"] == "failure"
    assert event["error"] == "quota exceeded"


def test_track_click_logs_and_calls_handler(caplog):
    @analytics.track_click(element_id="generate")
    def handler(e):
        return e * 2

    with caplog.at_level(logging.INFO, logger="thumbnail_studio.analytics"):
        assert handler(21) == 42

    [event] = _events(caplog, "ui_click")
    assert event["element_id"] == "generate"
