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

import pytest

from common.error_handling import InvalidTransitionError
from models.thumbnail import GenerationLifecycle, LifecycleStatus


def test_starts_idle_and_empty():
    lifecycle = GenerationLifecycle()
    assert lifecycle.status is LifecycleStatus.IDLE
    assert lifecycle.result is None
    assert lifecycle.error_message is None
    assert not lifecycle.is_loading


def test_begin_clears_previous_result_and_error():
    succeeded = GenerationLifecycle().begin("a").succeed("aW1n")
    failed = GenerationLifecycle().fail("boom")

    for previous in (succeeded, failed):
        loading = previous.begin("Warming up...")
        assert loading.status is LifecycleStatus.LOADING
        assert loading.result is None
        assert loading.error_message is None
        assert loading.loading_message == "Warming up..."


def test_succeed_sets_result_only():
    done = GenerationLifecycle().begin("a").advance("b").succeed("aW1n")
    assert done.status is LifecycleStatus.SUCCEEDED
    assert done.result == "aW1n"
    assert done.error_message is None
    assert done.loading_message == ""


def test_fail_drops_result_and_loading_message():
    failed = GenerationLifecycle().begin("a").fail("Nope")
    assert failed.status is LifecycleStatus.FAILED
    assert failed.error_message == "Nope"
    assert failed.result is None
    assert failed.loading_message == ""


def test_fail_from_idle_is_allowed_for_validation():
    assert GenerationLifecycle().fail("x").status is LifecycleStatus.FAILED


@pytest.mark.parametrize(
    "lifecycle, transition",
    [
        (GenerationLifecycle(), lambda l: l.succeed("x")),
        (GenerationLifecycle(), lambda l: l.advance("x")),
        (GenerationLifecycle().fail("e"), lambda l: l.succeed("x")),
        (GenerationLifecycle().begin("a"), lambda l: l.begin("b")),
    ],
)
def test_illegal_transitions_raise(lifecycle, transition):
    with pytest.raises(InvalidTransitionError):
        transition(lifecycle)


def test_snapshots_are_immutable():
    lifecycle = GenerationLifecycle()
    with pytest.raises(AttributeError):
        lifecycle.status = LifecycleStatus.LOADING
