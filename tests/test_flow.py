# Copyright 2025 Multikernel Technologies, Inc.
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

"""
Tests for the function creation flow.
"""

import dataclasses
from unittest.mock import call

import pytest

from fnctl.exceptions import ClientError
from fnctl.flow import Step, run_steps, function_steps, create_function_flow


class TestRunSteps:
    """Test the sequential fail-fast step runner."""

    def test_runs_in_order(self):
        """Test that every step runs and results keep step order."""
        seen = []
        steps = [
            Step("first", lambda o: seen.append(o) or {"n": o}, 1),
            Step("second", lambda o: seen.append(o), 2),
        ]

        outcome = run_steps(steps)

        assert seen == [1, 2]
        assert outcome.ok
        assert outcome.results == [{"n": 1}, None]
        assert outcome.failed_step is None

    def test_stops_at_first_error(self):
        """Test that later steps do not run after a failure."""
        error = ClientError("some error")
        later = []

        def fail(_):
            raise error

        steps = [
            Step("first", lambda o: "done", None),
            Step("second", fail, None),
            Step("third", later.append, None),
        ]

        outcome = run_steps(steps)

        assert not outcome.ok
        assert outcome.error is error
        assert outcome.failed_step is steps[1]
        assert outcome.results == ["done"]
        assert later == []

    def test_on_step_callback(self):
        """Test that the callback sees each step before it runs."""
        names = []
        run_steps([Step("a", lambda o: None, None), Step("b", lambda o: None, None)],
                  on_step=lambda s: names.append(s.description))
        assert names == ["a", "b"]

    def test_raise_for_error_keeps_original(self):
        """Test that the original exception object is re-raised."""
        error = RuntimeError("boom")

        def fail(_):
            raise error

        outcome = run_steps([Step("x", fail, None)])

        with pytest.raises(RuntimeError) as exc_info:
            outcome.raise_for_error()
        assert exc_info.value is error


class TestCreateFunctionFlow:
    """Test function creation with optional input wiring."""

    def test_function_only(self, mock_client, square_options):
        """Test that only the function is created without an input channel."""
        outcome = create_function_flow(mock_client, square_options)

        assert outcome.ok
        assert outcome.results == [None]
        assert mock_client.mock_calls == [call.create_function(square_options)]

    def test_with_input(self, mock_client, square_options, input_channel_options,
                        input_subscription_options):
        """Test function, channel and subscription are created in that order."""
        outcome = create_function_flow(
            mock_client, square_options, input_channel_options, input_subscription_options
        )

        assert outcome.ok
        assert mock_client.mock_calls == [
            call.create_function(square_options),
            call.create_channel(input_channel_options),
            call.create_subscription(input_subscription_options),
        ]

    def test_collects_results_in_order(self, mock_client, square_options, input_channel_options,
                                       input_subscription_options):
        """Test that returned resources are collected in execution order."""
        f, c, s = {"kind": "Service"}, {"kind": "Channel"}, {"kind": "Subscription"}
        mock_client.create_function.return_value = f
        mock_client.create_channel.return_value = c
        mock_client.create_subscription.return_value = s

        outcome = create_function_flow(
            mock_client, square_options, input_channel_options, input_subscription_options
        )

        assert outcome.results == [f, c, s]

    @pytest.mark.parametrize("failing,not_called", [
        ("create_function", ["create_channel", "create_subscription"]),
        ("create_channel", ["create_subscription"]),
        ("create_subscription", []),
    ])
    def test_fail_fast(self, mock_client, square_options, input_channel_options,
                       input_subscription_options, failing, not_called):
        """Test that a client error stops the flow and is kept unchanged."""
        error = ClientError("some error")
        getattr(mock_client, failing).side_effect = error

        outcome = create_function_flow(
            mock_client, square_options, input_channel_options, input_subscription_options
        )

        assert outcome.error is error
        for name in not_called:
            getattr(mock_client, name).assert_not_called()
        # nothing is rolled back
        mock_client.delete_channel.assert_not_called()

    def test_dry_run_does_not_change_calls(self, mock_client, square_options, input_channel_options,
                                           input_subscription_options):
        """Test that dry-run options flow through the same calls."""
        dry = [dataclasses.replace(o, dry_run=True)
               for o in (square_options, input_channel_options, input_subscription_options)]

        steps = function_steps(mock_client, *dry)

        assert [s.options.dry_run for s in steps] == [True, True, True]
        assert [s.description for s in steps] == [
            "function 'square'", "channel 'my-channel'", "subscription 'square'"
        ]
