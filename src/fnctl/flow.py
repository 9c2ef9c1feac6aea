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
Ordered, fail-fast creation flows.

A flow is a list of steps, each pairing a client call with its options.
Steps run one after the other and the first failure stops the flow. Steps
that already ran are not undone, so a failed flow may have created some of
its resources.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .client import ResourceClient, Resource
from .models import (
    CreateFunctionOptions,
    CreateChannelOptions,
    CreateSubscriptionOptions,
)


@dataclass(frozen=True)
class Step:
    """A single client call in a flow."""
    description: str
    call: Callable[[Any], Optional[Resource]]
    options: Any

    def run(self) -> Optional[Resource]:
        return self.call(self.options)


@dataclass
class FlowResult:
    """
    Outcome of a flow.

    ``results`` holds what each completed step returned, in execution order.
    When a step failed, ``error`` is the exception it raised and
    ``failed_step`` the step itself.
    """
    results: List[Optional[Resource]] = field(default_factory=list)
    error: Optional[BaseException] = None
    failed_step: Optional[Step] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Re-raise the failing step's exception unchanged."""
        if self.error is not None:
            raise self.error


def run_steps(steps: List[Step], on_step: Optional[Callable[[Step], None]] = None) -> FlowResult:
    """
    Run steps in order, stopping at the first one that raises.

    Args:
        steps: Steps to run
        on_step: Called with each step just before it runs

    Returns:
        FlowResult with the results of the steps that completed
    """
    outcome = FlowResult()
    for step in steps:
        if on_step is not None:
            on_step(step)
        try:
            outcome.results.append(step.run())
        except Exception as e:
            outcome.error = e
            outcome.failed_step = step
            break
    return outcome


def function_steps(
    client: ResourceClient,
    function: CreateFunctionOptions,
    channel: Optional[CreateChannelOptions] = None,
    subscription: Optional[CreateSubscriptionOptions] = None,
) -> List[Step]:
    """
    Steps creating a function and, when requested, its input wiring.

    The channel must exist before the subscription that references it, so
    the order is always function, channel, subscription.
    """
    steps = [Step(f"function '{function.name}'", client.create_function, function)]
    if channel is not None:
        steps.append(Step(f"channel '{channel.name}'", client.create_channel, channel))
    if subscription is not None:
        steps.append(Step(
            f"subscription '{subscription.name}'", client.create_subscription, subscription
        ))
    return steps


def create_function_flow(
    client: ResourceClient,
    function: CreateFunctionOptions,
    channel: Optional[CreateChannelOptions] = None,
    subscription: Optional[CreateSubscriptionOptions] = None,
    on_step: Optional[Callable[[Step], None]] = None,
) -> FlowResult:
    return run_steps(function_steps(client, function, channel, subscription), on_step)
