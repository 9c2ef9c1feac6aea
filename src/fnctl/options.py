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
Builders turning parsed command-line input into option records.

Builders never fail: input is checked by :mod:`fnctl.validation` first.
The one exception is :func:`resolve_invoker_url`, which commands call while
validating.
"""

from typing import Dict, Optional, Sequence

from .exceptions import ValidationError
from .models import (
    CreateFunctionOptions,
    CreateChannelOptions,
    CreateSubscriptionOptions,
    ListChannelOptions,
    DeleteChannelOptions,
)

DEFAULT_GIT_REVISION = "master"

INVOKER_URL_TEMPLATE = (
    "https://github.com/projectriff/{runtime}-function-invoker/raw/{version}/{runtime}-invoker.yaml"
)

INVOKER_VERSIONS: Dict[str, str] = {
    'node': 'v0.0.8',
    'java': 'v0.0.7',
    'command': 'v0.0.7',
    'python3': 'v0.0.6',
}

INVOKERS: Dict[str, str] = {
    runtime: INVOKER_URL_TEMPLATE.format(runtime=runtime, version=version)
    for runtime, version in INVOKER_VERSIONS.items()
}


def resolve_invoker_url(runtime: str, override: Optional[str] = None) -> str:
    """
    Return the invoker manifest URL for a runtime.

    An explicit override always wins over the lookup table.

    Raises:
        ValidationError: If the runtime is unknown and no override is given
    """
    if override:
        return override
    try:
        return INVOKERS[runtime]
    except KeyError:
        known = ', '.join(sorted(INVOKERS))
        raise ValidationError(
            f"unknown invoker '{runtime}' (known: {known}); use --invoker-url to specify one"
        ) from None


def function_options(
    runtime: str,
    name: str,
    image: str,
    git_repo: str,
    git_revision: Optional[str] = None,
    invoker_url: Optional[str] = None,
    env: Optional[Sequence[str]] = None,
    env_from: Optional[Sequence[str]] = None,
    namespace: Optional[str] = None,
    dry_run: bool = False,
) -> CreateFunctionOptions:
    return CreateFunctionOptions(
        name=name,
        image=image,
        git_repo=git_repo,
        git_revision=git_revision or DEFAULT_GIT_REVISION,
        invoker_url=resolve_invoker_url(runtime, invoker_url),
        env=tuple(env or ()),
        env_from=tuple(env_from or ()),
        namespace=namespace or "",
        dry_run=dry_run,
    )


def channel_options(
    name: str,
    bus: Optional[str] = None,
    cluster_bus: Optional[str] = None,
    namespace: Optional[str] = None,
    dry_run: bool = False,
) -> CreateChannelOptions:
    return CreateChannelOptions(
        name=name,
        bus=bus or None,
        cluster_bus=cluster_bus or None,
        namespace=namespace or "",
        dry_run=dry_run,
    )


def subscription_options(
    name: str,
    channel: str,
    subscriber: str,
    namespace: Optional[str] = None,
    dry_run: bool = False,
) -> CreateSubscriptionOptions:
    return CreateSubscriptionOptions(
        name=name,
        channel=channel,
        subscriber=subscriber,
        namespace=namespace or "",
        dry_run=dry_run,
    )


def input_subscription_options(
    function: CreateFunctionOptions,
    input_channel: str,
) -> CreateSubscriptionOptions:
    """Subscription feeding ``input_channel`` into the function being created."""
    return subscription_options(
        name=function.name,
        channel=input_channel,
        subscriber=function.name,
        namespace=function.namespace,
        dry_run=function.dry_run,
    )


def list_channel_options(namespace: Optional[str] = None) -> ListChannelOptions:
    return ListChannelOptions(namespace=namespace or "")


def delete_channel_options(name: str, namespace: Optional[str] = None) -> DeleteChannelOptions:
    return DeleteChannelOptions(name=name, namespace=namespace or "")
