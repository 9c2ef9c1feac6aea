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
Data models for function, channel and subscription requests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ResourceKind(Enum):
    """Platform resource kinds managed by fnctl."""
    FUNCTION = "Service"
    CHANNEL = "Channel"
    SUBSCRIPTION = "Subscription"

    @property
    def api_version(self) -> str:
        if self is ResourceKind.FUNCTION:
            return "serving.knative.dev/v1alpha1"
        return "channels.knative.dev/v1alpha1"

    @property
    def plural(self) -> str:
        """Fully qualified resource name as understood by kubectl."""
        group = self.api_version.split('/')[0]
        return f"{self.value.lower()}s.{group}"


@dataclass(frozen=True)
class CreateFunctionOptions:
    """Options for creating a function."""
    name: str
    image: str
    git_repo: str
    invoker_url: str
    git_revision: str = "master"
    env: Tuple[str, ...] = ()  # KEY=VALUE
    env_from: Tuple[str, ...] = ()
    namespace: str = ""
    dry_run: bool = False


@dataclass(frozen=True)
class CreateChannelOptions:
    """Options for creating a channel on a bus or a cluster bus."""
    name: str
    bus: Optional[str] = None
    cluster_bus: Optional[str] = None
    namespace: str = ""
    dry_run: bool = False


@dataclass(frozen=True)
class CreateSubscriptionOptions:
    """Options for subscribing a function to a channel."""
    name: str
    channel: str
    subscriber: str
    namespace: str = ""
    dry_run: bool = False


@dataclass(frozen=True)
class ListChannelOptions:
    namespace: str = ""


@dataclass(frozen=True)
class DeleteChannelOptions:
    name: str
    namespace: str = ""
