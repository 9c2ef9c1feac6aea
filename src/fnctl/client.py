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
Resource clients for the function platform.

:class:`ResourceClient` is the contract commands depend on. Create calls
return the resource document that was (or, for dry-runs, would be) created,
or ``None`` when the client has nothing to report. Failures raise
:class:`~fnctl.exceptions.ClientError`.

:class:`KubectlClient` implements the contract by driving ``kubectl``.
"""

import json
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ClientError
from .manifests import function_manifest, channel_manifest, subscription_manifest
from .models import (
    ResourceKind,
    CreateFunctionOptions,
    CreateChannelOptions,
    CreateSubscriptionOptions,
    ListChannelOptions,
    DeleteChannelOptions,
)

Resource = Dict[str, Any]


class ResourceClient(ABC):
    """Abstract interface for creating, listing and deleting platform resources."""

    @abstractmethod
    def create_function(self, options: CreateFunctionOptions) -> Optional[Resource]:
        ...

    @abstractmethod
    def create_channel(self, options: CreateChannelOptions) -> Optional[Resource]:
        ...

    @abstractmethod
    def create_subscription(self, options: CreateSubscriptionOptions) -> Optional[Resource]:
        ...

    @abstractmethod
    def list_channels(self, options: ListChannelOptions) -> List[Resource]:
        """Return channels in the order the platform reports them."""
        ...

    @abstractmethod
    def delete_channel(self, options: DeleteChannelOptions) -> None:
        ...


class KubectlClient(ResourceClient):
    """
    Resource client backed by the ``kubectl`` command-line tool.

    Dry-run creations never reach the cluster: the generated document is
    returned as-is. Real creations pipe the document to ``kubectl create``
    and return ``None``.

    Attributes:
        kubeconfig: Path to the kubeconfig file, or None for kubectl's default
        master: API server address overriding the kubeconfig, or None
        kubectl: Name or path of the kubectl binary
    """

    DEFAULT_KUBECTL = "kubectl"

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        master: Optional[str] = None,
        kubectl: Optional[str] = None
    ):
        self.kubeconfig = kubeconfig
        self.master = master
        self.kubectl = kubectl or self.DEFAULT_KUBECTL

    def create_function(self, options: CreateFunctionOptions) -> Optional[Resource]:
        return self._create(function_manifest(options), options.namespace, options.dry_run)

    def create_channel(self, options: CreateChannelOptions) -> Optional[Resource]:
        return self._create(channel_manifest(options), options.namespace, options.dry_run)

    def create_subscription(self, options: CreateSubscriptionOptions) -> Optional[Resource]:
        return self._create(subscription_manifest(options), options.namespace, options.dry_run)

    def list_channels(self, options: ListChannelOptions) -> List[Resource]:
        output = self._run(
            ["get", ResourceKind.CHANNEL.plural, "-o", "json"],
            options.namespace
        )
        try:
            return json.loads(output).get("items") or []
        except json.JSONDecodeError as e:
            raise ClientError(f"Failed to parse kubectl output: {e}") from e

    def delete_channel(self, options: DeleteChannelOptions) -> None:
        self._run(["delete", ResourceKind.CHANNEL.plural, options.name], options.namespace)

    def _create(self, manifest: Resource, namespace: str, dry_run: bool) -> Optional[Resource]:
        if dry_run:
            return manifest
        self._run(["create", "-f", "-"], namespace, stdin=yaml.safe_dump(manifest))
        return None

    def command(self, args: List[str], namespace: str = "") -> List[str]:
        """Full kubectl command line for ``args``, with connection flags."""
        cmd = [self.kubectl]
        if self.kubeconfig:
            cmd += ["--kubeconfig", self.kubeconfig]
        if self.master:
            cmd += ["--server", self.master]
        if namespace:
            cmd += ["--namespace", namespace]
        return cmd + args

    def _run(self, args: List[str], namespace: str = "", stdin: Optional[str] = None) -> str:
        if shutil.which(self.kubectl) is None:
            raise ClientError(
                f"{self.kubectl} not found on PATH. Install kubectl to talk to the cluster"
            )
        try:
            result = subprocess.run(
                self.command(args, namespace),
                input=stdin,
                check=True,
                capture_output=True,
                text=True
            )
        except subprocess.CalledProcessError as e:
            message = (e.stderr or "").strip() or str(e)
            raise ClientError(message) from e
        return result.stdout
