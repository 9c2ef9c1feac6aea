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
Platform manifest generation.

Builds the resource documents submitted by the kubectl client and shown by
``--dry-run``. Documents are plain dicts in the shape of the platform API so
they can be serialized by PyYAML as-is.
"""

from typing import Any, Dict, List, Optional, Sequence

from .models import (
    ResourceKind,
    CreateFunctionOptions,
    CreateChannelOptions,
    CreateSubscriptionOptions,
)
from .validation import ENV_FROM_PATTERN

BUILD_SERVICE_ACCOUNT = "fnctl-build"
BUILD_TEMPLATE = "fnctl-invoker"


def _metadata(name: str, namespace: str) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {'name': name, 'creationTimestamp': None}
    if namespace:
        metadata['namespace'] = namespace
    return metadata


def _document(kind: ResourceKind, name: str, namespace: str, spec: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'apiVersion': kind.api_version,
        'kind': kind.value,
        'metadata': _metadata(name, namespace),
        'spec': spec,
        'status': {},
    }


def parse_env(entries: Sequence[str]) -> List[Dict[str, Any]]:
    """Turn KEY=VALUE strings into container env entries, keeping order."""
    env = []
    for entry in entries:
        key, _, value = entry.partition('=')
        env.append({'name': key, 'value': value})
    return env


def parse_env_from(entries: Sequence[str]) -> List[Dict[str, Any]]:
    """
    Turn ``[VAR=]secretKeyRef:name:key`` strings into container env entries.

    The variable name defaults to the referenced key.
    """
    env = []
    for entry in entries:
        match = ENV_FROM_PATTERN.fullmatch(entry)
        if match is None:
            raise ValueError(f"Invalid env-from reference '{entry}'")
        env.append({
            'name': match.group('var') or match.group('key'),
            'valueFrom': {
                match.group('source'): {
                    'name': match.group('name'),
                    'key': match.group('key'),
                },
            },
        })
    return env


def function_manifest(options: CreateFunctionOptions) -> Dict[str, Any]:
    """
    Build the serving Service backing a function.

    The service is built from the git source by the invoker's build template
    and then runs the resulting image.
    """
    container: Dict[str, Any] = {'image': options.image}
    env = parse_env(options.env) + parse_env_from(options.env_from)
    if env:
        container['env'] = env

    build = {
        'serviceAccountName': BUILD_SERVICE_ACCOUNT,
        'source': {
            'git': {
                'url': options.git_repo,
                'revision': options.git_revision,
            },
        },
        'template': {
            'name': BUILD_TEMPLATE,
            'arguments': [
                {'name': 'IMAGE', 'value': options.image},
                {'name': 'INVOKER_PATH', 'value': options.invoker_url},
            ],
        },
    }

    spec = {
        'runLatest': {
            'configuration': {
                'build': build,
                'revisionTemplate': {
                    'spec': {'container': container},
                },
            },
        },
    }
    return _document(ResourceKind.FUNCTION, options.name, options.namespace, spec)


def channel_manifest(options: CreateChannelOptions) -> Dict[str, Any]:
    spec: Dict[str, Optional[str]] = {}
    if options.bus:
        spec['bus'] = options.bus
    if options.cluster_bus:
        spec['clusterBus'] = options.cluster_bus
    return _document(ResourceKind.CHANNEL, options.name, options.namespace, spec)


def subscription_manifest(options: CreateSubscriptionOptions) -> Dict[str, Any]:
    spec = {
        'channel': options.channel,
        'subscriber': options.subscriber,
    }
    return _document(ResourceKind.SUBSCRIPTION, options.name, options.namespace, spec)
