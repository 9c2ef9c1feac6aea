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
Output rendering for fnctl commands.
"""

from typing import IO, Any, Dict, Iterable, Optional

import click
import yaml

DOCUMENT_SEPARATOR = "---"


def format_manifest(resource: Dict[str, Any]) -> str:
    """Serialize a resource document as block-style YAML with sorted keys."""
    return yaml.safe_dump(resource, default_flow_style=False, sort_keys=True, allow_unicode=True)


def format_manifests(results: Iterable[Optional[Dict[str, Any]]]) -> str:
    """
    Serialize every present result, each followed by a separator line.

    ``None`` results are skipped, so a run where the client reported nothing
    renders as an empty string.
    """
    documents = []
    for resource in results:
        if resource is None:
            continue
        documents.append(format_manifest(resource) + DOCUMENT_SEPARATOR + "\n")
    return "".join(documents)


def render_manifests(results: Iterable[Optional[Dict[str, Any]]], out: Optional[IO] = None) -> None:
    text = format_manifests(results)
    if text:
        click.echo(text, file=out, nl=False)


def format_names(names: Iterable[str]) -> str:
    """Single-column NAME table, one name per line, in the given order."""
    lines = ["NAME"]
    lines.extend(names)
    return "\n".join(lines) + "\n"


def render_names(names: Iterable[str], out: Optional[IO] = None) -> None:
    click.echo(format_names(names), file=out, nl=False)


def resource_name(resource: Dict[str, Any]) -> str:
    return (resource.get("metadata") or {}).get("name", "")
