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
Channel commands: create, list and delete.
"""

from typing import Optional, Tuple
import click

from ..options import channel_options, list_channel_options, delete_channel_options
from ..render import render_manifests, render_names, resource_name
from ..utils import command_errors, get_client, progress
from ..validation import validate_arg_count, validate_name, validate_exactly_one_of


def namespace_option(f):
    return click.option('--namespace', '-n', default='', envvar='FNCTL_NAMESPACE',
                        help='Namespace of the channel')(f)


@click.group(name='channel')
def channel():
    """Interact with channel related resources."""


@channel.command(name='create')
@click.argument('args', nargs=-1, metavar='NAME')
@click.option('--bus', help='Bus backing the channel. Mutually exclusive with --cluster-bus')
@click.option('--cluster-bus', help='Cluster bus backing the channel. Mutually exclusive with --bus')
@namespace_option
@click.option('--dry-run', is_flag=True, help='Print the channel instead of creating it')
@click.pass_context
def create(
    ctx: click.Context,
    args: Tuple[str, ...],
    bus: Optional[str],
    cluster_bus: Optional[str],
    namespace: str,
    dry_run: bool
):
    """
    Create a new channel on a namespace or cluster bus.

    Examples:

        fnctl channel create tweets --bus kafka

        fnctl channel create orders --cluster-bus global-rabbit --namespace shop --dry-run
    """
    with command_errors(ctx):
        validate_arg_count(args, 1)
        name = args[0]
        validate_name(name, "channel name")
        validate_exactly_one_of(bus=bus, cluster_bus=cluster_bus)

        options = channel_options(
            name, bus=bus, cluster_bus=cluster_bus, namespace=namespace, dry_run=dry_run
        )
        progress(ctx, f"Creating channel '{name}'")
        result = get_client(ctx).create_channel(options)
        if dry_run:
            render_manifests([result])


@channel.command(name='list')
@click.argument('args', nargs=-1, metavar='')
@namespace_option
@click.pass_context
def list_cmd(ctx: click.Context, args: Tuple[str, ...], namespace: str):
    """
    List channels.

    Examples:

        fnctl channel list --namespace shop
    """
    with command_errors(ctx):
        validate_arg_count(args, 0)
        channels = get_client(ctx).list_channels(list_channel_options(namespace))
        render_names(resource_name(c) for c in channels)


@channel.command(name='delete')
@click.argument('args', nargs=-1, metavar='NAME')
@namespace_option
@click.pass_context
def delete(ctx: click.Context, args: Tuple[str, ...], namespace: str):
    """
    Delete an existing channel.

    Subscriptions referencing the channel are left in place.

    Examples:

        fnctl channel delete tweets
    """
    with command_errors(ctx):
        validate_arg_count(args, 1)
        name = args[0]
        validate_name(name, "channel name")

        progress(ctx, f"Deleting channel '{name}'")
        get_client(ctx).delete_channel(delete_channel_options(name, namespace))
