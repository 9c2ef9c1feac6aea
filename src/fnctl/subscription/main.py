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
Subscription commands.
"""

from typing import Optional, Tuple
import click

from ..options import subscription_options
from ..render import render_manifests
from ..utils import command_errors, get_client, progress
from ..validation import validate_arg_count, validate_name, validate_required_flags


@click.group(name='subscription')
def subscription():
    """Interact with subscription related resources."""


@subscription.command(name='create')
@click.argument('args', nargs=-1, metavar='NAME')
@click.option('--channel', 'channel_name', help='Channel delivering the messages')
@click.option('--subscriber', help='Function receiving the messages')
@click.option('--namespace', '-n', default='', envvar='FNCTL_NAMESPACE',
              help='Namespace of the subscription')
@click.option('--dry-run', is_flag=True, help='Print the subscription instead of creating it')
@click.pass_context
def create(
    ctx: click.Context,
    args: Tuple[str, ...],
    channel_name: Optional[str],
    subscriber: Optional[str],
    namespace: str,
    dry_run: bool
):
    """
    Subscribe a function to a channel.

    Examples:

        fnctl subscription create square-numbers --channel numbers --subscriber square
    """
    with command_errors(ctx):
        validate_arg_count(args, 1)
        name = args[0]
        validate_name(name, "subscription name")
        validate_required_flags(channel=channel_name, subscriber=subscriber)
        validate_name(channel_name, "channel name")
        validate_name(subscriber, "subscriber name")

        options = subscription_options(
            name,
            channel=channel_name,
            subscriber=subscriber,
            namespace=namespace,
            dry_run=dry_run,
        )
        progress(ctx, f"Creating subscription '{name}'")
        result = get_client(ctx).create_subscription(options)
        if dry_run:
            render_manifests([result])
