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
Function commands.

``function create`` builds a function from a git repository using a
runtime-specific invoker. With ``--input`` it also creates the input channel
and a subscription delivering that channel's messages to the function.
"""

from typing import Optional, Tuple
import click

from ..flow import create_function_flow
from ..options import (
    DEFAULT_GIT_REVISION,
    resolve_invoker_url,
    function_options,
    channel_options,
    input_subscription_options,
)
from ..render import render_manifests
from ..utils import command_errors, get_client, progress
from ..validation import (
    validate_arg_count,
    validate_name,
    validate_required_flags,
    validate_dependent_one_of,
    validate_exactly_one_of,
    validate_env,
    validate_env_from,
)


@click.group(name='function')
def function():
    """Interact with function related resources."""


@function.command(name='create')
@click.argument('args', nargs=-1, metavar='RUNTIME NAME')
@click.option('--image', help='Container image to build and run, e.g. "registry/user/square"')
@click.option('--git-repo', help='Git repository holding the function source')
@click.option('--git-revision', default=DEFAULT_GIT_REVISION, show_default=True,
              help='Git branch, tag or commit to build')
@click.option('--invoker-url', help='Invoker manifest URL, overriding the one chosen by RUNTIME')
@click.option('--env', multiple=True, help='Environment variable as KEY=VALUE (repeatable)')
@click.option('--env-from', multiple=True,
              help='Environment variable from a secret or config map key, as '
                   '[VAR=]secretKeyRef:name:key or [VAR=]configMapKeyRef:name:key (repeatable)')
@click.option('--input', 'input_channel', help='Name of the channel feeding the function')
@click.option('--bus', help='Bus for the input channel. Mutually exclusive with --cluster-bus')
@click.option('--cluster-bus', help='Cluster bus for the input channel. Mutually exclusive with --bus')
@click.option('--namespace', '-n', default='', envvar='FNCTL_NAMESPACE',
              help='Namespace of the created resources')
@click.option('--dry-run', is_flag=True, help='Print the resources instead of creating them')
@click.pass_context
def create(
    ctx: click.Context,
    args: Tuple[str, ...],
    image: Optional[str],
    git_repo: Optional[str],
    git_revision: str,
    invoker_url: Optional[str],
    env: Tuple[str, ...],
    env_from: Tuple[str, ...],
    input_channel: Optional[str],
    bus: Optional[str],
    cluster_bus: Optional[str],
    namespace: str,
    dry_run: bool
):
    """
    Create a function from source in a git repository.

    RUNTIME selects the invoker used to run the function (node, java,
    command or python3, or any name together with --invoker-url).

    Examples:

        fnctl function create node square --image registry/square --git-repo https://github.com/acme/square

        fnctl function create node square --image registry/square --git-repo https://github.com/acme/square \\
            --input numbers --bus kafka

        fnctl function create node square --image registry/square --git-repo https://github.com/acme/square --dry-run
    """
    with command_errors(ctx):
        validate_arg_count(args, 2)
        runtime, name = args
        validate_name(runtime, "invoker")
        validate_name(name, "function name")
        validate_required_flags(git_repo=git_repo, image=image)
        resolve_invoker_url(runtime, invoker_url)
        validate_env(env)
        validate_env_from(env_from)
        validate_dependent_one_of('input', input_channel, bus=bus, cluster_bus=cluster_bus)
        if input_channel:
            validate_exactly_one_of(bus=bus, cluster_bus=cluster_bus)
            validate_name(input_channel, "channel name")

        fn_opts = function_options(
            runtime, name,
            image=image,
            git_repo=git_repo,
            git_revision=git_revision,
            invoker_url=invoker_url,
            env=env,
            env_from=env_from,
            namespace=namespace,
            dry_run=dry_run,
        )
        ch_opts = None
        sub_opts = None
        if input_channel:
            ch_opts = channel_options(
                input_channel,
                bus=bus,
                cluster_bus=cluster_bus,
                namespace=namespace,
                dry_run=dry_run,
            )
            sub_opts = input_subscription_options(fn_opts, input_channel)

        outcome = create_function_flow(
            get_client(ctx), fn_opts, ch_opts, sub_opts,
            on_step=lambda step: progress(ctx, f"Creating {step.description}"),
        )
        if not outcome.ok:
            progress(ctx, f"Failed creating {outcome.failed_step.description}; "
                          f"{len(outcome.results)} earlier step(s) were not rolled back")
        outcome.raise_for_error()

        if dry_run:
            render_manifests(outcome.results)
        else:
            progress(ctx, f"Function '{name}' created")

