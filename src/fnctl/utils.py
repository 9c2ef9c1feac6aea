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
Helpers shared by fnctl commands.

Commands find their resource client and settings in the click context
object set up by the root command group.
"""

import sys
import traceback
from contextlib import contextmanager
from typing import Iterator

import click

from .client import KubectlClient, ResourceClient
from .exceptions import ValidationError

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def get_client(ctx: click.Context) -> ResourceClient:
    """
    Return the resource client for this invocation.

    A client placed in ``ctx.obj['client']`` (for instance by tests) is used
    as-is; otherwise a kubectl client is built from the root options.
    """
    obj = ctx.ensure_object(dict)
    client = obj.get('client')
    if client is None:
        client = KubectlClient(
            kubeconfig=obj.get('kubeconfig'),
            master=obj.get('master'),
        )
        obj['client'] = client
    return client


def is_verbose(ctx: click.Context) -> bool:
    return bool(ctx.obj.get('verbose', False)) if ctx and ctx.obj else False


def progress(ctx: click.Context, message: str) -> None:
    """Print a progress line on stderr in verbose mode."""
    if is_verbose(ctx):
        click.echo(message, err=True)


@contextmanager
def command_errors(ctx: click.Context) -> Iterator[None]:
    """
    Turn errors raised by a command body into messages and exit codes.

    Messages are printed exactly as raised. Validation errors exit with 2,
    everything else with 1.
    """
    try:
        yield
    except ValidationError as e:
        click.echo(str(e), err=True)
        sys.exit(EXIT_USAGE)
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled", err=True)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        click.echo(str(e), err=True)
        if is_verbose(ctx):
            traceback.print_exc()
        sys.exit(EXIT_FAILURE)
