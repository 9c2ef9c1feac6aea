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
Command-line interface for fnctl.
"""

import click

from . import __version__
from .function.main import function
from .channel.main import channel
from .subscription.main import subscription


@click.group()
@click.version_option(version=__version__, prog_name="fnctl")
@click.option("--kubeconfig", help="Path to the kubeconfig file (defaults to kubectl's own lookup)")
@click.option("--master", envvar="FNCTL_MASTER", help="Address of the Kubernetes API server, overriding the kubeconfig")
@click.option("--verbose", "-v", is_flag=True, help="Print progress and tracebacks on stderr")
@click.pass_context
def main(ctx, kubeconfig, master, verbose):
    """fnctl: manage functions, channels and subscriptions on a FaaS platform."""
    ctx.ensure_object(dict)
    ctx.obj["kubeconfig"] = kubeconfig
    ctx.obj["master"] = master
    ctx.obj["verbose"] = verbose


# Add subcommands
main.add_command(function)
main.add_command(channel)
main.add_command(subscription)


if __name__ == "__main__":
    main()
