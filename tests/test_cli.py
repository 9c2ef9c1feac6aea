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
Tests for the root command group and shared command helpers.
"""

from unittest.mock import patch

import click

from fnctl import __version__
from fnctl.cli import main
from fnctl.client import KubectlClient
from fnctl.exceptions import ClientError
from fnctl.utils import get_client


class TestRootCommand:
    """Test global options."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_subcommands(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for name in ("function", "channel", "subscription"):
            assert name in result.output

    def test_kubeconfig_environment_left_to_kubectl(self, runner):
        """Test that KUBECONFIG is not turned into a --kubeconfig flag."""
        obj = {}
        with patch("fnctl.client.KubectlClient.list_channels", return_value=[]):
            result = runner.invoke(
                main, ["channel", "list"], obj=obj, env={"KUBECONFIG": "/a/config:/b/config"}
            )

        assert result.exit_code == 0, result.output
        assert obj["client"].kubeconfig is None
        assert obj["client"].command(["get", "pods"]) == ["kubectl", "get", "pods"]

    def test_builds_kubectl_client_from_options(self, runner):
        """Test that --kubeconfig and --master reach the default client."""
        obj = {}
        with patch("fnctl.client.KubectlClient.list_channels", return_value=[]):
            result = runner.invoke(
                main, ["--kubeconfig", "/tmp/kc", "--master", "https://api", "channel", "list"], obj=obj
            )

        assert result.exit_code == 0, result.output
        client = obj["client"]
        assert isinstance(client, KubectlClient)
        assert client.kubeconfig == "/tmp/kc"
        assert client.master == "https://api"

    def test_verbose_progress(self, runner, mock_client):
        """Test that verbose mode reports each step on stderr."""
        result = runner.invoke(
            main,
            ["--verbose", "function", "create", "node", "square", "--image", "foo/bar",
             "--git-repo", "https://github.com/repo", "--input", "my-channel", "--bus", "kafka"],
            obj={"client": mock_client},
        )

        assert result.exit_code == 0, result.output
        assert "Creating function 'square'" in result.output
        assert "Creating channel 'my-channel'" in result.output
        assert "Creating subscription 'square'" in result.output

    def test_verbose_partial_failure(self, runner, mock_client):
        """Test that a partial failure says earlier steps were kept."""
        mock_client.create_subscription.side_effect = ClientError("some error")

        result = runner.invoke(
            main,
            ["-v", "function", "create", "node", "square", "--image", "foo/bar",
             "--git-repo", "https://github.com/repo", "--input", "my-channel", "--bus", "kafka"],
            obj={"client": mock_client},
        )

        assert result.exit_code == 1
        assert "Failed creating subscription 'square'; 2 earlier step(s) were not rolled back" in result.output
        assert "some error" in result.output


class TestGetClient:
    """Test client lookup in the click context."""

    def test_injected_client_is_used(self, mock_client):
        ctx = click.Context(main, obj={"client": mock_client})
        assert get_client(ctx) is mock_client

    def test_default_client_is_cached(self):
        ctx = click.Context(main, obj={})
        client = get_client(ctx)
        assert isinstance(client, KubectlClient)
        assert get_client(ctx) is client
