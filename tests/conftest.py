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
Pytest configuration and fixtures for fnctl tests.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import MagicMock

from click.testing import CliRunner

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from fnctl.cli import main
from fnctl.client import ResourceClient
from fnctl.models import (
    CreateFunctionOptions, CreateChannelOptions, CreateSubscriptionOptions
)

NODE_INVOKER_URL = "https://github.com/projectriff/node-function-invoker/raw/v0.0.8/node-invoker.yaml"


@pytest.fixture
def mock_client():
    """Resource client double whose calls all succeed without returning a resource."""
    client = MagicMock(spec=ResourceClient)
    client.create_function.return_value = None
    client.create_channel.return_value = None
    client.create_subscription.return_value = None
    client.list_channels.return_value = []
    client.delete_channel.return_value = None
    return client


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, mock_client):
    """Run the fnctl CLI against the mock client."""
    def _invoke(*args, **kwargs):
        return runner.invoke(main, list(args), obj={"client": mock_client}, **kwargs)
    return _invoke


@pytest.fixture
def square_options():
    """Options for the 'square' node function built from defaults."""
    return CreateFunctionOptions(
        name="square",
        image="foo/bar",
        git_repo="https://github.com/repo",
        git_revision="master",
        invoker_url=NODE_INVOKER_URL,
        env=(),
        env_from=(),
    )


@pytest.fixture
def input_channel_options():
    return CreateChannelOptions(name="my-channel", bus="kafka")


@pytest.fixture
def input_subscription_options():
    return CreateSubscriptionOptions(name="square", channel="my-channel", subscriber="square")
