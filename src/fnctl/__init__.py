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
fnctl: Function-as-a-Service command-line client

Creates, lists and deletes functions, channels and subscriptions on a
function platform running on Kubernetes.
"""

__version__ = "0.1.0"

from .exceptions import (
    FnctlError,
    ValidationError,
    InvalidArgumentCountError,
    InvalidNameError,
    MissingRequiredOneOfError,
    MutuallyExclusiveError,
    MissingDependentFlagError,
    MissingRequiredFlagError,
    ClientError,
)
from .models import (
    CreateFunctionOptions,
    CreateChannelOptions,
    CreateSubscriptionOptions,
    ListChannelOptions,
    DeleteChannelOptions,
)
from .client import ResourceClient, KubectlClient
from .flow import create_function_flow, run_steps, Step, FlowResult

__all__ = [
    # Clients
    'ResourceClient',
    'KubectlClient',
    # Flows
    'create_function_flow',
    'run_steps',
    'Step',
    'FlowResult',
    # Options
    'CreateFunctionOptions',
    'CreateChannelOptions',
    'CreateSubscriptionOptions',
    'ListChannelOptions',
    'DeleteChannelOptions',
    # Exceptions
    'FnctlError',
    'ValidationError',
    'InvalidArgumentCountError',
    'InvalidNameError',
    'MissingRequiredOneOfError',
    'MutuallyExclusiveError',
    'MissingDependentFlagError',
    'MissingRequiredFlagError',
    'ClientError',
]
