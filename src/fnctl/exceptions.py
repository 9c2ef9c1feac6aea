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
Exception classes for fnctl validation and resource client errors.
"""


class FnctlError(Exception):
    """Base exception for all fnctl errors."""


class ValidationError(FnctlError):
    """Raised when command input fails validation."""


class InvalidArgumentCountError(ValidationError):
    """Raised when a command receives the wrong number of positional arguments."""


class InvalidNameError(ValidationError):
    """Raised when a resource name is not a valid DNS label."""


class MissingRequiredOneOfError(ValidationError):
    """Raised when none of a group of alternative flags is set."""


class MutuallyExclusiveError(ValidationError):
    """Raised when more than one of a group of exclusive flags is set."""


class MissingDependentFlagError(ValidationError):
    """Raised when a flag is set without the flags it depends on."""


class MissingRequiredFlagError(ValidationError):
    """Raised when required flags are not set."""


class ClientError(FnctlError):
    """Raised when the resource client fails to perform an operation."""
