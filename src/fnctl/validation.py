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
Input validation for fnctl commands.

Every check here runs before the resource client is touched, so a failing
command never leaves anything behind on the platform.
"""

import re
from typing import Optional, Sequence

from .exceptions import (
    ValidationError,
    InvalidArgumentCountError,
    InvalidNameError,
    MissingRequiredOneOfError,
    MutuallyExclusiveError,
    MissingDependentFlagError,
    MissingRequiredFlagError,
)

DNS_LABEL_MAX_LENGTH = 63
DNS_LABEL_PATTERN = re.compile(r'[a-z0-9]([-a-z0-9]*[a-z0-9])?')

ENV_FROM_SOURCES = ('secretKeyRef', 'configMapKeyRef')
ENV_FROM_PATTERN = re.compile(
    r'(?:(?P<var>[A-Za-z_][A-Za-z0-9_]*)=)?'
    r'(?P<source>secretKeyRef|configMapKeyRef):(?P<name>[^:]+):(?P<key>[^:]+)'
)


def validate_name(candidate: str, what: str = "name") -> None:
    """
    Check that a resource name is a valid DNS-1123 label.

    Args:
        candidate: Name to check
        what: Human-readable role of the name, used in the error message

    Raises:
        InvalidNameError: If the name does not match the label rule
    """
    if len(candidate) > DNS_LABEL_MAX_LENGTH:
        raise InvalidNameError(
            f"invalid {what} '{candidate}': must be no more than "
            f"{DNS_LABEL_MAX_LENGTH} characters"
        )
    if not DNS_LABEL_PATTERN.fullmatch(candidate):
        raise InvalidNameError(
            f"invalid {what} '{candidate}': a DNS-1123 label must consist of lower case "
            "alphanumeric characters or '-', and must start and end with an "
            "alphanumeric character (e.g. 'my-name', or '123-abc')"
        )


def validate_arg_count(args: Sequence[str], expected: int) -> None:
    """Check the number of positional arguments given to a command."""
    if len(args) != expected:
        raise InvalidArgumentCountError(
            f"accepts {expected} arg(s), received {len(args)}"
        )


def validate_required_flags(**flags: Optional[str]) -> None:
    """
    Check that every given flag has a value.

    Keyword names use underscores and are reported with dashes.

    Raises:
        MissingRequiredFlagError: Listing every missing flag, sorted by name
    """
    missing = sorted(k.replace('_', '-') for k, v in flags.items() if not v)
    if missing:
        quoted = ', '.join(f'"{m}"' for m in missing)
        raise MissingRequiredFlagError(f"required flag(s) {quoted} not set")


def validate_exactly_one_of(**flags: Optional[str]) -> None:
    """
    Check that exactly one flag of a group is set.

    Raises:
        MissingRequiredOneOfError: If none is set
        MutuallyExclusiveError: If more than one is set
    """
    names = _flag_list(flags)
    count = sum(1 for v in flags.values() if v)
    if count == 0:
        raise MissingRequiredOneOfError(f"at least one of {names} must be set")
    if count > 1:
        raise MutuallyExclusiveError(f"at most one of {names} must be set")


def validate_dependent_one_of(trigger: str, trigger_value: Optional[str], **flags: Optional[str]) -> None:
    """
    Check that at least one flag of a group is set whenever ``trigger`` is.

    Raises:
        MissingDependentFlagError: If the trigger is set and none of the group is
    """
    if trigger_value and not any(flags.values()):
        raise MissingDependentFlagError(
            f"when {_flag_name(trigger)} is set, at least one of "
            f"{_flag_list(flags)} must be set"
        )


def validate_env(entries: Sequence[str]) -> None:
    """Check that every --env entry has the KEY=VALUE form."""
    for entry in entries:
        key, sep, _ = entry.partition('=')
        if not sep or not key:
            raise ValidationError(
                f"invalid --env '{entry}': expected KEY=VALUE"
            )


def validate_env_from(entries: Sequence[str]) -> None:
    """Check that every --env-from entry names a secret or config map key."""
    for entry in entries:
        if not ENV_FROM_PATTERN.fullmatch(entry):
            raise ValidationError(
                f"invalid --env-from '{entry}': expected "
                f"[VAR=]{{{'|'.join(ENV_FROM_SOURCES)}}}:<name>:<key>"
            )


def _flag_name(key: str) -> str:
    return '--' + key.replace('_', '-')


def _flag_list(flags: dict) -> str:
    return ', '.join(_flag_name(k) for k in flags)
