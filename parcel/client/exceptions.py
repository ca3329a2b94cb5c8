#
#   Copyright 2026 Hopsworks AB
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#

from __future__ import annotations

from typing import Any, Optional

import requests


class ParcelException(Exception):
    """Generic parcel exception"""


class RestAPIError(ParcelException):
    """REST Exception encapsulating the response object and url."""

    def __init__(self, url: str, response: requests.Response) -> None:
        message = (
            "Catalog service error: (url: {}). Server response: \n"
            "HTTP code: {}, HTTP reason: {}, body: {}".format(
                url,
                response.status_code,
                response.reason,
                response.content,
            )
        )
        super().__init__(message)
        self.url = url
        self.response = response


class DatasetException(ParcelException):
    """Raised when a catalog entry cannot be turned into a volume."""


class MalformedURLError(DatasetException):
    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        message = f"Could not parse dataset URL '{url}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.url = url


class UnsupportedSchemeError(DatasetException):
    def __init__(self, url: str, scheme: str) -> None:
        super().__init__(f"Unknown scheme '{scheme}' in dataset URL '{url}'")
        self.url = url
        self.scheme = scheme


class MissingLabelError(ParcelException):
    """Raised when a dataset cannot be rehydrated from volume labels."""

    def __init__(self, label: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Could not find '{label}' field in a persistent volume"
        )
        self.label = label


class MountNotFoundError(ParcelException):
    def __init__(self, volume_name: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Could not find a mount for volume {volume_name}")
        self.volume_name = volume_name


class BackendError(ParcelException):
    """Control-plane call failure.

    Wraps the underlying client error together with the operation that was
    attempted, so that operators can inspect or clean up the affected object.
    """

    def __init__(
        self,
        operation: str,
        kind: str,
        name: Optional[str] = None,
        namespace: Optional[str] = None,
        cause: Optional[BaseException] = None,
        message: Optional[str] = None,
    ) -> None:
        self.operation = operation
        self.kind = kind
        self.name = name
        self.namespace = namespace
        self.cause = cause
        self.status = getattr(cause, "status", None)
        if message is None:
            target = kind if name is None else f"{kind} '{name}'"
            if namespace is not None:
                target += f" in namespace '{namespace}'"
            message = f"Failed to {operation} {target}"
            if self.status is not None:
                message += f" (HTTP {self.status})"
            if cause is not None:
                message += f": {_describe_cause(cause)}"
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class PartialMountError(BackendError):
    """The volume was created but its claim was not.

    The created volume is left in place and exposed as ``volume`` so that the
    caller can retry the claim or delete the volume.
    """

    def __init__(self, volume: Any, claim_error: BackendError) -> None:
        volume_name = volume.metadata.name
        super().__init__(
            claim_error.operation,
            claim_error.kind,
            name=claim_error.name,
            namespace=claim_error.namespace,
            cause=claim_error.cause,
            message=(
                f"Created persistent volume '{volume_name}' but failed to create "
                f"its claim, the volume is left without a claim: {claim_error}"
            ),
        )
        self.volume = volume
        self.claim_error = claim_error


class MountDeletionError(BackendError):
    """Claim and/or volume deletion failed while returning a mount."""

    def __init__(
        self,
        volume_name: str,
        claim_error: Optional[BackendError] = None,
        volume_error: Optional[BackendError] = None,
    ) -> None:
        first = claim_error or volume_error
        failures = [str(e) for e in (claim_error, volume_error) if e is not None]
        super().__init__(
            "delete",
            first.kind,
            name=first.name,
            namespace=first.namespace,
            cause=first.cause,
            message=f"Failed to delete mount '{volume_name}': " + "; ".join(failures),
        )
        self.volume_name = volume_name
        self.claim_error = claim_error
        self.volume_error = volume_error

    @property
    def volume_deleted(self) -> bool:
        return self.volume_error is None


def _describe_cause(cause: BaseException) -> str:
    reason = getattr(cause, "reason", None)
    if reason:
        return str(reason)
    return str(cause) or type(cause).__name__
