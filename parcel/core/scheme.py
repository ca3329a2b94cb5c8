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

from urllib.parse import urlparse

from parcel.client import exceptions
from parcel.constants import DRIVERS


SCHEME_DRIVERS = {
    "webdav": DRIVERS.WEBDAV,
    "davfs": DRIVERS.WEBDAV,
    "http": DRIVERS.WEBDAV,
    "https": DRIVERS.WEBDAV,
    "irods": DRIVERS.IRODS_FUSE,
}


def resolve_driver(url: str) -> str:
    """Map the scheme of a dataset URL to a storage driver identifier.

    # Arguments
        url: Source URL of the dataset.
    # Returns
        `str`: `webdav` for WebDAV-family schemes, `irodsfuse` for `irods`.
    # Raises
        `parcel.client.exceptions.MalformedURLError`: If the URL cannot be parsed or has no scheme.
        `parcel.client.exceptions.UnsupportedSchemeError`: If no driver serves the scheme.
    """
    if not isinstance(url, str) or not url:
        raise exceptions.MalformedURLError(str(url), "empty URL")
    try:
        scheme = urlparse(url).scheme
    except ValueError as e:
        raise exceptions.MalformedURLError(url, str(e)) from e
    if not scheme:
        raise exceptions.MalformedURLError(url, "missing scheme")

    scheme = scheme.lower()
    if scheme not in SCHEME_DRIVERS:
        raise exceptions.UnsupportedSchemeError(url, scheme)
    return SCHEME_DRIVERS[scheme]
