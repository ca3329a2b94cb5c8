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

import logging

import furl
import requests
from parcel.client import exceptions


_logger = logging.getLogger(__name__)


class Client:
    """HTTP client for the dataset catalog service."""

    def __init__(self, base_url: str, trace: bool = False):
        if not base_url:
            raise ValueError("Catalog service URL cannot be empty.")
        self._base_url = base_url
        self._trace = trace
        _logger.debug("Setting up requests session for %s", base_url)
        self._session = requests.session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def _send_request(
        self,
        method,
        path_params,
        query_params=None,
        headers=None,
    ):
        """Send REST request to the catalog service.

        :param method: 'GET', 'PUT' or 'POST'
        :type method: str
        :param path_params: a list of path params appended to the base url,
            for example `["datasets"]`.
        :type path_params: list
        :param query_params: A dictionary of key/value pairs to be added as query parameters,
            defaults to None
        :type query_params: dict, optional
        :param headers: Additional header information, defaults to None
        :type headers: dict, optional
        :raises RestAPIError: Raised when request wasn't correctly received, understood or accepted
        :return: Response json
        :rtype: dict or list
        """
        f_url = furl.furl(self._base_url)
        base_segments = [segment for segment in f_url.path.segments if segment]
        f_url.path.segments = base_segments + [str(p) for p in path_params]
        url = str(f_url)

        request = requests.Request(
            method,
            url=url,
            headers=headers,
            params=query_params,
        )

        _logger.debug(f"url:{url}")

        prepped = self._session.prepare_request(request)
        response = self._session.send(prepped)
        self._trace_response(response)

        if response.status_code // 100 != 2:
            raise exceptions.RestAPIError(url, response)

        if len(response.content) == 0:
            return None
        return response.json()

    def _trace_response(self, response: requests.Response) -> None:
        if not self._trace:
            return
        _logger.info("Response Info:")
        _logger.info("  Status Code: %s", response.status_code)
        _logger.info("  Status     : %s", response.reason)
        _logger.info("  Time       : %s", response.elapsed)
        _logger.info("  Body       :\n%s", response.text)

    def _close(self):
        self._session.close()
