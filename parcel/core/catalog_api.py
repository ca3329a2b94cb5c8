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
from typing import Iterable, List, Optional, Union

from parcel import constants
from parcel.client import base
from parcel.dataset import Dataset


_logger = logging.getLogger(__name__)


class CatalogApi:
    """Read access to the dataset catalog service.

    The catalog only offers a listing endpoint, searching and selecting are
    done on the full listing.
    """

    def __init__(
        self,
        catalog_service_url: str = constants.CATALOG_SERVICE_URL,
        trace: bool = False,
        client: Optional[base.Client] = None,
    ):
        self._client = client or base.Client(
            catalog_service_url or constants.CATALOG_SERVICE_URL, trace=trace
        )

    def get_all_datasets(self) -> List[Dataset]:
        """Get all datasets

        # Returns
            `List[Dataset]`: List of all datasets in the catalog
        # Raises
            `parcel.client.exceptions.RestAPIError`: If the catalog service encounters an error when handling the request
        """
        return Dataset.from_response_json(
            self._client._send_request("GET", ["datasets"])
        )

    def search_datasets(self, keywords: Iterable[str]) -> List[Dataset]:
        """Search datasets by keywords.

        Keywords shorter than 4 characters are ignored. A dataset matches if
        any remaining keyword occurs in its name or description.

        # Arguments
            keywords: Keywords to look for, case-insensitive.
        # Returns
            `List[Dataset]`: Matching datasets, empty if no usable keyword was given
        # Raises
            `parcel.client.exceptions.RestAPIError`: If the catalog service encounters an error when handling the request
        """
        usable = filter_keywords(keywords)
        if not usable:
            return []
        return [ds for ds in self.get_all_datasets() if ds.contains_keywords(usable)]

    def select_datasets(self, ids: Iterable[Union[int, str]]) -> List[Dataset]:
        """Get datasets by id.

        # Arguments
            ids: Dataset ids, as integers or decimal strings.
        # Returns
            `List[Dataset]`: Datasets with one of the ids, in catalog order
        # Raises
            `parcel.client.exceptions.RestAPIError`: If the catalog service encounters an error when handling the request
        """
        wanted = {str(i).strip() for i in ids}
        return [ds for ds in self.get_all_datasets() if str(ds.id) in wanted]

    def close(self):
        """Close the HTTP session to the catalog service."""
        self._client._close()


def filter_keywords(keywords: Iterable[str]) -> List[str]:
    usable = []
    for keyword in keywords:
        if len(keyword) < constants.MIN_KEYWORD_LEN:
            _logger.warning(
                "Keyword '%s' is ignored because it is too short", keyword
            )
            continue
        usable.append(keyword)
    return usable
