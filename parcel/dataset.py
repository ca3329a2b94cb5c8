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

import json
from dataclasses import asdict, dataclass
from typing import Any, Iterable

import humps
from parcel import constants, util


@dataclass
class Dataset:
    """A dataset published in the catalog service.

    The numeric `id` is the identity of a dataset; names are not unique.
    """

    id: int
    name: str
    url: str | None = None
    description: str | None = None

    @classmethod
    def from_response_json(cls, json_dict: dict[str, Any] | list | None) -> list[Dataset]:
        if not json_dict:
            return []
        json_decamelized = humps.decamelize(json_dict)
        if isinstance(json_decamelized, dict):
            json_decamelized = json_decamelized.get("items") or []
        datasets = []
        for dataset in json_decamelized:
            # Remove keys that are not part of the dataclass
            for key in set(dataset.keys()) - set(Dataset.__dataclass_fields__.keys()):
                dataset.pop(key)
            datasets.append(cls(**dataset))
        return datasets

    def contains_keywords(self, keywords: Iterable[str]) -> bool:
        """Check whether any of the keywords occurs in the name or description."""
        haystack = f"{self.name or ''}\n{self.description or ''}".lower()
        return any(keyword.lower() in haystack for keyword in keywords)

    def short_description(self, max_len: int = constants.SHORT_DESCRIPTION_LEN) -> str:
        description = self.description or ""
        if len(description) <= max_len:
            return description
        return description[:max_len].rstrip() + "..."

    def json(self) -> str:
        return json.dumps(self, cls=util.Encoder)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __repr__(self):
        return f"Dataset({self.id!r}, {self.name!r})"
