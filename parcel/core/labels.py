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

import re
import secrets
from typing import Dict, Mapping, Optional

from kubernetes import client as k8s_client
from parcel.client import exceptions
from parcel.constants import LABELS, VOLUME
from parcel.dataset import Dataset


_NON_ALPHANUMERIC = re.compile("[^a-zA-Z0-9]+")
_DATASET_ID = re.compile("-?[0-9]+")


def sanitize_name(name: str) -> str:
    return _NON_ALPHANUMERIC.sub("", name or "")


def random_suffix(length: int = VOLUME.SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(VOLUME.SUFFIX_ALPHABET) for _ in range(length))


def generate_volume_name(dataset: Dataset) -> str:
    """Generate a fresh persistent volume name for a dataset.

    Every call returns a different name, so it must be called once per volume.
    """
    return f"{VOLUME.NAME_PREFIX}{sanitize_name(dataset.name)}-{random_suffix()}"


def claim_name_for(volume_name: str) -> str:
    return f"{volume_name}{VOLUME.CLAIM_SUFFIX}"


def volume_handle_for(volume_name: str) -> str:
    return f"{volume_name}{VOLUME.HANDLE_SUFFIX}"


def encode_labels(dataset: Dataset, volume_name: str) -> Dict[str, str]:
    """Labels shared by a volume and its claim.

    The claim selector matches on exactly this set, which pins the claim to
    its volume.
    """
    return {
        LABELS.SCHEMA: LABELS.SCHEMA_VERSION,
        LABELS.VOLUME_NAME: volume_name,
        LABELS.DATASET_ID: str(dataset.id),
        LABELS.DATASET_NAME: dataset.name,
    }


def recognize_managed(volume: k8s_client.V1PersistentVolume) -> bool:
    """Whether the volume was created by parcel, judged by its name only."""
    name = volume.metadata.name if volume.metadata is not None else None
    return bool(name) and name.startswith(VOLUME.NAME_PREFIX)


def references_volume(
    claim: k8s_client.V1PersistentVolumeClaim, volume_name: str
) -> bool:
    labels = _labels_of(claim)
    return labels.get(LABELS.VOLUME_NAME) == volume_name


def decode_dataset(labels: Optional[Mapping[str, str]]) -> Dataset:
    """Rehydrate the dataset identity stored on a volume.

    # Arguments
        labels: Labels of a persistent volume.
    # Returns
        `Dataset`: Dataset carrying the id and name, without url or description.
    # Raises
        `parcel.client.exceptions.MissingLabelError`: If id or name is absent, the id
            is not an integer or the labels belong to another schema version.
    """
    labels = labels or {}

    schema = labels.get(LABELS.SCHEMA)
    if schema and schema != LABELS.SCHEMA_VERSION:
        raise exceptions.MissingLabelError(
            LABELS.SCHEMA, f"Unsupported label schema '{schema}'"
        )

    if LABELS.DATASET_ID not in labels:
        raise exceptions.MissingLabelError(LABELS.DATASET_ID)
    raw_id = labels[LABELS.DATASET_ID]
    if not isinstance(raw_id, str) or not _DATASET_ID.fullmatch(raw_id):
        raise exceptions.MissingLabelError(
            LABELS.DATASET_ID, f"Invalid '{LABELS.DATASET_ID}' field: {raw_id!r}"
        )
    dataset_id = int(raw_id)

    if LABELS.DATASET_NAME not in labels:
        raise exceptions.MissingLabelError(LABELS.DATASET_NAME)

    return Dataset(id=dataset_id, name=labels[LABELS.DATASET_NAME])


def _labels_of(obj) -> Mapping[str, str]:
    if obj.metadata is None or obj.metadata.labels is None:
        return {}
    return obj.metadata.labels
