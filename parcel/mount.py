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
from typing import Any, Optional

from kubernetes import client as k8s_client
from parcel import util
from parcel.dataset import Dataset


class DatasetMount:
    """A dataset exposed through a persistent volume and its claim.

    Mounts are not stored anywhere; they are rebuilt from the labels of the
    two control-plane objects every time they are requested.
    """

    def __init__(
        self,
        dataset: Dataset,
        volume: k8s_client.V1PersistentVolume,
        claim: k8s_client.V1PersistentVolumeClaim,
    ):
        self._dataset = dataset
        self._volume = volume
        self._claim = claim

    @property
    def dataset(self) -> Dataset:
        """Dataset rehydrated from the volume labels."""
        return self._dataset

    @property
    def volume(self) -> k8s_client.V1PersistentVolume:
        return self._volume

    @property
    def claim(self) -> k8s_client.V1PersistentVolumeClaim:
        return self._claim

    @property
    def volume_name(self) -> str:
        return self._volume.metadata.name

    @property
    def claim_name(self) -> str:
        return self._claim.metadata.name

    @property
    def namespace(self) -> Optional[str]:
        return self._claim.metadata.namespace

    @property
    def phase(self) -> Optional[str]:
        """Binding phase of the claim, `None` until the control plane reports one."""
        status = self._claim.status
        return status.phase if status is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "dataset_id": self._dataset.id,
            "dataset_name": self._dataset.name,
            "volume": self.volume_name,
            "claim": self.claim_name,
            "namespace": self.namespace,
            "phase": self.phase,
        }

    def json(self) -> str:
        return json.dumps(self, cls=util.Encoder)

    def __repr__(self):
        return f"DatasetMount({self._dataset!r}, {self.volume_name!r}, {self.claim_name!r})"
