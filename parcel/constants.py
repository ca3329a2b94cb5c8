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

CATALOG_SERVICE_URL = "http://localhost:8080"
SHORT_DESCRIPTION_LEN = 200
MIN_KEYWORD_LEN = 4

VOLUME_NAMESPACE = "default"


class CSI:
    DRIVER_NAME = "parcel.csi.iychoi"
    STORAGE_CLASS_NAME = "parcel-sc"


class VOLUME:
    NAME_PREFIX = "parcel-pv-"
    CLAIM_SUFFIX = "-claim"
    HANDLE_SUFFIX = "-handle"
    DEFAULT_CAPACITY = "5Gi"
    ACCESS_MODE = "ReadWriteMany"
    VOLUME_MODE = "Filesystem"
    RECLAIM_POLICY = "Retain"
    ANONYMOUS_USER = "anonymous"
    # shortuuid alphabet, ambiguous characters removed
    SUFFIX_ALPHABET = "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    SUFFIX_LENGTH = 22


class LABELS:
    VOLUME_NAME = "volume-name"
    DATASET_ID = "dataset-id"
    DATASET_NAME = "dataset-name"
    SCHEMA = "parcel-label-schema"
    SCHEMA_VERSION = "v1"


class DRIVERS:
    WEBDAV = "webdav"
    IRODS_FUSE = "irodsfuse"
