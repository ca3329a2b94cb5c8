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

import json

from parcel.dataset import Dataset


class TestDataset:
    def test_from_response_json_list(self, backend_fixtures):
        # Arrange
        json_dict = backend_fixtures["dataset"]["get"]["response"]

        # Act
        datasets = Dataset.from_response_json(json_dict)

        # Assert
        assert len(datasets) == 4
        ds = datasets[0]
        assert ds.id == 42
        assert ds.name == "Plant Genomes!"
        assert ds.url == "irods://data.cyverse.org/iplant/home/shared/plant_genomes"
        assert ds.description == "Reference genome assemblies for 120 plant species."

    def test_from_response_json_items(self, backend_fixtures):
        # Arrange
        json_dict = backend_fixtures["dataset"]["get_items"]["response"]

        # Act
        datasets = Dataset.from_response_json(json_dict)

        # Assert
        assert datasets == [
            Dataset(
                id=7,
                name="Ocean Temperature",
                url="https://data.example.org/webdav/ocean/temperature",
                description="Daily sea surface temperature grids from 1981 to present.",
            )
        ]

    def test_from_response_json_empty(self, backend_fixtures):
        # Arrange
        json_dict = backend_fixtures["dataset"]["get_empty"]["response"]

        # Act & Assert
        assert Dataset.from_response_json(json_dict) == []
        assert Dataset.from_response_json(None) == []

    def test_contains_keywords(self):
        # Arrange
        ds = Dataset(id=1, name="Soil Microbiome", description="Amplicon SEQUENCING")

        # Act & Assert
        assert ds.contains_keywords(["micro"])
        assert ds.contains_keywords(["sequencing"])
        assert ds.contains_keywords(["volcano", "soil"])
        assert not ds.contains_keywords(["volcano"])
        assert not ds.contains_keywords([])

    def test_contains_keywords_without_description(self):
        # Arrange
        ds = Dataset(id=1, name="Soil")

        # Act & Assert
        assert ds.contains_keywords(["soil"])
        assert not ds.contains_keywords(["none"])

    def test_short_description(self):
        # Arrange
        ds = Dataset(id=1, name="x", description="a" * 250)

        # Act
        short = ds.short_description()

        # Assert
        assert short == "a" * 200 + "..."

    def test_short_description_fits(self):
        # Arrange
        ds = Dataset(id=1, name="x", description="short")

        # Act & Assert
        assert ds.short_description() == "short"
        assert Dataset(id=1, name="x").short_description() == ""

    def test_json(self):
        # Arrange
        ds = Dataset(id=1, name="x", url="https://host/x")

        # Act
        result = json.loads(ds.json())

        # Assert
        assert result == {
            "id": 1,
            "name": "x",
            "url": "https://host/x",
            "description": None,
        }

    def test_repr(self):
        # Act & Assert
        assert repr(Dataset(id=1, name="x")) == "Dataset(1, 'x')"
