#  Copyright 2025 EPAM Systems
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import pytest
from pydantic import ValidationError

from resultmapper.commons.default_mapper import DefaultResultMapper
from resultmapper.commons.model.domain import Concept, Description, QueryConcept
from resultmapper.commons.model.search import Hit, PageRequest
from test import raw_hit, search_response


@pytest.fixture
def default_mapper():
    return DefaultResultMapper()


def test_map_hit_from_source(default_mapper):
    hit = Hit.from_dict(
        raw_hit(
            "d1",
            source={
                "descriptionId": "500001",
                "conceptId": "100001",
                "term": "Heart structure",
                "languageCode": "en",
                "active": True,
            },
            index="description",
        )
    )

    description = default_mapper.map_hit(hit, Description)

    assert description.internal_id == "d1"
    assert description.description_id == "500001"
    assert description.concept_id == "100001"
    assert description.term == "Heart structure"
    assert description.language_code == "en"
    assert description.active is True


def test_map_hit_from_fields_when_source_missing(default_mapper):
    hit = Hit.from_dict(raw_hit("q1", fields={"conceptIdL": ["100001"], "parents": [138875005]}))

    query_concept = default_mapper.map_hit(hit, QueryConcept)

    assert query_concept.id == "q1"
    assert query_concept.concept_id_l == 100001
    assert query_concept.parents == [138875005]


def test_map_hit_overwrites_identity(default_mapper):
    hit = Hit.from_dict(raw_hit("a1", source={"internalId": "stale", "conceptId": "100001"}))
    assert default_mapper.map_hit(hit, Concept).internal_id == "a1"


def test_map_hit_invalid_document(default_mapper):
    hit = Hit.from_dict(raw_hit("a1", source={"conceptId": "100001", "active": "sometimes"}))
    with pytest.raises(ValidationError):
        default_mapper.map_hit(hit, Concept)


def test_map_results(default_mapper):
    response = search_response(
        [raw_hit("a1", source={"conceptId": "100001"}), raw_hit("a2", source={"conceptId": "100002"})],
        total=42,
        aggregations={"active": {"doc_count": 40}},
    )
    page_request = PageRequest(page=1, size=2)

    page = default_mapper.map_results(response, Concept, page_request)

    assert [concept.concept_id for concept in page.content] == ["100001", "100002"]
    assert [concept.internal_id for concept in page.content] == ["a1", "a2"]
    assert page.total == 42
    assert page.aggregations == {"active": {"doc_count": 40}}
    assert page.page_request == page_request
