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

from typing import Any, Optional

from resultmapper.commons.model.launch_objects import ApplicationConfig
from resultmapper.commons.model.search import SearchResponse

APP_CONFIG = ApplicationConfig(
    esHost="http://localhost:9200",
    esUser="",
    esPassword="",
    esVerifyCerts=False,
    esUseSsl=False,
    esSslShowWarn=False,
    turnOffSslVerification=True,
    esCAcert="",
    esClientCert="",
    esClientKey="",
    logLevel="DEBUG",
    fastResultMapping=True,
)


def raw_hit(
    hit_id: str,
    fields: Optional[dict[str, list[Any]]] = None,
    source: Optional[dict[str, Any]] = None,
    index: str = "concept",
) -> dict[str, Any]:
    hit: dict[str, Any] = {"_index": index, "_id": hit_id, "_score": 1.0}
    if fields is not None:
        hit["fields"] = fields
    if source is not None:
        hit["_source"] = source
    return hit


def raw_response(
    hits: list[dict[str, Any]], total: Optional[int] = None, aggregations: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    response: dict[str, Any] = {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": len(hits) if total is None else total, "relation": "eq"},
            "max_score": 1.0,
            "hits": hits,
        },
    }
    if aggregations is not None:
        response["aggregations"] = aggregations
    return response


def search_response(
    hits: list[dict[str, Any]], total: Optional[int] = None, aggregations: Optional[dict[str, Any]] = None
) -> SearchResponse:
    return SearchResponse.from_dict(raw_response(hits, total, aggregations))
