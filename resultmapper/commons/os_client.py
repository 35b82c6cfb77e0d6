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

"""OpenSearch call site which loads typed result pages through a result mapper."""

from typing import Any, Optional, Protocol, TypeVar

import urllib3
from opensearchpy import OpenSearch, RequestsHttpConnection
from urllib3.exceptions import InsecureRequestWarning

from resultmapper.commons import logging
from resultmapper.commons.model.launch_objects import ApplicationConfig
from resultmapper.commons.model.search import PageRequest, ResultPage, SearchResponse

LOGGER = logging.getLogger("resultMapper.osClient")

T = TypeVar("T")


class ResultMapper(Protocol):
    def map_results(
        self, response: SearchResponse, result_type: type[T], page_request: Optional[PageRequest] = None
    ) -> ResultPage[T]: ...


def projected_query(query: dict[str, Any], fields: list[str]) -> dict[str, Any]:
    """Narrow down the output of a query to the given fields only.

    :param query: OpenSearch query body
    :param fields: Stored field names to return
    :return: New query body which returns ``fields`` instead of ``_source``
    """
    my_query = dict(query)
    my_query["fields"] = list(fields)
    my_query["_source"] = False
    return my_query


class OsClient:
    """Thin OpenSearch client wrapper for paged, typed searches."""

    app_config: ApplicationConfig
    os_client: OpenSearch
    host: str

    def __init__(self, app_config: ApplicationConfig, *, os_client: Optional[OpenSearch] = None) -> None:
        """Initialize the OpenSearch client.

        :param app_config: Application configuration
        :param os_client: Optional pre-configured OpenSearch client for testing
        """
        self.app_config = app_config
        self.host = app_config.esHost
        if os_client:
            LOGGER.debug("Creating service using provided client")
            self.os_client = os_client
        else:
            self.os_client = self._create_os_client(app_config)

    def _create_os_client(self, app_config: ApplicationConfig) -> OpenSearch:
        if not app_config.esVerifyCerts:
            urllib3.disable_warnings(InsecureRequestWarning)
        kwargs: dict[str, Any] = {
            "timeout": 30,
            "max_retries": 5,
            "retry_on_timeout": True,
            "use_ssl": app_config.esUseSsl,
            "verify_certs": app_config.esVerifyCerts,
            "ssl_show_warn": app_config.esSslShowWarn,
            "ca_certs": app_config.esCAcert or None,
            "client_cert": app_config.esClientCert or None,
            "client_key": app_config.esClientKey or None,
        }

        if app_config.esUser:
            kwargs["http_auth"] = (app_config.esUser, app_config.esPassword)

        if app_config.turnOffSslVerification:
            kwargs["connection_class"] = RequestsHttpConnection

        return OpenSearch([self.host], **kwargs)

    def search_page(
        self,
        query: dict[str, Any],
        result_type: type[T],
        page_request: PageRequest,
        mapper: ResultMapper,
        index: Optional[str] = None,
    ) -> ResultPage[T]:
        """Execute a search for one page and decode it into typed results.

        :param query: OpenSearch query body, use ``projected_query`` to enable fast decoding
        :param result_type: Type of the result objects
        :param page_request: Page to load
        :param mapper: Result mapper to decode the response with
        :param index: Index name, the ``index_name`` of the result type by default
        :return: Page of decoded results
        :raises ValueError: if no index is given and the result type does not name one
        """
        index = index or getattr(result_type, "index_name", "")
        if not index:
            raise ValueError(f"No index to search for {result_type.__name__}")
        body = dict(query)
        body["from"] = page_request.offset
        body["size"] = page_request.size
        LOGGER.debug(f"Searching '{index}' for page {page_request.page} of {result_type.__name__}")
        raw_response = self.os_client.search(index=index, body=body)
        return mapper.map_results(SearchResponse.from_dict(raw_response), result_type, page_request)
