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

from resultmapper.config import load_application_config, to_bool


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("", None),
        ("true", True),
        ("Y", True),
        (1, True),
        ("False", False),
        ("0", False),
        (False, False),
    ],
)
def test_to_bool(value, expected):
    assert to_bool(value) is expected


def test_to_bool_invalid_value():
    with pytest.raises(ValueError):
        to_bool("maybe")


def test_load_application_config_defaults():
    app_config = load_application_config({})
    assert app_config.esHost == ""
    assert app_config.logLevel == "DEBUG"
    assert app_config.fastResultMapping is True
    assert app_config.turnOffSslVerification is False


def test_load_application_config_from_environment():
    app_config = load_application_config(
        {
            "ES_HOST": " http://opensearch:9200 ",
            "ES_USER": "admin",
            "ES_PASSWORD": "secret",
            "ES_USE_SSL": "true",
            "ES_VERIFY_CERTS": "1",
            "ES_TURN_OFF_SSL_VERIFICATION": "y",
            "LOGGING_LEVEL": "info",
            "PATH_TO_LOG": "/var/log/mapper.log",
            "FAST_RESULT_MAPPING": "false",
        }
    )
    assert app_config.esHost == "http://opensearch:9200"
    assert app_config.esUser == "admin"
    assert app_config.esPassword == "secret"
    assert app_config.esUseSsl is True
    assert app_config.esVerifyCerts is True
    assert app_config.turnOffSslVerification is True
    assert app_config.logLevel == "info"
    assert app_config.pathToLog == "/var/log/mapper.log"
    assert app_config.fastResultMapping is False


def test_load_application_config_invalid_boolean():
    with pytest.raises(ValueError):
        load_application_config({"FAST_RESULT_MAPPING": "sometimes"})


def test_load_application_config_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ES_HOST", "http://localhost:9200")
    monkeypatch.delenv("FAST_RESULT_MAPPING", raising=False)
    assert load_application_config().esHost == "http://localhost:9200"
