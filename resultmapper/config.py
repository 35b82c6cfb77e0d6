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

"""Application configuration read from environment variables."""

import os
from typing import Any, Mapping, Optional

from resultmapper.commons.model.launch_objects import ApplicationConfig


def to_bool(value: Optional[Any]) -> Optional[bool]:
    """Convert value of any type to boolean or raise ValueError.

    :param value: value to convert
    :return: boolean value
    :raises ValueError: if value is not boolean
    """
    if value is None or value == "":
        return None
    if value in {"TRUE", "True", "true", "1", "Y", "y", 1, True}:
        return True
    if value in {"FALSE", "False", "false", "0", "N", "n", 0, False}:
        return False
    raise ValueError(f"Invalid boolean value {value}.")


_STRING_SETTINGS = {
    "esHost": "ES_HOST",
    "esUser": "ES_USER",
    "esPassword": "ES_PASSWORD",
    "esCAcert": "ES_CA_CERT",
    "esClientCert": "ES_CLIENT_CERT",
    "esClientKey": "ES_CLIENT_KEY",
    "logLevel": "LOGGING_LEVEL",
    "pathToLog": "PATH_TO_LOG",
}

_BOOL_SETTINGS = {
    "esVerifyCerts": "ES_VERIFY_CERTS",
    "esUseSsl": "ES_USE_SSL",
    "esSslShowWarn": "ES_SSL_SHOW_WARN",
    "turnOffSslVerification": "ES_TURN_OFF_SSL_VERIFICATION",
    "fastResultMapping": "FAST_RESULT_MAPPING",
}


def load_application_config(environ: Optional[Mapping[str, str]] = None) -> ApplicationConfig:
    """Build the application config, unset variables keep their defaults.

    :param environ: Variables to read, ``os.environ`` by default
    :return: Application config
    :raises ValueError: if a boolean variable has an unrecognized value
    """
    env = os.environ if environ is None else environ
    settings: dict[str, Any] = {}
    for name, variable in _STRING_SETTINGS.items():
        value = env.get(variable)
        if value:
            settings[name] = value.strip()
    for name, variable in _BOOL_SETTINGS.items():
        value = to_bool(env.get(variable))
        if value is not None:
            settings[name] = value
    return ApplicationConfig(**settings)
