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

from pydantic import BaseModel


class ApplicationConfig(BaseModel):
    """General application config object"""

    esHost: str = ""
    esUser: str = ""
    esPassword: str = ""
    esVerifyCerts: bool = False
    esUseSsl: bool = False
    esSslShowWarn: bool = False
    esCAcert: str = ""
    esClientCert: str = ""
    esClientKey: str = ""
    turnOffSslVerification: bool = False

    logLevel: str = "DEBUG"
    pathToLog: str = "/tmp/config.log"

    fastResultMapping: bool = True
