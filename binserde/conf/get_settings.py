# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from collections.abc import Mapping
from typing import Optional

from structlog import get_logger

from binserde.conf.settings import CodecSettings

logger = get_logger()

ENV_PREFIX = 'BINSERDE_'

_settings_singleton: Optional[CodecSettings] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the codec settings.

    They are loaded on the first call from the `BINSERDE_*` environment variables (`BINSERDE_DEFAULT_ENDIAN` and
    `BINSERDE_MANUAL_CODEC_ENDIAN`), a variable that is not set keeps its default. Later calls return the same
    instance even if the environment changed.
    """
    global _settings_singleton

    if _settings_singleton is None:
        _settings_singleton = _load_settings_from_env(os.environ)

    return _settings_singleton


def _load_settings_from_env(environ: Mapping[str, str]) -> CodecSettings:
    values = {
        name: environ[ENV_PREFIX + name]
        for name in CodecSettings.model_fields
        if ENV_PREFIX + name in environ
    }
    settings = CodecSettings.model_validate(values)
    logger.debug('settings loaded', overrides=sorted(values), **settings.model_dump(mode='json'))
    return settings
