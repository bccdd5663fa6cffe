# Copyright 2026 Hathor Labs
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
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, field_validator
from structlog import get_logger
from typing_extensions import Self

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'FIXINT_CONFIG_YAML'


class FixintSettings(BaseModel):
    """Library-wide settings, immutable and strict about unknown keys.

    >>> FixintSettings().MAX_BITS
    64
    >>> FixintSettings(MAX_BITS=12)  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    pydantic_core.ValidationError: 1 validation error for FixintSettings
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Largest width, in bits, that `get_codec` will build. The predefined codecs go up to 64 bits.
    MAX_BITS: int = 64

    @field_validator('MAX_BITS')
    @classmethod
    def _validate_max_bits(cls, max_bits: int) -> int:
        if max_bits <= 0 or max_bits % 8 != 0:
            raise ValueError(f'MAX_BITS must be a positive multiple of 8, got {max_bits}')
        return max_bits

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> Self:
        """Load and validate settings from a yaml mapping, an empty file gives the defaults."""
        with open(filepath, 'r') as file:
            contents = yaml.safe_load(file)

        if contents is None:
            contents = {}
        if not isinstance(contents, dict):
            raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

        return cls.model_validate(contents)


_global_settings: Optional[FixintSettings] = None


def get_global_settings() -> FixintSettings:
    """
    Returns the process-wide settings.

    They are read once from the yaml file named by the 'FIXINT_CONFIG_YAML' env var, the built-in defaults are used when
    it isn't set.
    """
    global _global_settings
    if _global_settings is None:
        filepath = os.environ.get(CONFIG_YAML_ENV_VAR)
        if filepath:
            _global_settings = FixintSettings.from_yaml(filepath=filepath)
        else:
            _global_settings = FixintSettings()
        logger.debug('settings loaded', source=filepath, max_bits=_global_settings.MAX_BITS)
    return _global_settings


def reset_global_settings() -> None:
    """Forget the loaded settings, the next call to get_global_settings() reads them again."""
    global _global_settings
    _global_settings = None
