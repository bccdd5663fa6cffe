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

import logging
import sys
from enum import IntEnum, auto
from typing import Any

import structlog
from typing_extensions import assert_never


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def setup_logging(*, logging_output: LoggingOutput = LoggingOutput.PRETTY, debug: bool = False) -> None:
    """Configure where fixint's structlog events go.

    fixint only logs at debug level, when settings are loaded and when `get_codec` builds a codec that isn't predefined.
    Applications that configure structlog themselves don't need to call this.
    """
    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S'),
    ]
    logger_factory: Any = structlog.PrintLoggerFactory(sys.stderr)

    match logging_output:
        case LoggingOutput.NULL:
            logger_factory = structlog.ReturnLoggerFactory()
        case LoggingOutput.PRETTY:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        case LoggingOutput.JSON:
            processors.append(structlog.processors.JSONRenderer())
        case _:
            assert_never(logging_output)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        logger_factory=logger_factory,
    )
