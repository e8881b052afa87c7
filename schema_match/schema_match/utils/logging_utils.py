# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import sys

CLI_LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_cli_logging(verbose: bool = False) -> None:
    """Route schema-match diagnostics: warnings and errors to stderr, the rest to stdout.

    Check results printed with ``--format json`` stay parseable as long as
    stderr is kept apart.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    formatter = logging.Formatter(CLI_LOG_FORMAT)

    for stream, accepts in (
        (sys.stdout, lambda record: record.levelno < logging.WARNING),
        (sys.stderr, lambda record: record.levelno >= logging.WARNING),
    ):
        handler = logging.StreamHandler(stream=stream)
        handler.addFilter(accepts)
        handler.setFormatter(formatter)
        root.addHandler(handler)
