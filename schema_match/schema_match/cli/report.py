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

"""Result reporting for the check command."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class CheckResult:
    """Container for the outcome of checking a single data file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the data file being checked
        """
        self.file_path = file_path
        self.matched: Optional[bool] = None
        self.errors: List[str] = []

    @property
    def ok(self) -> bool:
        return self.matched is True and not self.errors

    def add_error(self, message: str):
        self.errors.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'matched': self.matched,
            'errors': list(self.errors),
        }


def summarize(results: List[CheckResult]) -> Dict[str, Any]:
    """Build the JSON report for a batch of results."""
    return {
        'files': len(results),
        'matched': sum(1 for r in results if r.ok),
        'failed': sum(1 for r in results if not r.ok),
        'results': [r.to_dict() for r in results],
    }
