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

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Real


def is_number(value) -> bool:
    """True for real numbers that are not bools and not NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # ints are always finite; math.isnan would overflow on very large ones
    if isinstance(value, int):
        return True
    return not math.isnan(value)


def _is_finite(value) -> bool:
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def is_multiple_of(value: float, multiple_of: float) -> bool:
    """Test whether ``value`` is an integer multiple of ``multiple_of``.

    A ``multiple_of`` of 0 disables the constraint. Infinite values never
    qualify, since their remainder is undefined.
    """
    if multiple_of == 0:
        return True
    if not _is_finite(value) or not _is_finite(multiple_of):
        return False

    if isinstance(value, int) and isinstance(multiple_of, int):
        return value % multiple_of == 0
    if isinstance(value, int) or isinstance(multiple_of, int):
        # Mixed int/float operands: exact rational remainder, no float overflow
        return Fraction(value) % Fraction(multiple_of) == 0
    # abs() folds a -0.0 remainder into 0.0
    return abs(math.fmod(value, multiple_of)) == 0
