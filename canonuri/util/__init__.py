# Copyright 2024 by the canonuri authors.
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

"""General utilities.

This package includes the modules that implement the low-level building
blocks of canonuri.

All utilities in the `structures` and `misc` modules are imported directly
into this package for convenience::

    from canonuri import util

    util.normalize_drive_letter('/C:/Windows')  # '/c:/Windows'

Conversely, the `uri` (percent codec) and `fspath` modules must be imported
explicitly::

    from canonuri.util import uri

    decoded = uri.decode('pr%C3%B6jects/c%23')
"""

from canonuri.util.misc import drive_letter_offset
from canonuri.util.misc import is_drive_letter
from canonuri.util.misc import normalize_drive_letter
from canonuri.util.structures import URIChange
from canonuri.util.structures import URIComponents

__all__ = (
    'drive_letter_offset',
    'is_drive_letter',
    'normalize_drive_letter',
    'URIChange',
    'URIComponents',
)
