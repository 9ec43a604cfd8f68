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

"""URI grammar parser.

Splits a raw URI string into its five components. No validation is done
here; see :mod:`canonuri.validators`.
"""

from __future__ import annotations

import re
from typing import Tuple

import canonuri
from canonuri.util.uri import decode

__all__ = ('split',)

# NOTE: See also RFC 3986, Appendix B. The scheme group is non-greedy so
#   that it stops at the first colon; the pattern as a whole matches any
#   string, including the empty string.
_URI_PATTERN = re.compile(
    r'^(([^:/?#]+?):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?', re.DOTALL
)

_EMPTY = ('', '', '', '', '')


def split(value: str) -> Tuple[str, str, str, str, str]:
    """Split a raw URI string into its components.

    The authority, path, query, and fragment are percent-decoded
    (see :func:`canonuri.util.uri.decode`); the scheme is returned as-is.
    A string without a colon is treated entirely as a path.

    This function never raises on any ``str`` input.

    Args:
        value (str): The string to split.

    Returns:
        tuple: A (*scheme*, *authority*, *path*, *query*, *fragment*)
        tuple. Absent components are returned as empty strings.
    """

    if not value:
        return _EMPTY

    match = _URI_PATTERN.match(value)
    if match is None:  # pragma: nocover
        canonuri._logger.debug('Unable to split %r into URI components', value)
        return _EMPTY

    scheme, authority, path, query, fragment = match.group(2, 4, 5, 7, 9)

    return (
        scheme or '',
        decode(authority or ''),
        decode(path or ''),
        decode(query or ''),
        decode(fragment or ''),
    )
