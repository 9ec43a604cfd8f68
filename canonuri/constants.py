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

from enum import Enum
import sys

__all__ = (
    'AUTHORITY_SCHEMES',
    'DEFAULT_SCHEME',
    'Platform',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

CANONURI_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of canonuri supports the current Python version."""

if not CANONURI_SUPPORTED:  # pragma: nocover
    raise ImportError(
        'canonuri requires Python 3.8+. '
        '(Recent Pip should automatically pick a suitable canonuri version.)'
    )

DEFAULT_SCHEME = 'file'
"""Scheme assigned to URIs constructed without one in non-strict mode."""

AUTHORITY_SCHEMES = frozenset(('file', 'http', 'https'))
"""Schemes for which a URI always has an authority component, even if empty.

For these schemes the path is never empty (it is coerced to ``'/'``), a
relative path is made absolute, and the ``//`` authority marker is always
emitted when formatting.
"""


class Platform(Enum):
    """Host path semantics used when converting to and from native paths.

    The selector is never probed from the running interpreter; callers pass
    it in explicitly (or bind it into a
    :class:`~canonuri.filesystem.FilesystemPathConverter`).
    """

    POSIX = 'posix'
    """Forward slash separators; no drive letters or UNC shares."""

    WINDOWS = 'windows'
    """Backslash separators, drive letters and UNC (``\\\\host\\share``) paths."""

    @property
    def is_windows(self) -> bool:
        return self is Platform.WINDOWS


def implies_authority(scheme: str) -> bool:
    """Return ``True`` if `scheme` always carries an authority component."""
    return scheme.lower() in AUTHORITY_SCHEMES
