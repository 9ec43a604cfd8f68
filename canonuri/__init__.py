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

"""Primary package for canonuri, a canonical URI value type.

canonuri parses, validates, formats and derives immutable URI values, and
converts them to and from native filesystem paths. The `canonuri` package
can be used to directly access most of the library's classes, functions,
and constants::

    import canonuri

    uri = canonuri.URI.parse('file:///c:/win/path')
    uri.fs_path(canonuri.Platform.WINDOWS)  # 'c:\\win\\path'
"""

import logging as _logging

__all__ = (
    # URI interface
    'URI',
    'URIChange',
    'URIComponents',
    'FilesystemPathConverter',
    # Public constants
    'AUTHORITY_SCHEMES',
    'DEFAULT_SCHEME',
    'Platform',
    # Path utilities
    'basename',
    'dirname',
    'extname',
    'join_path',
    'normalize_path',
    'resolve_path',
    # Error classes
    'IllegalSchemeCharacters',
    'InvalidAuthorityPath',
    'InvalidPathWithoutAuthority',
    'InvalidURI',
    'MissingScheme',
    # Utilities
    'util',
    # Package version
    '__version__',
)

# NOTE: The logger is defined before the submodules are imported, since
#   they look it up through the package namespace at call time.
_logger = _logging.getLogger('canonuri')
_logger.addHandler(_logging.NullHandler())

from canonuri import util  # NOQA: E402
from canonuri.constants import AUTHORITY_SCHEMES  # NOQA: E402
from canonuri.constants import DEFAULT_SCHEME  # NOQA: E402
from canonuri.constants import Platform  # NOQA: E402
from canonuri.errors import IllegalSchemeCharacters  # NOQA: E402
from canonuri.errors import InvalidAuthorityPath  # NOQA: E402
from canonuri.errors import InvalidPathWithoutAuthority  # NOQA: E402
from canonuri.errors import InvalidURI  # NOQA: E402
from canonuri.errors import MissingScheme  # NOQA: E402
from canonuri.filesystem import FilesystemPathConverter  # NOQA: E402
from canonuri.paths import basename  # NOQA: E402
from canonuri.paths import dirname  # NOQA: E402
from canonuri.paths import extname  # NOQA: E402
from canonuri.paths import join_path  # NOQA: E402
from canonuri.paths import normalize_path  # NOQA: E402
from canonuri.paths import resolve_path  # NOQA: E402
from canonuri.uri import URI  # NOQA: E402
from canonuri.util.structures import URIChange  # NOQA: E402
from canonuri.util.structures import URIComponents  # NOQA: E402

# Package version
from canonuri.version import __version__  # NOQA: E402
