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

"""Native filesystem path mapping.

Pure functions translating between a host-native path string and the
(authority, path) pair of a ``file`` URI. The host platform semantics are
always passed in explicitly.
"""

from __future__ import annotations

from typing import Tuple

from canonuri.constants import Platform
from canonuri.util.misc import drive_letter_offset
from canonuri.util.misc import normalize_drive_letter
from canonuri.util.uri import decode

__all__ = ('from_native', 'to_native')


def from_native(native_path: str, platform: Platform) -> Tuple[str, str]:
    """Map a native path onto the authority and path of a ``file`` URI.

    On Windows, backslashes are first converted to forward slashes, and a
    UNC path (``\\\\host\\share\\...``) contributes its host as the
    authority. On POSIX, a leading ``//`` is simply kept as part of the
    path.

    In both cases, a path starting with a drive letter is given a leading
    slash (``'c:/x'`` becomes ``'/c:/x'``), and the drive letter is
    lower-cased.

    Args:
        native_path (str): The native path to map.
        platform (Platform): Host path semantics to apply.

    Returns:
        tuple: An (*authority*, *path*) tuple. The path is not yet made
        absolute if it is relative; see :class:`~canonuri.URI`.
    """

    path = native_path
    authority = ''

    if platform.is_windows:
        path = path.replace('\\', '/')

        if path[:2] == '//':
            pos = path.find('/', 2)
            if pos == -1:
                authority = path[2:]
                path = '/'
            else:
                authority = path[2:pos]
                path = path[pos:] or '/'

    if drive_letter_offset(path) == 0:
        path = '/' + path

    return (authority, normalize_drive_letter(path))


def to_native(
    authority: str,
    path: str,
    platform: Platform,
    keep_drive_letter_casing: bool = False,
) -> str:
    """Render the authority and path of a URI as a native path.

    A non-empty authority is rendered as a UNC prefix (``\\\\authority`` on
    Windows, ``//authority`` on POSIX). Otherwise, on Windows only, a path
    of the form ``/c:/rest`` is unwrapped to ``c:\\rest``. Any
    percent-escapes remaining in the result are decoded gracefully.

    Args:
        authority (str): The (decoded) URI authority.
        path (str): The (decoded) URI path.
        platform (Platform): Host path semantics to apply.
        keep_drive_letter_casing (bool): Set to ``True`` to keep the case of
            an unwrapped drive letter as-is, rather than lower-casing it
            (default ``False``).

    Returns:
        str: The native path.
    """

    if authority:
        value = '//' + authority + path
    elif platform.is_windows and drive_letter_offset(path) == 1:
        value = path[1:]
        if not keep_drive_letter_casing:
            value = normalize_drive_letter(value)
    else:
        value = path

    value = decode(value)

    if platform.is_windows:
        value = value.replace('/', '\\')

    return value
