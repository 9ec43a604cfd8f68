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

"""Miscellaneous utilities.

This module provides misc. helpers shared by the formatter, the
filesystem path converter, and :meth:`canonuri.URI.file`.
"""

from __future__ import annotations

import string

__all__ = (
    'drive_letter_offset',
    'is_drive_letter',
    'normalize_drive_letter',
)

_ASCII_LETTERS = frozenset(string.ascii_letters)


def is_drive_letter(char: str) -> bool:
    """Return ``True`` if `char` is a single ASCII letter."""
    return char in _ASCII_LETTERS


def drive_letter_offset(path: str) -> int:
    """Locate a leading drive letter in a path.

    Both the native form (``'c:...'``) and the URI path form
    (``'/c:...'``) are recognized.

    Args:
        path (str): Path to inspect.

    Returns:
        int: The index of the drive letter within `path` (``0`` or ``1``),
        or ``-1`` if `path` does not start with a drive letter.
    """
    if len(path) >= 3 and path[0] == '/' and path[2] == ':':
        return 1 if is_drive_letter(path[1]) else -1

    if len(path) >= 2 and path[1] == ':':
        return 0 if is_drive_letter(path[0]) else -1

    return -1


def normalize_drive_letter(path: str) -> str:
    """Lower-case the drive letter of a path, if it has one.

    Args:
        path (str): A native (``'C:/x'``) or URI-style (``'/C:/x'``) path.

    Returns:
        str: `path` with its drive letter lower-cased, or `path` itself if
        it does not start with a drive letter.
    """
    offset = drive_letter_offset(path)

    # PERF: Avoid creating a new string when the letter is already lowercase.
    if offset == -1 or path[offset].islower():
        return path

    return path[:offset] + path[offset].lower() + path[offset + 1 :]
