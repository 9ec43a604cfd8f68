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

"""Filesystem path converter."""

from __future__ import annotations

from canonuri.constants import Platform
from canonuri.uri import URI

__all__ = ('FilesystemPathConverter',)


class FilesystemPathConverter:
    """Converts between ``file`` URIs and native paths for a given platform.

    The host path semantics are bound once, when the converter is created,
    so that code working with paths for a particular platform does not have
    to thread the selector through every call. Converters for different
    platforms may be used side by side::

        posix = canonuri.FilesystemPathConverter()
        windows = canonuri.FilesystemPathConverter(canonuri.Platform.WINDOWS)

        uri = windows.file('\\\\server\\share\\notes.txt')
        posix.fs_path(uri)  # '//server/share/notes.txt'

    Args:
        platform (Platform): Host path semantics to apply
            (default ``Platform.POSIX``).
        keep_drive_letter_casing (bool): Set to ``True`` to leave the case
            of Windows drive letters as-is when rendering native paths
            (default ``False``).
    """

    platform: Platform
    """Host path semantics applied by this converter."""
    keep_drive_letter_casing: bool
    """Whether :meth:`fs_path` leaves the case of drive letters as-is."""

    __slots__ = ('platform', 'keep_drive_letter_casing')

    def __init__(
        self,
        platform: Platform = Platform.POSIX,
        keep_drive_letter_casing: bool = False,
    ) -> None:
        self.platform = platform
        self.keep_drive_letter_casing = keep_drive_letter_casing

    def file(self, native_path: str) -> URI:
        """Create a ``file`` URI from a native path.

        See also: :meth:`canonuri.URI.file`.
        """
        return URI.file(native_path, self.platform)

    def fs_path(self, uri: URI) -> str:
        """Render a URI as a native path.

        See also: :meth:`canonuri.URI.fs_path`.
        """
        return uri.fs_path(
            self.platform, keep_drive_letter_casing=self.keep_drive_letter_casing
        )

    def __repr__(self) -> str:
        return '{}(platform={}, keep_drive_letter_casing={})'.format(
            self.__class__.__name__, self.platform, self.keep_drive_letter_casing
        )
