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

"""URI class."""

from __future__ import annotations

from typing import Any, Optional, Tuple

import canonuri
from canonuri.constants import DEFAULT_SCHEME
from canonuri.constants import implies_authority
from canonuri.constants import Platform
from canonuri.formatter import format_uri
from canonuri.parser import split
from canonuri.util import fspath
from canonuri.util.structures import URIChange
from canonuri.util.structures import URIComponents
from canonuri.validators import find_error

__all__ = ('URI',)


class URI:
    """An immutable, validated Uniform Resource Identifier.

    A URI is made of five components::

          foo://example.com:8042/over/there?name=ferret#nose
          \\_/   \\______________/\\_________/ \\_________/ \\__/
           |           |            |            |        |
        scheme     authority       path        query   fragment

    All components except the scheme hold decoded text; percent-encoding
    is only applied when the URI is serialized via :meth:`to_string`.

    URIs compare and hash by value, so they may be used as dictionary keys
    or set members.

    Args:
        scheme (str): The URI scheme, e.g., ``'http'``. When empty, the
            scheme defaults to ``'file'`` unless `strict` is set.
        authority (str): The (decoded) authority, e.g., ``'example.com:80'``.
        path (str): The (decoded) path. For the ``file``, ``http`` and
            ``https`` schemes, an empty path becomes ``'/'`` and a relative
            path is made absolute.
        query (str): The (decoded) query string, without the leading ``?``.
        fragment (str): The (decoded) fragment, without the leading ``#``.

    Keyword Arguments:
        strict (bool): Set to ``True`` to raise :class:`~.MissingScheme`
            rather than defaulting an empty scheme (default ``False``).

    Raises:
        InvalidURI: The components do not describe a valid URI. The
            concrete error type identifies the violated rule.
    """

    __slots__ = ('_scheme', '_authority', '_path', '_query', '_fragment')

    def __init__(
        self,
        scheme: str = '',
        authority: str = '',
        path: str = '',
        query: str = '',
        fragment: str = '',
        *,
        strict: bool = False,
    ) -> None:
        if not scheme and not strict:
            scheme = DEFAULT_SCHEME

        if implies_authority(scheme):
            if not path:
                path = '/'
            elif path[0] != '/':
                path = '/' + path

        error = find_error(scheme, authority, path, query, fragment, strict=strict)
        if error is not None:
            canonuri._logger.debug('Rejected URI candidate: %s', error)
            raise error

        self._scheme = scheme
        self._authority = authority
        self._path = path
        self._query = query
        self._fragment = fragment

    @classmethod
    def parse(cls, value: str, *, strict: bool = False) -> URI:
        """Create a URI from its string representation.

        The authority, path, query and fragment are percent-decoded;
        malformed escapes are kept verbatim rather than raising.

        Args:
            value (str): The string to parse, e.g.,
                ``'https://example.com/some%20path?q=1#top'``.

        Keyword Arguments:
            strict (bool): Set to ``True`` to require a scheme
                (default ``False``).

        Returns:
            URI: A new instance.
        """
        return cls(*split(value), strict=strict)

    @classmethod
    def file(cls, native_path: str, platform: Platform) -> URI:
        """Create a ``file`` URI from a native filesystem path.

        Args:
            native_path (str): A native path, e.g., ``'/usr/home'`` or
                ``'c:\\win\\path'``. The path is used as-is; in particular,
                it is not percent-decoded.
            platform (Platform): Host path semantics to apply. On
                Windows, backslashes are treated as separators and UNC paths
                contribute their host as the URI authority.

        Returns:
            URI: A new instance with the ``file`` scheme.
        """
        authority, path = fspath.from_native(native_path, platform)
        return cls('file', authority, path)

    @classmethod
    def from_components(
        cls, components: URIComponents, *, strict: bool = False
    ) -> URI:
        """Create a URI from already-decoded components.

        Args:
            components (URIComponents): The components to validate.

        Keyword Arguments:
            strict (bool): Set to ``True`` to require a scheme
                (default ``False``).

        Returns:
            URI: A new instance.
        """
        return cls(*components.as_tuple(), strict=strict)

    @staticmethod
    def is_uri(thing: Any) -> bool:
        """Return ``True`` if `thing` is a :class:`URI` instance."""
        return isinstance(thing, URI)

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def authority(self) -> str:
        return self._authority

    @property
    def path(self) -> str:
        return self._path

    @property
    def query(self) -> str:
        return self._query

    @property
    def fragment(self) -> str:
        return self._fragment

    def with_(
        self,
        change: Optional[URIChange] = None,
        *,
        scheme: Optional[str] = None,
        authority: Optional[str] = None,
        path: Optional[str] = None,
        query: Optional[str] = None,
        fragment: Optional[str] = None,
    ) -> URI:
        """Derive a new URI by overriding some of the components of this one.

        Overrides may be given as a :class:`~.URIChange`, as keyword
        arguments, or both, in which case the keyword arguments take
        precedence. A component that is not overridden (``None``) keeps its
        current value; an empty string clears it.

        The derived URI is validated in non-strict mode.

        Args:
            change (URIChange): A set of overrides (default ``None``).

        Keyword Arguments:
            scheme (str): New scheme.
            authority (str): New (decoded) authority.
            path (str): New (decoded) path.
            query (str): New (decoded) query.
            fragment (str): New (decoded) fragment.

        Returns:
            URI: A new instance, or this instance itself if none of the
            components would change.

        Raises:
            InvalidURI: The resulting components do not describe a valid URI.
        """

        overrides = URIChange(
            scheme=scheme,
            authority=authority,
            path=path,
            query=query,
            fragment=fragment,
        )
        if change is not None:
            overrides = change.merged(overrides)

        if overrides.is_empty():
            return self

        components = (
            self._scheme if overrides.scheme is None else overrides.scheme,
            self._authority if overrides.authority is None else overrides.authority,
            self._path if overrides.path is None else overrides.path,
            self._query if overrides.query is None else overrides.query,
            self._fragment if overrides.fragment is None else overrides.fragment,
        )

        if components == self._as_tuple():
            return self

        return URI(*components)

    def to_string(self, skip_encoding: bool = False) -> str:
        """Serialize this URI.

        Args:
            skip_encoding (bool): Set to ``True`` to render the URI for
                display, escaping only ``#`` and ``?`` where they would be
                ambiguous (default ``False``). Such strings are not
                guaranteed to round-trip through :meth:`parse`.

        Returns:
            str: The string representation of this URI.
        """
        return format_uri(self, skip_encoding=skip_encoding)

    def fs_path(
        self,
        platform: Platform,
        *,
        keep_drive_letter_casing: bool = False,
    ) -> str:
        """Render this URI as a native filesystem path.

        The scheme is not checked; any URI is rendered from its authority
        and path. Percent-escapes remaining in the path are decoded.

        Args:
            platform (Platform): Host path semantics to apply.

        Keyword Arguments:
            keep_drive_letter_casing (bool): Set to ``True`` to leave the
                case of a Windows drive letter as-is (default ``False``).

        Returns:
            str: The native path, e.g., ``'c:\\win\\path'`` or
            ``'\\\\server\\share'`` on Windows.
        """
        return fspath.to_native(
            self._authority,
            self._path,
            platform,
            keep_drive_letter_casing=keep_drive_letter_casing,
        )

    def to_components(self) -> URIComponents:
        """Return the components of this URI as :class:`~.URIComponents`."""
        return URIComponents(*self._as_tuple())

    def _as_tuple(self) -> Tuple[str, str, str, str, str]:
        return (
            self._scheme,
            self._authority,
            self._path,
            self._query,
            self._fragment,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URI):
            return NotImplemented

        return self._as_tuple() == other._as_tuple()

    def __hash__(self) -> int:
        return hash(self._as_tuple())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return '<{}: {!r}>'.format(self.__class__.__name__, self.to_string())
