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

"""URI serialization."""

from __future__ import annotations

from typing import Callable, List, TYPE_CHECKING

from canonuri.constants import implies_authority
from canonuri.util.misc import normalize_drive_letter
from canonuri.util.uri import encode_component
from canonuri.util.uri import encode_minimal
from canonuri.util.uri import split_authority

if TYPE_CHECKING:
    from canonuri.uri import URI
    from canonuri.util.structures import URIComponents

__all__ = ('format_uri',)


def _encode_minimal(value: str, is_path: bool, is_authority: bool) -> str:
    return encode_minimal(value)


def _format_authority(
    authority: str, encoder: Callable[[str, bool, bool], str]
) -> str:
    userinfo, host, port = split_authority(authority)

    parts: List[str] = []

    # NOTE: The user-info is case-sensitive, unlike the rest of the
    #   authority.
    if userinfo is not None:
        user, colon, password = userinfo.rpartition(':')
        if colon:
            parts.append(encoder(user, False, False))
            parts.append(':')
            parts.append(encoder(password, False, True))
        else:
            parts.append(encoder(userinfo, False, False))
        parts.append('@')

    parts.append(encoder(host.lower(), False, True))
    # NOTE: The port is not validated, so it has to be encoded like the
    #   host; a numeric port comes out unchanged.
    parts.append(encoder(port.lower(), False, True))

    return ''.join(parts)


def format_uri(uri: URI | URIComponents, skip_encoding: bool = False) -> str:
    """Serialize the components of a URI into a string.

    Args:
        uri: A :class:`~canonuri.URI` (or any object exposing the five URI
            component attributes) to serialize.
        skip_encoding (bool): Set to ``True`` to only escape the characters
            that would otherwise be ambiguous with the URI delimiters
            (default ``False``). The result is meant for display; it is not
            guaranteed to survive a round trip through
            :meth:`~canonuri.URI.parse`.

    Returns:
        str: The formatted URI.
    """

    encoder: Callable[[str, bool, bool], str]
    if skip_encoding:
        encoder = _encode_minimal
    else:
        encoder = encode_component

    parts: List[str] = []

    scheme = uri.scheme
    if scheme:
        parts.append(scheme if skip_encoding else scheme.lower())
        parts.append(':')

    authority = uri.authority
    if authority or implies_authority(scheme):
        parts.append('//')

    if authority:
        parts.append(_format_authority(authority, encoder))

    path = uri.path
    if path:
        parts.append(encoder(normalize_drive_letter(path), True, False))

    query = uri.query
    if query:
        parts.append('?')
        if skip_encoding:
            parts.append(query.replace('#', '%23'))
        else:
            parts.append(encode_component(query))

    fragment = uri.fragment
    if fragment:
        parts.append('#')
        if skip_encoding:
            parts.append(fragment)
        else:
            parts.append(encode_component(fragment))

    return ''.join(parts)
