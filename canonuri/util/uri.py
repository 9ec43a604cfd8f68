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

"""Percent-encoding utilities.

This module provides the low-level functions used to encode and decode the
individual components of a URI. These functions are not hoisted into the
`canonuri` module, and so must be explicitly imported::

    from canonuri.util import uri

    uri.encode_component('/some path/', is_path=True)  # '/some%20path/'
    uri.decode('c%23')  # 'c#'
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional, Tuple

import canonuri

__all__ = (
    'ENCODE_TABLE',
    'decode',
    'encode_component',
    'encode_minimal',
    'split_authority',
)


# NOTE: See also RFC 3986, Section 2.3
_UNRESERVED = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~'

# Additional characters that are left as-is in a given context.
_PATH_ALLOWED = '/'
_AUTHORITY_ALLOWED = ':[]'

ENCODE_TABLE: Dict[str, str] = {
    ':': '%3A',
    '/': '%2F',
    '?': '%3F',
    '#': '%23',
    '[': '%5B',
    ']': '%5D',
    '@': '%40',
    '!': '%21',
    '$': '%24',
    '&': '%26',
    "'": '%27',
    '(': '%28',
    ')': '%29',
    '*': '%2A',
    '+': '%2B',
    ',': '%2C',
    ';': '%3B',
    '=': '%3D',
    ' ': '%20',
    '%': '%25',
}
"""Fixed escapes for the reserved punctuation, space, and ``%`` itself."""

_ENCODED_RUN = re.compile(r'(?:%[0-9A-Fa-f]{2})+')


def _create_char_encoder(allowed_chars: str) -> Callable[[int], str]:
    lookup = {}

    for code_point in range(256):
        char = chr(code_point)
        if char in allowed_chars:
            encoded_char = char
        else:
            # NOTE: Code points above 0x7F only ever show up here as
            #   individual bytes of a UTF-8 sequence, never as characters,
            #   so they always fall through to the generic escape.
            encoded_char = ENCODE_TABLE.get(char) or '%{0:02X}'.format(code_point)

        lookup[code_point] = encoded_char

    return lookup.__getitem__


def _create_str_encoder(allowed_chars: str) -> Callable[[str], str]:
    encode_char = _create_char_encoder(allowed_chars)

    def encoder(value: str) -> str:
        # PERF: Very fast way to check whether there is anything to encode,
        #   learned from urllib.quote.
        if not value.rstrip(allowed_chars):
            return value

        # NOTE: Lone surrogates (e.g., smuggled in via surrogateescape'd
        #   native paths) are passed through rather than raising, so that
        #   encoding is total just like decoding.
        data = value.encode('utf-8', 'surrogatepass')

        # PERF: map() is faster than a list comp or a generator comp.
        return ''.join(map(encode_char, data))

    return encoder


_ENCODERS: Dict[Tuple[bool, bool], Callable[[str], str]] = {
    (False, False): _create_str_encoder(_UNRESERVED),
    (True, False): _create_str_encoder(_UNRESERVED + _PATH_ALLOWED),
    (False, True): _create_str_encoder(_UNRESERVED + _AUTHORITY_ALLOWED),
    (True, True): _create_str_encoder(
        _UNRESERVED + _PATH_ALLOWED + _AUTHORITY_ALLOWED
    ),
}


def encode_component(
    value: str, is_path: bool = False, is_authority: bool = False
) -> str:
    """Percent-encode a single URI component.

    Unreserved characters (RFC 3986, Section 2.3) are always left as-is.
    Reserved punctuation, space, and ``%`` are replaced by their fixed
    escape from :data:`ENCODE_TABLE`; everything else, including every
    non-ASCII character, is encoded as the UTF-8 bytes of the character.
    Escapes always use uppercase hex digits.

    Args:
        value (str): The decoded component to encode.

    Keyword Arguments:
        is_path (bool): Set to ``True`` to preserve ``/`` as a segment
            separator (default ``False``).
        is_authority (bool): Set to ``True`` to preserve ``:``, ``[`` and
            ``]``, as used by ports and IPv6 literals (default ``False``).

    Returns:
        str: The encoded component.
    """
    return _ENCODERS[(bool(is_path), bool(is_authority))](value)


def encode_minimal(value: str) -> str:
    """Escape only the ``#`` and ``?`` characters in a URI component.

    This is meant for rendering URIs for humans: spaces and non-ASCII text
    are left untouched, so the result is readable but not guaranteed to
    survive a round trip through :meth:`canonuri.URI.parse`.

    Args:
        value (str): The decoded component to encode.

    Returns:
        str: `value` with ``#`` and ``?`` percent-encoded.
    """

    # PERF: Don't take the time to instantiate a new string unless we have to.
    if '#' not in value and '?' not in value:
        return value

    return value.replace('#', '%23').replace('?', '%3F')


def _valid_tail_start(data: bytes) -> int:
    """Return the offset of the longest suffix of `data` that is valid UTF-8."""

    end = len(data)
    while end:
        # NOTE: Character boundaries can be recovered from the end since
        #   UTF-8 is self-synchronizing; a character has at most three
        #   continuation bytes (0x80-0xBF) after its lead byte.
        start = end - 1
        while start > max(end - 4, 0) and 0x80 <= data[start] < 0xC0:
            start -= 1

        try:
            data[start:end].decode('utf-8')
        except UnicodeDecodeError:
            break

        end = start

    return end


def _decode_run(run: str) -> str:
    # NOTE: Every escape in the run stands for exactly one byte, so the
    #   i-th byte of data corresponds to run[3 * i:3 * i + 3].
    data = bytes.fromhex(run.replace('%', ''))

    # NOTE: Escapes before the longest valid tail are kept verbatim.
    pos = _valid_tail_start(data)
    if not pos:
        return data.decode('utf-8')

    canonuri._logger.debug(
        'Left %d malformed percent-escape(s) undecoded in %r', pos, run
    )

    return run[: 3 * pos] + data[pos:].decode('utf-8')


def decode(encoded: str) -> str:
    """Decode percent-encoded characters, gracefully.

    Contiguous runs of ``%XX`` escapes are decoded as UTF-8 byte sequences.
    If a run is not valid UTF-8, its first escape is emitted verbatim and
    decoding is retried on the remainder of the run, until the run is
    consumed. Escapes that are not hexadecimal (e.g., ``'%zz'``) and stray
    ``%`` characters are left untouched. Unlike `urllib.parse.unquote_plus`,
    ``+`` is never converted to a space.

    This function never raises on any ``str`` input.

    Args:
        encoded (str): A percent-encoded URI component.

    Returns:
        str: The decoded component.
    """

    # PERF: Short-circuit if we can.
    if '%' not in encoded:
        return encoded

    return _ENCODED_RUN.sub(lambda match: _decode_run(match.group(0)), encoded)


def split_authority(authority: str) -> Tuple[Optional[str], str, str]:
    """Split an authority into its user-info, host, and port parts.

    The host may be a domain name or an IP address; bracketed IPv6 literals
    are supported, and bare IPv6 addresses (containing more than one colon)
    are assumed to carry no port.

    Args:
        authority (str): The (decoded) authority to split.

    Returns:
        tuple: A (*userinfo*, *host*, *port*) tuple. *userinfo* is ``None``
        when the authority has no ``@``; *port* includes its leading colon,
        or is empty if there is no port.
    """

    userinfo: Optional[str] = None
    pos = authority.rfind('@')
    if pos != -1:
        userinfo = authority[:pos]
        authority = authority[pos + 1 :]

    if authority.startswith('['):
        # IPv6 literal, possibly with a port
        pos = authority.rfind(']:')
        if pos != -1:
            return (userinfo, authority[: pos + 1], authority[pos + 1 :])
        return (userinfo, authority, '')

    pos = authority.rfind(':')
    if (pos == -1) or (pos != authority.find(':')):
        # Bare domain name or IP address
        return (userinfo, authority, '')

    # NOTE: At this point we know that there was only a single colon, so we
    #   should have an IPv4 address or a domain name plus a port.
    return (userinfo, authority[:pos], authority[pos:])
