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

"""Path utilities.

Functions that derive a new URI from the path of an existing one. In all
cases ``'/'`` is the only separator recognized, regardless of the host
platform, and every component other than the path is carried over
unchanged.

These functions are hoisted into the `canonuri` package namespace::

    import canonuri

    uri = canonuri.URI.parse('foo://a/foo/bar/')
    canonuri.join_path(uri, 'x', 'y')  # <URI: 'foo://a/foo/bar/x/y'>
"""

from __future__ import annotations

from typing import List, overload, Union

from canonuri.uri import URI

__all__ = (
    'basename',
    'dirname',
    'extname',
    'join_path',
    'normalize_path',
    'resolve_path',
)


@overload
def normalize_path(path: str) -> str: ...


@overload
def normalize_path(path: URI) -> URI: ...


def normalize_path(path: Union[str, URI]) -> Union[str, URI]:
    """Normalize a path.

    Empty and ``.`` segments are dropped, and each ``..`` segment removes
    the segment that precedes it. A ``..`` that cannot be resolved is kept
    in a relative path and dropped from an absolute one. A leading slash is
    kept, and so is a trailing slash unless the result is empty.

    Args:
        path: Either a path string, or a :class:`~.URI` whose path is to be
            normalized.

    Returns:
        The normalized path, or a new URI with the normalized path when a
        URI was passed.
    """

    if isinstance(path, URI):
        return path.with_(path=normalize_path(path.path))

    if not path:
        return ''

    is_absolute = path.startswith('/')

    stack: List[str] = []
    for segment in path.split('/'):
        if not segment or segment == '.':
            continue

        if segment == '..':
            if stack and stack[-1] != '..':
                stack.pop()
            elif not is_absolute:
                stack.append(segment)
        else:
            stack.append(segment)

    normalized = '/'.join(stack)
    if is_absolute:
        normalized = '/' + normalized

    if normalized and path.endswith('/') and not normalized.endswith('/'):
        normalized += '/'

    return normalized


def join_path(uri: URI, *segments: str) -> URI:
    """Join one or more path segments to the path of a URI.

    The segments are appended with exactly one ``/`` between them, and the
    result is normalized (see :func:`normalize_path`). The result ends with
    a slash only if the last segment does; when no segment is given, the
    path is merely normalized.

    Args:
        uri (URI): The base URI.
        *segments (str): Path segments to append. A leading slash on a
            segment does not make it absolute.

    Returns:
        URI: A new URI with the joined path.
    """

    joined = '/'.join(part for part in (uri.path,) + segments if part)

    # NOTE: A URI with an authority can only have an absolute path.
    if uri.authority and joined and not joined.startswith('/'):
        joined = '/' + joined

    joined = normalize_path(joined)

    if segments:
        if segments[-1].endswith('/'):
            if joined and not joined.endswith('/'):
                joined += '/'
        elif len(joined) > 1 and joined.endswith('/'):
            joined = joined[:-1]

    return uri.with_(path=joined)


def resolve_path(uri: URI, *segments: str) -> URI:
    """Resolve one or more paths against the path of a URI.

    Each segment is resolved in turn, the way a shell would ``cd`` into
    it: a segment starting with ``/`` replaces the path accumulated so far,
    while any other segment is appended to it. ``.`` and ``..`` are
    resolved as they are encountered, and repeated slashes are collapsed.

    The resolved path never has a trailing slash (unless it is the root).
    If the base path was relative and the URI has no authority, the
    result is relative as well.

    Args:
        uri (URI): The base URI.
        *segments (str): Paths to resolve.

    Returns:
        URI: A new URI with the resolved path.
    """

    base = uri.path
    if not base.startswith('/'):
        base = '/' + base

    stack: List[str] = []

    for path in (base,) + segments:
        if path.startswith('/'):
            stack.clear()

        for part in path.split('/'):
            if not part or part == '.':
                continue

            if part == '..':
                if stack:
                    stack.pop()
            else:
                stack.append(part)

    resolved = '/' + '/'.join(stack)

    if not uri.path.startswith('/') and not uri.authority:
        resolved = resolved[1:]

    return uri.with_(path=resolved)


def dirname(uri: URI) -> URI:
    """Return a URI for the parent directory of a URI's path.

    Trailing slashes are ignored, as with the Unix ``dirname`` command. The
    parent of a top-level entry (e.g., ``/some``) is the root; the parent
    of a single relative segment is the empty path.

    Args:
        uri (URI): The URI to inspect.

    Returns:
        URI: A new URI for the parent directory, or `uri` itself if its
        path is empty or the root.
    """

    path = uri.path
    if not path or path == '/':
        return uri

    trimmed = path.rstrip('/') or '/'

    pos = trimmed.rfind('/')
    if pos == -1:
        parent = ''
    elif pos == 0:
        parent = '/'
    else:
        parent = trimmed[:pos]

    return uri.with_(path=parent)


def basename(uri: URI) -> str:
    """Return the last segment of a URI's path.

    Trailing slashes are ignored, as with the Unix ``basename`` command.

    Args:
        uri (URI): The URI to inspect.

    Returns:
        str: The last path segment, or an empty string if the path is empty
        or the root.
    """

    trimmed = uri.path.rstrip('/')
    return trimmed[trimmed.rfind('/') + 1 :]


def extname(uri: URI) -> str:
    """Return the extension of the last segment of a URI's path.

    The extension starts at the last ``.`` of the segment. A leading dot
    does not count, so a hidden file such as ``.profile`` has no
    extension.

    Args:
        uri (URI): The URI to inspect.

    Returns:
        str: The extension, including its dot (e.g., ``'.txt'``), or an
        empty string.
    """

    name = basename(uri)

    pos = name.rfind('.')
    if pos > 0:
        return name[pos:]

    return ''
