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

"""URI validation errors.

All classes are available directly from the `canonuri` package
namespace::

    import canonuri

    try:
        uri = canonuri.URI.parse(text, strict=True)
    except canonuri.MissingScheme:
        ...

Every error carries the candidate field values that failed validation, so
that callers can report exactly what was rejected.
"""

from __future__ import annotations

from canonuri.util.structures import URIComponents

__all__ = (
    'IllegalSchemeCharacters',
    'InvalidAuthorityPath',
    'InvalidPathWithoutAuthority',
    'InvalidURI',
    'MissingScheme',
)


class InvalidURI(ValueError):
    """The candidate URI fields violate one of the URI invariants.

    Args:
        scheme (str): Candidate scheme.
        authority (str): Candidate (decoded) authority.
        path (str): Candidate (decoded) path.
        query (str): Candidate (decoded) query.
        fragment (str): Candidate (decoded) fragment.
    """

    message = 'Invalid URI'

    def __init__(
        self,
        scheme: str = '',
        authority: str = '',
        path: str = '',
        query: str = '',
        fragment: str = '',
    ) -> None:
        self.scheme = scheme
        self.authority = authority
        self.path = path
        self.query = query
        self.fragment = fragment

        super().__init__(
            '{}: {{scheme: {!r}, authority: {!r}, path: {!r}, '
            'query: {!r}, fragment: {!r}}}'.format(
                self.message, scheme, authority, path, query, fragment
            )
        )

    @property
    def components(self) -> URIComponents:
        """The rejected candidate, as :class:`~canonuri.URIComponents`."""
        return URIComponents(
            self.scheme, self.authority, self.path, self.query, self.fragment
        )


class MissingScheme(InvalidURI):
    """A scheme is required (strict mode), but none was given."""

    message = 'Scheme is missing'


class IllegalSchemeCharacters(InvalidURI):
    """The scheme does not match ``ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``."""

    message = 'Scheme contains illegal characters'


class InvalidAuthorityPath(InvalidURI):
    """An authority is present, but the path does not begin with a slash."""

    message = (
        'If a URI contains an authority component, then the path component '
        'must either be empty or begin with a slash ("/") character'
    )


class InvalidPathWithoutAuthority(InvalidURI):
    """No authority is present, but the path begins with two slashes."""

    message = (
        'If a URI does not contain an authority component, then the path '
        'cannot begin with two slash characters ("//")'
    )
