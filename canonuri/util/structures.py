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

"""Data structures.

This module provides the plain aggregates used to build and derive
:class:`~canonuri.URI` values. These classes are hoisted into the
`canonuri` module for convenience::

    import canonuri

    parts = canonuri.URIComponents(scheme='http', authority='example.org')
    uri = canonuri.URI.from_components(parts)

"""

from __future__ import annotations

import dataclasses
from typing import Optional, Tuple

__all__ = ('URIChange', 'URIComponents')


@dataclasses.dataclass
class URIComponents:
    """The five fields of a URI, as plain (decoded) strings.

    Unlike :class:`~canonuri.URI`, an instance of this class is not
    validated; it is merely a convenient way to pass already-known parts
    to :meth:`~canonuri.URI.from_components` without re-parsing a string.
    """

    scheme: str = ''
    authority: str = ''
    path: str = ''
    query: str = ''
    fragment: str = ''

    def as_tuple(self) -> Tuple[str, str, str, str, str]:
        return (self.scheme, self.authority, self.path, self.query, self.fragment)


@dataclasses.dataclass(frozen=True)
class URIChange:
    """A set of optional per-field overrides.

    Fields left as ``None`` inherit the value of the URI that the change is
    applied to (see also :meth:`~canonuri.URI.with_`). Note that an empty
    string is a real override, e.g., ``URIChange(authority='')`` clears the
    authority.
    """

    scheme: Optional[str] = None
    authority: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def is_empty(self) -> bool:
        """Return ``True`` if no field is overridden."""
        return (
            self.scheme is None
            and self.authority is None
            and self.path is None
            and self.query is None
            and self.fragment is None
        )

    def merged(self, other: URIChange) -> URIChange:
        """Return a new change where the overrides set in `other` take precedence."""
        return URIChange(
            scheme=self.scheme if other.scheme is None else other.scheme,
            authority=self.authority if other.authority is None else other.authority,
            path=self.path if other.path is None else other.path,
            query=self.query if other.query is None else other.query,
            fragment=self.fragment if other.fragment is None else other.fragment,
        )
