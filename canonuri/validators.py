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

"""URI invariant checks."""

from __future__ import annotations

import re
from typing import Optional

from canonuri import errors
from canonuri.constants import implies_authority

__all__ = ('find_error', 'validate')

_SCHEME_PATTERN = re.compile(r'[a-zA-Z][a-zA-Z0-9+.-]*')


def find_error(
    scheme: str,
    authority: str,
    path: str,
    query: str,
    fragment: str,
    *,
    strict: bool = False,
) -> Optional[errors.InvalidURI]:
    """Check the candidate fields of a URI against the URI invariants.

    Args:
        scheme (str): Candidate scheme.
        authority (str): Candidate (decoded) authority.
        path (str): Candidate (decoded) path.
        query (str): Candidate (decoded) query.
        fragment (str): Candidate (decoded) fragment.

    Keyword Arguments:
        strict (bool): Set to ``True`` to require a scheme
            (default ``False``).

    Returns:
        InvalidURI: An instance of the first violated invariant's error
        type, or ``None`` if the fields describe a valid URI. The error is
        returned, not raised.
    """

    fields = (scheme, authority, path, query, fragment)

    if not scheme:
        if strict:
            return errors.MissingScheme(*fields)
    elif not _SCHEME_PATTERN.fullmatch(scheme):
        return errors.IllegalSchemeCharacters(*fields)

    if path:
        if authority:
            if not path.startswith('/'):
                return errors.InvalidAuthorityPath(*fields)
        elif path.startswith('//') and not implies_authority(scheme):
            # NOTE: Authority-implying schemes always emit the '//' marker
            #   when formatted, so only the remaining schemes are ambiguous.
            return errors.InvalidPathWithoutAuthority(*fields)

    return None


def validate(
    scheme: str,
    authority: str,
    path: str,
    query: str,
    fragment: str,
    *,
    strict: bool = False,
) -> None:
    """Validate the candidate fields of a URI.

    See also: :func:`find_error`.

    Raises:
        InvalidURI: The fields violate one of the URI invariants. The
            concrete type identifies the violated invariant.
    """

    error = find_error(scheme, authority, path, query, fragment, strict=strict)
    if error is not None:
        raise error
