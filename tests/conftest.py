import random

import pytest

import canonuri


@pytest.fixture(
    params=[canonuri.Platform.POSIX, canonuri.Platform.WINDOWS],
    ids=['posix', 'windows'],
)
def platform(request):
    return request.param


@pytest.fixture()
def converter(platform):
    return canonuri.FilesystemPathConverter(platform)


class _SuiteUtils:
    """Assorted helpers shared by the test modules."""

    # NOTE: Seeded so that a failing property check can be reproduced.
    SEED = 0xC0FFEE

    # Letters are lowercase only, so that no segment can ever look like an
    #   uppercase drive letter (which would be case-folded).
    SEGMENT_CHARS = (
        'abcdefghijklmnopqrstuvwxyz0123456789'
        "-._~!$&'()*+,;=@ "
        'äöüß€ˈ\U0001d11e'
    )

    @classmethod
    def rng(cls):
        return random.Random(cls.SEED)

    @classmethod
    def arbitrary_segments(cls, rng, count, alphabet=None):
        alphabet = alphabet or cls.SEGMENT_CHARS
        return [
            ''.join(rng.choice(alphabet) for _ in range(rng.randint(1, 8)))
            for __ in range(count)
        ]


@pytest.fixture(scope='session')
def util():
    return _SuiteUtils()
