import pytest

import canonuri


class TestSlots:
    def test_slots_uri(self):
        uri = canonuri.URI.parse('foo://a/b')

        with pytest.raises(AttributeError):
            uri.doesnt = 'exist'

    def test_slots_converter(self, platform):
        converter = canonuri.FilesystemPathConverter(platform)

        with pytest.raises(AttributeError):
            converter.doesnt = 'exist'

    def test_converter_options_are_settable(self):
        converter = canonuri.FilesystemPathConverter()
        converter.platform = canonuri.Platform.WINDOWS
        converter.keep_drive_letter_casing = True

        uri = canonuri.URI.parse('file:///C:/x')
        assert converter.fs_path(uri) == 'C:\\x'
