import pytest

import canonuri
from canonuri import Platform
from canonuri import URI
from canonuri.util import fspath


class TestFile:
    @pytest.mark.parametrize(
        'native,expected',
        [
            ('c:\\win\\path', 'file:///c%3A/win/path'),
            ('c:\\win/path', 'file:///c%3A/win/path'),
            ('C:\\win\\path', 'file:///c%3A/win/path'),
            ('c:\\test\\drive', 'file:///c%3A/test/drive'),
            ('c:\\test with %\\path', 'file:///c%3A/test%20with%20%25/path'),
            ('c:\\test with %25\\path', 'file:///c%3A/test%20with%20%2525/path'),
            ('c:\\test with %25\\c#code', 'file:///c%3A/test%20with%20%2525/c%23code'),
        ],
    )
    def test_windows(self, native, expected):
        assert URI.file(native, Platform.WINDOWS).to_string() == expected

    @pytest.mark.parametrize(
        'native,expected',
        [
            ('c:\\win\\path', 'file:///c%3A%5Cwin%5Cpath'),
            ('c:\\win/path', 'file:///c%3A%5Cwin/path'),
        ],
    )
    def test_posix_backslashes(self, native, expected):
        assert URI.file(native, Platform.POSIX).to_string() == expected

    def test_platform_is_required(self):
        with pytest.raises(TypeError):
            URI.file('/usr/home')

    def test_windows_unc(self):
        uri = URI.file('\\\\sh\u00e4res\\path\\c#\\plugin.json', Platform.WINDOWS)

        assert uri.scheme == 'file'
        assert uri.authority == 'sh\u00e4res'
        assert uri.path == '/path/c#/plugin.json'
        assert uri.query == ''
        assert uri.fragment == ''
        assert uri.to_string() == 'file://sh%C3%A4res/path/c%23/plugin.json'

    def test_windows_unc_admin_share(self):
        uri = URI.file('\\\\localhost\\c$\\GitDevelopment\\express', Platform.WINDOWS)

        assert uri.authority == 'localhost'
        assert uri.path == '/c$/GitDevelopment/express'
        assert uri.to_string() == 'file://localhost/c%24/GitDevelopment/express'
        assert uri.fs_path(Platform.WINDOWS) == (
            '\\\\localhost\\c$\\GitDevelopment\\express'
        )

    @pytest.mark.parametrize('native', ['\\\\shares', '\\\\shares\\'])
    def test_windows_unc_host_only(self, native):
        uri = URI.file(native, Platform.WINDOWS)

        assert uri.authority == 'shares'
        assert uri.path == '/'
        assert uri.to_string() == 'file://shares/'

    def test_posix_double_slash_stays_in_path(self):
        uri = URI.file('//shares/files/p.cs', Platform.POSIX)

        assert uri.authority == ''
        assert uri.path == '//shares/files/p.cs'
        assert uri.to_string() == 'file:////shares/files/p.cs'
        assert URI.parse(uri.to_string()) == uri
        assert uri.fs_path(Platform.POSIX) == '//shares/files/p.cs'

    def test_relative_paths_made_absolute(self, platform):
        assert URI.file('/foo/bar', platform).path == '/foo/bar'
        assert URI.file('foo/bar', platform).path == '/foo/bar'
        assert URI.file('./foo/bar', platform).path == '/./foo/bar'
        assert URI.file('', platform).path == '/'

    def test_drive_letter_lowercased(self, platform):
        assert URI.file('/C:/win/path', platform).path == '/c:/win/path'
        assert URI.file('C:/win/path', platform).path == '/c:/win/path'

    def test_file_is_not_decoded(self, platform):
        assert URI.file('/foo/%A0.txt', platform).path == '/foo/%A0.txt'


class TestFsPath:
    @pytest.mark.parametrize(
        'native,expected',
        [
            ('c:\\win\\path', 'c:\\win\\path'),
            ('c:\\win/path', 'c:\\win\\path'),
            ('c:/win/path', 'c:\\win\\path'),
            ('c:/win/path/', 'c:\\win\\path\\'),
            ('C:/win/path', 'c:\\win\\path'),
            ('/c:/win/path', 'c:\\win\\path'),
            ('./c/win/path', '\\.\\c\\win\\path'),
        ],
    )
    def test_windows(self, native, expected):
        assert URI.file(native, Platform.WINDOWS).fs_path(Platform.WINDOWS) == expected

    @pytest.mark.parametrize(
        'native,expected',
        [
            ('c:/win/path', '/c:/win/path'),
            ('c:/win/path/', '/c:/win/path/'),
            ('C:/win/path', '/c:/win/path'),
            ('/c:/win/path', '/c:/win/path'),
            ('./c/win/path', '/./c/win/path'),
        ],
    )
    def test_posix_keeps_drive_letters_in_path(self, native, expected):
        assert URI.file(native, Platform.POSIX).fs_path(Platform.POSIX) == expected

    def test_platform_is_required(self):
        with pytest.raises(TypeError):
            URI.parse('file:///c:/x').fs_path()

    @pytest.mark.parametrize(
        'platform,expected',
        [
            (Platform.WINDOWS, 'c:\\test\\me'),
            (Platform.POSIX, '/c:/test/me'),
        ],
    )
    def test_parsed(self, platform, expected):
        assert URI.parse('file:///c:/test/me').fs_path(platform) == expected

    @pytest.mark.parametrize(
        'platform,expected',
        [
            (Platform.WINDOWS, '\\\\shares\\files\\c#\\p.cs'),
            (Platform.POSIX, '//shares/files/c#/p.cs'),
        ],
    )
    def test_authority(self, platform, expected):
        uri = URI.parse('file://shares/files/c%23/p.cs')
        assert uri.fs_path(platform) == expected

    def test_authority_any_scheme(self):
        assert URI.parse('foo://a/b').fs_path(Platform.POSIX) == '//a/b'
        assert URI.parse('foo://a').fs_path(Platform.POSIX) == '//a'

    def test_authority_only(self, platform):
        uri = URI.parse('file://%2Fhome%2Fticino%2Fdesktop%2Ftest.cpp')

        assert uri.path == '/'
        expected = '///home/ticino/desktop/test.cpp/'
        if platform.is_windows:
            expected = expected.replace('/', '\\')
        assert uri.fs_path(platform) == expected

    def test_drive_letter_casing(self):
        uri = URI.parse('file:///C:/Win/Path')

        assert uri.fs_path(Platform.WINDOWS) == 'c:\\Win\\Path'
        assert (
            uri.fs_path(Platform.WINDOWS, keep_drive_letter_casing=True)
            == 'C:\\Win\\Path'
        )
        assert uri.fs_path(Platform.POSIX) == '/C:/Win/Path'

    def test_remaining_escapes_decoded(self, platform):
        uri = URI('file', '', '/foo/%C3%A4%20b')
        expected = '/foo/\u00e4 b'
        if platform.is_windows:
            expected = expected.replace('/', '\\')

        assert uri.fs_path(platform) == expected

    def test_malformed_escapes_kept(self):
        uri = URI.parse('file://some/%A0.txt')
        assert uri.fs_path(Platform.POSIX) == '//some/%A0.txt'

    @pytest.mark.parametrize(
        'value,platform,expected',
        [
            ('file:///c:/alex.txt', Platform.WINDOWS, 'c:\\alex.txt'),
            (
                'file:///c:/Source/Z%C3%BCrich%20or%20Zurich%20'
                '(%CB%88zj%CA%8A%C9%99r%C9%AAk,/Code/resources/app/plugins',
                Platform.WINDOWS,
                'c:\\Source\\Z\u00fcrich or Zurich (\u02c8zj\u028a\u0259r\u026ak,'
                '\\Code\\resources\\app\\plugins',
            ),
            (
                'file://monacotools/folder/isi.txt',
                Platform.WINDOWS,
                '\\\\monacotools\\folder\\isi.txt',
            ),
            (
                'file://monacotools1/certificates/SSL/',
                Platform.WINDOWS,
                '\\\\monacotools1\\certificates\\SSL\\',
            ),
            ('file:///c:/alex.txt', Platform.POSIX, '/c:/alex.txt'),
            (
                'file:///c:/Source/Z%C3%BCrich%20or%20Zurich%20'
                '(%CB%88zj%CA%8A%C9%99r%C9%AAk,/Code/resources/app/plugins',
                Platform.POSIX,
                '/c:/Source/Z\u00fcrich or Zurich (\u02c8zj\u028a\u0259r\u026ak,'
                '/Code/resources/app/plugins',
            ),
        ],
    )
    def test_uri_to_fs_path_and_back(self, value, platform, expected):
        uri = URI.parse(value)
        assert uri.fs_path(platform) == expected

        uri2 = URI.file(uri.fs_path(platform), platform)
        assert uri2.fs_path(platform) == expected
        assert uri2.to_string() == uri.to_string()

    def test_posix_authority_becomes_path(self):
        uri = URI.parse('file://monacotools/folder/isi.txt')
        native = uri.fs_path(Platform.POSIX)
        assert native == '//monacotools/folder/isi.txt'

        # POSIX has no UNC paths, so the host ends up in the path.
        uri2 = URI.file(native, Platform.POSIX)
        assert uri2.authority == ''
        assert uri2.to_string() == 'file:////monacotools/folder/isi.txt'
        assert uri2.fs_path(Platform.POSIX) == native


class TestFilesystemPathConverter:
    def test_defaults(self):
        converter = canonuri.FilesystemPathConverter()

        assert converter.platform is Platform.POSIX
        assert converter.keep_drive_letter_casing is False

    def test_delegates(self, converter, platform):
        native = 'c:\\x' if platform.is_windows else '/usr/home'

        uri = converter.file(native)
        assert uri == URI.file(native, platform)
        assert converter.fs_path(uri) == uri.fs_path(platform) == native

    def test_keep_drive_letter_casing(self):
        converter = canonuri.FilesystemPathConverter(
            Platform.WINDOWS, keep_drive_letter_casing=True
        )
        uri = URI.parse('file:///C:/x')

        assert converter.fs_path(uri) == 'C:\\x'

    def test_side_by_side(self):
        posix = canonuri.FilesystemPathConverter()
        windows = canonuri.FilesystemPathConverter(Platform.WINDOWS)

        uri = windows.file('\\\\server\\share\\notes.txt')

        assert posix.fs_path(uri) == '//server/share/notes.txt'
        assert windows.fs_path(uri) == '\\\\server\\share\\notes.txt'

    def test_repr(self):
        converter = canonuri.FilesystemPathConverter(Platform.WINDOWS)
        assert repr(converter) == (
            'FilesystemPathConverter(platform=Platform.WINDOWS, '
            'keep_drive_letter_casing=False)'
        )


class TestNativeMapping:
    @pytest.mark.parametrize(
        'native,platform,expected',
        [
            ('/usr/home', Platform.POSIX, ('', '/usr/home')),
            ('//host/share', Platform.POSIX, ('', '//host/share')),
            ('C:\\x', Platform.WINDOWS, ('', '/c:/x')),
            ('\\\\host\\share\\x', Platform.WINDOWS, ('host', '/share/x')),
            ('\\\\host', Platform.WINDOWS, ('host', '/')),
            ('relative\\x', Platform.WINDOWS, ('', 'relative/x')),
        ],
    )
    def test_from_native(self, native, platform, expected):
        assert fspath.from_native(native, platform) == expected

    @pytest.mark.parametrize(
        'authority,path,platform,expected',
        [
            ('', '/usr/home', Platform.POSIX, '/usr/home'),
            ('host', '/share', Platform.POSIX, '//host/share'),
            ('host', '/share', Platform.WINDOWS, '\\\\host\\share'),
            ('', '/D:/x', Platform.WINDOWS, 'd:\\x'),
            ('', '/1:/x', Platform.WINDOWS, '\\1:\\x'),
        ],
    )
    def test_to_native(self, authority, path, platform, expected):
        assert fspath.to_native(authority, path, platform) == expected
