"""
Codec Provider Tests
====================

Every provider must honour the UTF8Codec contract; the registry must
only hand out registered providers.
"""

import threading

import pytest

from ocaml_string_convert.providers import (
    BuiltinUTF8Codec,
    LookupUTF8Codec,
    MockUTF8Codec,
    UTF8Codec,
)
from ocaml_string_convert.registry import get_all_codecs, get_codec, registered_codecs


@pytest.fixture(params=["builtin", "lookup", "mock"])
def codec(request) -> UTF8Codec:
    if request.param == "builtin":
        return BuiltinUTF8Codec()
    if request.param == "lookup":
        return LookupUTF8Codec()
    return MockUTF8Codec()


class TestCodecContract:

    def test_encode(self, codec):
        assert codec.encode("foo·bar") == b"foo\xc2\xb7bar"

    def test_decode(self, codec):
        assert codec.decode(b"\xd8\xac\xd9\x85\xd9\x84") == "جمل"

    def test_decode_truncated_is_error(self, codec):
        with pytest.raises(UnicodeDecodeError) as exc_info:
            codec.decode(b"ab\xe2\x82")
        assert exc_info.value.start == 2
        assert exc_info.value.reason == "unexpected end of data"

    def test_encode_lone_surrogate_is_error(self, codec):
        with pytest.raises(UnicodeEncodeError):
            codec.encode("\udc80")

    def test_info_is_utf8(self, codec):
        info = codec.get_info()
        assert info.encoding == "utf-8"
        assert info.codec_id == codec.codec_id


class TestLookupCodec:

    @pytest.mark.parametrize("alias", ["utf-8", "UTF-8", "utf8", "u8"])
    def test_accepts_utf8_aliases(self, alias):
        assert LookupUTF8Codec(alias).get_info().encoding == "utf-8"

    @pytest.mark.parametrize("name", ["latin-1", "utf-16", "utf-8-sig"])
    def test_rejects_other_encodings(self, name):
        with pytest.raises(ValueError, match="not 'utf-8'"):
            LookupUTF8Codec(name)

    def test_unknown_encoding(self):
        with pytest.raises(LookupError):
            LookupUTF8Codec("no-such-encoding")


class TestMockCodec:

    def test_counts_calls(self):
        codec = MockUTF8Codec()
        codec.encode("a")
        codec.encode("b")
        codec.decode(b"c")
        assert codec.encode_calls == 2
        assert codec.decode_calls == 1

    def test_counts_are_thread_safe(self):
        codec = MockUTF8Codec()

        def worker():
            for _ in range(500):
                codec.decode(b"x")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert codec.decode_calls == 4000

    def test_failure_mode(self):
        codec = MockUTF8Codec(fail_decode=True)
        with pytest.raises(UnicodeDecodeError):
            codec.decode(b"valid")
        assert codec.decode_calls == 1

    def test_delegates_to_inner(self):
        codec = MockUTF8Codec(inner=LookupUTF8Codec())
        assert codec.get_info().implementation == "mock over lookup"


class TestRegistry:

    def test_registered_names(self):
        assert registered_codecs() == ("builtin", "lookup")
        assert len(get_all_codecs()) == 2

    def test_get_codec_returns_fresh_instance(self):
        first = get_codec("builtin")
        second = get_codec("builtin")
        assert isinstance(first, BuiltinUTF8Codec)
        assert first is not second

    def test_mock_is_not_registered(self):
        with pytest.raises(ValueError, match="registered: builtin, lookup"):
            get_codec("mock")
