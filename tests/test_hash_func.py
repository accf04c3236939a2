import hashlib

import pytest

from signature import hash_func
from signature.hash_func import (
    UnsupportedAlgorithmError,
    available_algorithms,
    get_hash_func,
    get_hash_func_by_name,
    hash_data,
    md5_hash,
    set_hash_func,
    sha1_hash,
    sha256_hash,
)


class TestBuiltins:
    def test_sha1_empty(self):
        assert sha1_hash(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    def test_md5_empty(self):
        assert md5_hash(b"") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_sha256_empty(self):
        assert sha256_hash(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_known_vectors(self):
        assert sha1_hash(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"
        assert md5_hash(b"abc") == "900150983cd24fb0d6963f7d28e17f72"

    def test_str_is_utf8_encoded(self):
        assert sha1_hash("héllo") == sha1_hash("héllo".encode("utf-8"))
        assert md5_hash("héllo") == hashlib.md5("héllo".encode("utf-8")).hexdigest()

    def test_lengths_and_lowercase(self):
        for func, width in ((sha1_hash, 40), (md5_hash, 32), (sha256_hash, 64)):
            digest = func(b"\x00\xff payload")
            assert len(digest) == width
            assert digest == digest.lower()
            int(digest, 16)

    def test_bytearray_and_memoryview(self):
        assert sha1_hash(bytearray(b"abc")) == sha1_hash(b"abc")
        assert sha1_hash(memoryview(b"abc")) == sha1_hash(b"abc")


class TestSelection:
    def test_default_is_sha1(self):
        assert get_hash_func() is sha1_hash

    def test_set_and_get(self):
        set_hash_func(md5_hash)
        assert get_hash_func() is md5_hash
        assert hash_data(b"") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_custom_function(self):
        set_hash_func(lambda data: data.hex())
        assert hash_data(b"\x01\x02") == "0102"

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            set_hash_func("sha1")
        assert get_hash_func() is sha1_hash


class TestRegistry:
    def test_available(self):
        assert available_algorithms() == ["md5", "sha1", "sha256"]

    @pytest.mark.parametrize("name", ["sha1", "SHA1", "sha-1", "SHA_1", " sha1 "])
    def test_lookup_spellings(self, name):
        assert get_hash_func_by_name(name) is sha1_hash

    def test_lookup_sha256(self):
        assert get_hash_func_by_name("SHA-256") is sha256_hash

    def test_unknown(self):
        with pytest.raises(UnsupportedAlgorithmError) as excinfo:
            get_hash_func_by_name("whirlpool")
        assert "whirlpool" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)

    def test_configure_from_env(self, monkeypatch):
        from signature import config

        monkeypatch.setattr(config, "HASH_ALGORITHM", "md5")
        assert hash_func.configure_from_env() is md5_hash
        assert get_hash_func() is md5_hash
