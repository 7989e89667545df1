"""Tests for canonical record serialization and strict decoding."""

import pytest

from sharelink.core.exceptions import CorruptRecordError
from sharelink.db.models import LinkRecord
from sharelink.services.record_codec import canonicalize, decode_record


class TestCanonicalize:

    def test_fixed_key_order_and_compact(self):
        record = LinkRecord(title="T", description="D", redirectUrl="https://x")
        assert canonicalize(record) == b'{"title":"T","description":"D","redirectUrl":"https://x"}'

    def test_independent_of_input_key_order(self):
        a = LinkRecord.model_validate({"redirectUrl": "u", "title": "t", "description": "d"})
        b = LinkRecord.model_validate({"title": "t", "description": "d", "redirectUrl": "u"})
        assert canonicalize(a) == canonicalize(b)

    def test_non_ascii_written_as_utf8(self):
        record = LinkRecord(title="café", description="D", redirectUrl="https://x")
        assert "café".encode("utf-8") in canonicalize(record)

    def test_decode_lossless(self):
        record = LinkRecord(title='quote " and \\ slash', description="línea\nnueva", redirectUrl="https://x/?a=1&b=2")
        assert decode_record(canonicalize(record)) == record


class TestDecodeRecord:

    @pytest.mark.parametrize("data", [
        b"not json",
        b"\xff\xfe",
        b"[1, 2, 3]",
        b'"just a string"',
        b'{"title":"t","description":"d"}',
        b'{"title":"","description":"d","redirectUrl":"u"}',
        b'{"title":1,"description":"d","redirectUrl":"u"}',
    ])
    def test_unreadable_bytes_are_corrupt(self, data):
        with pytest.raises(CorruptRecordError):
            decode_record(data, short_id="bad1")

    def test_extra_keys_ignored(self):
        data = b'{"title":"t","description":"d","redirectUrl":"u","extra":true}'
        record = decode_record(data)
        assert record == LinkRecord(title="t", description="d", redirectUrl="u")

    def test_error_names_short_id(self):
        with pytest.raises(CorruptRecordError) as excinfo:
            decode_record(b"{", short_id="bad1")
        assert excinfo.value.short_id == "bad1"
        assert "bad1" in str(excinfo.value)
