import io

import pytest

from postal_unify.decode import iter_rows
from postal_unify.errors import MalformedInputError, PostalDataError
from tests.conftest import KEN_ALL_LINES, encode_csv


def test_iter_rows_decodes_cp932_with_line_numbers() -> None:
    stream = io.BytesIO(encode_csv(KEN_ALL_LINES[:2]))
    rows = list(iter_rows(stream, source="KEN_ALL.CSV"))
    assert [line for line, _ in rows] == [1, 2]
    assert rows[0][1][2] == "0600000"
    assert rows[0][1][6] == "北海道"
    assert rows[1][1][3] == "ﾎｯｶｲﾄﾞｳ"
    assert len(rows[1][1]) == 15


def test_iter_rows_skips_blank_lines() -> None:
    stream = io.BytesIO(b"a,b\r\n\r\nc,d\r\n")
    assert [row for _, row in iter_rows(stream)] == [["a", "b"], ["c", "d"]]


def test_iter_rows_leaves_stream_open() -> None:
    stream = io.BytesIO(b"a,b\r\n")
    list(iter_rows(stream))
    assert not stream.closed


def test_undecodable_bytes_are_fatal() -> None:
    stream = io.BytesIO(b"a,b\r\nc,\x82")
    with pytest.raises(MalformedInputError) as excinfo:
        list(iter_rows(stream, source="broken.csv"))
    assert isinstance(excinfo.value, PostalDataError)
    assert "broken.csv" in str(excinfo.value)


def test_unterminated_quote_is_fatal() -> None:
    stream = io.BytesIO(b'a,"b\r\nc,d\r\n')
    with pytest.raises(MalformedInputError):
        list(iter_rows(stream))


def test_undecodable_bytes_report_their_own_line() -> None:
    good = [f"{i},ok" for i in range(300)]
    data = encode_csv(good) + b"x,\x82\xff\r\n" + encode_csv(good)
    with pytest.raises(MalformedInputError) as excinfo:
        list(iter_rows(io.BytesIO(data), source="deep.csv"))
    assert excinfo.value.line == 301
    assert "deep.csv:301" in str(excinfo.value)


def test_quoted_field_spanning_lines_is_one_row() -> None:
    stream = io.BytesIO('a,"b\r\nc"\r\nd,e\r\n'.encode("cp932"))
    assert list(iter_rows(stream)) == [(2, ["a", "b\r\nc"]), (3, ["d", "e"])]
