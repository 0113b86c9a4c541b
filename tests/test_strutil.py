import pytest

from negi.strutil import mbslen, mbsws, mbtowc, strskip, wcsws

SAMPLES = ["", "hello", "caf\u00e9", "\u4e2d\u6587", "a\U0001f600b", "\u00e9\u4e2d\U0001f600"]


def test_strskip_prefix():
    assert strskip("foobar", "foo") == "bar"
    assert strskip("foo", "foo") == ""
    assert strskip("anything", "") == "anything"


def test_strskip_missing():
    assert strskip("foobar", "bar") is None
    assert strskip("fo", "foo") is None


def test_strskip_bytes():
    assert strskip(b"/root/sub", b"/root") == b"/sub"


@pytest.mark.parametrize("text", SAMPLES)
def test_mbslen_matches_char_count(text):
    assert mbslen(text.encode("utf-8")) == len(text)


def test_mbslen_rejects_bad_lead():
    with pytest.raises(ValueError):
        mbslen(b"\x80abc")
    with pytest.raises(ValueError):
        mbslen(b"a\xe4")


@pytest.mark.parametrize("ch", ["A", "\u00e9", "\u07ff", "\u4e2d", "\uffff", "\U0001f600", "\U0010ffff"])
def test_mbtowc_round_trip(ch):
    assert mbtowc(ch.encode("utf-8")) == ord(ch)


def test_mbtowc_reads_only_first_sequence():
    assert mbtowc("\u4e2dxyz".encode("utf-8")) == ord("\u4e2d")


def test_mbtowc_empty():
    assert mbtowc(b"") == 0


def test_mbsws_ascii():
    data = b"ab cd"
    assert mbsws(data) == data.index(b" ")


def test_mbsws_multibyte_space():
    data = "\u4e2d\u3000x".encode("utf-8")
    assert mbsws(data) == len("\u4e2d".encode("utf-8"))


def test_mbsws_none():
    assert mbsws("\u4e2d\u6587abc".encode("utf-8")) is None


def test_wcsws_str():
    assert wcsws("abc\tdef") == 3
    assert wcsws("abcdef") is None


def test_wcsws_skips_surrogate_pairs():
    units = [0xD83D, 0xDE00, 0x41, 0x20]
    assert wcsws(units) == 3