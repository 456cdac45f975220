import pytest

from psdLine import PSDLine


def test_parse_line():
    psd_line = PSDLine("3\t2\t3\t0\t1\tthe cat\tle chat\n")
    assert psd_line.sent_id == 3
    assert psd_line.getSpan() == (2, 3)
    assert (psd_line.tgt_start, psd_line.tgt_end) == (0, 1)
    assert psd_line.src_phrase == "the cat"
    assert psd_line.tgt_phrase == "le chat"


@pytest.mark.parametrize("raw_line, msg", [
    ("3\t2\t3\t0\t1\tthe cat\n", "Expected 7 tab separated columns"),
    ("3 2 3 0 1 the cat le chat\n", "Expected 7 tab separated columns"),
    ("x\t2\t3\t0\t1\tthe cat\tle chat\n", "must be integers"),
    ("0\t2\t3\t0\t1\tthe cat\tle chat\n", "Sentence ids start from 1"),
    ("1\t-1\t3\t0\t1\tthe cat\tle chat\n", "Negative source span start"),
])
def test_malformed_line_is_fatal(raw_line, msg, capsys):
    with pytest.raises(SystemExit):
        PSDLine(raw_line, 12)
    err = capsys.readouterr().err
    assert msg in err
    assert "Line # 12" in err
