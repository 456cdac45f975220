import io

import pytest

from sentenceCursor import SentenceCursor


def make_cursor(corpus="s1\ns2\ns3\n", parses="(p1)\n(p2)\n(p3)\n"):
    return SentenceCursor(io.StringIO(corpus), io.StringIO(parses))


def test_advance_reads_both_streams_in_lockstep():
    cursor = make_cursor()
    cursor.advanceTo(1)
    assert (cursor.sent_id, cursor.corpus_line, cursor.parse_line) == (1, "s1", "(p1)")
    cursor.advanceTo(3)
    assert (cursor.sent_id, cursor.corpus_line, cursor.parse_line) == (3, "s3", "(p3)")


def test_advance_to_current_sentence_reads_nothing():
    cursor = make_cursor()
    cursor.advanceTo(2)
    cursor.advanceTo(2)
    assert (cursor.sent_id, cursor.corpus_line) == (2, "s2")


def test_empty_parse_line_is_kept():
    cursor = make_cursor(corpus="s1\ns2\n", parses="\n(p2)\n")
    cursor.advanceTo(1)
    assert cursor.parse_line == ""
    cursor.advanceTo(2)
    assert cursor.parse_line == "(p2)"


def test_regression_is_fatal(capsys):
    cursor = make_cursor()
    cursor.advanceTo(2)
    with pytest.raises(SystemExit):
        cursor.advanceTo(1)
    assert "must be sorted by sentence" in capsys.readouterr().err


def test_short_stream_is_fatal(capsys):
    cursor = make_cursor(parses="(p1)\n")
    with pytest.raises(SystemExit):
        cursor.advanceTo(2)
    assert "Parse file ended at sentence 1" in capsys.readouterr().err
