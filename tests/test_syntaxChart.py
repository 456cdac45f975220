import pytest

from syntaxChart import NO_TAG, TOP_LABEL, UNRESOLVED, Resolved, SyntaxChart

PENN_PARSE = "(S (NP (PRP we)) (VP (VBD saw) (SBAR (S (NP (DT the) (NN cat)) (VP (VB sleep))))))"
XML_PARSE = '<tree label="S"> we saw <tree label="NP"> the cat </tree> sleep </tree>'


def build(sent_len, parse_line):
    chart = SyntaxChart(sent_len)
    chart.read(parse_line)
    return chart


def test_penn_labels_lowest_first():
    chart = build(5, PENN_PARSE)
    assert chart.getLabels(2, 3) == ["NP"]
    assert chart.getLabels(0, 0) == ["PRP", "NP"]
    assert chart.getLabels(2, 4) == ["S", "SBAR"]
    assert chart.getLabels(0, 4) == ["S"]


def test_uncovered_span_gives_notag():
    chart = build(5, PENN_PARSE)
    assert chart.getLabels(1, 2) == [NO_TAG]


def test_parent_is_above_topmost_constituent():
    chart = build(5, PENN_PARSE)
    assert chart.getParent(2, 3) == (Resolved("S"), False)
    # SBAR is the topmost constituent over 2-4
    assert chart.getParent(2, 4) == (Resolved("VP"), False)
    assert chart.getParent(0, 0) == (Resolved("S"), True)


def test_root_parent_is_top():
    chart = build(5, PENN_PARSE)
    assert chart.getParent(0, 4) == (Resolved(TOP_LABEL), True)


def test_unresolved_reports_left_edge():
    chart = build(5, PENN_PARSE)
    (parent, at_left_edge) = chart.getParent(1, 2)
    assert parent is UNRESOLVED
    assert not at_left_edge
    (parent, at_left_edge) = chart.getParent(0, 1)
    assert parent is UNRESOLVED
    assert at_left_edge


def test_unlabeled_outer_bracket():
    chart = build(3, "( (S (NP (DT a) (NN dog)) (VP (VBZ barks))) )")
    assert chart.getLabels(2, 2) == ["VBZ", "VP"]
    assert chart.getParent(0, 2) == (Resolved(TOP_LABEL), True)
    assert chart.getParent(0, 1) == (Resolved("S"), True)


def test_moses_tree_markup():
    chart = build(5, XML_PARSE)
    assert chart.getLabels(2, 3) == ["NP"]
    assert chart.getLabels(3, 3) == [NO_TAG]
    assert chart.getParent(2, 3) == (Resolved("S"), False)
    assert chart.getParent(3, 3)[0] is UNRESOLVED


def test_moses_markup_without_spaces():
    chart = build(2, '<tree label="NP">the cat</tree>')
    assert chart.getLabels(0, 1) == ["NP"]


def test_partial_markup_full_span_resolves_to_top():
    chart = build(3, 'a <tree label="NP"> b </tree> c')
    assert chart.getParent(0, 2) == (Resolved(TOP_LABEL), True)
    assert chart.getParent(1, 1) == (Resolved(TOP_LABEL), False)


def test_empty_parse_has_no_constituents():
    chart = build(4, "")
    assert chart.getLabels(0, 3) == [NO_TAG]
    assert chart.getParent(0, 3) == (Resolved(TOP_LABEL), True)


@pytest.mark.parametrize("sent_len, parse_line", [
    (2, "(S (NP (DT the) (NN cat))"),
    (2, "(S (DT the) (NN cat)))"),
    (3, "(S (DT the) (NN cat))"),
    (2, "the (S (NN cat))"),
    (1, '<tree label="NP"> cat'),
    (1, 'cat </tree>'),
    (1, '<tree label="X"></tree> cat'),
])
def test_malformed_parse_is_fatal(sent_len, parse_line, capsys):
    with pytest.raises(SystemExit):
        build(sent_len, parse_line)
    assert "Malformed parse tree" in capsys.readouterr().err
