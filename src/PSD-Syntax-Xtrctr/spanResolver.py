## Resolves the syntactic features of a source span against the sentence chart ##

import sys

from syntaxChart import NO_TAG, Resolved

def getSyntaxFeatures(chart, span_start, span_end):
    '''Labels over the span; NOTAG is dropped when real labels are also found'''

    labelsLst = chart.getLabels(span_start, span_end)
    if len(labelsLst) > 1:
        return [label for label in labelsLst if label != NO_TAG]
    return labelsLst[:]

def findParentLabel(chart, span_start, span_end):
    '''Widens the span (leftwards first, then rightwards) until the chart finds its parent'''

    max_steps = chart.sent_len + 1
    orig_span = (span_start, span_end)
    for _ in range(max_steps):
        (parent, at_left_edge) = chart.getParent(span_start, span_end)
        if isinstance(parent, Resolved):
            return parent.label

        if not at_left_edge: span_start -= 1
        else: span_end += 1
        if span_end >= chart.sent_len: break

    sys.stderr.write("ERROR: No parent constituent found for span %d-%d (widened up to %d-%d) in a sentence of %d tokens. Exiting!!\n" \
                        % (orig_span[0], orig_span[1], span_start, span_end, chart.sent_len))
    sys.exit(1)
