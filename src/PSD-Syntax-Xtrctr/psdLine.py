import sys

class PSDLine(object):
    '''One line of the PSD file: a source phrase in a sentence and its observed translation'''

    __slots__ = "sent_id", "src_start", "src_end", "tgt_start", "tgt_end", "src_phrase", "tgt_phrase"

    def __init__(self, raw_line, line_cnt=0):
        # sent_id  src_start  src_end  tgt_start  tgt_end  src_phrase  tgt_phrase (tab separated)
        cols = raw_line.rstrip('\r\n').split('\t')
        if len(cols) != 7:
            self.lineError(raw_line, line_cnt, "Expected 7 tab separated columns, found %d" % (len(cols)))

        try:
            (self.sent_id, self.src_start, self.src_end, self.tgt_start, self.tgt_end) = [int(x) for x in cols[:5]]
        except ValueError:
            self.lineError(raw_line, line_cnt, "Sentence id and spans must be integers")
        self.src_phrase = cols[5].strip()
        self.tgt_phrase = cols[6].strip()

        if self.sent_id < 1:
            self.lineError(raw_line, line_cnt, "Sentence ids start from 1")
        if self.src_start < 0:
            self.lineError(raw_line, line_cnt, "Negative source span start")

    def getSpan(self):
        return (self.src_start, self.src_end)

    def lineError(self, raw_line, line_cnt, msg):
        sys.stderr.write("Line # %d in PSD file : %s\n" % (line_cnt, raw_line.rstrip('\r\n')))
        sys.stderr.write("ERROR: %s. Exiting!!\n" % (msg))
        sys.exit(1)
