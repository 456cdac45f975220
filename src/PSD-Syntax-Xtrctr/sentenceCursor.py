import sys

class SentenceCursor(object):
    '''Moves the corpus and the parse file in lockstep to a given sentence id'''

    __slots__ = "corpusF", "parseF", "sent_id", "corpus_line", "parse_line"

    def __init__(self, corpusF, parseF):
        self.corpusF = corpusF
        self.parseF = parseF
        self.sent_id = 0            # sentence ids are 1-based; 0 means nothing read yet
        self.corpus_line = ''
        self.parse_line = ''

    def advanceTo(self, target_id):
        '''Reads one line from each file per sentence until target_id is the current sentence'''

        if target_id < self.sent_id:
            sys.stderr.write("ERROR: Sentence id %d found after sentence %d; the PSD file must be sorted by sentence. Exiting!!\n" % (target_id, self.sent_id))
            sys.exit(1)

        while self.sent_id < target_id:
            corpus_line = self.corpusF.readline()
            parse_line = self.parseF.readline()
            if corpus_line == '' or parse_line == '':
                which = 'Corpus' if corpus_line == '' else 'Parse'
                sys.stderr.write("ERROR: %s file ended at sentence %d before reaching sentence %d. Exiting!!\n" % (which, self.sent_id, target_id))
                sys.exit(1)

            self.corpus_line = corpus_line.strip()
            self.parse_line = parse_line.strip()
            self.sent_id += 1

        return None
