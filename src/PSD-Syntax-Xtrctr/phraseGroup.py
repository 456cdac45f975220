class PhraseGroup(object):
    '''Training unit for one source phrase: its context, syntax and the loss of every candidate translation'''

    __slots__ = "src_phrase", "span_start", "span_end", "context", "synt_feats", "parent_label", "span_bucket", \
                "translations", "losses", "has_translation"

    def __init__(self, src_phrase, span_start, span_end, translations):
        self.src_phrase = src_phrase
        self.span_start = span_start
        self.span_end = span_end
        self.context = []
        self.synt_feats = []
        self.parent_label = ''
        self.span_bucket = ''
        self.translations = translations
        self.losses = [1.0 for x in range(len(translations))]
        self.has_translation = False

    @classmethod
    def openGroup(cls, src_phrase, span_start, span_end, translations):
        return PhraseGroup(src_phrase, span_start, span_end, translations)

    def markIfCorrect(self, tgt_id):
        '''Sets the loss of the first candidate with the given target id to zero'''

        # only one correct translation per group
        if self.has_translation: return False
        for i in range( len(self.translations) ):
            if self.translations[i].index == tgt_id:
                self.losses[i] = 0.0
                self.has_translation = True
                return True
        return False

    def close(self):
        '''Returns the group if it can be used for training, None otherwise'''

        if self.has_translation: return self
        return None
