## Extracts the PSD training examples with syntactic features for the source side of rules ##
## Usage: xtract-syntax-feats psd-file parsed-file corpus phrase-table extractor-config output-train output-index ##

import sys
import time
from datetime import timedelta

import settings
from featureExtractor import FeatureExtractor, VWFileTrainConsumer
from phraseGroup import PhraseGroup
from psdLine import PSDLine
from ruleTable import RuleTable
from sentenceCursor import SentenceCursor
from spanBucket import bucketSpan
from spanResolver import findParentLabel, getSyntaxFeatures
from syntaxChart import SyntaxChart

class FilterStats(object):
    '''Counts of source phrases and target phrases before and after filtering'''

    __slots__ = "src_total", "src_survived", "tgt_total", "tgt_survived"

    def __init__(self):
        self.src_total = 0
        self.src_survived = 0
        self.tgt_total = 0
        self.tgt_survived = 0

    def writeStats(self, outF):
        outF.write( "Filtered phrases: source %d, target %d\n" % (self.src_total - self.src_survived, self.tgt_total - self.tgt_survived) )
        outF.write( "Remaining phrases: source %d, target %d\n" % (self.src_survived, self.tgt_survived) )


def readFactoredLine(corpus_line, factor_count):
    '''Splits the sentence into tokens and every token into its factors'''

    context = []
    for word in corpus_line.split():
        factors = word.split('|')
        if len(factors) != factor_count:
            sys.stderr.write("ERROR: Wrong count of factors (expected %d): %s. Exiting!!\n" % (factor_count, word))
            sys.exit(1)
        context.append(factors)
    return context


class SyntaxFeatXtractor(object):
    '''Walks the PSD file and builds one training example for every group of consecutive source phrases'''

    __slots__ = "rtable", "config", "extractor", "consumer", "progress", "cursor", "stats", "group", \
                "seenSpansSet", "seen_sent_id"

    def __init__(self, rtable, config, extractor, consumer, progress=100000):
        self.rtable = rtable
        self.config = config
        self.extractor = extractor
        self.consumer = consumer
        self.progress = progress
        self.cursor = None
        self.stats = None
        self.group = None
        self.seenSpansSet = set([])
        self.seen_sent_id = 0

    def xtract(self, psdF, corpusF, parseF):
        '''One pass over the PSD file; returns the filtering statistics'''

        self.cursor = SentenceCursor(corpusF, parseF)
        self.stats = FilterStats()
        self.group = None
        self.seenSpansSet.clear()
        self.seen_sent_id = 0

        t_beg = time.time()
        # one source phrase can have multiple correct translations;
        # these will be on consecutive lines in the PSD file
        for line_cnt, raw_line in enumerate(psdF, 1):
            if raw_line.strip() == '': continue
            psd_line = PSDLine(raw_line, line_cnt)

            if self.progress > 0 and line_cnt % self.progress == 0:
                sys.stderr.write( "Processed %d PSD lines in %s\n" % (line_cnt, timedelta(seconds=time.time() - t_beg)) )

            if not self.rtable.srcExists(psd_line.src_phrase): continue

            self.cursor.advanceTo(psd_line.sent_id)
            if self.group is None or psd_line.src_phrase != self.group.src_phrase:
                self.closeGroup()
                self.checkGroupOrder(psd_line, True)
                self.openGroup(psd_line)
            else:
                self.checkGroupOrder(psd_line, False)

            self.stats.tgt_total += 1
            (tgt_id, found_tgt) = self.rtable.getTgtPhraseID(psd_line.tgt_phrase)
            if found_tgt and self.group.markIfCorrect(tgt_id):
                self.stats.tgt_survived += 1

        # generate features for the last source phrase
        self.closeGroup()
        sys.stderr.write( "Time taken for extracting the features : %s\n" % (timedelta(seconds=time.time() - t_beg)) )

        return self.stats

    def checkGroupOrder(self, psd_line, opens_group):
        '''A phrase occurrence must not come back once another group was opened in the same sentence'''

        if psd_line.sent_id != self.seen_sent_id:
            self.seenSpansSet.clear()
            self.seen_sent_id = psd_line.sent_id

        occurrence = (psd_line.src_phrase, psd_line.src_start, psd_line.src_end)
        if opens_group and occurrence in self.seenSpansSet:
            sys.stderr.write("ERROR: Source phrase '%s' (span %d-%d) of sentence %d is not on consecutive lines in the PSD file. Exiting!!\n" \
                                % (psd_line.src_phrase, psd_line.src_start, psd_line.src_end, psd_line.sent_id))
            sys.exit(1)
        self.seenSpansSet.add(occurrence)

    def openGroup(self, psd_line):
        '''Sets the new source phrase along with its context, syntax features and translations'''

        (span_start, span_end) = psd_line.getSpan()
        group = PhraseGroup.openGroup(psd_line.src_phrase, span_start, span_end, \
                                      self.rtable.getTranslations(psd_line.src_phrase))
        corpus_line = self.cursor.corpus_line
        group.context = readFactoredLine(corpus_line, self.config.getFactorCount())

        span_len = span_end - span_start + 1
        if span_len <= 0 or span_end >= len(group.context):
            sys.stderr.write("ERROR: Invalid span %d-%d for the phrase '%s' in sentence %d of %d tokens. Exiting!!\n" \
                                % (span_start, span_end, psd_line.src_phrase, psd_line.sent_id, len(group.context)))
            sys.exit(1)
        group.span_bucket = str( bucketSpan(span_len) )

        chart = SyntaxChart( len(group.context) )
        chart.read(self.cursor.parse_line)
        group.synt_feats = getSyntaxFeatures(chart, span_start, span_end)
        group.parent_label = findParentLabel(chart, span_start, span_end)

        self.group = group
        return None

    def closeGroup(self):
        '''Emits the open group if one of its translations survived filtering'''

        if self.group is None: return None

        self.stats.src_total += 1
        example = self.group.close()
        if example is not None:
            self.stats.src_survived += 1
            self.extractor.generateFeatures(self.consumer, example)
        self.group = None
        return None


def openInput(inFile):
    try:
        return open(inFile, 'r', encoding='utf-8')
    except IOError:
        sys.stderr.write("ERROR: Failed to open %s. Exiting!!\n" % (inFile))
        sys.exit(1)

def main(argv=None):
    sys.stderr.write( "Beginning extraction of syntactic features for LHS of rules ...\n" )
    opts = settings.args(argv)

    psdF = openInput(opts.psdFile)
    parseF = openInput(opts.parseFile)
    corpusF = openInput(opts.corpusFile)
    try:
        rtable = RuleTable(opts.ruleFile)
        extractor = FeatureExtractor(opts.config)
        consumer = VWFileTrainConsumer(opts.trainFile)
        rtable.writePhraseIndex(opts.indexFile)

        xtractor = SyntaxFeatXtractor(rtable, opts.config, extractor, consumer, opts.progress)
        stats = xtractor.xtract(psdF, corpusF, parseF)
    finally:
        psdF.close()
        parseF.close()
        corpusF.close()

    # output statistics about filtering
    stats.writeStats(sys.stderr)

    # flush the feature consumer
    consumer.finish()
    return 0

if __name__ == "__main__":
    main()
