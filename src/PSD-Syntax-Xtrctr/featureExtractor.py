## Generates the PSD features of a phrase group and writes them as Vowpal Wabbit ##
## label-dependent (csoaa_ldf) training examples ##

import re
import sys

FEAT_ESCAPE = re.compile(r'[\s|:]')
escapeDict = { '|' : '_PIPE_', ':' : '_COLON_' }

def escapeFeat(feat):
    '''VW feature names cannot have whitespace, pipes or colons'''

    return FEAT_ESCAPE.sub(lambda m: escapeDict.get(m.group(0), '_'), feat)


class FeatureExtractor(object):
    '''Source side (shared) and target side (per candidate) features of the PSD examples'''

    __slots__ = "config"

    def __init__(self, config):
        self.config = config

    def generateFeatures(self, consumer, group):
        '''Computes the features of the group and hands the example to the consumer'''

        sharedFeats = self.getSourceFeats(group)
        candLst = []
        for trans, loss in zip(group.translations, group.losses):
            candLst.append( (trans.index, loss, self.getTargetFeats(group, trans)) )

        consumer.writeExample(sharedFeats, candLst)
        return None

    def getSourceFeats(self, group):
        config = self.config
        context = group.context
        featsLst = []

        for fact_i in config.factors:
            if config.source_internal:
                for tok in context[group.span_start:group.span_end + 1]:
                    featsLst.append( "p^f%d^%s" % (fact_i, tok[fact_i]) )

            if config.bag_of_words:
                for tok in context:
                    featsLst.append( "bow^f%d^%s" % (fact_i, tok[fact_i]) )

            for offset in range(1, config.window + 1):
                left_i = group.span_start - offset
                right_i = group.span_end + offset
                left_w = context[left_i][fact_i] if left_i >= 0 else '<s>'
                right_w = context[right_i][fact_i] if right_i < len(context) else '</s>'
                featsLst.append( "c^f%d^-%d^%s" % (fact_i, offset, left_w) )
                featsLst.append( "c^f%d^+%d^%s" % (fact_i, offset, right_w) )

        if config.syntax_feats:
            for label in group.synt_feats:
                featsLst.append( "syn^%s" % (label) )
        if config.parent_label:
            featsLst.append( "par^%s" % (group.parent_label) )
        if config.span_feat:
            featsLst.append( "span^%s" % (group.span_bucket) )

        return [escapeFeat(feat) for feat in featsLst]

    def getTargetFeats(self, group, trans):
        config = self.config
        featsLst = []

        if config.target_internal:
            for tgt_w in trans.phrase.split():
                featsLst.append( "t^%s" % (tgt_w) )
            featsLst.append( "tp^%s" % (trans.phrase) )
        if config.paired:
            featsLst.append( "pair^%s^%s" % (group.src_phrase, trans.phrase) )

        featsLst = [escapeFeat(feat) for feat in featsLst]
        if config.scores:
            for score_i, score in enumerate(trans.scores):
                featsLst.append( "sc%d:%g" % (score_i, score) )

        return featsLst


class VWFileTrainConsumer(object):
    '''Writes the examples in Vowpal Wabbit csoaa_ldf format'''

    __slots__ = "outFile", "oF", "tot_examples"

    def __init__(self, outFile):
        self.outFile = outFile
        self.tot_examples = 0
        try:
            self.oF = open(outFile, 'w', encoding='utf-8')
        except IOError:
            sys.stderr.write("ERROR: Failed to open %s. Exiting!!\n" % (outFile))
            sys.exit(1)

    def writeExample(self, sharedFeats, candLst):
        '''Shared line, one line per candidate (id:loss) and an empty line to end the example'''

        self.oF.write( "shared |s %s\n" % (' '.join(sharedFeats)) )
        for (tgt_id, loss, featsLst) in candLst:
            self.oF.write( "%d:%g |t %s\n" % (tgt_id, loss, ' '.join(featsLst)) )
        self.oF.write( "\n" )
        self.tot_examples += 1

    def finish(self):
        self.oF.close()
        sys.stderr.write( "Training examples written to %s : %d\n" % (self.outFile, self.tot_examples) )
