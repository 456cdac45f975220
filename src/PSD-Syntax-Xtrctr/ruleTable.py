## Phrase table for the PSD extractor: candidate translations of every source phrase ##
## and an index of the target phrases (ids are 1-based, in order of first appearance) ##

import gzip
import sys
import time

class Translation(object):
    '''Candidate translation of a source phrase along with its phrase-table scores'''

    __slots__ = "index", "phrase", "scores"

    def __init__(self, index, phrase, scores):
        self.index = index
        self.phrase = phrase
        self.scores = scores


class RuleTable(object):
    '''Phrase table class serving the source and target lookups of the extractor'''

    __slots__ = "ruleFile", "ruleDict", "tgtIndexDict", "tgtPhrasesLst", "tot_rule_pairs"

    def __init__(self, ruleFile):
        self.ruleFile = ruleFile
        self.ruleDict = {}
        self.tgtIndexDict = {}
        self.tgtPhrasesLst = []
        self.tot_rule_pairs = 0
        self.loadRules()

    def loadRules(self):
        '''Loads the phrase pairs (src ||| tgt ||| scores [||| ...]) from plain or gzipped file'''

        t_beg = time.time()
        try:
            if self.ruleFile.endswith('.gz'): rF = gzip.open(self.ruleFile, 'rt', encoding='utf-8')
            else: rF = open(self.ruleFile, 'r', encoding='utf-8')
        except IOError:
            sys.stderr.write("ERROR: Failed to open the phrase table %s. Exiting!!\n" % (self.ruleFile))
            sys.exit(1)

        sys.stderr.write( "Loading phrase pairs from file   : %s\n" % (self.ruleFile) )
        try:
            for line_cnt, line in enumerate(rF, 1):
                line = line.strip()
                if line == '': continue

                entries = line.split(' ||| ')
                if len(entries) < 3:
                    sys.stderr.write("Line # %d in file %s : %s\n" % (line_cnt, self.ruleFile, line))
                    sys.stderr.write("Phrase table entries need at least source, target and scores. Exiting!!\n")
                    sys.exit(1)
                (src, tgt, probs) = (entries[0].strip(), entries[1].strip(), entries[2])
                try:
                    scores = [float(x) for x in probs.split()]
                except ValueError:
                    sys.stderr.write("Line # %d in file %s : %s\n" % (line_cnt, self.ruleFile, line))
                    sys.stderr.write("Phrase table scores must be real values. Exiting!!\n")
                    sys.exit(1)

                tgt_id = self.addTgtPhrase(tgt)
                if src not in self.ruleDict: self.ruleDict[src] = []
                self.ruleDict[src].append( Translation(tgt_id, tgt, scores) )
                self.tot_rule_pairs += 1
        finally:
            rF.close()

        t_end = time.time()
        sys.stderr.write( "Unique source phrases found               : %d\n" % (len(self.ruleDict)) )
        sys.stderr.write( "Unique target phrases found               : %d\n" % (len(self.tgtPhrasesLst)) )
        sys.stderr.write( "Total phrase pairs loaded                 : %d\n" % (self.tot_rule_pairs) )
        sys.stderr.write( "Time taken for loading the phrase table   : %1.3f sec\n\n" % (t_end - t_beg) )
        return None

    def addTgtPhrase(self, tgt):
        if tgt not in self.tgtIndexDict:
            self.tgtPhrasesLst.append(tgt)
            self.tgtIndexDict[tgt] = len(self.tgtPhrasesLst)
        return self.tgtIndexDict[tgt]

    def srcExists(self, src_phr):
        return src_phr in self.ruleDict

    def getTranslations(self, src_phr):
        return self.ruleDict[src_phr]

    def getTgtPhraseID(self, tgt_phr):
        '''Returns the tuple (target id, found); the id is 0 when not found'''

        if tgt_phr in self.tgtIndexDict:
            return (self.tgtIndexDict[tgt_phr], True)
        return (0, False)

    def getTargetIndex(self):
        return self.tgtPhrasesLst

    def writePhraseIndex(self, outFile):
        '''Writes the target phrases in the order of their ids (line n has the phrase with id n)'''

        try:
            oF = open(outFile, 'w', encoding='utf-8')
        except IOError:
            sys.stderr.write("ERROR: Failed to open %s. Exiting!!\n" % (outFile))
            sys.exit(1)

        with oF:
            for tgt in self.getTargetIndex():
                oF.write( "%s\n" % (tgt) )
        return None
