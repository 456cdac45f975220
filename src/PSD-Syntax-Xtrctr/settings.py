## Command line and extractor configuration for the syntactic PSD feature extractor ##

import optparse
import sys

usage = "usage: %prog [options] psd-file parsed-file corpus phrase-table extractor-config output-train output-index"

# Feature families that can be switched on/off in the [features] section
featSwitches = { "source-internal" : "source_internal",
                 "bag-of-words" : "bag_of_words",
                 "syntax-features" : "syntax_feats",
                 "parent-label" : "parent_label",
                 "span-feature" : "span_feat",
                 "target-internal" : "target_internal",
                 "paired" : "paired",
                 "scores" : "scores" }

class ExtractorConfig(object):
    '''Factors and feature switches used while generating the PSD features'''

    __slots__ = "factors", "window", "source_internal", "bag_of_words", "syntax_feats", "parent_label", \
                "span_feat", "target_internal", "paired", "scores"

    def __init__(self):
        self.factors = [0]
        self.window = 0
        self.source_internal = True
        self.bag_of_words = False
        self.syntax_feats = True
        self.parent_label = True
        self.span_feat = True
        self.target_internal = True
        self.paired = False
        self.scores = False

    def getFactorCount(self):
        return len(self.factors)


def args(argv=None):
    optparser = optparse.OptionParser(usage=usage)

    optparser.add_option("", "--verbose", dest="verbose", default=False, action="store_true", help="Print the extractor settings")
    optparser.add_option("", "--progress", dest="progress", default=100000, type="int", help="Report progress every N lines of the PSD file")

    global opts
    (opts, posArgs) = optparser.parse_args(argv)

    if len(posArgs) != 7:
        sys.stderr.write("ERROR: wrong arguments\n")
        optparser.print_usage(sys.stderr)
        sys.exit(1)

    (opts.psdFile, opts.parseFile, opts.corpusFile, opts.ruleFile, opts.configFile, \
        opts.trainFile, opts.indexFile) = posArgs
    opts.config = loadConfig(opts.configFile)

    if opts.verbose:
        config = opts.config
        sys.stderr.write( "INFO: PSD file                    : %s\n" % (opts.psdFile) )
        sys.stderr.write( "INFO: Parse file                  : %s\n" % (opts.parseFile) )
        sys.stderr.write( "INFO: Corpus file                 : %s\n" % (opts.corpusFile) )
        sys.stderr.write( "INFO: Phrase table                : %s\n" % (opts.ruleFile) )
        sys.stderr.write( "INFO: Factors used                : %s\n" % (' '.join( [str(x) for x in config.factors] )) )
        sys.stderr.write( "INFO: Context window size         : %d\n" % (config.window) )
        for feat in sorted( featSwitches.keys() ):
            sys.stderr.write( "INFO: %-28s: %s\n" % (feat, getattr(config, featSwitches[feat])) )

    return opts

def loadConfig(configFile):
    '''Load the extractor configuration file'''

    config = ExtractorConfig()
    parameter_line = ''
    line_cnt = 0
    try:
        cF = open(configFile, 'r')
    except IOError:
        sys.stderr.write("ERROR: Failed to open the extractor config %s. Exiting!!\n" % (configFile))
        sys.exit(1)

    try:
        for line in cF:
            line = line.strip()
            line_cnt += 1
            if line.startswith('#') or line == '': continue

            if line.startswith('['):
                parameter_line = line
                continue

            if parameter_line == "[factors]":
                try:
                    config.factors = [int(x) for x in line.replace(',', ' ').split()]
                except ValueError:
                    configError(configFile, line_cnt, line, "Factors must be integers")
            elif parameter_line == "[features]":
                if line.find("=") <= 0:
                    configError(configFile, line_cnt, line, "Unknown feature option specified")

                (feat, val) = line.split("=", 1)
                feat = feat.strip()
                val = val.strip().lower()
                if feat == "context-window" or feat == "window-size":
                    if not val.isdigit():
                        configError(configFile, line_cnt, line, "Context window must be a non-negative integer")
                    config.window = int(val)
                elif feat in featSwitches and val in ('true', 'false'):
                    setattr(config, featSwitches[feat], val == 'true')
                else:
                    configError(configFile, line_cnt, line, "Unknown feature option specified")
            else:
                configError(configFile, line_cnt, line, "Option found outside a known section")
    finally:
        cF.close()

    if not config.factors:
        configError(configFile, line_cnt, '', "At least one factor must be specified")
    # the corpus carries exactly one field per configured factor
    if min(config.factors) < 0 or max(config.factors) >= len(config.factors):
        configError(configFile, line_cnt, '', "Factor indices must lie between 0 and %d" % (len(config.factors) - 1))

    return config

def configError(configFile, line_cnt, line, msg):
    sys.stderr.write("Line # %d in file %s : %s\n" % (line_cnt, configFile, line))
    sys.stderr.write("%s. Exiting!!\n" % (msg))
    sys.exit(1)
