## Syntax chart over the source sentence built from a parse tree ##
## Spans are 0-based and inclusive on both ends [i, j] ##

import re
import sys

NO_TAG = "NOTAG"            # Label of a span not covered by any constituent
TOP_LABEL = "TOP"           # Parent of a tree root (and of the full sentence span)

PENN_TOKEN = re.compile(r'\(|\)|[^\s()]+')
XML_TOKEN = re.compile(r'<tree\s+label\s*=\s*"([^"]*)"\s*>|(</tree>)|((?:[^\s<]|<(?!/?tree))+)')


class Resolved(object):
    '''Parent lookup that found the constituent above the span'''

    __slots__ = "label"

    def __init__(self, label):
        self.label = label

    def __eq__(self, other):
        return isinstance(other, Resolved) and self.label == other.label

    def __repr__(self):
        return "Resolved(%s)" % (self.label)


class Unresolved(object):
    '''Parent lookup for a span that is not a constituent'''

    __slots__ = ()

    def __repr__(self):
        return "Unresolved"

UNRESOLVED = Unresolved()


class Node(object):
    __slots__ = "label", "start", "end", "parent"

    def __init__(self, label, start, end):
        self.label = label
        self.start = start
        self.end = end
        self.parent = None


class SyntaxChart(object):
    '''Constituents of a single parsed sentence indexed by their span'''

    __slots__ = "sent_len", "spanDict"

    def __init__(self, sent_len):
        self.sent_len = sent_len
        self.spanDict = {}          # (start, end) -> nodes over the span, lowest first

    def read(self, parse_line):
        '''Fills the chart from a Penn bracketed tree or a Moses <tree label=".."> markup'''

        parse_line = parse_line.strip()
        if parse_line == '': return None

        if parse_line.startswith('('):
            leaves = self.readPenn(parse_line)
        else:
            leaves = self.readXML(parse_line)

        if leaves != self.sent_len:
            self.parseError(parse_line, "Parse has %d leaves but the sentence has %d tokens" % (leaves, self.sent_len))
        return None

    def readPenn(self, parse_line):
        stack = []
        roots = []
        pos = 0
        toks = PENN_TOKEN.findall(parse_line)
        tok_i = 0
        while tok_i < len(toks):
            tok = toks[tok_i]
            if tok == '(':
                label = None
                if tok_i + 1 < len(toks) and toks[tok_i + 1] not in ('(', ')'):
                    label = toks[tok_i + 1]
                    tok_i += 1
                stack.append( (label, pos, []) )
            elif tok == ')':
                if not stack:
                    self.parseError(parse_line, "Unbalanced brackets")
                (label, start, children) = stack.pop()
                self.closeConstituent(parse_line, label, start, pos, children, stack, roots)
            else:
                if not stack:
                    self.parseError(parse_line, "Word '%s' outside of the tree" % (tok))
                pos += 1
            tok_i += 1

        if stack:
            self.parseError(parse_line, "Unbalanced brackets")
        return pos

    def readXML(self, parse_line):
        stack = []
        roots = []
        pos = 0
        for m in XML_TOKEN.finditer(parse_line):
            (label, end_tag, word) = m.groups()
            if label is not None:
                stack.append( (label, pos, []) )
            elif end_tag is not None:
                if not stack:
                    self.parseError(parse_line, "Closing tag without a matching <tree>")
                (label, start, children) = stack.pop()
                self.closeConstituent(parse_line, label, start, pos, children, stack, roots)
            else:
                pos += 1

        if stack:
            self.parseError(parse_line, "Unclosed <tree> tag")
        return pos

    def closeConstituent(self, parse_line, label, start, pos, children, stack, roots):
        '''Creates the node for a closed bracket and links its children to it'''

        enclosing = stack[-1][2] if stack else roots
        if label is None:           # unlabeled bracket just passes its children up
            enclosing.extend(children)
            return None
        if pos == start:
            self.parseError(parse_line, "Empty constituent %s" % (label))

        node = Node(label, start, pos - 1)
        for child in children:
            child.parent = node
        if (start, pos - 1) not in self.spanDict: self.spanDict[(start, pos - 1)] = []
        self.spanDict[(start, pos - 1)].append( node )
        enclosing.append( node )
        return None

    def getLabels(self, start, end):
        '''Labels of all constituents exactly covering [start, end]'''

        if (start, end) not in self.spanDict:
            return [NO_TAG]
        return [node.label for node in self.spanDict[(start, end)]]

    def getParent(self, start, end):
        '''Label above the topmost constituent over [start, end] along with the left-edge flag'''

        at_left_edge = start <= 0
        if (start, end) in self.spanDict:
            top_node = self.spanDict[(start, end)][-1]
            if top_node.parent is None:
                return (Resolved(TOP_LABEL), at_left_edge)
            return (Resolved(top_node.parent.label), at_left_edge)

        if start <= 0 and end == self.sent_len - 1:
            return (Resolved(TOP_LABEL), at_left_edge)
        return (UNRESOLVED, at_left_edge)

    def parseError(self, parse_line, msg):
        sys.stderr.write("ERROR: %s in parse : %s\n" % (msg, parse_line))
        sys.stderr.write("Malformed parse tree. Exiting!!\n")
        sys.exit(1)
