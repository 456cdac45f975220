import sys

def bucketSpan(span_len):
    '''Coarse span-length feature: 1, 2, 3, 4-6, 7-10 and longer spans'''

    if span_len < 1:
        sys.stderr.write("ERROR: Non-positive span length %d. Exiting!!\n" % (span_len))
        sys.exit(1)

    if span_len <= 3: return span_len
    elif span_len <= 6: return 4
    elif span_len <= 10: return 7
    return 8
