import pytest

from spanBucket import bucketSpan


@pytest.mark.parametrize("span_len, bucket", [
    (1, 1), (2, 2), (3, 3),
    (4, 4), (5, 4), (6, 4),
    (7, 7), (8, 7), (9, 7), (10, 7),
    (11, 8), (25, 8), (400, 8),
])
def test_bucket_table(span_len, bucket):
    assert bucketSpan(span_len) == bucket


def test_bucket_is_monotone():
    buckets = [bucketSpan(span_len) for span_len in range(1, 60)]
    assert buckets == sorted(buckets)
    assert set(buckets) == {1, 2, 3, 4, 7, 8}


@pytest.mark.parametrize("span_len", [0, -3])
def test_non_positive_length_is_fatal(span_len, capsys):
    with pytest.raises(SystemExit):
        bucketSpan(span_len)
    assert "Non-positive span length" in capsys.readouterr().err
