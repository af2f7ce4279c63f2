import pytest

from sortedsample.quick_start import DEFAULT_WEIGHTS, format_report, main, tally

HEADER = "idx  weight   p(idx)   count   p̂(count)"
RULE = "---  ------   ------   -----   --------"


def _rows(text):
    return [line.split() for line in text.splitlines()[2:]]


def test_tally_counts():
    assert tally([0, 1, 1, 3], 4) == [1, 2, 0, 1]


def test_tally_total_matches_input_length():
    indices = [2, 2, 0, 4, 4, 4, 1]
    counts = tally(indices, 5)
    assert sum(counts) == len(indices)
    assert len(counts) == 5


def test_tally_empty():
    assert tally([], 3) == [0, 0, 0]


@pytest.mark.parametrize("bad", [3, -1])
def test_tally_rejects_out_of_range(bad):
    with pytest.raises(IndexError):
        tally([0, bad], 3)


def test_format_report_header():
    lines = format_report([1.0, 3.0], [1, 3], 4).splitlines()
    assert lines[0] == HEADER
    assert lines[1] == RULE
    assert len(lines) == 4


def test_format_report_row_fields():
    rows = _rows(format_report([1.0, 3.0], [1, 3], 4))
    assert rows[0] == ["0", "1.0", "0.250", "1", "0.250"]
    assert [int(r[0]) for r in rows] == [0, 1]
    assert [int(r[3]) for r in rows] == [1, 3]


def test_format_report_probabilities_sum_to_one():
    rows = _rows(format_report([1.0, 3.0, 2.0, 4.0], [10, 30, 20, 40], 100))
    assert sum(float(r[2]) for r in rows) == pytest.approx(1.0, abs=1e-3)
    assert sum(float(r[4]) for r in rows) == pytest.approx(1.0, abs=1e-3)


def test_format_report_length_mismatch():
    with pytest.raises(ValueError):
        format_report([1.0, 2.0], [1], 1)


def test_format_report_rejects_zero_draws():
    with pytest.raises(ValueError):
        format_report([1.0], [0], 0)


def test_main_prints_table(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == HEADER
    assert lines[1] == RULE
    rows = _rows(out)
    assert len(rows) == len(DEFAULT_WEIGHTS)
    counts = [int(r[3]) for r in rows]
    assert sum(counts) == 1000
    total = sum(DEFAULT_WEIGHTS)
    for w, c in zip(DEFAULT_WEIGHTS, counts):
        assert abs(c - 1000 * w / total) < 100


def test_main_is_reproducible(capsys):
    main(["--seed", "7", "--draws", "500"])
    first = capsys.readouterr().out
    main(["--seed", "7", "--draws", "500"])
    second = capsys.readouterr().out
    assert first == second
    assert sum(int(r[3]) for r in _rows(first)) == 500


def test_main_rejects_zero_draws():
    with pytest.raises(SystemExit):
        main(["--draws", "0"])