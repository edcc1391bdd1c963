import pytest

from offline_summarizer.frequency import build_frequency_table


def test_counts_every_token():
    table = build_frequency_table([["see", "spot"], ["see", "spot", "run"], ["run", "spot", "run"]])
    assert table.get("spot") == 3
    assert table.get("run") == 3
    assert table.get("see") == 2
    assert table.get("missing") == 0
    assert "run" in table
    assert "missing" not in table
    assert len(table) == 3


def test_most_common_is_stable():
    table = build_frequency_table([["b", "a"], ["a", "b", "c"]])
    assert table.most_common(2) == [("a", 2), ("b", 2)]
    assert table.most_common() == [("a", 2), ("b", 2), ("c", 1)]


def test_table_is_read_only():
    table = build_frequency_table([["x"]])
    with pytest.raises(TypeError):
        table.counts["x"] = 5  # type: ignore[index]


def test_empty_document():
    table = build_frequency_table([])
    assert len(table) == 0
    assert table.most_common() == []
