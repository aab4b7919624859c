import pytest

from receipt_inventory.parsing.s1_section import SectionBounder, BoundedRegion


@pytest.fixture
def bounder():
    return SectionBounder(
        start_markers=["ддв број", "ddv broj"],
        end_markers=["промет од", "promet od"],
    )


def test_empty_lines(bounder):
    region = bounder.bound([])
    assert region == BoundedRegion(start=0, end=0)
    assert len(region) == 0


def test_no_markers_covers_whole_receipt(bounder):
    lines = ["Milk", "2 L 89.00", "Bread", "1 kom 45.50"]
    region = bounder.bound(lines)

    assert region.start == 0
    assert region.end == len(lines)
    assert not region.start_marker_found
    assert not region.end_marker_found


def test_both_markers(bounder):
    lines = ["MARKET DOO", "ДДВ број 123", "Milk", "2 L 89.00", "Промет од 134.50"]
    region = bounder.bound(lines)

    assert (region.start, region.end) == (2, 4)
    assert region.start_marker_found
    assert region.end_marker_found


def test_markers_are_case_insensitive_substrings(bounder):
    lines = ["header", "  DDV BROJ: 4030", "Milk", "2 L 89.00", "vkupen PROMET OD smetka"]
    region = bounder.bound(lines)
    assert (region.start, region.end) == (2, 4)


def test_only_end_marker(bounder):
    lines = ["Milk", "2 L 89.00", "промет од 89.00", "trailer"]
    region = bounder.bound(lines)
    assert (region.start, region.end) == (0, 2)


def test_first_start_marker_wins(bounder):
    # Второе упоминание налогового номера не сдвигает начало зоны
    lines = ["ДДВ број 1", "Milk", "2 L 89.00", "ddv broj 2", "Bread", "1 kom 45.50"]
    region = bounder.bound(lines)
    assert region.start == 1
    assert region.end == len(lines)


def test_end_marker_above_start_marker(bounder):
    lines = ["промет од", "ДДВ број 1", "Milk", "2 L 89.00"]
    region = bounder.bound(lines)

    assert region.end == 0
    assert region.start == 0
    assert region.end_marker_found
    assert not region.start_marker_found


def test_both_markers_on_one_line_collapse(bounder):
    lines = ["ДДВ број 1 промет од 0", "Milk", "2 L 89.00"]
    region = bounder.bound(lines)

    assert region.start == region.end == 0
    assert len(region) == 0


@pytest.mark.parametrize("lines", [
    [],
    ["a"],
    ["ДДВ број"],
    ["промет од"],
    ["x", "ДДВ број", "y", "промет од", "z"],
    ["промет од", "ДДВ број"],
])
def test_region_is_always_valid(bounder, lines):
    region = bounder.bound(lines)
    assert 0 <= region.start <= region.end <= len(lines)


def test_no_configured_markers():
    region = SectionBounder([], []).bound(["ДДВ број", "Milk", "2 L 89.00"])
    assert (region.start, region.end) == (0, 3)


def test_to_dict(bounder):
    region = bounder.bound(["ДДВ број", "Milk", "2 L 89.00"])
    assert region.to_dict() == {
        "start": 1,
        "end": 3,
        "start_marker_found": True,
        "end_marker_found": False,
    }
