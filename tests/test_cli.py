import pytest

from arrayops.cli import main

INPUT_TEXT = "5 4 4 2 -1 0\n10, 15, -1, +0\n5 4 15 2 3 0\n"


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(INPUT_TEXT, encoding="utf-8")
    return path


def _section(lines, title):
    index = lines.index(title)
    return lines[index + 1]


def test_main_succeeds(input_file, capsys):
    assert main([str(input_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "PrintArrays"
    assert lines[1] == "Vector 1: 5 4 4 2 -1 0 "
    assert lines[2] == "Vector 2: 10 15 -1 0 "
    assert lines[3] == "Vector 3: 5 4 15 2 3 0 "


def test_main_prints_sorted_arrays(input_file, capsys):
    main([str(input_file)])
    lines = capsys.readouterr().out.splitlines()
    start = lines.index("ManualSortTransformer result")
    sorted_lines = lines[start + 1 : start + 4]
    for line, raw in zip(sorted_lines, INPUT_TEXT.splitlines()):
        label, _, numbers = line.partition(": ")
        values = [int(v) for v in numbers.split()]
        assert values == sorted(int(v) for v in raw.replace(",", " ").split())
        assert label.startswith("Vector ")


def test_main_prints_intersections(input_file, capsys):
    main([str(input_file)])
    lines = capsys.readouterr().out.splitlines()
    titles = [i for i, line in enumerate(lines) if line == "IntersectionTransformer result"]
    assert len(titles) == 2
    assert lines[titles[0] + 1] == "0 "
    assert lines[titles[1] + 1] == "0 2 5 "


def test_main_prints_unique_reverse_sorted(input_file, capsys):
    main([str(input_file)])
    lines = capsys.readouterr().out.splitlines()
    assert _section(lines, "UniqueReverseSortedTransformer result") == "10 3 "


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    assert f"Could not open file: {missing}" in capsys.readouterr().err


def test_main_needs_two_arrays(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1 2 3\n", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "two arrays" in captured.err


def test_main_reports_bad_numbers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1 --\n2\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Could not parse" in capsys.readouterr().err