import io

import pytest

from cselab.lookup_cli import main, parse_args, run_queries
from cselab.transactions import TransactionTable


def test_parse_args_all_options():
    options = parse_args(["-s", "-t", "10", "sales.csv"])
    assert options.show_stats is True
    assert options.table_size == 10
    assert options.filename == "sales.csv"


def test_parse_args_defaults():
    options = parse_args(["sales.csv"])
    assert options.show_stats is False
    assert options.table_size == 1873


def test_parse_args_small_size_ignored():
    assert parse_args(["-t", "3", "f"]).table_size == 1873


def test_parse_args_option_after_filename():
    options = parse_args(["f", "-s"])
    assert options.show_stats is True
    assert options.filename == "f"


def test_parse_args_unknown_option():
    with pytest.raises(ValueError):
        parse_args(["-x", "f"])


def test_parse_args_missing_filename():
    with pytest.raises(ValueError):
        parse_args(["-s"])


def test_run_queries_hits_and_misses():
    table = TransactionTable(5)
    table.insert("a1", "widget", 9.5)
    out = io.StringIO()
    count = run_queries(table, ["a1\n", "zz\n"], out)
    assert count == 1
    assert out.getvalue() == (
        "found sale id=a1, purchased_item=widget, cost=9.50000\n"
        "could not find sale with id=zz\n"
    )


def test_run_queries_empty_input():
    out = io.StringIO()
    assert run_queries(TransactionTable(3), [], out) == 0
    assert out.getvalue() == ""


def test_main_end_to_end(tmp_path, monkeypatch, capsys):
    path = tmp_path / "sales.csv"
    path.write_text("a1,widget,9.5\nb2,gadget,1.25\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("b2\nnone\n"))
    status = main(["-s", "-t", "7", str(path)])
    captured = capsys.readouterr()
    assert status == 0
    assert "found sale id=b2, purchased_item=gadget, cost=1.25000\n" in captured.out
    assert "could not find sale with id=none\n" in captured.out
    assert "1 successful queries\n" in captured.out
    assert "Table size: 7\n" in captured.out
    assert "Total entries: 2\n" in captured.out


def test_main_reports_duplicates(tmp_path, monkeypatch, capsys):
    path = tmp_path / "sales.csv"
    path.write_text("a1,widget,9.5\na1,other,2\n")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert "load_table duplicate entry: a1\n" in captured.err
    assert captured.out == "0 successful queries\n"


def test_main_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "missing.csv")])
    assert status == 1
    assert "error in load_table\n" in capsys.readouterr().err


def test_main_bad_usage(capsys):
    assert main(["-q"]) == 1
    assert "[-s] [-t table_size] <filename>" in capsys.readouterr().err