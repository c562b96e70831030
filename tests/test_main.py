import pytest

from main import main


def test_prints_one_token_per_line(capsys) -> None:
    main(["f(a, 'it''s')"])

    assert capsys.readouterr().out.splitlines() == ["f", "(", "a", ",", "'it''s'", ")"]


def test_unescape_flag(capsys) -> None:
    main(["--unescape", "SELECT 'it''s', \"a\"\"b\""])

    assert capsys.readouterr().out.splitlines() == ["SELECT", "it's", ",", 'a"b']


def test_reads_statement_from_stdin(capsys, monkeypatch) -> None:
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("  x   y  \n"))
    main([])

    assert capsys.readouterr().out.splitlines() == ["x", "y"]


def test_execute_prints_result(capsys) -> None:
    main(["--execute", "SELECT 'hello' AS greeting"])

    out = capsys.readouterr().out
    assert "'hello'" in out
    assert "greeting" in out


def test_execute_failure_exits() -> None:
    with pytest.raises(SystemExit, match="failed"):
        main(["--execute", "SELECT * FROM missing"])


def test_empty_statement_exits() -> None:
    with pytest.raises(SystemExit, match="No statement given"):
        main(["   "])
