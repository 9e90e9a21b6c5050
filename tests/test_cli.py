import pytest

from sniffwatch import cli


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help(flag, capsys):
    assert cli.main([flag]) == 0
    out, err = capsys.readouterr()
    assert out == cli.HELP_TEXT + "\n"
    assert "Application to comfortably monitor your Internet traffic" in out
    assert err == ""


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_version(flag, capsys):
    assert cli.main([flag]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == f"{cli.PROGRAM_NAME} {cli.APP_VERSION}"
    assert err == ""


def test_unknown_argument(capsys):
    assert cli.main(["--bogus"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "unknown option '--bogus'" in err
    assert f"try '{cli.PROGRAM_NAME} --help'" in err


def test_only_first_argument_matters(capsys):
    assert cli.main(["-v", "--bogus"]) == 0
    out, _ = capsys.readouterr()
    assert cli.APP_VERSION in out
    assert cli.main(["--bogus", "-h"]) == 1


def test_no_arguments_prints_nothing(capsys):
    assert cli.main([]) == 0
    out, err = capsys.readouterr()
    assert (out, err) == ("", "")


def test_reads_sys_argv_by_default(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["prog", "--version"])
    assert cli.main() == 0
    assert cli.APP_VERSION in capsys.readouterr().out