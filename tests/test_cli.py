import pytest
from bs4 import BeautifulSoup

from mailcomments.cli import main


def run_cli(tmp_path, *extra):
    return main(["--maildir", str(tmp_path / "maildir"), "--html-dir", str(tmp_path / "html-dir"), "--quiet", *extra])


def comment_names(path):
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
    return [div.get_text() for div in soup.find_all("div", class_="comment-name")]


def test_two_mails_one_page(tmp_path, write_mail, capsys):
    # written newest first to show the output is ordered by time, not by walk order
    write_mail("a.mail", URL="/foo", Time="2000000", ID="2", Name="Later")
    write_mail("b.mail", URL="/foo", Time="1000000", ID="1", Name="Earlier")

    assert run_cli(tmp_path) == 0

    out_file = tmp_path / "html-dir" / "foo"
    assert comment_names(out_file) == ["Earlier", "Later"]
    out = capsys.readouterr().out
    assert out == f"Wrote {out_file} (2 comments)\n"


def test_pages_in_nested_html_dir(tmp_path, write_mail):
    write_mail("1.mail", URL="https://example.com/foo", Time="1000000", ID="1")
    write_mail("2.mail", subdir="new", URL="https://example.com/foo", Time="2000000", ID="2")

    html_dir = tmp_path / "html-dir" / "posts"
    assert main(["--maildir", str(tmp_path / "maildir"), "--html-dir", str(html_dir), "--quiet"]) == 0

    assert [p.name for p in html_dir.iterdir()] == ["foo"]
    text = (html_dir / "foo").read_text(encoding="utf-8")
    assert text.index("1970-01-12 13:46:40") < text.index("1970-01-24 03:33:20")


def test_one_file_per_page(tmp_path, write_mail, capsys):
    write_mail("1.mail", URL="/foo", ID="1")
    write_mail("2.mail", URL="/bar", ID="2")
    write_mail("3.mail", URL="/foo", ID="3")

    assert run_cli(tmp_path) == 0

    html_dir = tmp_path / "html-dir"
    assert sorted(p.name for p in html_dir.iterdir()) == ["bar", "foo"]
    assert capsys.readouterr().out.splitlines() == [
        f"Wrote {html_dir / 'bar'} (1 comments)",
        f"Wrote {html_dir / 'foo'} (2 comments)",
    ]


def test_invalid_ip_aborts(tmp_path, write_mail, capsys):
    write_mail("1.mail", URL="/foo", ID="1")
    write_mail("2.mail", URL="/foo", ID="2", IP="not-an-ip")

    assert run_cli(tmp_path) != 0

    assert not (tmp_path / "html-dir").exists()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not-an-ip" in captured.err
    assert "2.mail" in captured.err


def test_bad_url_aborts(tmp_path, write_mail, capsys):
    write_mail("1.mail", URL="/posts/foo")

    assert run_cli(tmp_path) == 1

    err = capsys.readouterr().err
    assert err.startswith("Unable to write HTML for page: /posts/foo:")
    assert "too many '/' characters" in err
    assert list((tmp_path / "html-dir").iterdir()) == []


def test_rerun_regenerates(tmp_path, write_mail):
    first = write_mail("1.mail", URL="/foo", ID="1", Name="Gone")
    assert run_cli(tmp_path) == 0

    first.unlink()
    write_mail("2.mail", URL="/foo", ID="2", Name="Fresh")
    assert run_cli(tmp_path) == 0

    assert comment_names(tmp_path / "html-dir" / "foo") == ["Fresh"]


def test_empty_maildir(tmp_path, capsys):
    (tmp_path / "maildir").mkdir()
    assert run_cli(tmp_path) == 0
    assert capsys.readouterr().out == ""


def test_missing_maildir(tmp_path, capsys):
    assert run_cli(tmp_path) == 1
    assert "error reading dir names" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "you must provide a maildir"),
        (["--html-dir", "out"], "you must provide a maildir"),
        (["--maildir", "in"], "you must provide an HTML directory"),
        (["--maildir", "", "--html-dir", "out"], "you must provide a maildir"),
    ],
)
def test_missing_arguments(argv, message, capsys):
    assert main(argv) == 1
    err = capsys.readouterr().err
    assert err.startswith(message)
    assert "--html-dir" in err


def test_log_file(tmp_path, write_mail):
    write_mail("1.mail", IP="not-an-ip")
    log_file = tmp_path / "run.log"

    assert run_cli(tmp_path, "--log-file", str(log_file), "--log-level", "INFO") == 1

    log = log_file.read_text(encoding="utf-8")
    assert " - ERROR - " in log
    assert "not-an-ip" in log
