import io
import socket
from unittest.mock import patch

import pytest

from hostresolve.lookup import lookup_files, main

KNOWN = {
    "alpha.example.com": "192.0.2.10",
    "beta.example.com": "192.0.2.20",
    "gamma.example.com": "192.0.2.30",
}


def _fake_getaddrinfo(host, port, *args, **kwargs):
    if host in KNOWN:
        return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", (KNOWN[host], 0))]
    raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


@pytest.fixture
def resolver():
    with patch("socket.getaddrinfo", side_effect=_fake_getaddrinfo) as mocked:
        yield mocked


def test_lookup_files_writes_host_and_address(tmp_path, resolver):
    first = tmp_path / "one.txt"
    first.write_text("alpha.example.com\nbeta.example.com\n")
    second = tmp_path / "two.txt"
    second.write_text("gamma.example.com\n")
    output = io.StringIO()
    count = lookup_files([first, second], output)
    assert count == 3
    assert output.getvalue().splitlines() == [
        "alpha.example.com,192.0.2.10",
        "beta.example.com,192.0.2.20",
        "gamma.example.com,192.0.2.30",
    ]


def test_words_on_one_line_are_separate_hostnames(tmp_path, resolver):
    source = tmp_path / "hosts.txt"
    source.write_text("  alpha.example.com\tbeta.example.com  \n\n")
    output = io.StringIO()
    lookup_files([source], output)
    assert output.getvalue().splitlines() == [
        "alpha.example.com,192.0.2.10",
        "beta.example.com,192.0.2.20",
    ]


def test_failed_lookup_writes_empty_address(tmp_path, resolver, capsys):
    source = tmp_path / "hosts.txt"
    source.write_text("nowhere.example.com\nalpha.example.com\n")
    output = io.StringIO()
    lookup_files([source], output)
    assert output.getvalue().splitlines() == [
        "nowhere.example.com,",
        "alpha.example.com,192.0.2.10",
    ]
    assert "dnslookup error: nowhere.example.com" in capsys.readouterr().err


def test_missing_input_stops_processing(tmp_path, resolver, capsys):
    first = tmp_path / "one.txt"
    first.write_text("alpha.example.com\n")
    last = tmp_path / "three.txt"
    last.write_text("gamma.example.com\n")
    output = io.StringIO()
    count = lookup_files([first, tmp_path / "absent.txt", last], output)
    assert count == 1
    assert output.getvalue() == "alpha.example.com,192.0.2.10\n"
    assert "Error Opening Input File" in capsys.readouterr().err


def test_long_word_is_split_into_pieces(tmp_path, resolver):
    source = tmp_path / "long.txt"
    source.write_text("a" * 1030 + "\n")
    output = io.StringIO()
    lookup_files([source], output)
    hosts = [line.split(",")[0] for line in output.getvalue().splitlines()]
    assert hosts == ["a" * 1024, "a" * 6]


def test_main_needs_two_arguments(capsys):
    assert main(["only-one"]) == 1
    assert "Not enough arguments: 1" in capsys.readouterr().err


def test_main_writes_output_file(tmp_path, resolver):
    source = tmp_path / "hosts.txt"
    source.write_text("beta.example.com\n")
    target = tmp_path / "results.txt"
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "beta.example.com,192.0.2.20\n"


def test_main_fails_when_output_cannot_be_opened(tmp_path, resolver, capsys):
    source = tmp_path / "hosts.txt"
    source.write_text("beta.example.com\n")
    target = tmp_path / "no-such-dir" / "results.txt"
    assert main([str(source), str(target)]) == 1
    assert "Error Opening Output File" in capsys.readouterr().err