import io
import socket
import threading
import time

import pytest

from sysdrills.filetransfer import client_main, send_file_request, serve_once

HOST = "127.0.0.1"


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind((HOST, 0))
        return probe.getsockname()[1]


def _start_server(port, directory, out):
    outcome = {}

    def run():
        try:
            outcome["path"] = serve_once(HOST, port, directory, out)
        except Exception as error:  # recorded for the test to inspect
            outcome["error"] = error

    thread = threading.Thread(target=run)
    thread.start()
    return thread, outcome


def _retry(call):
    deadline = time.monotonic() + 10
    while True:
        try:
            return call()
        except ConnectionRefusedError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.05)


def test_round_trip_writes_file_and_echoes(tmp_path):
    port = _free_port()
    server_out = io.StringIO()
    thread, outcome = _start_server(port, tmp_path, server_out)
    client_out = io.StringIO()
    name, content = "notes.txt", "some text to keep"

    echoes = _retry(lambda: send_file_request(HOST, port, name, content, client_out))
    thread.join(timeout=10)

    assert echoes == (name, content)
    assert outcome["path"] == tmp_path / name
    assert (tmp_path / name).read_text() == content
    assert server_out.getvalue() == f"string len of {name} is {len(name)}\n"
    assert client_out.getvalue() == f"server echo: {name}\nserver echo: {content}\n"


def test_defaults_match_original_exchange(tmp_path):
    port = _free_port()
    thread, outcome = _start_server(port, tmp_path, io.StringIO())
    echoes = _retry(lambda: send_file_request(HOST, port, out=io.StringIO()))
    thread.join(timeout=10)
    assert echoes == ("file.txt", "new content")
    assert (tmp_path / "file.txt").read_text() == "new content"


def test_server_refuses_path_outside_directory(tmp_path):
    port = _free_port()
    thread, outcome = _start_server(port, tmp_path, io.StringIO())
    with pytest.raises(ConnectionError):
        _retry(lambda: send_file_request(HOST, port, "../escape.txt", "x", io.StringIO()))
    thread.join(timeout=10)
    assert isinstance(outcome["error"], ValueError)
    assert not (tmp_path.parent / "escape.txt").exists()


def test_client_main_reports_refused_connection(capsys):
    port = _free_port()
    assert client_main(["--host", HOST, "--port", str(port)]) == 1
    assert capsys.readouterr().err.startswith("error:")