"""A one-shot file-writing server and the client that feeds it."""

import argparse
import socket
import sys
from pathlib import Path

BUFFER_SIZE = 100
PORT = 3000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_FILENAME = "file.txt"
DEFAULT_CONTENT = "new content"


def _receive(sock):
    data = sock.recv(BUFFER_SIZE)
    if not data:
        raise ConnectionError("peer closed the connection")
    return data


def _target_path(directory, name):
    if not name or name in (".", "..") or Path(name).name != name:
        raise ValueError(f"refusing to write to {name!r}")
    return Path(directory) / name


def serve_once(host=None, port=PORT, directory=".", out=None):
    """Accept one client, create the file it names and store what it sends.

    Both the file name and the content are echoed back to the client.
    Returns the path of the written file.
    """
    out = sys.stdout if out is None else out
    with socket.create_server((host or "", port), backlog=1) as server:
        conn, _ = server.accept()
    with conn:
        raw_name = _receive(conn)
        name = raw_name.decode("utf-8", errors="replace")
        path = _target_path(directory, name)
        with path.open("w+") as handle:
            print(f"string len of {name} is {len(raw_name)}", file=out)
            conn.sendall(raw_name)
            raw_content = _receive(conn)
            handle.write(raw_content.decode("utf-8", errors="replace"))
            conn.sendall(raw_content)
    return path


def send_file_request(host=DEFAULT_HOST, port=PORT, filename=DEFAULT_FILENAME,
                      content=DEFAULT_CONTENT, out=None):
    """Send a file name and then its content, printing each echo.

    Returns the two echoes received from the server.
    """
    out = sys.stdout if out is None else out
    echoes = []
    with socket.create_connection((host, port)) as sock:
        for message in (filename, content):
            sock.sendall(message.encode())
            echo = _receive(sock).decode("utf-8", errors="replace")
            print(f"server echo: {echo}", file=out)
            echoes.append(echo)
    return tuple(echoes)


def server_main(argv=None):
    parser = argparse.ArgumentParser(description="Serve one file-writing request.")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)
    try:
        serve_once(args.host, args.port, args.directory)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


def client_main(argv=None):
    parser = argparse.ArgumentParser(description="Ask the server to write a file.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    parser.add_argument("content", nargs="?", default=DEFAULT_CONTENT)
    args = parser.parse_args(argv)
    try:
        send_file_request(args.host, args.port, args.filename, args.content)
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0