import socket
import threading
from contextlib import contextmanager

from saba.cli import main


@contextmanager
def serve_once(response):
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)

    def handle():
        try:
            conn, _ = listener.accept()
        except OSError:
            return
        with conn:
            data = b""
            while not data.endswith(b"\n\n"):
                chunk = conn.recv(4096)
                if not chunk:
                    break
                data += chunk
            conn.sendall(response)

    thread = threading.Thread(target=handle, daemon=True)
    thread.start()
    try:
        yield listener.getsockname()[1]
    finally:
        thread.join(timeout=5)
        listener.close()


def closed_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_prints_response(capsys):
    reply = b"HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message"
    with serve_once(reply) as port:
        code = main(["--host", "127.0.0.1", "--port", str(port), "--path", "x"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("response: \n")
    assert "status_code=200" in out
    assert "'body message'" in out


def test_prints_error(capsys):
    code = main(["--host", "127.0.0.1", "--port", str(closed_port())])
    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("error: \n")
    assert "Failed to connect to TCP stream" in out