import threading
import time

import pytest

from hello_server.server import bind_socket, build_server


@pytest.fixture
def live_server():
    """Run the real uvicorn server on an ephemeral port in a background thread."""
    sock = bind_socket("127.0.0.1", 0)
    server = build_server()
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()
    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("server did not start")
        time.sleep(0.01)
    yield f"http://127.0.0.1:{sock.getsockname()[1]}"
    server.should_exit = True
    thread.join(timeout=10)
    sock.close()


@pytest.fixture
def occupied_port():
    blocker = bind_socket("0.0.0.0", 0)
    yield blocker.getsockname()[1]
    blocker.close()

