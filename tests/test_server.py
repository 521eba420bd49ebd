import threading
import time

import pytest
import requests
from werkzeug.serving import make_server

from demo_api import create_app
from demo_api.config import TestConfig


@pytest.fixture
def live_server():
    server = make_server("127.0.0.1", 0, create_app(TestConfig), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    thread.join(timeout=5)


def test_pending_delay_does_not_block_other_requests(live_server):
    slow = {}

    def call_slow():
        slow["resp"] = requests.get(f"{live_server}/api/test/delay", params={"ms": 1500}, timeout=10)

    worker = threading.Thread(target=call_slow)
    worker.start()
    time.sleep(0.2)

    started = time.perf_counter()
    fast = requests.get(f"{live_server}/api/users", timeout=5)
    elapsed = time.perf_counter() - started

    assert fast.status_code == 200
    assert elapsed < 1.0
    assert worker.is_alive()

    worker.join(timeout=10)
    assert slow["resp"].status_code == 200
    assert slow["resp"].json()["delay"] == 1500
