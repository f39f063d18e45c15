import threading
from http.server import HTTPServer
from urllib.request import urlopen

import pytest

from api.index import handler


@pytest.fixture
def server():
    srv = HTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()


def test_get_serves_rendered_page(server, soup):
    host, port = server.server_address
    with urlopen(f"http://{host}:{port}/") as resp:
        body = resp.read()
        assert resp.status == 200
        assert resp.headers["Content-Type"] == "text/html; charset=utf-8"
        assert int(resp.headers["Content-Length"]) == len(body)

    s = soup(body)
    assert s.select_one("nav a[href='/projects']").get_text() == "Projects"
