from http.server import BaseHTTPRequestHandler

from portfolio_site.render import render_page


class handler(BaseHTTPRequestHandler):
    """
    Minimal Vercel Python function.

    Serves the rendered projects page. Images and the stylesheet are
    expected to be served by the static host under /static/.
    """

    def do_GET(self):
        body = render_page().encode("utf-8")

        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)
