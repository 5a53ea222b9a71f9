import requests

PRECEDENT_URL = "https://www.no-harassment.mhlw.go.jp/foundation/judicail-precedent/"


def make_response(body: str, status: int = 200, url: str = PRECEDENT_URL, charset: str | None = "utf-8"):
    response = requests.Response()
    response.status_code = status
    response._content = body.encode("utf-8")
    response._content_consumed = True
    response.url = url
    response.headers["Content-Type"] = f"text/html; charset={charset}" if charset else "text/html"
    response.encoding = charset if charset else "ISO-8859-1"
    return response


def anchor(href: str, text: str) -> str:
    return f'<a href="{href}">{text}</a>'


def page(*anchors: str) -> str:
    return "<html><body><ul>" + "".join(f"<li>{a}</li>" for a in anchors) + "</ul></body></html>"
