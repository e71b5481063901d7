"""Page rendering.

Turns a PageInfo into a response body: either the raw contents, or a dark
themed HTML page with links for the index and a ``<pre>`` block for
everything else.
"""

from dataclasses import dataclass
from html import escape
from urllib.parse import quote, urlsplit

PROJECT_URL = "https://github.com/seanbreckenridge/subpath-serve"

DARK_CSS = """
html, body {
    margin: 0px;
    padding: 0px;
    border: 0px;
    width: 100%;
    min-height: 100vh;
    background-color: #111;
    color: white;
    font-family: "Courier", sans-serif;
}
main {
    display: flex;
    justify-content: center;
}
.container {
    width: 90%;
    margin: 2rem;
}
div#rounded {
    background-color: #1d2330;
    font-size: 120%;
    margin: 1rem;
    padding: 1rem;
    border-radius: min(0.25rem, 15px);
}
.title {
    display: flex;
    flex-direction: row;
    justify-content: flex-end;
    width: 90%;
    margin-left: auto;
    margin-right: auto;
}
code {
    white-space: pre-wrap;
    word-wrap: break-word;
}
p {
    margin: 4px;
}
a {
    color: #0779e4;
}
a:visited {
    color: #4cbbb9;
}
a:hover {
    color: #77d8d8;
}
a:active {
    color: #eff3c6;
}
footer {
    display: flex;
    flex-direction: column;
    justify-content: flex-start;
    width: 80%;
    margin-left: auto;
    margin-right: auto;
    padding-bottom: 1rem;
}
footer div {
    padding-top: 0.5rem;
    padding-bottom: 0.5rem;
}
"""

# Drops the query string, so "?dark" becomes the raw response
RAW_SCRIPT = """
function RawFile() {
    window.location.href = window.location.href.substring(0, window.location.href.lastIndexOf("?"));
}
"""


@dataclass(frozen=True)
class ExternalLink:
    """Link to the file on an external repository host."""

    url: str
    label: str


@dataclass(frozen=True)
class PageInfo:
    """Everything needed to render one response.

    ``lines`` is set only for the index page, rendered as one link per line.
    """

    title: str
    contents: str
    lines: tuple[str, ...] | None = None
    external_link: ExternalLink | None = None


def render(page: PageInfo, wants_html: bool) -> str:
    """Render a page as raw text or as dark HTML.

    Args:
        page: Page to render
        wants_html: Render the themed HTML document instead of raw contents

    Returns:
        Response body
    """
    if not wants_html:
        return page.contents
    return render_html(page)


def render_html(page: PageInfo) -> str:
    if page.lines is not None:
        body = "\n".join(
            f'<p><a href="./{escape(_quote_path(line))}?dark">{escape(line)}</a></p>'
            for line in page.lines
        )
    else:
        body = f"<pre><code>{escape(page.contents)}</code></pre>"

    footer = ""
    if page.external_link is not None:
        link = page.external_link
        footer = f'<div>View on <a href="{escape(link.url)}">{escape(link.label)}</a></div>\n'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<style>{DARK_CSS}</style>
<title>{escape(page.title)}</title>
</head>
<body>
<main>
<div class="container">
<div class="title">
<a href="#" onclick="RawFile()">Raw</a>
</div>
<div id="rounded">
{body}
</div>
</div>
</main>
<footer>
{footer}<div>Served with <a href="{PROJECT_URL}">subpath-serve</a></div>
</footer>
<script>{RAW_SCRIPT}</script>
</body>
</html>
"""


def external_link_label(prefix_url: str | None) -> str:
    """Derive a display name for the repository host of prefix_url.

    Uses the second-to-last label of the hostname, capitalized:
    ``https://github.com/user/repo/blob/master`` gives ``Github``.
    Falls back to ``Repository`` when no name can be derived.
    """
    if not prefix_url:
        return "Repository"
    try:
        hostname = urlsplit(prefix_url).hostname
    except ValueError:
        return "Repository"
    if not hostname:
        return "Repository"
    parts = hostname.split(".")
    if len(parts) < 2 or not parts[-2]:
        return "Repository"
    return parts[-2].capitalize()


def _quote_path(path: str) -> str:
    return quote(path, safe="/", errors="surrogateescape")
