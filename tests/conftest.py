import pytest

from htmltree import Element

SAMPLE_HTML = """
  <!DOCTYPE html>
  <html lang="en">
    <head>
      <meta charset="utf-8">
      <title>Test Page</title>
      <link rel="stylesheet" href="/styles.css">
    </head>
    <body>
      <!-- main content -->
      <div class="container">
        <h1>Hello World</h1>
        <img src="/image.jpg" alt="Test Image">
        <a href="/page.html">Link</a>
      </div>
      <script src="/app.js"></script>
    </body>
  </html>
"""


def sample_tree() -> Element:
    return Element(
        "html",
        {"lang": "en"},
        [
            Element(
                "head",
                children=[
                    Element("meta", {"charset": "utf-8"}),
                    Element("title", children=["Test Page"]),
                    Element("link", {"rel": "stylesheet", "href": "/styles.css"}),
                ],
            ),
            Element(
                "body",
                children=[
                    Element(
                        "div",
                        {"class": "container"},
                        [
                            Element("h1", children=["Hello World"]),
                            Element("img", {"src": "/image.jpg", "alt": "Test Image"}),
                            Element("a", {"href": "/page.html"}, ["Link"]),
                        ],
                    ),
                    Element("script", {"src": "/app.js"}),
                ],
            ),
        ],
    )


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture
def sample() -> Element:
    return sample_tree()
