from typing import List

from htmltree import (
    DEFAULT_VIEWPORT,
    Element,
    Resource,
    create_html_document,
    ensure_head,
    exists,
    extract_all_resources,
    insert_inline_script,
    insert_link,
    set_charset,
    set_title,
    set_viewport,
    traverse,
)


def _count(tree: Element, name: str) -> int:
    found: List[Element] = []
    traverse(tree, lambda node: isinstance(node, Element) and node.name == name and found.append(node))
    return len(found)


def _body_only() -> Element:
    return Element("html", children=[Element("body")])


def test_ensure_head_returns_existing_head() -> None:
    head = Element("head")
    root = Element("html", children=[head, Element("body")])

    assert ensure_head(root) is head
    assert len(root.children) == 2


def test_ensure_head_inserts_before_body() -> None:
    root = Element("html", children=["stray", Element("nav"), Element("body")])

    head = ensure_head(root)

    assert root.children[2] is head
    assert head == Element("head")
    assert root.children[3].name == "body"


def test_ensure_head_inserts_first_without_body() -> None:
    root = Element("html", children=[Element("div")])

    ensure_head(root)

    assert [child.name for child in root.children] == ["head", "div"]


def test_ensure_head_handles_missing_children() -> None:
    root = Element("html", children=None)  # type: ignore[arg-type]

    ensure_head(root)

    assert root.children == [Element("head")]


def test_set_title_updates_existing_title(sample) -> None:
    set_title(sample, "New Title")

    assert exists(sample, lambda view: view.name == "title" and view.content == "New Title")
    assert _count(sample, "title") == 1


def test_set_title_replaces_nested_markup() -> None:
    root = Element("html", children=[Element("head", children=[Element("title", children=["a", Element("b")])])])

    set_title(root, "Plain")

    assert root.children[0].children[0] == Element("title", children=["Plain"])


def test_set_title_rewrites_every_title() -> None:
    first = Element("title", children=["one"])
    second = Element("title", children=["two"])
    root = Element("html", children=[Element("head", children=[first]), Element("body", children=[second])])

    set_title(root, "Both")

    assert first.children == ["Both"]
    assert second.children == ["Both"]


def test_set_title_prepends_title_to_head() -> None:
    root = Element("html", children=[Element("head", children=[Element("meta", {"charset": "utf-8"})])])

    set_title(root, "Created Title")

    head = root.children[0]
    assert head.children[0] == Element("title", children=["Created Title"])
    assert head.children[1].name == "meta"


def test_set_title_creates_head() -> None:
    root = _body_only()

    set_title(root, "New Title")

    assert len(root.children) == 2
    assert root.children[0].name == "head"
    assert root.children[0].children[0].name == "title"


def test_set_charset_keeps_existing_charset(sample) -> None:
    before = _count(sample, "meta")

    set_charset(sample)
    set_charset(sample, "iso-8859-1")

    assert _count(sample, "meta") == before


def test_set_charset_prepends_meta() -> None:
    root = Element("html", children=[Element("head", children=[Element("title", children=["t"])])])

    set_charset(root)

    head = root.children[0]
    assert head.children[0] == Element("meta", {"charset": "utf-8"})


def test_set_charset_uses_custom_value() -> None:
    root = create_html_document()
    head = root.children[0]
    head.children = [child for child in head.children if "charset" not in child.attribs]

    set_charset(root, "iso-8859-1")

    assert head.children[0].attribs == {"charset": "iso-8859-1"}


def test_set_charset_recognizes_http_equiv_and_name_forms() -> None:
    http_equiv = Element(
        "meta", {"http-equiv": "Content-Type", "content": "text/html; Charset=UTF-8"}
    )
    named = Element("meta", {"name": "CHARSET", "content": "utf-8"})

    for meta in (http_equiv, named):
        root = Element("html", children=[Element("head", children=[meta])])
        set_charset(root)
        assert root.children[0].children == [meta]


def test_set_charset_ignores_content_type_without_charset() -> None:
    meta = Element("meta", {"http-equiv": "content-type", "content": "text/html"})
    root = Element("html", children=[Element("head", children=[meta])])

    set_charset(root)

    assert root.children[0].children == [Element("meta", {"charset": "utf-8"}), meta]


def test_set_viewport_appends_meta() -> None:
    root = create_html_document()
    head = root.children[0]
    head.children = [child for child in head.children if child.attribs.get("name") != "viewport"]

    set_viewport(root, "width=device-width, initial-scale=2.0")

    assert head.children[-1] == Element(
        "meta", {"name": "viewport", "content": "width=device-width, initial-scale=2.0"}
    )


def test_set_viewport_does_not_duplicate() -> None:
    root = create_html_document()
    before = _count(root, "meta")

    set_viewport(root)
    set_viewport(root)

    assert _count(root, "meta") == before


def test_set_viewport_name_match_is_case_sensitive() -> None:
    root = Element("html", children=[Element("head", children=[Element("meta", {"name": "Viewport"})])])

    set_viewport(root)

    assert root.children[0].children[-1].attribs == {"name": "viewport", "content": DEFAULT_VIEWPORT}


def test_insert_link_appends_to_head() -> None:
    root = create_html_document()

    insert_link(root, "/test.css", "stylesheet", {"media": "screen"})

    head = root.children[0]
    assert head.children[-1] == Element(
        "link", {"rel": "stylesheet", "href": "/test.css", "media": "screen"}
    )


def test_insert_link_creates_head() -> None:
    root = _body_only()

    insert_link(root, "/style.css")

    assert root.children[0].name == "head"
    assert root.children[0].children[0] == Element("link", {"rel": "stylesheet", "href": "/style.css"})


def test_insert_link_twice_adds_two_links() -> None:
    root = create_html_document()

    insert_link(root, "/a.css")
    insert_link(root, "/a.css")

    head = root.children[0]
    links = [child for child in head.children if child.name == "link"]
    assert len(links) == 2
    assert links[0] is not links[1]


def test_insert_inline_script_appends_to_head() -> None:
    root = create_html_document()
    code = 'console.log("test");'

    insert_inline_script(root, code)
    insert_inline_script(root, code)

    assert exists(root, lambda view: view.name == "script" and view.content == code)
    assert root.children[0].children[-1] == Element("script", children=[code])
    assert _count(root, "script") == 2


def test_extract_all_resources_in_document_order(sample) -> None:
    assert extract_all_resources(sample) == [
        Resource(name="link", attribute="href", value="/styles.css"),
        Resource(name="img", attribute="src", value="/image.jpg"),
        Resource(name="a", attribute="href", value="/page.html"),
        Resource(name="script", attribute="src", value="/app.js"),
    ]


def test_extract_all_resources_reports_each_attribute() -> None:
    root = Element(
        "body",
        children=[
            Element("form", {"action": "/submit"}),
            Element("object", {"data": "/movie.swf"}),
            Element("x-widget", {"href": "/h", "src": "/s", "action": ""}),
        ],
    )

    assert extract_all_resources(root) == [
        Resource("form", "action", "/submit"),
        Resource("object", "data", "/movie.swf"),
        Resource("x-widget", "src", "/s"),
        Resource("x-widget", "href", "/h"),
    ]


def test_extract_all_resources_without_resources() -> None:
    root = Element("html", children=[Element("body", children=[Element("p", children=["text"])])])

    assert extract_all_resources(root) == []
    assert extract_all_resources(None) == []
