# tests/test_pipeline.py
"""
End-to-end tests for ``extract`` / ``extract_soup``: the documented
scenarios plus the behavioural properties of the whole pipeline.
"""

from types import SimpleNamespace
from xml.dom import minidom

import pytest
from bs4 import BeautifulSoup

from declutter import (
    DocumentFactoryError,
    ExtractionConfig,
    ExtractionPhase,
    ScoringStrategy,
    extract,
    extract_soup,
)
from declutter.services.dom.soup import SoupDocumentFactory, SoupNodeReader
from declutter.services.extractor.walker import build_mirror


# -------------------------------------------------------------------
# 1️⃣  Scenario A – sidebar dropped, paragraph kept
# -------------------------------------------------------------------
def test_sidebar_is_removed(parse, prose):
    assert len(prose) == 120
    root = parse(f'<div><p>{prose}</p><div class="sidebar">related links</div></div>')

    container = extract_soup(root)

    assert container.name == "div"
    assert len(container.contents) == 1
    article = container.contents[0]
    assert article.name == "div"
    assert [c.name for c in article.contents] == ["p"]
    assert article.p.get_text() == prose
    assert "related links" not in str(container)


# -------------------------------------------------------------------
# 2️⃣  Scenario B – preformatted text survives verbatim
# -------------------------------------------------------------------
def test_pre_content_is_preserved(parse):
    container = extract_soup(parse("<pre>&lt;b&gt;bold&lt;/b&gt;</pre>"))

    pre = container.contents[0]
    assert pre.name == "pre"
    assert pre.get_text() == "<b>bold</b>"
    assert pre.find("b") is None


# -------------------------------------------------------------------
# 3️⃣  Scenario C – inline data-URI images never reach the output
# -------------------------------------------------------------------
def test_data_uri_image_is_absent(parse, prose):
    root = parse(f'<div><img src="data:image/png;base64,AAAA"><p>{prose}</p></div>')
    container = extract_soup(root)
    assert container.find("img") is None
    assert prose in container.get_text()


def test_data_uri_image_root_gives_empty_container(parse):
    container = extract_soup(parse('<img src="data:image/png;base64,AAAA">'))
    assert str(container) == "<div></div>"


# -------------------------------------------------------------------
# 4️⃣  Scenario D – anchor text does not decide the winner
# -------------------------------------------------------------------
def test_anchor_text_does_not_win_over_prose(parse, reader, prose):
    long_link = "n" * 200
    with_link = parse(f'<div><a href="/x">{long_link}</a><p>{prose}</p></div>')
    without_link = parse(f"<div><p>{prose}</p></div>")

    # the anchor contributes nothing to its container
    assert (
        build_mirror(with_link, reader).content_score
        == build_mirror(without_link, reader).content_score
    )

    container = extract_soup(with_link)
    top = container.contents[0]
    assert top.name == "div"
    assert top.p.get_text() == prose


def test_link_only_container_scores_no_higher_than_empty(parse, reader):
    links = "".join(f'<a href="/{i}">{"long anchor text " * 10}</a>' for i in range(5))
    assert (
        build_mirror(parse(f"<div>{links}</div>"), reader).content_score
        <= build_mirror(parse("<div></div>"), reader).content_score
    )


# -------------------------------------------------------------------
# 5️⃣  Whole-pipeline properties
# -------------------------------------------------------------------
def test_extraction_is_deterministic(parse, prose):
    html = f'<main><h1>Title</h1><p>{prose}</p><ul><li><a href="/a">nav</a></li></ul></main>'
    first = extract_soup(parse(html))
    second = extract_soup(parse(html))
    assert str(first) == str(second)


def test_junk_is_dropped_at_any_depth(parse, prose):
    html = (
        f'<div><section><div><div id="footer"><p>Footer text that is fairly long</p></div>'
        f'<p>{prose}</p></div></section><script>track()</script></div>'
    )
    container = extract_soup(parse(html))
    assert "Footer text" not in str(container)
    assert "track()" not in str(container)
    assert prose in container.get_text()


def test_source_tree_is_not_mutated(parse, prose):
    root = parse(f'<div><p class="x">{prose}</p><div class="sidebar">ads</div></div>')
    before = str(root)
    extract_soup(root)
    assert str(root) == before


def test_whole_document_can_be_passed(prose):
    soup = BeautifulSoup(f"<p>{prose}</p>", "html.parser")
    container = extract_soup(soup)
    assert container.contents[0].name == "div"
    assert container.p.get_text() == prose


def test_rejected_root_gives_empty_container(parse):
    assert str(extract_soup(parse("<script>alert(1)</script>"))) == "<div></div>"


def test_extract_with_explicit_reader_and_factory(parse, prose):
    factory = SoupDocumentFactory()
    container = extract(parse(f"<p>{prose}</p>"), factory, reader=SoupNodeReader())
    assert str(container) == f"<div><p>{prose}</p></div>"


# -------------------------------------------------------------------
# 6️⃣  Configuration
# -------------------------------------------------------------------
def test_container_tag_is_configurable(parse, prose):
    container = extract_soup(parse(f"<p>{prose}</p>"), config=ExtractionConfig(container_tag="article"))
    assert container.name == "article"


def test_paragraph_strategy_end_to_end(parse):
    text = "lorem ipsum, " * 20
    root = parse(f'<body><div class="post"><p>{text}</p></div><ul><li><a href="/a">home</a></li></ul></body>')

    container = extract_soup(root, config=ExtractionConfig(strategy=ScoringStrategy.PARAGRAPH))

    top = container.contents[0]
    assert top.name == "div"
    assert top.find("p") is not None
    assert container.find("ul") is None


# -------------------------------------------------------------------
# 7️⃣  Instrumentation hook and error handling
# -------------------------------------------------------------------
def test_hook_called_once_per_phase(parse, prose):
    calls = []
    extract_soup(parse(f"<p>{prose}</p>"), hook=lambda phase, elapsed: calls.append((phase, elapsed)))

    assert [phase for phase, _ in calls] == [
        ExtractionPhase.FILTER,
        ExtractionPhase.SELECT,
        ExtractionPhase.RECONSTRUCT,
    ]
    assert all(elapsed >= 0 for _, elapsed in calls)


def test_unusable_factory_is_rejected(parse):
    with pytest.raises(DocumentFactoryError) as exc_info:
        extract(parse("<p>hi</p>"), object())

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.missing == [
        "create_element",
        "create_text_node",
        "set_attribute",
        "append_child",
    ]


def test_beautifulsoup_document_is_accepted_as_factory(parse, prose):
    soup = BeautifulSoup("", "html.parser")
    container = extract(parse(f"<p>{prose}</p>"), soup)
    assert str(container) == f"<div><p>{prose}</p></div>"


# -------------------------------------------------------------------
# 8️⃣  Very deep documents through the whole pipeline
# -------------------------------------------------------------------
DEPTH = 5000


def _fake_element(tag, children=()):
    return SimpleNamespace(
        nodeType=1,
        tagName=tag,
        childNodes=list(children),
        getAttribute=lambda name: "",
    )


def _deep_document():
    """``DEPTH`` nested divs around one long, comma-rich paragraph."""
    node = _fake_element("P", [SimpleNamespace(nodeType=3, nodeValue="lorem ipsum, " * 20)])
    for _ in range(DEPTH):
        node = _fake_element("DIV", [node])
    return node


def test_deep_document_uniform_strategy():
    container = extract(_deep_document(), minidom.Document())

    # every wrapper adds to the root, so the whole chain is rebuilt
    node = container.firstChild
    divs = 0
    while node.tagName == "div":
        divs += 1
        node = node.firstChild
    assert divs == DEPTH
    assert node.tagName == "p"
    assert node.firstChild.nodeValue == "lorem ipsum, " * 20


def test_deep_document_paragraph_strategy():
    config = ExtractionConfig(strategy=ScoringStrategy.PARAGRAPH)

    container = extract(_deep_document(), minidom.Document(), config=config)

    # the paragraph's direct parent wins
    top = container.firstChild
    assert top.tagName == "div"
    assert [n.tagName for n in top.childNodes] == ["p"]
