# File: tests/test_link_extractor.py
import pytest

from site_validator.crawler.link_extractor import extract_links

ORIGIN = "http://example.org/"


@pytest.mark.parametrize("count", [0, 1, 5])
def test_every_root_relative_anchor_yields_one_url(count):
    body = "".join(f'<a href="/page{i}">p{i}</a>' for i in range(count)).encode()
    links = extract_links(body, ORIGIN)
    assert links == [f"http://example.org/page{i}" for i in range(count)]


def test_duplicates_are_kept_in_document_order():
    body = b'<a href="/b">1</a><a href="/a">2</a><a href="/b">3</a>'
    assert extract_links(body, ORIGIN) == [
        "http://example.org/b",
        "http://example.org/a",
        "http://example.org/b",
    ]


@pytest.mark.parametrize(
    "href",
    [
        "//other/x",
        "//",
        "relative/path",
        "http://example.org/abs",
        "mailto:someone@example.org",
        "javascript:void(0)",
        "#top",
        "?q=1",
    ],
)
def test_non_root_relative_hrefs_are_dropped(href):
    body = f'<a href="{href}">x</a>'.encode()
    assert extract_links(body, ORIGIN) == []


@pytest.mark.parametrize(
    "href,expected",
    [
        ("/", "http://example.org/"),
        ("/x", "http://example.org/x"),
        ("/a#frag", "http://example.org/a"),
        ("/a?b=1#frag", "http://example.org/a?b=1"),
        ("/docs/page.html", "http://example.org/docs/page.html"),
    ],
)
def test_root_relative_hrefs_are_resolved(href, expected):
    body = f'<p><a class="nav" href="{href}">x</a></p>'.encode()
    assert extract_links(body, ORIGIN) == [expected]


def test_links_use_origin_scheme_and_host_only():
    body = b'<a href="/x">x</a>'
    assert extract_links(body, "https://example.org:8443/deep/page?q=1#f") == [
        "https://example.org:8443/x"
    ]


def test_unterminated_href_yields_nothing():
    assert extract_links(b'<a href="/never-closed>text</a>', ORIGIN) == []


@pytest.mark.parametrize(
    "body",
    [
        b'<A HREF="/upper">x</A>',
        b"<a href='/single'>x</a>",
        b'<a href="">x</a>',
        b"<link href=\"/style.css\" rel=\"stylesheet\">",
        b"no markup at all",
        b"",
    ],
)
def test_pattern_misses(body):
    assert extract_links(body, ORIGIN) == []


def test_binary_garbage_does_not_crash():
    body = b'\x00\xff\xfe<a href="/ok">x</a>\x80\x81'
    assert extract_links(body, ORIGIN) == ["http://example.org/ok"]


def test_path_is_percent_encoded():
    body = '<a href="/a b/é">x</a>'.encode("utf-8")
    assert extract_links(body, ORIGIN) == ["http://example.org/a%20b/%C3%A9"]


def test_unparsable_link_is_logged_and_skipped(log_records):
    body = b'<a href="/bad%zz">x</a><a href="/good">y</a>'
    assert extract_links(body, ORIGIN) == ["http://example.org/good"]
    warnings = [r for r in log_records if r.levelname == "WARNING"]
    assert len(warnings) == 1
    assert "/bad%zz" in warnings[0].getMessage()


def test_non_utf8_bytes_are_escaped_as_is():
    body = b'<a href="/caf\xe9">1</a><a href="/caf\xe8">2</a><a href="/s?q=\xff">3</a>'
    assert extract_links(body, ORIGIN) == [
        "http://example.org/caf%E9",
        "http://example.org/caf%E8",
        "http://example.org/s?q=%FF",
    ]


def test_userinfo_of_start_url_is_not_copied():
    body = b'<a href="/x">x</a>'
    assert extract_links(body, "http://user:pw@example.org:8080/") == [
        "http://example.org:8080/x"
    ]
