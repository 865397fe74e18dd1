import types

import pytest
import requests

from rss_aggregator import documents
from rss_aggregator.errors import FetchError, MalformedFeedError


def test_get_child_element_returns_first_match(parse_xml):
    item = parse_xml(
        """
        <item>
          <title>First</title>
          <link>http://x</link>
          <title>Second</title>
        </item>
        """
    )

    assert documents.get_child_element(item, "title") == 0
    assert documents.get_child_element(item, "link") == 1
    assert documents.get_child_element(item, "pubDate") == -1


def test_get_child_element_on_childless_element(parse_xml):
    assert documents.get_child_element(parse_xml("<item/>"), "title") == -1


def test_text_of_strips_and_treats_blank_as_missing(parse_xml):
    channel = parse_xml(
        """
        <channel>
          <title>  News  </title>
          <link>   </link>
          <description/>
        </channel>
        """
    )

    assert documents.text_of(channel[0]) == "News"
    assert documents.text_of(channel[1]) is None
    assert documents.text_of(channel[2]) is None


def test_child_text_handles_missing_and_cdata(parse_xml):
    item = parse_xml("<item><description><![CDATA[<b>bold</b>]]></description></item>")

    assert documents.child_text(item, "description") == "<b>bold</b>"
    assert documents.child_text(item, "title") is None


def test_load_document_reads_local_file(write_file):
    path = write_file("feed.xml", '<rss version="2.0"><channel/></rss>')

    root = documents.load_document(str(path))

    assert root.tag == "rss"
    assert root.get("version") == "2.0"


def test_load_document_missing_file_raises_fetch_error(tmp_path):
    with pytest.raises(FetchError):
        documents.load_document(str(tmp_path / "missing.xml"))


def test_load_document_invalid_xml_raises_malformed(write_file):
    path = write_file("broken.xml", "<rss><channel></rss>")

    with pytest.raises(MalformedFeedError):
        documents.load_document(str(path))


def test_load_document_fetches_urls_with_requests(monkeypatch):
    captured = {}

    def fake_get(url, timeout=None, headers=None):
        captured.update(url=url, timeout=timeout, headers=headers)
        return types.SimpleNamespace(
            content=b'<rss version="2.0"><channel><title>T</title></channel></rss>',
            raise_for_status=lambda: None,
        )

    monkeypatch.setattr(documents.requests, "get", fake_get)

    root = documents.load_document(
        "https://example.com/feed.xml", timeout=3.0, user_agent="tester/1.0"
    )

    assert root[0][0].text == "T"
    assert captured["url"] == "https://example.com/feed.xml"
    assert captured["timeout"] == 3.0
    assert captured["headers"] == {"User-Agent": "tester/1.0"}


def test_load_document_wraps_request_exception(monkeypatch):
    def fake_get(url, timeout=None, headers=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(documents.requests, "get", fake_get)

    with pytest.raises(FetchError) as excinfo:
        documents.load_document("http://unreachable.example.com/rss")

    assert excinfo.value.location == "http://unreachable.example.com/rss"
    assert "connection refused" in str(excinfo.value)


def test_load_document_wraps_http_error(monkeypatch):
    def raise_for_status():
        raise requests.HTTPError("404 Client Error")

    monkeypatch.setattr(
        documents.requests,
        "get",
        lambda url, timeout=None, headers=None: types.SimpleNamespace(
            content=b"", raise_for_status=raise_for_status
        ),
    )

    with pytest.raises(FetchError):
        documents.load_document("https://example.com/missing.xml")
