"""
URI 单元测试
"""

from fuel_tools.utils.uri import URI, URIPath, canonical_url


class TestURIPath:
    """URIPath 测试"""

    def test_parse(self):
        path = URIPath("banana:8080/models/box")
        assert path.parts == ["banana:8080", "models", "box"]
        assert path.str() == "banana:8080/models/box"
        assert not path.is_absolute()

    def test_absolute(self):
        path = URIPath("/a/b")
        assert path.is_absolute()
        assert path.str() == "/a/b"

    def test_trailing_separator_dropped(self):
        assert URIPath("banana:8080/").str() == "banana:8080"

    def test_push_back_and_join(self):
        path = URIPath("api.ignitionfuel.org")
        path.push_back("1.0")
        joined = path / "models/box"
        assert path.str() == "api.ignitionfuel.org/1.0"
        assert joined.str() == "api.ignitionfuel.org/1.0/models/box"

    def test_empty(self):
        assert URIPath().str() == ""
        assert URIPath("") == URIPath()


class TestURI:
    """URI 测试"""

    def test_valid(self):
        uri = URI("http://banana:8080")
        assert uri.valid()
        assert uri.scheme() == "http"
        assert uri.path().str() == "banana:8080"
        assert uri.str() == "http://banana:8080"

    def test_query_and_fragment(self):
        uri = URI("https://host/a?x=1#top")
        assert uri.path().str() == "host/a"
        assert uri.query() == "x=1"
        assert uri.fragment() == "top"
        assert uri.str() == "https://host/a?x=1#top"

    def test_without_scheme(self):
        for text in ["asdf", "://host", "1http://host", ""]:
            uri = URI(text)
            assert not uri.valid()
            assert uri.str() == ""

    def test_build_from_parts(self):
        uri = URI()
        uri.set_scheme("http")
        uri.path().push_back("banana:8080")
        assert uri.str() == "http://banana:8080"

    def test_copy_is_independent(self):
        original = URI("http://host/a")
        copy = URI(original)
        copy.path().push_back("b")
        assert original.str() == "http://host/a"
        assert copy.str() == "http://host/a/b"

    def test_equality(self):
        assert URI("http://host/") == URI("http://host")
        assert URI("http://host") != URI("https://host")


class TestCanonicalUrl:
    """规范化测试"""

    def test_strips_trailing_separator(self):
        assert canonical_url("http://banana:8080/").str() == "http://banana:8080"

    def test_schemeless_is_empty(self):
        assert canonical_url("asdf").str() == ""
        assert canonical_url(None).str() == ""

    def test_scheme_only(self):
        uri = URI()
        uri.set_scheme("http")
        uri.path().set_absolute()
        assert canonical_url(uri).str() == "http://"

    def test_accepts_uri(self):
        assert canonical_url(URI("https://myserver")).str() == "https://myserver"

    def test_empty_segments_collapse(self):
        assert canonical_url("http://a//").str() == "http://a"
        assert canonical_url("http://a//b").str() == "http://a/b"
