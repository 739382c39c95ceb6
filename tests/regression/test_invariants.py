import pytest

from src.components.redirects import build_redirect_url
from src.domain.target import new_target
from src.domain.url import parse_url, unescape_path

REQUEST_PATHS = [
    "/",
    "/abc",
    "/a/b/c",
    "/abc/?aaa=1",
    "/%20",
    "/a%2fbc",
    "/a%2Fbc",
    "/a/b%22/c",
    "/%2f/?aaa=1",
    "/x?y=%2f&z",
]

TEMPLATES = [
    "http://bar.com/",
    "http://bar.com/%2f/",
    "http://bar.com/a/b/c?foo=bar",
    "http://bar.com/$path",
    "http://bar.com$path",
    "http://bar.com/bbb/$path",
    "http://bar.com/bbb$path",
    "http://bar.com/b%2fb/$path",
]


def target(dst, strip=None):
    opts = {"redirect": "301"}
    if strip:
        opts["strip"] = strip
    return new_target("svc", dst, opts)


def request(path):
    return parse_url("http://foo.com" + path)


# --- Template-only routes ignore the request ---
@pytest.mark.parametrize("dst", ["http://bar.com/", "http://bar.com/%2f/", "http://bar.com/a/b/c?foo=bar"])
def test_template_only_routes_are_fixed(dst):
    t = target(dst)
    results = {str(build_redirect_url(t, request(p))) for p in REQUEST_PATHS}
    assert len(results) == 1


# --- Path pass-through ---
@pytest.mark.parametrize("path", REQUEST_PATHS)
def test_path_pass_through(path):
    req = request(path)
    url = build_redirect_url(target("http://bar.com/$path"), req)
    assert url.path == req.path
    if req.raw_path:
        assert url.raw_path == req.raw_path


# --- Encoding preservation ---
@pytest.mark.parametrize("escape", ["%2F", "%2f", "%20", "%22"])
def test_encoding_preserved(escape):
    url = build_redirect_url(target("http://bar.com/$path"), request(f"/a{escape}b"))
    assert escape in str(url)


# --- Strip then substitute ---
@pytest.mark.parametrize("strip", ["/stripme", "/strip%2fme", "/strip%20me"])
@pytest.mark.parametrize("rest", ["/", "/abc", "/a%2fb", "/a/b%22"])
def test_strip_leaves_rest(strip, rest):
    req = request(strip + rest)
    url = build_redirect_url(target("http://bar.com/$path", strip), req)
    assert url.path.endswith(unescape_path(rest))


# --- Query precedence ---
@pytest.mark.parametrize("path", REQUEST_PATHS)
def test_template_query_wins(path):
    url = build_redirect_url(target("http://bar.com/$path?foo=bar"), request(path))
    assert url.raw_query == "foo=bar"


# --- Non-empty path ---
@pytest.mark.parametrize("dst", TEMPLATES)
@pytest.mark.parametrize("path", REQUEST_PATHS + ["/stripme"])
def test_path_never_empty(dst, path):
    url = build_redirect_url(target(dst, "/stripme"), request(path))
    assert url.path


# --- Raw path stays consistent with path ---
@pytest.mark.parametrize("dst", TEMPLATES)
@pytest.mark.parametrize("path", REQUEST_PATHS)
def test_raw_path_decodes_to_path(dst, path):
    t = target(dst)
    req = request(path)
    url = build_redirect_url(t, req)
    if t.url.raw_path or req.raw_path:
        assert url.raw_path
        assert unescape_path(url.raw_path) == url.path


# --- Inputs are never modified ---
@pytest.mark.parametrize("dst", TEMPLATES)
def test_inputs_unchanged(dst):
    t = target(dst, "/stripme")
    req = request("/stripme/a%2fb?x=1")
    url_before, req_before = t.url, req
    build_redirect_url(t, req)
    assert t.url == url_before == parse_url(dst)
    assert req == req_before == request("/stripme/a%2fb?x=1")
    assert t.strip_path == "/stripme"
    assert t.redirect_url is None
