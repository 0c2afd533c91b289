"""Edge cases and extended behaviour of the route map."""

import logging
import pickle
import re

import pytest

from routemap import NO_MATCH, InvalidSegment, RouteMap, match_pattern


def test_no_match_is_falsy_singleton():
    assert not NO_MATCH
    assert NO_MATCH is not None
    assert NO_MATCH != {}
    assert repr(NO_MATCH) == "NO_MATCH"
    assert type(NO_MATCH)() is NO_MATCH
    assert pickle.loads(pickle.dumps(NO_MATCH)) is NO_MATCH


def test_match_pattern_accepts_compiled_regex():
    regex = re.compile(r"^/items/(?P<ident>\d+)$")
    assert match_pattern("/items/12", regex) == {"ident": "12"}
    assert match_pattern("/items/abc", regex) is NO_MATCH


def test_match_optional_group_defaults_to_empty_string():
    assert match_pattern("/a", r"^/a(?P<tail>b)?$") == {"tail": ""}


def test_default_regex_stops_at_slash():
    routes = RouteMap().append("files/<name>")
    routes.bind(lambda params: params["name"])
    assert routes.route("/files/readme") == "readme"
    assert routes.route("/files/docs/readme") is NO_MATCH


def test_dynamic_segment_with_empty_regex_uses_default():
    routes = RouteMap().append("<name:>")
    assert routes.path == ("(?P<name>[^/]+)",)


def test_dynamic_segment_splits_on_first_colon_only():
    routes = RouteMap().append("<stamp:\\d+:\\d+>")
    assert routes.path == ("(?P<stamp>\\d+:\\d+)",)
    routes.bind(lambda params: params)
    assert routes.route("/12:30") == {"stamp": "12:30"}


def test_append_mixes_literal_and_dynamic():
    routes = RouteMap().append("/users/<ident:\\d+>/posts/")
    routes.bind(lambda params: params)
    assert routes.pattern == r"^/users/(?P<ident>\d+)/posts$"
    assert routes.route("/users/7/posts") == {"ident": "7"}
    assert routes.route("/users/x/posts") is NO_MATCH


def test_back_zero_keeps_path():
    routes = RouteMap().append("foo/bar").back(0)
    assert routes.path == ("foo", "bar")


def test_invalid_group_name_fails_at_bind_not_append():
    routes = RouteMap().append("<1abc>")
    with pytest.raises(InvalidSegment) as excinfo:
        routes.bind(print)
    assert isinstance(excinfo.value.__cause__, re.error)
    assert routes.routes == {}


def test_rebind_replaces_handler_in_place():
    routes = RouteMap()
    routes.append("<slug>").bind(lambda params: "catch-all")
    routes.flush().append("about").bind(lambda params: "about")
    routes.flush().append("<slug>").bind(lambda params: "replaced")
    assert list(routes.routes) == ["^/(?P<slug>[^/]+)$", "^/about$"]
    assert routes.route("/about") == "replaced"


def test_shared_prefix_with_back():
    routes = RouteMap().append("blog")
    routes.append("<year:\\d{4}>").bind(lambda params: ("year", params))
    routes.append("<slug>").bind(lambda params: ("post", params))
    routes.back(2).append("feed").bind(lambda params: ("feed", params))
    assert routes.route("/blog/2024") == ("year", {"year": "2024"})
    assert routes.route("/blog/2024/hello") == ("post", {"year": "2024", "slug": "hello"})
    assert routes.route("/blog/feed") == ("feed", {})


def test_handler_exceptions_propagate():
    def boom(params):
        raise RuntimeError("boom")

    routes = RouteMap().append("boom").bind(boom)
    with pytest.raises(RuntimeError, match="boom"):
        routes.route("/boom")


def test_handler_receives_captured_strings():
    received = []
    routes = RouteMap().append("<n:\\d+>").bind(received.append)
    routes.route("/5")
    assert received == [{"n": "5"}]


def test_no_match_without_fallback():
    routes = RouteMap().append("here").bind(lambda params: "found")
    assert routes.route("/nothing") is NO_MATCH
    with pytest.raises(TypeError):
        RouteMap(get_default_handler=lambda params: "fallback")  # type: ignore[call-arg]


def test_quantifier_with_comma_keeps_its_pattern():
    routes = RouteMap().append("<x:\\d{1,3}>").bind(lambda params: params["x"])
    assert list(routes.routes) == [r"^/(?P<x>\d{1,3})$"]
    assert routes.route("/123") == "123"
    assert routes.route("/1234") is NO_MATCH


def test_trailing_newline_matches_anchored_route():
    routes = RouteMap().append("foo").bind(lambda params: "foo")
    assert routes.route("/foo\n") == "foo"
    assert routes.route("/foo\n\n") is NO_MATCH


def test_routes_property_is_a_copy():
    routes = RouteMap().append("a").bind(print)
    routes.routes.clear()
    assert list(routes.routes) == ["^/a$"]


def test_dispatch_is_logged(caplog):
    routes = RouteMap().append("a").bind(lambda params: "a")
    with caplog.at_level(logging.DEBUG, logger="routemap"):
        routes.route("/a")
        routes.route("/b")
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["'/a' matched ^/a$", "'/b' matched no route"]
