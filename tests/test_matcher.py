"""Tests for wren.routing.matcher — first-match path matching."""

import pytest

from wren.config import RouterConfig
from wren.errors import NotFound, RoutingError
from wren.routing.matcher import match
from wren.routing.route import RouteSpec
from wren.routing.table import RouteTable


def _handler() -> str:
    return "ok"


def _table(*routes: RouteSpec, config: RouterConfig | None = None) -> RouteTable:
    table = RouteTable(config)
    table.register_many(routes)
    return table


def _page() -> RouteSpec:
    return RouteSpec(
        name="page",
        path="/{page}",
        handler=_handler,
        methods=frozenset({"GET", "HEAD"}),
        params={"page": r"\d+"},
        defaults={"page": "0"},
    )


def _user_post() -> RouteSpec:
    return RouteSpec(
        name="user_post",
        path="/{user}/{post}",
        handler=_handler,
        methods=frozenset({"GET", "HEAD"}),
        params={"user": r"\w+", "post": r"\d+"},
    )


def _entries() -> RouteSpec:
    return RouteSpec(
        name="entries",
        path="/entries/{page}/{orderby}",
        handler=_handler,
        params={"page": r"\d+", "orderby": r"\w+"},
        defaults={"page": "0", "orderby": "id_asc"},
    )


class TestLiteralRoutes:
    def test_exact(self) -> None:
        table = _table(RouteSpec(name="index", path="/index", handler=_handler))
        result = match(table, "GET", "/index")
        assert result.route.name == "index"
        assert result.data == {}

    def test_mismatch(self) -> None:
        table = _table(RouteSpec(name="index", path="/index", handler=_handler))
        with pytest.raises(NotFound):
            match(table, "GET", "/other")

    def test_case_insensitive_literals(self) -> None:
        table = _table(RouteSpec(name="index", path="/index", handler=_handler))
        assert match(table, "GET", "/INDEX").route.name == "index"

    def test_root(self) -> None:
        table = _table(RouteSpec(name="home", path="/", handler=_handler))
        assert match(table, "GET", "/").data == {}

    def test_longer_request_not_matched(self) -> None:
        table = _table(RouteSpec(name="users", path="/users", handler=_handler))
        with pytest.raises(NotFound):
            match(table, "GET", "/users/42")

    def test_shorter_request_not_matched(self) -> None:
        table = _table(RouteSpec(name="users", path="/api/users", handler=_handler))
        with pytest.raises(NotFound):
            match(table, "GET", "/api")


class TestMethods:
    def test_method_filter(self) -> None:
        table = _table(
            RouteSpec(name="add", path="/add", handler=_handler, methods=frozenset({"POST", "HEAD"}))
        )
        assert match(table, "POST", "/add").route.name == "add"
        with pytest.raises(NotFound):
            match(table, "GET", "/add")

    def test_method_is_normalized(self) -> None:
        table = _table(RouteSpec(name="add", path="/add", handler=_handler, methods=frozenset({"POST"})))
        assert match(table, "post", "/add").route.name == "add"

    def test_same_path_different_methods(self) -> None:
        table = _table(
            RouteSpec(name="show", path="/item", handler=_handler, methods=frozenset({"GET"})),
            RouteSpec(name="update", path="/item", handler=_handler, methods=frozenset({"PUT"})),
        )
        assert match(table, "GET", "/item").route.name == "show"
        assert match(table, "PUT", "/item").route.name == "update"


class TestParams:
    def test_single_param(self) -> None:
        assert match(_table(_page()), "GET", "/42").data == {"page": "42"}

    def test_pattern_failure(self) -> None:
        with pytest.raises(NotFound):
            match(_table(_page()), "GET", "/abc")

    def test_multiple_params(self) -> None:
        result = match(_table(_user_post()), "GET", "/alice/7")
        assert result.data == {"user": "alice", "post": "7"}

    def test_missing_segment_without_default(self) -> None:
        with pytest.raises(NotFound):
            match(_table(_user_post()), "GET", "/alice")

    def test_pattern_is_anchored(self) -> None:
        table = _table(
            RouteSpec(name="n", path="/n/{id}", handler=_handler, params={"id": r"\d+"})
        )
        with pytest.raises(NotFound):
            match(table, "GET", "/n/12x")
        with pytest.raises(NotFound):
            match(table, "GET", "/n/x12")

    def test_value_case_preserved(self) -> None:
        table = _table(
            RouteSpec(name="u", path="/users/{name}", handler=_handler, params={"name": r"\w+"})
        )
        assert match(table, "GET", "/USERS/Alice").data == {"name": "Alice"}

    def test_value_is_percent_decoded(self) -> None:
        table = _table(
            RouteSpec(name="q", path="/q/{term}", handler=_handler, params={"term": r"[^/]+"})
        )
        assert match(table, "GET", "/q/a%20b").data == {"term": "a b"}

    def test_pattern_tested_against_decoded_value(self) -> None:
        table = _table(
            RouteSpec(name="u", path="/users/{user}", handler=_handler, params={"user": r"\w+"})
        )
        assert match(table, "GET", "/users/caf%C3%A9").data == {"user": "caf\u00e9"}

    def test_encoded_slash_stays_in_one_segment(self) -> None:
        table = _table(
            RouteSpec(name="f", path="/files/{name}", handler=_handler, params={"name": r".+"})
        )
        assert match(table, "GET", "/files/a%2Fb").data == {"name": "a/b"}

    def test_missing_pattern_raises(self) -> None:
        table = _table(RouteSpec(name="broken", path="/x/{id}", handler=_handler))
        with pytest.raises(RoutingError) as exc_info:
            match(table, "GET", "/x/1")
        assert exc_info.value.route == "broken"
        assert exc_info.value.param == "id"

    def test_missing_pattern_is_fatal_for_the_call(self) -> None:
        table = _table(
            RouteSpec(name="broken", path="/{id}", handler=_handler),
            RouteSpec(name="fine", path="/{id}", handler=_handler, params={"id": r"\d+"}),
        )
        with pytest.raises(RoutingError):
            match(table, "GET", "/1")

    def test_missing_pattern_not_reached(self) -> None:
        table = _table(
            RouteSpec(name="fine", path="/{id}", handler=_handler, params={"id": r"\d+"}),
            RouteSpec(name="broken", path="/{id}", handler=_handler),
        )
        assert match(table, "GET", "/1").route.name == "fine"


class TestDefaults:
    def test_default_used_when_omitted(self) -> None:
        assert match(_table(_page()), "GET", "/").data == {"page": "0"}

    def test_default_not_used_for_bad_value(self) -> None:
        with pytest.raises(NotFound):
            match(_table(_page()), "GET", "/abc")

    def test_trailing_defaults(self) -> None:
        table = _table(_entries())
        assert match(table, "GET", "/entries").data == {"page": "0"}
        assert match(table, "GET", "/entries/").data == {"page": "0"}
        assert match(table, "GET", "/entries/3").data == {"page": "3", "orderby": "id_asc"}
        assert match(table, "GET", "/entries/3/title").data == {"page": "3", "orderby": "title"}

    def test_non_trailing_default_not_applied(self) -> None:
        table = _table(
            RouteSpec(
                name="odd",
                path="/{page}/items",
                handler=_handler,
                params={"page": r"\d+"},
                defaults={"page": "0"},
            )
        )
        with pytest.raises(NotFound):
            match(table, "GET", "//items")


class TestPriority:
    def test_first_registered_wins(self) -> None:
        table = _table(
            RouteSpec(name="user", path="/users/{id}", handler=_handler, params={"id": r"\w+"}),
            RouteSpec(name="new_user", path="/users/new", handler=_handler),
        )
        assert match(table, "GET", "/users/new").route.name == "user"

    def test_specific_first(self) -> None:
        table = _table(
            RouteSpec(name="new_user", path="/users/new", handler=_handler),
            RouteSpec(name="user", path="/users/{id}", handler=_handler, params={"id": r"\w+"}),
        )
        assert match(table, "GET", "/users/new").route.name == "new_user"
        assert match(table, "GET", "/users/7").route.name == "user"

    def test_mixed_route_table(self) -> None:
        table = _table(
            RouteSpec(name="add", path="/add/", handler=_handler, methods=frozenset({"POST", "HEAD"})),
            _page(),
            _user_post(),
            _entries(),
            RouteSpec(name="index", path="/index/", handler=_handler),
        )
        assert match(table, "GET", "/index").route.name == "index"
        assert match(table, "POST", "/add").route.name == "add"
        assert match(table, "GET", "/1").data == {"page": "1"}
        assert match(table, "GET", "/").data == {"page": "0"}
        assert match(table, "GET", "/user/123").data == {"user": "user", "post": "123"}
        with pytest.raises(NotFound):
            match(table, "GET", "/null/dull/")


class TestTrailingSlash:
    def test_ignored_by_default(self) -> None:
        table = _table(RouteSpec(name="users", path="/users", handler=_handler))
        assert match(table, "GET", "/users/").route.name == "users"

    def test_pattern_slash_ignored_by_default(self) -> None:
        table = _table(RouteSpec(name="index", path="/index/", handler=_handler))
        assert match(table, "GET", "/index").route.name == "index"

    def test_strict(self) -> None:
        table = _table(
            RouteSpec(name="users", path="/users", handler=_handler),
            config=RouterConfig(strip_trailing_slash=False),
        )
        assert match(table, "GET", "/users").route.name == "users"
        with pytest.raises(NotFound):
            match(table, "GET", "/users/")


class TestNotFound:
    def test_empty_table(self) -> None:
        with pytest.raises(NotFound) as exc_info:
            match(RouteTable(), "GET", "/")
        assert exc_info.value.status == 404
        assert "GET" in exc_info.value.detail

    def test_fresh_result_per_call(self) -> None:
        table = _table(_page())
        first = match(table, "GET", "/1")
        second = match(table, "GET", "/1")
        assert first == second
        assert first.data is not second.data
