"""Tests for roots.routing.route: Route, RouterSchema, RouteMatch."""

import pytest

from roots.config import LocaleConfig
from roots.routing.route import Route, RouteMatch, RouterSchema


class TestRoute:
    def test_creation(self) -> None:
        route = Route(name="/about", href="/cs/o-nas")
        assert route.name == "/about"
        assert route.href == "/cs/o-nas"

    def test_frozen(self) -> None:
        route = Route("/about", "/about")
        with pytest.raises(AttributeError):
            route.href = "/other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Route("/about", "/about") == Route("/about", "/about")
        assert Route("/about", "/about") != Route("/about", "/cs/o-nas")


class TestRouterSchema:
    def test_locale_config(self) -> None:
        schema = RouterSchema(
            routes={}, locales=("en", "cs"), default_locale="cs", prefix_default_locale=True
        )
        assert schema.locale_config == LocaleConfig(
            locales=("en", "cs"), default_locale="cs", prefix_default_locale=True
        )

    def test_routes_for(self) -> None:
        schema = RouterSchema(
            routes={"en": [Route("/about", "/about")]}, locales=("en",), default_locale="en"
        )
        assert schema.routes_for("en") == (Route("/about", "/about"),)
        assert schema.routes_for("cs") == ()

    def test_prefix_default_locale_off_by_default(self) -> None:
        schema = RouterSchema(routes={}, locales=("en",), default_locale="en")
        assert schema.prefix_default_locale is False


class TestRouteMatch:
    def test_fields(self) -> None:
        route = Route("/docs", "/docs/:parts+")
        result = RouteMatch(route=route, locale="en", params={"parts": ["a", "b"]})
        assert result.route is route
        assert result.locale == "en"
        assert result.params == {"parts": ["a", "b"]}
