"""
Tests for TLD extraction and localized URL building.
"""
import pytest

from localization import UnsupportedLocaleError


@pytest.mark.parametrize(
    "host,expected",
    [
        ("www.example.co.uk", ".uk"),
        ("example.com", ".com"),
        ("example.fr", ".fr"),
        ("example.com:8000", ".com"),
        ("localhost", ""),
        ("localhost:8000", ""),
        ("", ""),
        ("[::1]:8000", ""),
    ],
)
def test_get_tld(registry, host, expected):
    assert registry.get_tld(host) == expected


class TestLocaleForHost:

    def test_known_tld(self, registry):
        assert registry.get_locale_for_host("www.example.fr") == "fr"

    def test_port_is_ignored(self, registry):
        assert registry.get_locale_for_host("example.ae:443") == "ar"

    @pytest.mark.parametrize("host", ["example.jp", "localhost", ""])
    def test_falls_back_to_default(self, registry, host):
        assert registry.get_locale_for_host(host) == "en"


class TestLocalizedUrl:

    def test_rewrites_host_tld(self, registry):
        url = registry.get_localized_url("fr", "example.com", "http://example.com/about")

        assert url == "http://example.fr/about"

    def test_same_locale_is_unchanged(self, registry):
        url = registry.get_localized_url("en", "example.com", "http://example.com/about")

        assert url == "http://example.com/about"

    def test_unsupported_locale_raises(self, registry):
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            registry.get_localized_url("de", "example.com", "http://example.com/about")

        assert exc_info.value.error.metadata["locale"] == "de"

    def test_unsupported_locale_raises_even_when_nothing_to_rewrite(self, registry):
        with pytest.raises(UnsupportedLocaleError):
            registry.get_localized_url("de", "localhost", "/about")

    def test_path_and_query_containing_tld_are_untouched(self, registry):
        uri = "https://shop.example.com/files/report.com?next=other.com#top.com"

        url = registry.get_localized_url("fr", "shop.example.com", uri)

        assert url == "https://shop.example.fr/files/report.com?next=other.com#top.com"

    def test_round_trip_keeps_path_suffixes(self, registry):
        uri = "http://example.com/mirror/example.com/index.html"

        to_fr = registry.get_localized_url("fr", "example.com", uri)
        back = registry.get_localized_url("en", "example.fr", to_fr)

        assert to_fr == "http://example.fr/mirror/example.com/index.html"
        assert back == uri

    def test_port_and_userinfo_are_preserved(self, registry):
        url = registry.get_localized_url("ar", "example.com:8080", "http://user:pw@example.com:8080/a?b=1")

        assert url == "http://user:pw@example.ae:8080/a?b=1"

    def test_relative_uri_is_unchanged(self, registry):
        assert registry.get_localized_url("fr", "example.com", "/about?x=1") == "/about?x=1"

    def test_host_without_tld_is_unchanged(self, registry):
        uri = "http://localhost:8000/about"

        assert registry.get_localized_url("fr", "localhost:8000", uri) == uri

    def test_uri_on_other_domain_is_unchanged(self, registry):
        uri = "http://example.org/about"

        assert registry.get_localized_url("fr", "example.com", uri) == uri

    def test_tab_inside_host_stays_on_same_site(self, registry):
        url = registry.get_localized_url("fr", "example.com", "http://exa\tmple.com/about")

        assert url == "http://example.fr/about"

    def test_newline_inside_authority_stays_on_same_site(self, registry):
        url = registry.get_localized_url("ar", "example.com:8080", "http://example.co\nm:8080/a?b=1")

        assert url == "http://example.ae:8080/a?b=1"

    def test_localized_urls_for_every_locale(self, registry):
        urls = registry.get_localized_urls("example.fr", "https://example.fr/menu")

        assert urls == {
            "en": "https://example.com/menu",
            "fr": "https://example.fr/menu",
            "ar": "https://example.ae/menu",
        }
