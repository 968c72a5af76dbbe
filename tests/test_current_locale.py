"""
Tests for the request-scoped current locale.
"""
import asyncio

import pytest

from localization import UnsupportedLocaleError


def test_defaults_to_default_locale(registry):
    assert registry.get_current_locale() == "en"
    assert registry.get_tld_for_current_locale() == ".com"


def test_use_locale_binds_and_restores(registry):
    with registry.use_locale("ar") as code:
        assert code == "ar"
        assert registry.get_current_locale() == "ar"
        assert registry.get_tld_for_current_locale() == ".ae"
        assert registry.get_name_for_current_locale() == "Arabic"
        assert registry.get_direction_for_current_locale() == "rtl"
        assert registry.get_script_for_current_locale() == "Arab"
        assert registry.get_native_for_current_locale() == "العربية"

    assert registry.get_current_locale() == "en"


def test_use_locale_nests(registry):
    with registry.use_locale("fr"):
        with registry.use_locale("ar"):
            assert registry.get_current_locale() == "ar"
        assert registry.get_current_locale() == "fr"


def test_use_locale_rejects_unsupported(registry):
    with pytest.raises(UnsupportedLocaleError):
        with registry.use_locale("de"):
            pass

    assert registry.get_current_locale() == "en"


def test_set_current_locale_rejects_unsupported(registry):
    with pytest.raises(UnsupportedLocaleError):
        registry.set_current_locale("xx")


def test_set_current_locale_is_task_scoped(registry):
    async def worker(code: str, ready: asyncio.Event, go: asyncio.Event) -> str:
        registry.set_current_locale(code)
        ready.set()
        await go.wait()
        return registry.get_current_locale()

    async def main():
        go = asyncio.Event()
        ready_fr, ready_ar = asyncio.Event(), asyncio.Event()
        tasks = [
            asyncio.create_task(worker("fr", ready_fr, go)),
            asyncio.create_task(worker("ar", ready_ar, go)),
        ]
        await ready_fr.wait()
        await ready_ar.wait()
        go.set()
        return await asyncio.gather(*tasks), registry.get_current_locale()

    results, outer = asyncio.run(main())

    assert results == ["fr", "ar"]
    assert outer == "en"
