# Overview: Pytest coverage for the settings service and the in-memory settings cache.

from litepos.services import settings_service
from litepos.state import SettingsCache


class TestSettingsService:
    """Settings rows are text values grouped by group_name."""

    def test_seed_is_idempotent(self, db_session):
        assert settings_service.seed_default_settings() == len(settings_service.DEFAULT_SETTINGS)
        assert settings_service.seed_default_settings() == 0

    def test_seeded_keys(self, db_session, default_settings):
        cache = SettingsCache()
        cache.load(settings_service.list_settings())
        for key in ("store_name", "currency_symbol", "default_tax_rate_bps",
                    "order_number_prefix", "next_order_number"):
            assert key in cache
        assert cache.get_number("default_tax_rate_bps") == 0
        assert cache.get("currency_symbol") == "$"

    def test_seed_keeps_edited_values(self, db_session, default_settings):
        settings_service.update_setting("store_name", "Corner Shop")
        settings_service.seed_default_settings()
        assert settings_service.get_setting("store_name")["value"] == "Corner Shop"

    def test_list_ordered_by_group_then_key(self, db_session, default_settings):
        keys = [row["key"] for row in settings_service.list_settings()]
        assert keys[:2] == ["currency_symbol", "store_name"]
        assert keys[-1] == "default_tax_rate_bps"

    def test_list_by_group(self, db_session, default_settings):
        rows = settings_service.list_settings_by_group("orders")
        assert [row["key"] for row in rows] == ["next_order_number", "order_number_prefix"]

    def test_update_existing_and_missing(self, db_session, default_settings):
        assert settings_service.update_setting("receipt_footer", "See you soon") is True
        assert settings_service.get_setting("receipt_footer")["value"] == "See you soon"
        assert settings_service.update_setting("no_such_key", "x") is False
        assert settings_service.get_setting("no_such_key") is None


def _cache(**values):
    cache = SettingsCache()
    cache.load([{"key": key, "value": value} for key, value in values.items()])
    return cache


class TestSettingsCache:
    """Typed getters parse stored text on read."""

    def test_loads_from_service_rows(self, db_session, default_settings):
        cache = SettingsCache()
        assert not cache.loaded
        cache.load(settings_service.list_settings())

        assert cache.loaded
        assert cache.get("order_number_prefix") == "ORD-"
        assert cache.get_number("next_order_number") == 1
        assert cache.get_boolean("receipt_show_customer") is True
        assert cache.get_json("payment_methods") == ["cash", "check", "credit_card", "other"]

    def test_missing_key_defaults(self):
        cache = _cache()
        assert "store_name" not in cache
        assert cache.get("store_name") == ""
        assert cache.get_number("store_name") == 0
        assert cache.get_boolean("store_name") is False
        assert cache.get_json("store_name") is None

    def test_get_number(self):
        cache = _cache(padded=" 42 ", negative="-7", suffixed="12abc", decimal="8.25", junk="abc", empty="")
        assert cache.get_number("padded") == 42
        assert cache.get_number("negative") == -7
        assert cache.get_number("suffixed") == 12
        assert cache.get_number("decimal") == 8
        assert cache.get_number("junk") == 0
        assert cache.get_number("empty") == 0

    def test_get_boolean_only_exact_true(self):
        cache = _cache(a="true", b="True", c="1", d="yes", e="false")
        assert [cache.get_boolean(k) for k in "abcde"] == [True, False, False, False, False]

    def test_get_json_malformed_is_none(self):
        cache = _cache(good='{"rate": 5}', bad="{rate: 5", empty="")
        assert cache.get_json("good") == {"rate": 5}
        assert cache.get_json("bad") is None
        assert cache.get_json("empty") is None

    def test_update_is_cache_only(self, db_session, default_settings):
        cache = SettingsCache()
        cache.load(settings_service.list_settings())
        cache.update("store_name", "Pop-up Stand")
        cache.update("not_loaded", "ignored")

        assert cache.get("store_name") == "Pop-up Stand"
        assert "not_loaded" not in cache
        assert settings_service.get_setting("store_name")["value"] == "Lite POS"
