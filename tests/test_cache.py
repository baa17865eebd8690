"""Tests for the file-based cache layer."""

from __future__ import annotations

import json
import time

from impact_effects.cache import cache_get, cache_key, cache_put, get_cache_dir


class TestCacheLayer:
    def test_miss_returns_none(self, monkeypatch, tmp_path):
        monkeypatch.setattr("impact_effects.cache._CACHE_DIR", tmp_path)
        assert cache_get("nonexistent", max_age_seconds=3600) is None

    def test_put_then_get(self, monkeypatch, tmp_path):
        monkeypatch.setattr("impact_effects.cache._CACHE_DIR", tmp_path)
        cache_put("feed.json", b'{"element_count": 0}')
        result = cache_get("feed.json", max_age_seconds=3600)
        assert result == b'{"element_count": 0}'

    def test_expired_returns_none(self, monkeypatch, tmp_path):
        monkeypatch.setattr("impact_effects.cache._CACHE_DIR", tmp_path)
        cache_put("old.json", b"stale data")
        # Backdate the meta timestamp
        meta_path = tmp_path / "old.json.meta"
        meta_path.write_text(json.dumps({"timestamp": time.time() - 7200}))
        assert cache_get("old.json", max_age_seconds=3600) is None

    def test_cache_dir_created(self, monkeypatch, tmp_path):
        cache_dir = tmp_path / "sub" / "deep"
        monkeypatch.setattr("impact_effects.cache._CACHE_DIR", cache_dir)
        result = get_cache_dir()
        assert result == cache_dir
        assert cache_dir.is_dir()

    def test_different_keys_dont_collide(self, monkeypatch, tmp_path):
        monkeypatch.setattr("impact_effects.cache._CACHE_DIR", tmp_path)
        cache_put("a.json", b"alpha")
        cache_put("b.json", b"bravo")
        assert cache_get("a.json", max_age_seconds=3600) == b"alpha"
        assert cache_get("b.json", max_age_seconds=3600) == b"bravo"

    def test_corrupted_meta_returns_none(self, monkeypatch, tmp_path):
        monkeypatch.setattr("impact_effects.cache._CACHE_DIR", tmp_path)
        (tmp_path / "bad.json").write_bytes(b"data")
        (tmp_path / "bad.json.meta").write_text("not json")
        assert cache_get("bad.json", max_age_seconds=3600) is None


class TestCacheKey:
    def test_parameter_order_irrelevant(self):
        a = cache_key("neows-feed", start="2025-09-01", end="2025-09-02")
        b = cache_key("neows-feed", end="2025-09-02", start="2025-09-01")
        assert a == b

    def test_distinct_ranges_distinct_keys(self):
        a = cache_key("neows-feed", start="2025-09-01", end="2025-09-02")
        b = cache_key("neows-feed", start="2025-09-01", end="2025-09-03")
        assert a != b

    def test_prefix_and_suffix(self):
        key = cache_key("neows-feed", start="2025-09-01")
        assert key.startswith("neows-feed-")
        assert key.endswith(".json")
