# Copyright (c) 2026 The PhishLens Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Tests for the Redis-backed analysis store."""
import json
from unittest.mock import MagicMock

import pytest
from phishlens.models import EmailAnalysisResult, Settings
from phishlens.store import (
    ANALYSIS_KEY_PREFIX,
    SETTINGS_KEY,
    STATS_KEY,
    THREAT_REPORTS_KEY,
    AnalysisStore,
)


@pytest.fixture
def redis_client():
    """MagicMock Redis whose get/set/setex share one dict."""
    data = {}
    client = MagicMock()
    client.data = data
    client.get.side_effect = data.get
    client.set.side_effect = lambda key, value: data.__setitem__(key, value)
    client.setex.side_effect = lambda key, ttl, value: data.__setitem__(key, value)
    client.scan_iter.side_effect = lambda match="*": [
        k for k in list(data) if k.startswith(match.rstrip("*"))
    ]
    return client


@pytest.fixture
def store(redis_client):
    return AnalysisStore(
        redis_client=redis_client, default_settings=Settings(), analysis_ttl=3600,
    )


def _result(level: str, score: int = 0) -> EmailAnalysisResult:
    return EmailAnalysisResult(risk_score=score, risk_level=level)


class TestAnalyses:

    def test_save_sets_expiry(self, store, redis_client):
        record = store.save_analysis("thread-1", _result("high", 90), source_url="https://mail.google.com/")

        redis_client.setex.assert_called_once()
        key, ttl, raw = redis_client.setex.call_args.args
        assert key == f"{ANALYSIS_KEY_PREFIX}thread-1"
        assert ttl == 3600
        assert json.loads(raw) == record
        assert record["analysis"]["risk_level"] == "high"
        assert record["source_url"] == "https://mail.google.com/"
        assert isinstance(record["timestamp"], float)

    def test_get_roundtrip(self, store):
        store.save_analysis("thread-1", _result("low", 25))
        record = store.get_analysis("thread-1")
        assert record["analysis"]["risk_score"] == 25

    def test_get_missing(self, store):
        assert store.get_analysis("nope") is None

    def test_get_invalid_json(self, store, redis_client):
        redis_client.data[f"{ANALYSIS_KEY_PREFIX}bad"] = "{not json"
        assert store.get_analysis("bad") is None

    def test_count_threats_per_source(self, store):
        page = "https://mail.google.com/mail/u/0/"
        store.save_analysis("a", _result("high", 90), source_url=page)
        store.save_analysis("b", _result("medium", 50), source_url=page)
        store.save_analysis("c", _result("low", 25), source_url=page)
        store.save_analysis("d", _result("high", 90), source_url="https://outlook.live.com/")
        assert store.count_threats(page) == 2
        assert store.count_threats("https://mail.yahoo.com/") == 0

    def test_recent_threats_newest_first(self, store, redis_client):
        for analysis_id, level, timestamp in [
            ("old", "high", 100.0),
            ("new", "medium", 300.0),
            ("safe", "low", 400.0),
            ("mid", "high", 200.0),
        ]:
            redis_client.data[f"{ANALYSIS_KEY_PREFIX}{analysis_id}"] = json.dumps({
                "timestamp": timestamp,
                "analysis": _result(level).to_dict(),
                "source_url": "",
            })
        redis_client.data[f"{ANALYSIS_KEY_PREFIX}bad"] = "{not json"

        threats = store.recent_threats()
        assert [t["id"] for t in threats] == ["new", "mid", "old"]
        assert threats[0]["analysis"]["risk_level"] == "medium"

    def test_recent_threats_limit(self, store):
        for i in range(7):
            store.save_analysis(f"t-{i}", _result("high", 90))
        assert len(store.recent_threats()) == 5
        assert len(store.recent_threats(limit=2)) == 2
        assert store.recent_threats(limit=0) == []


class TestStats:

    def test_update_uses_pipeline(self, store, redis_client):
        pipe = redis_client.pipeline.return_value
        store.update_stats(scanned=3, threats=1)

        pipe.hincrby.assert_any_call(STATS_KEY, "scanned", 3)
        pipe.hincrby.assert_any_call(STATS_KEY, "threats", 1)
        pipe.hsetnx.assert_called_once()
        pipe.execute.assert_called_once()

    def test_get_stats(self, store, redis_client):
        redis_client.hgetall.return_value = {
            "scanned": "12", "threats": "3", "last_reset": "1700000000.5",
        }
        assert store.get_stats() == {
            "scanned": 12, "threats": 3, "last_reset": 1700000000.5,
        }

    def test_get_stats_empty(self, store, redis_client):
        redis_client.hgetall.return_value = {}
        assert store.get_stats() == {"scanned": 0, "threats": 0, "last_reset": None}

    def test_reset(self, store, redis_client):
        redis_client.hgetall.return_value = {"scanned": "0", "threats": "0", "last_reset": "1.0"}
        stats = store.reset_stats()

        mapping = redis_client.hset.call_args.kwargs["mapping"]
        assert mapping["scanned"] == 0
        assert mapping["threats"] == 0
        assert stats["scanned"] == 0


class TestSettings:

    def test_defaults_when_nothing_stored(self, store):
        assert store.get_settings() == Settings()

    def test_partial_update_merges(self, store, redis_client):
        updated = store.update_settings({"sensitivity": 5, "show_warnings": False})
        assert updated.sensitivity == 5
        assert updated.show_warnings is False
        assert updated.real_time_scanning is True
        assert json.loads(redis_client.data[SETTINGS_KEY])["sensitivity"] == 5
        assert store.get_settings() == updated

    def test_invalid_update_not_stored(self, store, redis_client):
        with pytest.raises(ValueError):
            store.update_settings({"sensitivity": 9})
        redis_client.set.assert_not_called()

    def test_invalid_stored_settings_fall_back(self, store, redis_client):
        redis_client.data[SETTINGS_KEY] = json.dumps({"sensitivity": 0})
        assert store.get_settings() == Settings()

    def test_configured_defaults(self, redis_client):
        store = AnalysisStore(
            redis_client=redis_client,
            default_settings=Settings(block_suspicious=True),
            analysis_ttl=60,
        )
        assert store.get_settings().block_suspicious is True


class TestThreatReports:

    def test_record(self, store, redis_client):
        report = store.record_threat_report({"email_id": "thread-1"}, source_url="https://mail.google.com/")

        assert report["reported"] is True
        assert report["data"] == {"email_id": "thread-1"}
        key, raw = redis_client.lpush.call_args.args
        assert key == THREAT_REPORTS_KEY
        assert json.loads(raw) == report

    def test_list(self, store, redis_client):
        redis_client.lrange.return_value = [
            json.dumps({"data": {"n": 1}}), "{broken", json.dumps({"data": {"n": 2}}),
        ]
        reports = store.list_threat_reports(limit=10)
        assert [r["data"]["n"] for r in reports] == [1, 2]
        redis_client.lrange.assert_called_once_with(THREAT_REPORTS_KEY, 0, 9)
