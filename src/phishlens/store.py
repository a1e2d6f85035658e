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

"""
PhishLens — Redis Persistence

Keeps everything the scanner needs between page loads:
1. Analysis records, keyed by an opaque analysis id, expiring after a week
2. Running counters (emails scanned, threats found) updated atomically
3. The user's settings record
4. Threat reports submitted by users

The engine never touches this module; callers treat it as best-effort.
"""
import json
import logging
import time
from typing import Optional

import redis

from phishlens.config import REDIS_URL, get_analysis_ttl_seconds, get_default_settings
from phishlens.models import THREAT_LEVELS, EmailAnalysisResult, Settings

logger = logging.getLogger(__name__)

ANALYSIS_KEY_PREFIX = "analysis:"
STATS_KEY = "stats:total"
SETTINGS_KEY = "settings"
THREAT_REPORTS_KEY = "threat_reports"


class AnalysisStore:
    """
    Redis-backed store for analyses, counters and settings.

    Usage:
        store = AnalysisStore()
        store.save_analysis("thread-123", result, source_url="https://mail.google.com/")
        store.update_stats(scanned=1, threats=1 if result.is_threat else 0)
        settings = store.get_settings()
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        default_settings: Optional[Settings] = None,
        analysis_ttl: Optional[int] = None,
    ):
        self.redis_client = redis_client or redis.from_url(REDIS_URL, decode_responses=True)
        self._default_settings = default_settings
        self.analysis_ttl = analysis_ttl or get_analysis_ttl_seconds()

    # -- analyses --

    def save_analysis(
        self,
        analysis_id: str,
        result: EmailAnalysisResult,
        source_url: str = "",
    ) -> dict:
        """Store an analysis with a timestamp; Redis expires it after analysis_ttl."""
        record = {
            "timestamp": time.time(),
            "analysis": result.to_dict(),
            "source_url": source_url,
        }
        self.redis_client.setex(
            f"{ANALYSIS_KEY_PREFIX}{analysis_id}", self.analysis_ttl, json.dumps(record),
        )
        return record

    def get_analysis(self, analysis_id: str) -> Optional[dict]:
        raw = self.redis_client.get(f"{ANALYSIS_KEY_PREFIX}{analysis_id}")
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.error("Invalid analysis record for %s", analysis_id)
            return None

    def count_threats(self, source_url: str) -> int:
        """Count stored medium/high analyses that came from source_url."""
        count = 0
        for key in self.redis_client.scan_iter(match=f"{ANALYSIS_KEY_PREFIX}*"):
            raw = self.redis_client.get(key)
            if not raw:
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError:
                continue
            level = record.get("analysis", {}).get("risk_level")
            if record.get("source_url") == source_url and level in THREAT_LEVELS:
                count += 1
        return count

    def recent_threats(self, limit: int = 5) -> list[dict]:
        """Return the newest medium/high analyses, newest first."""
        threats = []
        for key in self.redis_client.scan_iter(match=f"{ANALYSIS_KEY_PREFIX}*"):
            raw = self.redis_client.get(key)
            if not raw:
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError:
                logger.error("Invalid analysis record at %s", key)
                continue
            if record.get("analysis", {}).get("risk_level") in THREAT_LEVELS:
                record["id"] = key[len(ANALYSIS_KEY_PREFIX):]
                threats.append(record)
        threats.sort(key=lambda r: r.get("timestamp", 0), reverse=True)
        return threats[:max(limit, 0)]

    # -- counters --

    def update_stats(self, scanned: int = 0, threats: int = 0) -> None:
        """Increment the running counters atomically."""
        pipe = self.redis_client.pipeline()
        pipe.hincrby(STATS_KEY, "scanned", scanned)
        pipe.hincrby(STATS_KEY, "threats", threats)
        pipe.hsetnx(STATS_KEY, "last_reset", time.time())
        pipe.execute()

    def get_stats(self) -> dict:
        raw = self.redis_client.hgetall(STATS_KEY) or {}
        last_reset = raw.get("last_reset")
        return {
            "scanned": int(raw.get("scanned", 0)),
            "threats": int(raw.get("threats", 0)),
            "last_reset": float(last_reset) if last_reset else None,
        }

    def reset_stats(self) -> dict:
        self.redis_client.hset(
            STATS_KEY, mapping={"scanned": 0, "threats": 0, "last_reset": time.time()},
        )
        logger.info("Statistics reset")
        return self.get_stats()

    # -- settings --

    @property
    def default_settings(self) -> Settings:
        if self._default_settings is None:
            self._default_settings = get_default_settings()
        return self._default_settings

    def get_settings(self) -> Settings:
        """Return stored settings merged over the configured defaults."""
        defaults = self.default_settings.to_dict()
        raw = self.redis_client.get(SETTINGS_KEY)
        if not raw:
            return Settings.from_dict(defaults)
        try:
            return Settings.from_dict({**defaults, **json.loads(raw)})
        except (json.JSONDecodeError, TypeError, ValueError) as exc:
            logger.warning("Ignoring invalid stored settings: %s", exc)
            return Settings.from_dict(defaults)

    def update_settings(self, changes: dict) -> Settings:
        """Apply a partial update.

        Raises:
            ValueError: if the merged settings are invalid. Nothing is stored.
        """
        merged = Settings.from_dict({**self.get_settings().to_dict(), **changes})
        self.redis_client.set(SETTINGS_KEY, json.dumps(merged.to_dict()))
        logger.info("Settings updated: %s", merged.to_dict())
        return merged

    # -- threat reports --

    def record_threat_report(self, data: dict, source_url: str = "") -> dict:
        report = {
            "timestamp": time.time(),
            "data": data,
            "source_url": source_url,
            "reported": True,
        }
        self.redis_client.lpush(THREAT_REPORTS_KEY, json.dumps(report))
        logger.info("Threat reported from %s", source_url or "unknown source")
        return report

    def list_threat_reports(self, limit: int = 50) -> list[dict]:
        reports = []
        for raw in self.redis_client.lrange(THREAT_REPORTS_KEY, 0, limit - 1):
            try:
                reports.append(json.loads(raw))
            except json.JSONDecodeError:
                logger.error("Invalid threat report in list: %s", raw)
        return reports
