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
PhishLens — Configuration Loader

Provides a single, cached loader for config.yaml used by the API, the
Celery worker and the mailbox scanner. The scoring engine itself reads no
configuration.
"""

import logging
import os
from functools import lru_cache

import yaml

from phishlens.models import Settings

logger = logging.getLogger(__name__)

# Search paths for config.yaml (Docker mount, then relative to repo root)
_CONFIG_PATHS = [
    "/app/config/config.yaml",
    os.path.join(os.path.dirname(__file__), "..", "..", "config", "config.yaml"),
]

REDIS_URL = os.environ.get("REDIS_URL", "redis://localhost:6379/0")

DEFAULT_DEBOUNCE_SECONDS = 1.0
DEFAULT_ANALYSIS_TTL_DAYS = 7


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load and cache config.yaml from known paths.

    Returns:
        The parsed YAML config as a dict, or an empty dict if no config found.
    """
    config_path = os.environ.get("PHISHLENS_CONFIG_PATH", "")
    search_paths = [config_path] + _CONFIG_PATHS if config_path else _CONFIG_PATHS

    for path in search_paths:
        if not path:
            continue
        try:
            with open(path) as f:
                config = yaml.safe_load(f) or {}
            logger.info("Configuration loaded from %s", path)
            return config
        except FileNotFoundError:
            continue

    logger.warning("No config.yaml found — using empty configuration")
    return {}


def get_default_settings() -> Settings:
    """Return the settings record used until the user changes something.

    Raises:
        ValueError: if config.yaml holds an out-of-range sensitivity.
    """
    return Settings.from_dict(load_config().get("settings") or {})


def get_debounce_seconds() -> float:
    """Quiet period before a burst of page mutations triggers a re-scan."""
    scanner = load_config().get("scanner") or {}
    return float(scanner.get("debounce_seconds", DEFAULT_DEBOUNCE_SECONDS))


def get_analysis_ttl_seconds() -> int:
    """How long stored analysis records live before Redis expires them."""
    storage = load_config().get("storage") or {}
    days = storage.get("analysis_ttl_days", DEFAULT_ANALYSIS_TTL_DAYS)
    return int(days) * 24 * 60 * 60
