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
PhishLens Detection Engine

Orchestrates analysis of an email:
1. Auto-discovers all analyzers (sorted by order)
2. Runs each analyzer, collecting its partial analysis
3. Aggregates the partials into a score and risk level

The engine is pure: no I/O, no shared mutable state, same input gives the
same output. It never raises; an analyzer that blows up is logged and its
slot falls back to the analyzer's default.
"""
import logging
import time
from functools import lru_cache

from phishlens.analyzers import discover_analyzers
from phishlens.analyzers._base import BaseAnalyzer
from phishlens.models import EmailAnalysisResult, EmailRecord
from phishlens.scoring import calculate_risk_score, determine_risk_level

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_analyzers() -> tuple[BaseAnalyzer, ...]:
    """Discover analyzers once per process."""
    analyzers = tuple(discover_analyzers())
    logger.info(
        "Loaded %d analyzers (order: %s)",
        len(analyzers),
        ", ".join(f"{a.name}({a.order})" for a in analyzers),
    )
    return analyzers


def analyze(email: EmailRecord) -> EmailAnalysisResult:
    """
    Score an email for phishing risk.

    Missing fields are treated as absent: no content means no keywords or
    URLs, no sender means no spoofing signal, no headers means every
    authentication check counts as failed.
    """
    result = EmailAnalysisResult()

    for analyzer in get_analyzers():
        t0 = time.monotonic()
        try:
            partial = analyzer.analyze(email)
        except Exception as exc:
            logger.exception("Analyzer '%s' failed: %s", analyzer.name, exc)
            partial = analyzer.default()
        elapsed_ms = (time.monotonic() - t0) * 1000
        logger.debug("Analyzer '%s' finished (%.1fms)", analyzer.name, elapsed_ms)
        setattr(result, analyzer.result_field, partial)

    result.risk_score = calculate_risk_score(result.content, result.metadata, result.sender)
    result.risk_level = determine_risk_level(result.risk_score)

    logger.debug(
        "Analysis complete: score=%d level=%s keywords=%d urls=%d",
        result.risk_score, result.risk_level,
        len(result.content.suspicious_keywords), len(result.content.url_analysis),
    )
    return result


def analyze_dict(data: dict) -> EmailAnalysisResult:
    """Convenience wrapper for callers holding a JSON-shaped email."""
    return analyze(EmailRecord.from_dict(data))
