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
Risk Aggregator

Turns the three partial analyses into one 0-100 score and a risk level.
The model is purely additive; intermediate totals may run far past 100 and
are only clamped at the end, so every score of 70 or more lands in "high".
"""
import math

from phishlens.models import (
    RISK_HIGH,
    RISK_LOW,
    RISK_MEDIUM,
    RISK_MINIMAL,
    ContentAnalysis,
    MetadataAnalysis,
    SenderAnalysis,
)

# --- Weights ---
KEYWORD_WEIGHT = 5
URGENCY_WEIGHT = 10
GRAMMAR_WEIGHT = 0.3
SPF_FAIL_SCORE = 20
DKIM_FAIL_SCORE = 15
DMARC_FAIL_SCORE = 25
SUSPICIOUS_HEADER_WEIGHT = 10
UNKNOWN_SENDER_WITH_KEYWORDS_SCORE = 30

# --- Level thresholds (lower bounds, highest first) ---
LEVEL_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (70, RISK_HIGH),
    (40, RISK_MEDIUM),
    (20, RISK_LOW),
)


def raw_risk_score(
    content: ContentAnalysis,
    metadata: MetadataAnalysis,
    sender: SenderAnalysis,
) -> float:
    """Sum every contribution without clamping."""
    score = 0.0

    # Content
    score += len(content.suspicious_keywords) * KEYWORD_WEIGHT
    score += content.urgency_indicator_count * URGENCY_WEIGHT
    score += max(0, 100 - content.grammar_score) * GRAMMAR_WEIGHT
    score += sum(url.risk_score for url in content.url_analysis)

    # Metadata
    if not metadata.spf_pass:
        score += SPF_FAIL_SCORE
    if not metadata.dkim_pass:
        score += DKIM_FAIL_SCORE
    if not metadata.dmarc_pass:
        score += DMARC_FAIL_SCORE
    score += len(metadata.suspicious_headers) * SUSPICIOUS_HEADER_WEIGHT

    # Sender
    score += sender.spoofing_likelihood
    if not sender.is_known_legitimate and content.suspicious_keywords:
        score += UNKNOWN_SENDER_WITH_KEYWORDS_SCORE

    return score


def calculate_risk_score(
    content: ContentAnalysis,
    metadata: MetadataAnalysis,
    sender: SenderAnalysis,
) -> int:
    """Floor the additive score to an integer and clamp it to 0-100.

    Flooring keeps the level the same as bucketing the unrounded total.
    """
    score = math.floor(raw_risk_score(content, metadata, sender))
    return min(max(score, 0), 100)


def determine_risk_level(score: int) -> str:
    """Map a clamped score to its risk level."""
    for lower_bound, level in LEVEL_THRESHOLDS:
        if score >= lower_bound:
            return level
    return RISK_MINIMAL
