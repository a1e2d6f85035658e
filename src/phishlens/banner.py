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
Warning banner description.

Builds the data a host needs to render an inline warning above a message:
title, message, color, icon and the on-demand details. No markup is
produced here.
"""
from typing import Optional

from phishlens.models import (
    RISK_HIGH,
    RISK_LOW,
    RISK_MEDIUM,
    RISK_MINIMAL,
    EmailAnalysisResult,
)

WARNING_COLORS: dict[str, str] = {
    RISK_HIGH: "#d32f2f",
    RISK_MEDIUM: "#f57c00",
    RISK_LOW: "#fbc02d",
    RISK_MINIMAL: "#388e3c",
}

WARNING_ICONS: dict[str, str] = {
    RISK_HIGH: "\U0001F6A8",     # rotating light
    RISK_MEDIUM: "\u26A0\uFE0F",  # warning sign
    RISK_LOW: "\u26A1",           # high voltage
    RISK_MINIMAL: "\u2139\uFE0F", # information
}

MAX_DETAIL_KEYWORDS = 5
SPOOFING_MESSAGE_THRESHOLD = 50


def warning_message(result: EmailAnalysisResult) -> str:
    """One-line summary of why the email was flagged."""
    messages = []

    if result.content.suspicious_keywords:
        messages.append("Phishing keywords detected")
    if any(url.is_suspicious for url in result.content.url_analysis):
        messages.append("Suspicious links found")
    if not result.metadata.spf_pass or not result.metadata.dkim_pass:
        messages.append("Email authentication failed")
    if result.sender.spoofing_likelihood > SPOOFING_MESSAGE_THRESHOLD:
        messages.append("Possible sender spoofing")

    if not messages:
        return "Multiple security indicators detected."
    return ", ".join(messages) + "."


def build_banner(result: EmailAnalysisResult) -> Optional[dict]:
    """Describe the warning banner for a result, or None for minimal risk."""
    level = result.risk_level
    if level == RISK_MINIMAL:
        return None

    return {
        "level": level,
        "title": f"{level.upper()} SECURITY RISK DETECTED",
        "message": warning_message(result),
        "color": WARNING_COLORS.get(level, WARNING_COLORS[RISK_MINIMAL]),
        "icon": WARNING_ICONS.get(level, WARNING_ICONS[RISK_MINIMAL]),
        "details": {
            "risk_score": result.risk_score,
            "suspicious_keywords": result.content.suspicious_keywords[:MAX_DETAIL_KEYWORDS],
            "has_suspicious_urls": any(
                url.is_suspicious for url in result.content.url_analysis
            ),
        },
    }
