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
Keyword Matcher — phrase dictionary and urgency patterns.

Plain substring matching, no word boundaries: "google" matches inside
"googleplex" and "irs" matches inside "first". Only the matched phrase is
reported, never its category.
"""
import re


# ---------------------------------------------------------------------------
# Keyword lists
# ---------------------------------------------------------------------------

#: Urgency phrases.
_URGENCY_KEYWORDS: tuple[str, ...] = (
    "urgent", "immediate", "expires today", "act now", "limited time",
    "expires soon", "don't delay", "instant", "immediately",
)

#: Financial threat phrases.
_FINANCIAL_KEYWORDS: tuple[str, ...] = (
    "suspend account", "verify account", "update payment", "billing problem",
    "payment failed", "credit card", "bank account", "wire transfer",
    "tax refund", "refund pending", "unclaimed money", "lottery winner",
)

#: Social engineering phrases.
_SOCIAL_ENGINEERING_KEYWORDS: tuple[str, ...] = (
    "click here", "download now", "open attachment", "confirm identity",
    "security alert", "unusual activity", "sign in", "log in",
    "reset password", "update information", "verify now",
)

#: Brands and authorities commonly impersonated.
_AUTHORITY_KEYWORDS: tuple[str, ...] = (
    "microsoft", "google", "apple", "amazon", "paypal", "netflix",
    "facebook", "instagram", "twitter", "linkedin", "irs", "fbi",
    "government", "official notice", "legal action",
)

#: Full dictionary in scan order.
SUSPICIOUS_KEYWORDS: tuple[str, ...] = (
    _URGENCY_KEYWORDS
    + _FINANCIAL_KEYWORDS
    + _SOCIAL_ENGINEERING_KEYWORDS
    + _AUTHORITY_KEYWORDS
)

#: Each pattern counts once, however often it appears.
URGENCY_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"within \d+ hours?", re.IGNORECASE),
    re.compile(r"expires? (?:today|soon|in)", re.IGNORECASE),
    re.compile(r"immediate(?:ly)?", re.IGNORECASE),
    re.compile(r"urgent", re.IGNORECASE),
    re.compile(r"act now", re.IGNORECASE),
    re.compile(r"don't (?:wait|delay)", re.IGNORECASE),
)


# ---------------------------------------------------------------------------
# Scanners
# ---------------------------------------------------------------------------

def match_keywords(content: str) -> list[str]:
    """Return the dictionary phrases contained in content, in dictionary order."""
    text_lower = content.lower()
    matched: list[str] = []
    for keyword in SUSPICIOUS_KEYWORDS:
        if keyword.lower() in text_lower and keyword not in matched:
            matched.append(keyword)
    return matched


def count_urgency_indicators(content: str) -> int:
    """Count how many urgency patterns occur at least once in content."""
    return sum(1 for pattern in URGENCY_PATTERNS if pattern.search(content))
