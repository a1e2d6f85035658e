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
Analyzer: Sender Domain

Estimates how likely the sender domain is to be impersonating a well-known
one.

What it checks:
- Exact match against a fixed allowlist of legitimate domains
- Lookalike domains ("paypai.com" vs "paypal.com") via edit distance
- Structural patterns common in throwaway phishing domains

Every allowlisted domain the sender resembles contributes to the score, not
just the closest one, so a domain that looks like two brands scores higher
than one that looks like a single brand.
"""
import re

from phishlens.analyzers._base import BaseAnalyzer
from phishlens.models import EmailRecord, SenderAnalysis


LEGITIMATE_DOMAINS: tuple[str, ...] = (
    "gmail.com", "outlook.com", "yahoo.com", "hotmail.com",
    "microsoft.com", "google.com", "apple.com", "amazon.com",
    "paypal.com", "netflix.com", "facebook.com", "twitter.com",
)

_LEGITIMATE_SET: frozenset[str] = frozenset(LEGITIMATE_DOMAINS)

# Each matching pattern adds PATTERN_SCORE
SUSPICIOUS_DOMAIN_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+"),                    # IP literal
    re.compile(r"[a-z0-9]+-[a-z0-9]+-[a-z0-9]+\.(?:tk|ml|ga|cf)$"),   # free TLD
    re.compile(r"secure[0-9]*\."),                                    # fake "secure" host
    re.compile(r"[a-z]+[0-9]+\.(?:com|net|org)$"),                    # word + digits
)

SIMILARITY_THRESHOLD = 0.7
SIMILARITY_WEIGHT = 50
PATTERN_SCORE = 30
MAX_SPOOFING = 100


def extract_domain(sender: str) -> str:
    """
    Pull the domain out of "user@domain" or "Name <user@domain>".

    Takes everything after the first "@" up to the first ">" and lowercases
    it. Returns "" when there is no "@".
    """
    _, at, rest = sender.partition("@")
    if not at:
        return ""
    return rest.split(">", 1)[0].lower()


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit insert, delete and substitute costs."""
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur[j] = min(
                prev[j] + 1,         # deletion
                cur[j - 1] + 1,      # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev = cur
    return prev[len(b)]


def similarity(a: str, b: str) -> float:
    """Normalised similarity in [0, 1]; 1.0 means identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - levenshtein_distance(a, b) / longest


def spoofing_score(domain: str) -> float:
    """Combine lookalike similarity and structural patterns into 0-100."""
    score = 0.0
    for legit in LEGITIMATE_DOMAINS:
        ratio = similarity(domain, legit)
        if ratio > SIMILARITY_THRESHOLD and domain != legit:
            score += ratio * SIMILARITY_WEIGHT

    for pattern in SUSPICIOUS_DOMAIN_PATTERNS:
        if pattern.search(domain):
            score += PATTERN_SCORE

    return min(max(score, 0.0), MAX_SPOOFING)


class SenderAnalyzer(BaseAnalyzer):
    """Check the sender domain against known brands and phishing patterns."""

    name = "sender"
    description = "Allowlist lookup, lookalike detection and suspicious domain patterns"
    order = 30
    result_field = "sender"

    def analyze(self, email: EmailRecord) -> SenderAnalysis:
        domain = extract_domain(email.sender or "")
        if not domain:
            return self.default()

        return SenderAnalysis(
            domain=domain,
            spoofing_likelihood=spoofing_score(domain),
            is_known_legitimate=domain in _LEGITIMATE_SET,
        )

    def default(self) -> SenderAnalysis:
        return SenderAnalysis()
