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
URL Analyzer

Extracts URLs from the email body and scores each one on its own. This is a
heuristic-based check (no external API calls).

What it checks:
- IP addresses used as hostnames (legitimate sites use domain names)
- Hostnames stitched together from many hyphenated words
- Path traversal ("..") and redirect parameters
- URL shorteners (scored, but not suspicious on their own)

Every rule that matches adds its score and reason; a URL that cannot be
parsed scores MALFORMED_SCORE and nothing else.
"""
import re
from urllib.parse import urlparse

from phishlens.models import UrlAnalysis


# URL shortener domains (substring match against the hostname)
SHORTENERS: tuple[str, ...] = ("bit.ly", "tinyurl.com", "t.co", "goo.gl", "ow.ly")

# Regex to extract URLs from text
URL_PATTERN = re.compile(r"""https?://[^\s<>"']+""", re.IGNORECASE)

# Dotted IPv4 run anywhere in the hostname
IP_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")

MALFORMED_SCORE = 50
IP_HOST_SCORE = 40
HYPHENATED_HOST_SCORE = 20
REDIRECT_SCORE = 30
SHORTENER_SCORE = 15


def extract_urls(content: str) -> list[str]:
    """Return every http(s) URL in content, in order, duplicates kept."""
    return URL_PATTERN.findall(content)


def _parse_hostname(url: str) -> tuple[str, str, str]:
    """Return (hostname, path, query), raising ValueError if the URL is unusable."""
    parsed = urlparse(url)
    # Accessing .port validates it ("http://host:abc" raises here)
    parsed.port
    hostname = parsed.hostname or ""
    if not hostname:
        raise ValueError(f"URL has no host: {url[:80]}")
    return hostname, parsed.path, parsed.query


def analyze_url(url: str) -> UrlAnalysis:
    """Score a single URL."""
    analysis = UrlAnalysis(url=url)

    try:
        hostname, path, query = _parse_hostname(url)
    except ValueError:
        analysis.is_suspicious = True
        analysis.reasons.append("Malformed URL")
        analysis.risk_score += MALFORMED_SCORE
        return analysis

    analysis.domain = hostname

    # Check for IP address as hostname
    if IP_PATTERN.search(hostname):
        analysis.is_suspicious = True
        analysis.reasons.append("Uses IP address instead of domain")
        analysis.risk_score += IP_HOST_SCORE

    # Check for hostnames made of many hyphenated words
    if "-" in hostname and len(hostname.split("-")) > 3:
        analysis.is_suspicious = True
        analysis.reasons.append("Suspicious domain structure")
        analysis.risk_score += HYPHENATED_HOST_SCORE

    # Check for traversal in the path or a redirect parameter
    if ".." in path or "redirect" in query:
        analysis.is_suspicious = True
        analysis.reasons.append("Potential redirect or path traversal")
        analysis.risk_score += REDIRECT_SCORE

    # Shorteners hide the destination but are common in legitimate mail too
    if any(shortener in hostname for shortener in SHORTENERS):
        analysis.reasons.append("Uses URL shortener")
        analysis.risk_score += SHORTENER_SCORE

    return analysis


def analyze_urls(content: str) -> list[UrlAnalysis]:
    """Extract and score every URL in content."""
    return [analyze_url(url) for url in extract_urls(content)]
