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
PhishLens Engine — Data Models

These dataclasses define the data structures flowing through the scoring
engine.

For beginners:
- EmailRecord         = the email extracted from the page (input)
- ContentAnalysis,
  MetadataAnalysis,
  SenderAnalysis      = what one analyzer found (intermediate)
- EmailAnalysisResult = the final score and risk level (output)
"""
from dataclasses import dataclass, field


#: Risk levels, lowest to highest.
RISK_MINIMAL = "minimal"
RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"

RISK_LEVELS: tuple[str, ...] = (RISK_MINIMAL, RISK_LOW, RISK_MEDIUM, RISK_HIGH)

#: Levels counted as threats by the stats counters and the badge.
THREAT_LEVELS: frozenset[str] = frozenset({RISK_MEDIUM, RISK_HIGH})


@dataclass(frozen=True)
class EmailRecord:
    """
    An email as handed to the engine by an extraction collaborator.

    Headers are usually empty when the record was scraped from a webmail
    page; header keys are case-sensitive as provided.
    """
    content: str = ""
    sender: str = ""
    subject: str = ""
    headers: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "EmailRecord":
        """Create an EmailRecord from a JSON dict, treating null fields as empty.

        Raises:
            ValueError: if headers is neither null nor an object.
        """
        headers = data.get("headers") or {}
        if not isinstance(headers, dict):
            raise ValueError(f"headers must be an object, got {type(headers).__name__}")
        return cls(
            content=data.get("content") or "",
            sender=data.get("sender") or "",
            subject=data.get("subject") or "",
            headers={str(k): str(v) for k, v in headers.items()},
        )

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "sender": self.sender,
            "subject": self.subject,
            "headers": dict(self.headers),
        }


@dataclass
class UrlAnalysis:
    """
    Findings for a single URL found in the body.

    risk_score has no upper bound; the aggregator sums every URL's score
    before the final clamp.
    """
    url: str = ""
    domain: str = ""             # Empty when the URL could not be parsed
    is_suspicious: bool = False
    reasons: list = field(default_factory=list)
    risk_score: int = 0

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "domain": self.domain,
            "is_suspicious": self.is_suspicious,
            "reasons": list(self.reasons),
            "risk_score": self.risk_score,
        }


@dataclass
class ContentAnalysis:
    """Body-text findings: keywords, URLs, urgency and grammar."""
    suspicious_keywords: list = field(default_factory=list)
    url_analysis: list = field(default_factory=list)
    urgency_indicator_count: int = 0
    grammar_score: int = 100

    def to_dict(self) -> dict:
        return {
            "suspicious_keywords": list(self.suspicious_keywords),
            "url_analysis": [u.to_dict() for u in self.url_analysis],
            "urgency_indicator_count": self.urgency_indicator_count,
            "grammar_score": self.grammar_score,
        }


@dataclass
class MetadataAnalysis:
    """Header findings. ip_reputation and origin_country are reserved."""
    spf_pass: bool = False
    dkim_pass: bool = False
    dmarc_pass: bool = False
    suspicious_headers: list = field(default_factory=list)
    ip_reputation: str = "unknown"
    origin_country: str = "unknown"

    def to_dict(self) -> dict:
        return {
            "spf_pass": self.spf_pass,
            "dkim_pass": self.dkim_pass,
            "dmarc_pass": self.dmarc_pass,
            "suspicious_headers": list(self.suspicious_headers),
            "ip_reputation": self.ip_reputation,
            "origin_country": self.origin_country,
        }


@dataclass
class SenderAnalysis:
    """Sender-domain findings. domain_reputation and domain_age are reserved."""
    domain: str = ""
    domain_reputation: str = "unknown"
    spoofing_likelihood: float = 0
    is_known_legitimate: bool = False
    domain_age: str = "unknown"

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "domain_reputation": self.domain_reputation,
            "spoofing_likelihood": self.spoofing_likelihood,
            "is_known_legitimate": self.is_known_legitimate,
            "domain_age": self.domain_age,
        }


@dataclass
class EmailAnalysisResult:
    """
    The final decision for one email.

    Fields:
    - risk_score: 0-100, always clamped
    - risk_level: one of RISK_LEVELS, derived from risk_score only
    - content, metadata, sender: the three partial analyses
    """
    risk_score: int = 0
    risk_level: str = RISK_MINIMAL
    content: ContentAnalysis = field(default_factory=ContentAnalysis)
    metadata: MetadataAnalysis = field(default_factory=MetadataAnalysis)
    sender: SenderAnalysis = field(default_factory=SenderAnalysis)

    @property
    def is_threat(self) -> bool:
        return self.risk_level in THREAT_LEVELS

    def to_dict(self) -> dict:
        """Serialise the result to a JSON-safe dict."""
        return {
            "risk_score": self.risk_score,
            "risk_level": self.risk_level,
            "content": self.content.to_dict(),
            "metadata": self.metadata.to_dict(),
            "sender": self.sender.to_dict(),
        }


@dataclass
class Settings:
    """
    User-facing scanner settings.

    sensitivity is accepted and validated (1-5) but the scoring arithmetic
    does not consume it.
    """
    real_time_scanning: bool = True
    show_warnings: bool = True
    block_suspicious: bool = False
    sensitivity: int = 3

    def __post_init__(self):
        if isinstance(self.sensitivity, bool) or not isinstance(self.sensitivity, int):
            raise ValueError(f"sensitivity must be an integer, got {self.sensitivity!r}")
        if not 1 <= self.sensitivity <= 5:
            raise ValueError(f"sensitivity must be between 1 and 5, got {self.sensitivity}")

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Build Settings from a dict, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> dict:
        return {
            "real_time_scanning": self.real_time_scanning,
            "show_warnings": self.show_warnings,
            "block_suspicious": self.block_suspicious,
            "sensitivity": self.sensitivity,
        }
