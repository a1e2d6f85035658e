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
Analyzer: Body Content

Bundles the text-based checks into a single ContentAnalysis:
- suspicious phrases (keywords.py)
- urgency patterns (keywords.py)
- per-URL findings (url_analyzer.py)
- grammar heuristic (grammar.py)
"""
from phishlens.analyzers._base import BaseAnalyzer
from phishlens.analyzers.grammar import grammar_score
from phishlens.analyzers.keywords import count_urgency_indicators, match_keywords
from phishlens.analyzers.url_analyzer import analyze_urls
from phishlens.models import ContentAnalysis, EmailRecord


class ContentAnalyzer(BaseAnalyzer):
    """Scan the body for phishing phrases, risky URLs and sloppy text."""

    name = "content"
    description = "Keyword, urgency, URL and grammar checks on the email body"
    order = 10
    result_field = "content"

    def analyze(self, email: EmailRecord) -> ContentAnalysis:
        body_text = email.content or ""
        return ContentAnalysis(
            suspicious_keywords=match_keywords(body_text),
            url_analysis=analyze_urls(body_text),
            urgency_indicator_count=count_urgency_indicators(body_text),
            grammar_score=grammar_score(body_text),
        )

    def default(self) -> ContentAnalysis:
        return ContentAnalysis()
