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

"""Grammar heuristic: mechanical text-quality anomalies."""
import re

# Every match of every pattern costs PENALTY_PER_MATCH points.
GRAMMAR_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\s{2,}"),                 # repeated whitespace
    re.compile(r"[.!?]{2,}"),              # repeated punctuation
    re.compile(r"[A-Z]{3,}"),              # shouting
    re.compile(r"\b(?:recieve|occured|seperate|definately)\b", re.IGNORECASE),
)

PENALTY_PER_MATCH = 5


def grammar_score(content: str) -> int:
    """Score text quality from 100 (clean) down to 0."""
    score = 100
    for pattern in GRAMMAR_PATTERNS:
        matches = sum(1 for _ in pattern.finditer(content))
        score -= matches * PENALTY_PER_MATCH
    return max(score, 0)
