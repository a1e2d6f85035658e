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
PhishLens Analyzer Base Class

Every analyzer fills exactly one slot of EmailAnalysisResult:
"content", "metadata" or "sender".

To create a new analyzer:
1. Create a new .py file in this folder (e.g. my_check.py)
2. Import BaseAnalyzer from this file
3. Create a class that inherits from BaseAnalyzer
4. Set name, description, order and result_field
5. Implement analyze() and default()

Example:
    from phishlens.analyzers._base import BaseAnalyzer
    from phishlens.models import SenderAnalysis

    class MySenderCheck(BaseAnalyzer):
        name = "my_sender_check"
        description = "What this analyzer does"
        order = 40
        result_field = "sender"

        def analyze(self, email):
            return SenderAnalysis()

        def default(self):
            return SenderAnalysis()
"""
from abc import ABC, abstractmethod

from phishlens.models import EmailRecord


class BaseAnalyzer(ABC):
    """
    Base class for all email analyzers.

    Attributes:
        name:         Unique identifier for this analyzer (shown in logs)
        description:  Human-readable description of what it checks
        order:        Execution order, lowest first
        result_field: Which EmailAnalysisResult slot the output goes into
    """

    name: str = "unnamed"
    description: str = ""
    order: int = 100
    result_field: str = ""

    @abstractmethod
    def analyze(self, email: EmailRecord):
        """
        Analyze an email and return a partial analysis.

        Args:
            email: The email to analyze. Has these fields:
                   - email.content (str)  The body text
                   - email.sender  (str)  "Name <user@example.com>" or bare address
                   - email.subject (str)  Subject line
                   - email.headers (dict) Raw headers, often empty

        Returns:
            The partial analysis object for result_field. Must not raise on
            arbitrary input.
        """
        ...

    @abstractmethod
    def default(self):
        """Return the partial analysis used when this dimension has no data."""
        ...
