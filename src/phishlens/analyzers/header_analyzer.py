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
Analyzer: Email Header Authentication

Reads SPF, DKIM, and DMARC results from the Authentication-Results header
and flags headers that phishing kits tend to leave behind.

What each check means:
- SPF:   "Is this server allowed to send email for this domain?"
- DKIM:  "Was this email cryptographically signed by the domain?"
- DMARC: "Does this email pass the domain's authentication policy?"

Only an explicit "pass" counts. The results are taken as written in the
header; nothing is verified against DNS.
"""
from phishlens.analyzers._base import BaseAnalyzer
from phishlens.models import EmailRecord, MetadataAnalysis


AUTH_RESULTS_HEADER = "Authentication-Results"

# Markers matched as substrings of a header's name or value
SUSPICIOUS_HEADER_MARKERS: tuple[str, ...] = (
    "X-Mailer: PHP",
    "X-Originating-IP",
    "X-Forwarded",
)


class HeaderAnalyzer(BaseAnalyzer):
    """Check email authentication headers (SPF, DKIM, DMARC)."""

    name = "header_auth"
    description = "Reads SPF, DKIM and DMARC results and flags suspicious headers"
    order = 20
    result_field = "metadata"

    def analyze(self, email: EmailRecord) -> MetadataAnalysis:
        metadata = MetadataAnalysis()
        headers = email.headers or {}

        # Get the authentication-results header (set by receiving mail server)
        if AUTH_RESULTS_HEADER in headers:
            auth_results = str(headers[AUTH_RESULTS_HEADER]).lower()
            metadata.spf_pass = "spf=pass" in auth_results
            metadata.dkim_pass = "dkim=pass" in auth_results
            metadata.dmarc_pass = "dmarc=pass" in auth_results

        # A header matching several markers is listed once per marker
        for header, value in headers.items():
            value = str(value)
            for marker in SUSPICIOUS_HEADER_MARKERS:
                if marker in header or marker in value:
                    metadata.suspicious_headers.append(header)

        return metadata

    def default(self) -> MetadataAnalysis:
        return MetadataAnalysis()
