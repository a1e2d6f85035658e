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
Mailbox Scanner

Drives the engine over the messages visible on one webmail page:
1. Detects the platform from the page hostname
2. Extracts an EmailRecord from each message element not seen before
3. Runs the engine, keeps the result, persists it best-effort
4. Re-scans after bursts of page mutations, debounced

The host supplies the message elements (as HTML fragments) through a
callable, so the scanner never touches a live DOM.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlparse

from phishlens.banner import build_banner
from phishlens.config import get_debounce_seconds
from phishlens.debounce import Debouncer
from phishlens.detector import analyze
from phishlens.extraction import detect_platform, email_id, extract_email
from phishlens.models import EmailAnalysisResult, Settings

logger = logging.getLogger(__name__)


@dataclass
class ScanOutcome:
    """One analyzed message."""
    email_id: str
    result: EmailAnalysisResult
    banner: Optional[dict] = None


class MailboxScanner:
    """
    Scan the messages of one webmail page.

    Usage:
        scanner = MailboxScanner(page_url, get_elements=host.message_elements, store=store)
        scanner.scan_visible()   # initial pass
        scanner.on_mutation()    # call from the page's mutation observer
    """

    def __init__(
        self,
        page_url: str,
        get_elements: Callable[[], list[str]],
        store=None,
        settings: Optional[Settings] = None,
        debounce_seconds: Optional[float] = None,
    ):
        self.page_url = page_url
        self.platform = detect_platform(urlparse(page_url).hostname or "")
        self._get_elements = get_elements
        self._store = store
        self.settings = settings or Settings()
        self.analyzed: dict[str, ScanOutcome] = {}
        self._scan_lock = threading.Lock()
        wait = get_debounce_seconds() if debounce_seconds is None else debounce_seconds
        self._rescan = Debouncer(wait, self.scan_visible)
        logger.info("Scanner started for %s (platform: %s)", page_url, self.platform)

    @property
    def analyzed_count(self) -> int:
        return len(self.analyzed)

    def scan_visible(self) -> list[ScanOutcome]:
        """Analyze every visible message not analyzed yet; return the new outcomes.

        Debounced re-scans run on a timer thread, so passes are serialized:
        a message is checked and recorded under the same lock.
        """
        with self._scan_lock:
            elements = self._get_elements() or []
            logger.debug("Found %d emails to analyze", len(elements))

            outcomes = []
            for html in elements:
                message_id = email_id(html)
                if message_id in self.analyzed:
                    continue
                outcome = self.scan_element(html, message_id)
                if outcome is not None:
                    outcomes.append(outcome)

        if outcomes and self._store is not None:
            threats = sum(1 for o in outcomes if o.result.is_threat)
            try:
                self._store.update_stats(scanned=len(outcomes), threats=threats)
            except Exception as exc:
                logger.warning("Stats update failed (non-fatal): %s", exc)
        return outcomes

    def scan_element(self, html: str, message_id: Optional[str] = None) -> Optional[ScanOutcome]:
        """Analyze one message element. Returns None if it has nothing to analyze."""
        message_id = message_id or email_id(html)
        try:
            record = extract_email(html, self.platform)
        except Exception as exc:
            logger.warning("Extraction failed for %s: %s", message_id, exc)
            return None

        if not record.content and not record.sender:
            return None

        result = analyze(record)
        banner = build_banner(result) if self.settings.show_warnings else None
        outcome = ScanOutcome(email_id=message_id, result=result, banner=banner)
        self.analyzed[message_id] = outcome

        if self._store is not None:
            try:
                self._store.save_analysis(message_id, result, source_url=self.page_url)
            except Exception as exc:
                logger.warning("Storing analysis %s failed (non-fatal): %s", message_id, exc)
        return outcome

    def on_mutation(self) -> None:
        """Schedule a re-scan once the page has been quiet for the debounce window."""
        if not self.settings.real_time_scanning:
            return
        self._rescan.trigger()

    def update_settings(self, settings: Settings) -> None:
        self.settings = settings
        if not settings.real_time_scanning:
            self._rescan.cancel()

    def close(self) -> None:
        self._rescan.cancel()
