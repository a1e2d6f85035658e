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
Webmail Extraction

Turns an HTML fragment of a webmail page (one message element) into an
EmailRecord. Each platform has its own extractor class, picked by platform
tag; the engine only ever sees the normalised EmailRecord.

Fragments are parsed with BeautifulSoup and searched with CSS selectors.
A selector group is a comma-separated list; the first element in document
order matching any selector of the group wins. Groups are tried in order.
The message element itself can match, so a fragment that is just the body
container still yields its text.

Headers are not visible in the rendered page, so extracted records always
carry empty headers.
"""
import logging
import re
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from phishlens.models import EmailRecord

logger = logging.getLogger(__name__)

PLATFORM_GMAIL = "gmail"
PLATFORM_OUTLOOK = "outlook"
PLATFORM_YAHOO = "yahoo"
PLATFORM_GENERIC = "generic"

EMAIL_SITE_DOMAINS: tuple[str, ...] = (
    "mail.google.com",
    "outlook.live.com",
    "outlook.office.com",
    "outlook.office365.com",
    "yahoo.com",
    "protonmail.com",
)

# Root-element attributes that identify a message, in order of preference
_ID_ATTRIBUTES: tuple[str, ...] = ("data-thread-id", "data-convid", "data-test-id")

# Never part of the visible text
_NON_TEXT_TAGS: tuple[str, ...] = ("script", "style")


def detect_platform(hostname: str) -> str:
    """Map a page hostname to a platform tag."""
    hostname = (hostname or "").lower()
    if "mail.google.com" in hostname:
        return PLATFORM_GMAIL
    if "outlook." in hostname:
        return PLATFORM_OUTLOOK
    if "yahoo.com" in hostname:
        return PLATFORM_YAHOO
    return PLATFORM_GENERIC


def is_email_site(url: str) -> bool:
    """True if the URL belongs to a supported webmail site."""
    if not url:
        return False
    return any(domain in url for domain in EMAIL_SITE_DOMAINS)


def parse_fragment(html: str) -> BeautifulSoup:
    """Parse a message element, dropping script and style content."""
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup(_NON_TEXT_TAGS):
        tag.decompose()
    return soup


def _root(soup: BeautifulSoup) -> Optional[Tag]:
    return soup.find(True)


def email_id(html: str) -> str:
    """Derive a stable identifier for a message element.

    Prefers the platform's own id attributes on the root element; otherwise
    uses the start of the element's inner markup with whitespace removed.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    root = _root(soup)
    if root is None:
        markup = html or ""
    else:
        for name in _ID_ATTRIBUTES:
            if root.get(name):
                return root[name]
        markup = root.decode_contents()
    return re.sub(r"\s+", "", markup[:100])[:50]


# ---------------------------------------------------------------------------
# Platform extractors
# ---------------------------------------------------------------------------

class PlatformExtractor:
    """
    Base extractor: finds content, sender and subject with selector groups.

    Subclasses only set the selector groups (and optionally the attribute
    that carries the sender address).
    """

    platform: str = ""
    content_selectors: tuple[str, ...] = ()
    sender_selectors: tuple[str, ...] = ()
    subject_selectors: tuple[str, ...] = ()
    sender_attribute: str = ""

    def _select(self, soup: BeautifulSoup, groups: tuple[str, ...]) -> Optional[Tag]:
        for group in groups:
            element = soup.select_one(group)
            if element is not None:
                return element
        return None

    def extract_content(self, html: str) -> str:
        element = self._select(parse_fragment(html), self.content_selectors)
        return element.get_text() if element else ""

    def extract_sender(self, html: str) -> str:
        element = self._select(parse_fragment(html), self.sender_selectors)
        if element is None:
            return ""
        if self.sender_attribute and element.get(self.sender_attribute):
            return element[self.sender_attribute]
        return element.get_text().strip()

    def extract_subject(self, html: str) -> str:
        element = self._select(parse_fragment(html), self.subject_selectors)
        return element.get_text().strip() if element else ""

    def extract(self, html: str) -> EmailRecord:
        return EmailRecord(
            content=self.extract_content(html),
            sender=self.extract_sender(html),
            subject=self.extract_subject(html),
            headers={},
        )


class GmailExtractor(PlatformExtractor):
    platform = PLATFORM_GMAIL
    # A bare ".a3s" is the body container handed over on its own
    content_selectors = (".a3s.aiL, .ii.gt .a3s", ".a3s")
    sender_selectors = (".go .gD, .h2osre .gN",)
    subject_selectors = (".hP, .bog",)
    # Gmail puts the bare address in an attribute; the text is the display name
    sender_attribute = "email"


class OutlookExtractor(PlatformExtractor):
    platform = PLATFORM_OUTLOOK
    content_selectors = (".x_bodyContainer, .rps_cb28 .rps_9b0b",)
    sender_selectors = ('[data-automation-id="senderDisplayName"], .rps_7eb7',)
    subject_selectors = ('[data-automation-id="subjectLine"], .rps_83b5',)


class YahooExtractor(PlatformExtractor):
    platform = PLATFORM_YAHOO
    content_selectors = ('.msg-body, [data-test-id="message-view-body"]',)
    sender_selectors = ('[data-test-id="message-from"], .msg-sender',)
    subject_selectors = ('[data-test-id="message-subject"], .msg-subject',)


class GenericExtractor(PlatformExtractor):
    """Unknown webmail: the whole element's text is the content."""

    platform = PLATFORM_GENERIC

    def extract_content(self, html: str) -> str:
        return parse_fragment(html).get_text()


EXTRACTORS: dict[str, type[PlatformExtractor]] = {
    cls.platform: cls
    for cls in (GmailExtractor, OutlookExtractor, YahooExtractor, GenericExtractor)
}


def get_extractor(platform: str) -> PlatformExtractor:
    """Return the extractor for a platform tag, falling back to generic."""
    extractor_cls = EXTRACTORS.get(platform)
    if extractor_cls is None:
        logger.debug("Unknown platform %r, using generic extractor", platform)
        extractor_cls = GenericExtractor
    return extractor_cls()


def extract_email(html: str, platform: str = PLATFORM_GENERIC) -> EmailRecord:
    """Extract an EmailRecord from one message element's HTML."""
    return get_extractor(platform).extract(html)
