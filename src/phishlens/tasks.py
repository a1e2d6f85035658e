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
PhishLens — Celery Tasks

Hosts that receive many emails at once hand them to the worker instead of
scoring them on their own thread. Results are persisted best-effort to
Redis and returned to the caller.
"""
import json
import logging
import uuid

from phishlens.celery_app import app
from phishlens.detector import analyze
from phishlens.models import EmailRecord

logger = logging.getLogger(__name__)

# Lazy-initialised singleton (created on first use by each worker process)
_store = None


def _get_store():
    global _store
    if _store is None:
        from phishlens.store import AnalysisStore
        _store = AnalysisStore()
    return _store


@app.task(
    name="phishlens.tasks.analyze_email",
    bind=True,
    max_retries=3,
    default_retry_delay=10,
    acks_late=True,
)
def analyze_email(self, email_json: str, analysis_id: str = "", source_url: str = ""):
    """
    Score an email and persist the result.

    Args:
        email_json:  JSON object with content, sender, subject and headers.
        analysis_id: Key for the stored record; generated when empty.
        source_url:  Page the email was found on (used for badge counts).
    """
    try:
        payload = json.loads(email_json)
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        email = EmailRecord.from_dict(payload)
        analysis_id = analysis_id or uuid.uuid4().hex

        logger.info(
            "Analyzing email: analysis_id=%s from=%s subject=%s",
            analysis_id, email.sender, email.subject,
        )

        result = analyze(email)

        # --- Persistence (best-effort) ---
        try:
            store = _get_store()
            store.save_analysis(analysis_id, result, source_url=source_url)
            store.update_stats(scanned=1, threats=1 if result.is_threat else 0)
        except Exception as store_exc:
            logger.warning("Redis write failed (non-fatal): %s", store_exc)

        logger.info(
            "Analysis complete: analysis_id=%s score=%d level=%s",
            analysis_id, result.risk_score, result.risk_level,
        )

        return {"analysis_id": analysis_id, "analysis": result.to_dict()}

    except ValueError as exc:
        # Includes json.JSONDecodeError; not retried
        logger.error("Invalid email payload: %s", exc)
        raise

    except Exception as exc:
        logger.exception("Failed to analyze email: %s", exc)
        raise self.retry(exc=exc)
