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
PhishLens API — FastAPI Application

JSON API for extension hosts: score an email, fetch stored analyses,
report threats, and read or change stats and settings.
"""

import logging
import uuid
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from phishlens.banner import build_banner
from phishlens.detector import analyze
from phishlens.models import EmailRecord
from phishlens.store import AnalysisStore

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(title="PhishLens", docs_url="/api/docs", openapi_url="/api/openapi.json")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_store() -> AnalysisStore:
    """One store (and Redis connection pool) per process."""
    return AnalysisStore()


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class EmailPayload(BaseModel):
    content: str = ""
    sender: str = ""
    subject: str = ""
    headers: dict[str, str] = {}


class AnalyzeRequest(BaseModel):
    email: EmailPayload
    analysis_id: Optional[str] = None
    source_url: str = ""


class ThreatReport(BaseModel):
    data: dict
    source_url: str = ""


class SettingsUpdate(BaseModel):
    real_time_scanning: Optional[bool] = None
    show_warnings: Optional[bool] = None
    block_suspicious: Optional[bool] = None
    sensitivity: Optional[int] = None


# ---------------------------------------------------------------------------
# Analysis routes
# ---------------------------------------------------------------------------

@app.post("/api/analyze")
async def api_analyze(body: AnalyzeRequest, store: AnalysisStore = Depends(get_store)):
    """Score an email. Storage problems never fail the response."""
    record = EmailRecord.from_dict(body.email.model_dump())
    analysis_id = body.analysis_id or uuid.uuid4().hex
    result = analyze(record)

    show_warnings = True
    try:
        show_warnings = store.get_settings().show_warnings
        store.save_analysis(analysis_id, result, source_url=body.source_url)
        store.update_stats(scanned=1, threats=1 if result.is_threat else 0)
    except Exception as exc:
        logger.warning("Persisting analysis %s failed (non-fatal): %s", analysis_id, exc)

    return {
        "analysis_id": analysis_id,
        "analysis": result.to_dict(),
        "banner": build_banner(result) if show_warnings else None,
    }


@app.get("/api/analyses/{analysis_id}")
async def api_analysis_detail(analysis_id: str, store: AnalysisStore = Depends(get_store)):
    record = store.get_analysis(analysis_id)
    if not record:
        raise HTTPException(404, "Analysis not found")
    return record


@app.get("/api/badge")
async def api_badge(source_url: str, store: AnalysisStore = Depends(get_store)):
    """Threat count for a page, as shown on the extension badge."""
    threats = store.count_threats(source_url)
    return {"threats": threats, "text": str(threats) if threats else ""}


@app.get("/api/threats/recent")
async def api_recent_threats(limit: int = 5, store: AnalysisStore = Depends(get_store)):
    """Newest medium/high analyses, as listed in the extension popup."""
    return store.recent_threats(limit=limit)


@app.post("/api/report")
async def api_report(body: ThreatReport, store: AnalysisStore = Depends(get_store)):
    report = store.record_threat_report(body.data, source_url=body.source_url)
    return {"success": True, "report": report}


@app.get("/api/reports")
async def api_reports(limit: int = 50, store: AnalysisStore = Depends(get_store)):
    return store.list_threat_reports(limit=limit)


# ---------------------------------------------------------------------------
# Stats & settings
# ---------------------------------------------------------------------------

@app.get("/api/stats")
async def api_stats(store: AnalysisStore = Depends(get_store)):
    return store.get_stats()


@app.post("/api/stats/reset")
async def api_stats_reset(store: AnalysisStore = Depends(get_store)):
    return store.reset_stats()


@app.get("/api/settings")
async def api_settings(store: AnalysisStore = Depends(get_store)):
    return store.get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(body: SettingsUpdate, store: AnalysisStore = Depends(get_store)):
    try:
        settings = store.update_settings(body.model_dump(exclude_none=True))
    except ValueError as exc:
        raise HTTPException(422, str(exc))
    return settings.to_dict()


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}
