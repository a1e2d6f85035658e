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
PhishLens — Celery Application

Workers import this app instance; hosts import phishlens.tasks and call
analyze_email.delay(...). Broker and result backend share REDIS_URL.
"""
from celery import Celery

from phishlens.config import REDIS_URL, get_analysis_ttl_seconds

ANALYSIS_QUEUE = "emails"

app = Celery("phishlens", broker=REDIS_URL, backend=REDIS_URL)

app.conf.update(
    # JSON only; payloads are plain email dicts
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],

    task_routes={"phishlens.tasks.analyze_email": {"queue": ANALYSIS_QUEUE}},

    # Results live as long as the stored analyses do
    result_expires=get_analysis_ttl_seconds(),

    # One message at a time, acknowledged only once scored
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    task_reject_on_worker_lost=True,

    timezone="UTC",
    enable_utc=True,
)

app.autodiscover_tasks(["phishlens"])
