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
Debouncer — coalesce bursts of events into a single call.

Each trigger() cancels the pending timer and arms a new one, so the
callback runs once, `wait` seconds after the last event of a burst.

Thread-safe: page-mutation events may arrive from any thread.
"""
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """Run `func` once after `wait` seconds without a new trigger.

    Usage:
        rescan = Debouncer(1.0, scanner.rescan)
        rescan.trigger()   # on every mutation event
        rescan.cancel()    # on shutdown
    """

    def __init__(self, wait: float, func: Callable[[], None]):
        self.wait = wait
        self._func = func
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def trigger(self) -> None:
        """Restart the quiet-period countdown."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.wait, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _fire(self) -> None:
        with self._lock:
            # A newer trigger() replaced this timer after it had already fired
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        try:
            self._func()
        except Exception as exc:
            logger.exception("Debounced call failed: %s", exc)
