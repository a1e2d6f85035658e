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
Analyzer auto-discovery.

Every public module in this package is imported and scanned for concrete
BaseAnalyzer subclasses. Helper modules (keyword tables, the grammar
heuristic) contribute nothing. An analyzer is only accepted if its
result_field names a slot of EmailAnalysisResult.

Adding an analyzer never requires touching this file.
"""
import dataclasses
import importlib
import inspect
import logging
import pkgutil
from typing import Iterator

import phishlens.analyzers as _self_pkg
from phishlens.analyzers._base import BaseAnalyzer
from phishlens.models import EmailAnalysisResult

logger = logging.getLogger(__name__)

RESULT_FIELDS = frozenset(
    f.name for f in dataclasses.fields(EmailAnalysisResult)
    if f.name not in ("risk_score", "risk_level")
)


def _public_modules() -> Iterator[str]:
    for module_info in pkgutil.walk_packages(_self_pkg.__path__, prefix=_self_pkg.__name__ + "."):
        if not module_info.name.rsplit(".", 1)[-1].startswith("_"):
            yield module_info.name


def _analyzer_classes(module) -> Iterator[type[BaseAnalyzer]]:
    for _name, cls in inspect.getmembers(module, inspect.isclass):
        if issubclass(cls, BaseAnalyzer) and not inspect.isabstract(cls):
            yield cls


def discover_analyzers() -> list[BaseAnalyzer]:
    """
    Instantiate every analyzer found in the analyzers/ package.

    A module that fails to import is logged and skipped, as is a class with
    an unknown result_field.

    Returns:
        Analyzer instances sorted by order (ties keep discovery order).
    """
    found: dict[type, BaseAnalyzer] = {}

    for module_name in _public_modules():
        try:
            module = importlib.import_module(module_name)
        except Exception as exc:
            logger.warning("Skipping analyzer module %s: %s", module_name, exc)
            continue

        for cls in _analyzer_classes(module):
            if cls in found:
                continue
            if cls.result_field not in RESULT_FIELDS:
                logger.warning(
                    "Skipping analyzer %s: unknown result_field %r", cls.__name__, cls.result_field,
                )
                continue
            found[cls] = cls()

    return sorted(found.values(), key=lambda a: a.order)
