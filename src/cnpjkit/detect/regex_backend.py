"""
Regex-based CNPJ detection in free text.

What this does
--------------
- Loads the YAML ruleset `cnpjkit/detect/rulesets/cnpj.yaml` (a masked and a
  bare pattern).
- Normalizes every match and keeps it only if the check digits agree.
- Emits `Span` records carrying the raw slice, the canonical value and the
  detected encoding.

Regex alone matches any 14-character token; the checksum gate is what keeps
order numbers and hashes out of the results.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from importlib import resources
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..codec import classify, is_valid, normalize

logger = logging.getLogger(__name__)

RULESET_PACKAGE = "cnpjkit.detect.rulesets"
RULESET_FILE = "cnpj.yaml"

_FLAGS = {"I": re.I, "M": re.M, "S": re.S}


@dataclass
class Span:
    """
    A CNPJ found in text.

    Attributes:
        start: Start character offset (inclusive).
        end:   End character offset (exclusive).
        text:  Raw matched slice, mask included.
        type:  "CNPJ_NUMERIC" or "CNPJ_ALPHANUMERIC".
        value: Normalized 14-character identifier.
        confidence: Confidence configured for the rule that matched.
    """
    start: int
    end: int
    text: str
    type: str
    value: str
    confidence: float


class RegexBackend:
    """
    Load the CNPJ ruleset and run it against input text.

    Each rule in the YAML accepts:
      - regex:      the pattern string
      - flags:      optional list of flags ["I", "M", "S"] (default ["I"])
      - confidence: float score assigned to matches from this rule
    """

    def __init__(self, masked: bool = True, bare: bool = True) -> None:
        enabled = {"CNPJ_MASKED": masked, "CNPJ_BARE": bare}
        self.rules: List[Tuple[str, re.Pattern, Dict[str, Any]]] = []

        text = resources.files(RULESET_PACKAGE).joinpath(RULESET_FILE).read_text()
        data = yaml.safe_load(text) or {}
        for key, spec in (data.get("patterns", {}) or {}).items():
            if not enabled.get(key, True):
                logger.debug("rule %s disabled", key)
                continue
            compiled = self._compile_rule(key, spec)
            if compiled:
                self.rules.append(compiled)

    def _compile_rule(
        self, key: str, spec: Any
    ) -> Optional[Tuple[str, re.Pattern, Dict[str, Any]]]:
        if not isinstance(spec, dict) or "regex" not in spec:
            logger.warning("skipping malformed rule %s", key)
            return None

        flags = 0
        for f in spec.get("flags", ["I"]):
            flags |= _FLAGS.get(f, 0)

        pat = re.compile(spec["regex"], flags)
        meta = {"confidence": float(spec.get("confidence", 0.99))}
        return key, pat, meta

    def detect(self, text: str) -> List[Span]:
        """
        Run all rules and return validated, non-overlapping spans in text order.

        Per match: normalize -> validate check digits -> classify -> emit.
        """
        spans: List[Span] = []
        for _, pat, meta in self.rules:
            for m in pat.finditer(text):
                raw = m.group(0)
                value = normalize(raw)
                if not is_valid(value):
                    continue
                kind = classify(value)
                spans.append(
                    Span(
                        start=m.start(),
                        end=m.end(),
                        text=raw,
                        type=f"CNPJ_{kind.name}",
                        value=value,
                        confidence=meta["confidence"],
                    )
                )
        return self._merge(spans)

    @staticmethod
    def _merge(spans: List[Span]) -> List[Span]:
        """Drop overlaps, keeping the earliest then longest span."""
        merged: List[Span] = []
        for s in sorted(spans, key=lambda s: (s.start, -(s.end - s.start))):
            if merged and s.start < merged[-1].end:
                continue
            merged.append(s)
        return merged
