from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .mappings import ASSAY_MAPPINGS
from .model import AssayMapping, AssayMatch


class AssayChooser:
    def __init__(self, mappings: Sequence[AssayMapping] = ASSAY_MAPPINGS) -> None:
        self._mappings: Tuple[AssayMapping, ...] = tuple(mappings)

    @property
    def mappings(self) -> Tuple[AssayMapping, ...]:
        return self._mappings

    def classify(self, test_name: str) -> Optional[str]:
        if not test_name:
            return None
        for mapping in self._mappings:
            for pattern in mapping.patterns:
                if pattern in test_name:
                    return mapping.assay_code
        return None

    def detect_assays(self, text: str) -> List[AssayMatch]:
        hits: List[Tuple[int, str, str]] = []
        for mapping in self._mappings:
            for pattern in mapping.patterns:
                pos = text.find(pattern)
                if pos != -1:
                    hits.append((pos, mapping.assay_code, pattern))

        # keep first occurrence per code
        first: Dict[str, Tuple[int, str]] = {}
        for pos, code, pattern in sorted(hits, key=lambda x: x[0]):
            if code not in first:
                first[code] = (pos, pattern)

        ordered = sorted(first.items(), key=lambda x: x[1][0])
        return [AssayMatch(assay_code=code, pattern=pattern, position=pos) for code, (pos, pattern) in ordered]
