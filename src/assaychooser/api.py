from __future__ import annotations

from typing import List, Optional, Tuple

from .assaychooser import AssayChooser
from .mappings import ASSAY_MAPPINGS
from .model import AssayMapping, AssayMatch, AssayTableError

_CHOOSER = AssayChooser()


def classify_test_name(test_name: str) -> Optional[str]:
    """Public API (AssayChooser)

    Contract:
    - Walk ASSAY_MAPPINGS in table order, patterns in list order.
    - Match: contains, case-sensitive, no trimming.
    - First hit returns its assay_code; no hit returns None.
    """
    return _CHOOSER.classify(test_name)


def detect_assays(text: str) -> List[AssayMatch]:
    """All assay codes with at least one pattern in text, sorted by first occurrence position."""
    return _CHOOSER.detect_assays(text)


def get_assay_mappings() -> Tuple[AssayMapping, ...]:
    return ASSAY_MAPPINGS


def assay_codes() -> List[str]:
    return [m.assay_code for m in ASSAY_MAPPINGS]
