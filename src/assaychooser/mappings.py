from __future__ import annotations

from typing import Tuple

from .model import AssayMapping


# Reihenfolge ist relevant: erster Treffer gewinnt.
# "Listeria monocytogenes" landet deshalb bei LIS, nicht bei LMO.
ASSAY_MAPPINGS: Tuple[AssayMapping, ...] = (
    AssayMapping(
        assay_code="SLM",
        patterns=(
            "Salmonella",
            "Sal-PCR GeneUp-375g v.3",
            "Sal-PCR GeneUp-FP v.3",
        ),
    ),
    AssayMapping(
        assay_code="ECO",
        patterns=(
            "EC0157",
            "ECO157",
        ),
    ),
    AssayMapping(
        assay_code="EH1",
        patterns=(
            "EHEC",
            "STEC",
        ),
    ),
    AssayMapping(
        assay_code="LIS",
        patterns=(
            "LIS-PCR GeneUp-ENV(BM) v.1",
            "LIS-PCR GeneUp-FP v.3",
            "Listeria",
        ),
    ),
    AssayMapping(
        assay_code="LMO",
        patterns=(
            "Listeria monocytogenes",
            "LM-PCR GeneUp-FP v.3",
        ),
    ),
)
