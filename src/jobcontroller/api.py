from __future__ import annotations

from .jobcontroller import BatchInProgressError, JobController, JobControllerError
from .model import JobResult


def create_controller(quoting: str = "minimal") -> JobController:
    """Public API (JobController)

    Contract:
    - stage_files(): append .xlsx/.xls files, duplicates ignored; clear_files() empties the list.
    - process(): one batch over all staged files, replaces the previous result wholesale.
    - Single-flight: process() while a run is in flight raises BatchInProgressError.
    - export_assay()/export_all(): CSV files for the current result.
    """
    return JobController(quoting)
