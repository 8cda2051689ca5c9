from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Settings:
    output_dir: str = "output"
    log_level: str = "INFO"
    csv_quoting: str = "minimal"  # minimal|none
    log_file: Optional[str] = None
