from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .codec import CnpjType


# ---- Generation defaults (CLI `generate`) ----
class GeneratorConfig(BaseModel):
    kind: CnpjType = CnpjType.ALPHANUMERIC
    masked: bool = False
    count: int = Field(default=1, ge=1)
    seed: Optional[int] = None  # None -> SystemRandom


# ---- Check-digit behavior ----
class ChecksumConfig(BaseModel):
    # False keeps the legacy '0' fallback for out-of-range characters
    strict: bool = False


# ---- Text scanning (CLI `scan`) ----
class DetectorConfig(BaseModel):
    masked: bool = True  # 12.ABC.345/01DE-35
    bare: bool = True    # 12ABC34501DE35


# ---- Root config ----
class CnpjConfig(BaseModel):
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    checksum: ChecksumConfig = Field(default_factory=ChecksumConfig)
    detector: DetectorConfig = Field(default_factory=DetectorConfig)


# ---- Loader ----
def load_config(path: Optional[Path]) -> CnpjConfig:
    if not path:
        return CnpjConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return CnpjConfig(**data)
