from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STITCHDAG_")

    K: int = Field(15, ge=0)
    STITCH_THRESHOLD: int = 10
    STITCH_INTERVAL: int = Field(5, ge=1)
    MAX_PARENTS: int = Field(3, ge=1)
    N_BLOCKS: int = 100
    REPORT_INTERVAL: int = 20
    SEED: Optional[int] = None
    REACHABILITY: Literal["full_scan", "child_index"] = "full_scan"
