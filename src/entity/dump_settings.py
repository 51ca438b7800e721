from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

from bytereader.constants import DUMP_FORMATS, Constants as Co

DumpFormat = Literal[DUMP_FORMATS]


class DumpSettings(BaseModel):
    format: DumpFormat = Co.HEX
    columns: int = Field(default=16, ge=1)
    limit: Optional[int] = Field(default=None, ge=0)  # bytes per pass, None = all
    passes: int = Field(default=1, ge=1)

    @classmethod
    def from_config(cls, cfg: Dict[str, Any], **overrides: Any) -> "DumpSettings":
        """Build from the `dump` config section; None overrides are ignored."""
        values = dict(cfg.get(Co.DUMP) or {})
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
