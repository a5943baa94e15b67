from typing import Literal

from pydantic import BaseModel, Field, field_validator


class UploadRules(BaseModel):
    text_extension: str = ".txt"
    max_upload_bytes: int = Field(default=2 * 1024**3, gt=0)  # 2 GiB

    @field_validator("text_extension")
    @classmethod
    def _dotted(cls, v: str) -> str:
        if not v.startswith(".") or "/" in v or "\\" in v or len(v) < 2:
            raise ValueError("text_extension must look like '.txt'")
        return v


class QrCodeRules(BaseModel):
    size_px: int = Field(default=256, ge=21)
    error_correction: Literal["L", "M", "Q", "H"] = "M"
    border: int = Field(default=4, ge=0)


class Rules(BaseModel):
    uploads: UploadRules = UploadRules()
    qrcodes: QrCodeRules = QrCodeRules()
