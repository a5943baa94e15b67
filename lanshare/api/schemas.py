from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Uploads ---
class TextUploadRequest(BaseModel):
    # Clients send {"Raw": "..."}; the lowercase field name is accepted too
    model_config = ConfigDict(populate_by_name=True)

    raw: str = Field(..., alias="Raw")

    @field_validator("raw")
    @classmethod
    def validate_utf8(cls, v: str) -> str:
        """Reject strings that cannot be stored as UTF-8 (lone surrogates)."""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError("Raw must be valid UTF-8 text") from e
        return v


class UploadResponse(BaseModel):
    url: str


# --- Network ---
class AddressesResponse(BaseModel):
    addresses: list[str]


class LinksResponse(BaseModel):
    links: list[str]


class ErrorResponse(BaseModel):
    detail: str
