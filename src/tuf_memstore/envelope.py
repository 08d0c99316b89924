"""
Signed-metadata envelope models.

Only enough of the envelope is modelled to read the version number of a
signed document; the rest of the payload is ignored. These Pydantic models
are used to tell versioned metadata apart from other blobs (raw keys,
certificates) that share the same store.

Decoding is lenient the way metadata decoders usually are: a JSON null
anywhere in the envelope leaves that part at its zero value. The typed
fields that are present must still decode (integer version, RFC 3339
expiry, base64 signature).
"""
from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

__all__ = ["Signature", "SignedCommon", "SignedMeta", "parse_version"]


def _null_as_empty(data: Any) -> Any:
    return {} if data is None else data


class Signature(BaseModel):
    """One signature over the signed portion."""
    keyid: Optional[str] = Field(default=None, description="ID of the signing key")
    method: Optional[str] = Field(default=None, description="Signature scheme")
    sig: Optional[bytes] = Field(default=None, description="Signature bytes (base64 on the wire)")

    @model_validator(mode="before")
    @classmethod
    def empty_on_null(cls, data):
        return _null_as_empty(data)

    @field_validator("sig", mode="before")
    @classmethod
    def decode_sig(cls, v):
        """Decode the standard-alphabet base64 signature."""
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("sig must be a base64 string")
        try:
            return base64.b64decode(v, validate=True)
        except binascii.Error as e:
            raise ValueError(f"sig is not valid base64: {e}") from None


class SignedCommon(BaseModel):
    """Fields shared by the signed portion of every role."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: Optional[str] = Field(default=None, alias="_type", description="Role type")
    version: StrictInt = Field(default=0, description="Metadata version")
    expires: Optional[datetime] = Field(default=None, strict=True, description="Expiry timestamp")

    @model_validator(mode="before")
    @classmethod
    def empty_on_null(cls, data):
        return _null_as_empty(data)

    @field_validator("version", mode="before")
    @classmethod
    def null_version(cls, v):
        return 0 if v is None else v


class SignedMeta(BaseModel):
    """Envelope wrapping a signed payload with its signatures."""
    model_config = ConfigDict(extra="ignore")

    signed: SignedCommon = Field(default_factory=SignedCommon)
    signatures: List[Signature] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def empty_on_null(cls, data):
        return _null_as_empty(data)

    @field_validator("signed", mode="before")
    @classmethod
    def null_signed(cls, v):
        return {} if v is None else v

    @field_validator("signatures", mode="before")
    @classmethod
    def null_signatures(cls, v):
        return [] if v is None else v


def parse_version(blob: bytes) -> Optional[int]:
    """
    Read the version of a signed-metadata document.

    Args:
        blob: Candidate metadata bytes

    Returns:
        The signed.version value, or None if blob is not a signed-metadata
        envelope (invalid JSON, not an object, non-integer version, bad
        expiry timestamp or signature encoding)
    """
    try:
        meta = SignedMeta.model_validate_json(blob)
    except ValidationError as e:
        logger.debug(f"Blob is not versioned metadata ({e.error_count()} validation errors)")
        return None
    return meta.signed.version
