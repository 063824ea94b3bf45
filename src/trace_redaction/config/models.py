# src/trace_redaction/config/models.py
import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from trace_redaction.core.types import HashFunction, RedactionAction

logger = logging.getLogger(__name__)

class RedactionRuleModel(BaseModel):
    """Validated, immutable form of a `RedactionRule`."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    paths: Tuple[str, ...] = Field(
        min_length=1,
        description="Dotted paths to redact, applied in order. Supports literal keys, '*' and 'key[]'."
    )
    action: RedactionAction = Field(description="What to do with each matched leaf value.")
    replacement: Optional[str] = Field(
        default=None,
        description="Replacement value for the 'mask' action. Defaults to '[REDACTED]' when unset."
    )

    @field_validator("replacement")
    @classmethod
    def _warn_replacement_without_mask(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is not None and info.data.get("action") not in (None, "mask"):
            logger.warning(
                f"Redaction rule for paths {info.data.get('paths')} sets a replacement "
                f"but uses action '{info.data.get('action')}'; the replacement is ignored."
            )
        return v


class RedactionConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    rules: List[RedactionRuleModel] = Field(
        default_factory=list,
        description="Ordered redaction rules. Later rules may act on values touched by earlier ones."
    )
    hash_function: HashFunction = Field(
        default="rolling",
        description=(
            "Digest used by the 'hash' action. 'rolling' is a fast non-cryptographic hash "
            "meant for best-effort obfuscation only; 'sha256' truncates a SHA-256 digest "
            "to the same 8 hex digit format."
        )
    )
