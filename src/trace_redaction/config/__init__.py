"""Configuration models for redactors."""
from .models import RedactionConfig, RedactionRuleModel

__all__ = ["RedactionConfig", "RedactionRuleModel"]
