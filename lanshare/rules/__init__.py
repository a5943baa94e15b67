from .loader import load_rules, load_rules_or_default
from .models import QrCodeRules, Rules, UploadRules

__all__ = [
    "QrCodeRules",
    "Rules",
    "UploadRules",
    "load_rules",
    "load_rules_or_default",
]
