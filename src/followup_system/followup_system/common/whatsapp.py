from __future__ import annotations

import re

from ..core.constants import EGYPT_COUNTRY_CODE, WHATSAPP_BASE_URL


def format_egyptian_phone(phone: str) -> str:
    """Digits-only number with the Egyptian country code, for wa.me links (not for storage)."""
    cleaned = re.sub(r"\D", "", phone or "")
    if cleaned.startswith("0"):
        cleaned = EGYPT_COUNTRY_CODE + cleaned[1:]
    if not cleaned.startswith(EGYPT_COUNTRY_CODE):
        cleaned = EGYPT_COUNTRY_CODE + cleaned
    return cleaned


def get_whatsapp_url(phone: str) -> str:
    return f"{WHATSAPP_BASE_URL}{format_egyptian_phone(phone)}"
