"""
Версии формы запроса /{version}/greet.

Текущая форма всегда описывается GreetRequest; устаревшие формы получают
суффикс версии (GreetRequestV1, ...) и свой тег здесь.
"""

from __future__ import annotations

LEGACY_GREET_V1 = "v1"
CURRENT_GREET_VERSION = "v2"
