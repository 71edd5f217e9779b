"""Crypt Helpers."""

from __future__ import annotations

import hashlib


def sha1(value: str) -> str:
    """UTF-8 문자열의 SHA-1 해시(16진수 소문자)."""
    return hashlib.sha1(value.encode("utf-8")).hexdigest()


def token_fingerprint(access_token: str) -> str:
    """로그용 토큰 지문 (원문 토큰은 로그에 남기지 않음)."""
    return sha1(access_token)[:12]
