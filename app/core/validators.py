import re
from typing import Any, Mapping, Optional

REQUIRED_FIELDS = ("name", "email", "position")

# 앞뒤 공백/이메일 검증에서 공백으로 취급하는 문자.
# 파이썬 \s 와 달리 U+FEFF 는 포함하고 \x1c-\x1f, \x85 는 포함하지 않는다.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_NOT_WS_OR_AT = f"[^{re.escape(WHITESPACE)}@]+"
EMAIL_PATTERN = re.compile(rf"{_NOT_WS_OR_AT}@{_NOT_WS_OR_AT}\.{_NOT_WS_OR_AT}")

MISSING_FIELDS = "Name, email, and position are required"
EMPTY_FIELDS = "Name, email, and position cannot be empty"
INVALID_EMAIL = "Invalid email format"
NOT_AN_OBJECT = "Request body must be a JSON object"


def strip_whitespace(value: str) -> str:
    return value.strip(WHITESPACE)


def validate_employee_payload(payload: Mapping[str, Any]) -> Optional[str]:
    """
    직원 생성/수정 바디 검증. 통과하면 None, 아니면 에러 메시지.

    규칙은 순서대로 적용하고 처음 실패한 것만 돌려준다.
    1) name/email/position 모두 존재 + 문자열
    2) 앞뒤 공백 제거 후 비어있지 않음
    3) email 형식 (local@domain.tld)
    """
    values = [payload.get(field) for field in REQUIRED_FIELDS]

    if any(not isinstance(value, str) for value in values):
        return MISSING_FIELDS

    if any(not strip_whitespace(value) for value in values):
        return EMPTY_FIELDS

    if not EMAIL_PATTERN.fullmatch(payload["email"]):
        return INVALID_EMAIL

    return None
