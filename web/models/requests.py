"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator


class SendEmailRequest(BaseModel):
    """원장 명세서 메일 발송 요청

    JSON 필드명은 camelCase (partyId).
    """

    party_id: str = Field(..., alias="partyId", min_length=1, description="거래처 ID")
    email: EmailStr = Field(..., description="수신자 이메일")
    subject: str = Field(..., min_length=1, description="메일 제목")
    body: str = Field(..., min_length=1, description="메일 본문")

    @field_validator("subject")
    @classmethod
    def subject_single_line(cls, value: str) -> str:
        """제목은 한 줄 (메일 Subject 헤더)"""
        if "\r" in value or "\n" in value:
            raise ValueError("must not contain line breaks")
        return value

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "partyId": "abc-co",
                    "email": "accounts@abccompany.com",
                    "subject": "Tax Invoice & Ledger Statement",
                    "body": "Dear Sir/Madam,\n\nPlease find attached the ledger statement.",
                },
            ]
        },
    }


def first_error_message(error: ValidationError) -> str:
    """검증 오류 중 첫 번째 규칙 위반 메시지

    예: "email: Field required"
    """
    errors = error.errors()
    if not errors:
        return "Invalid payload"

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid payload")
    return f"{location}: {message}" if location else message
