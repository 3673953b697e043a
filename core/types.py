"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class DeliveryOutcome(str, Enum):
    """명세서 발송 파이프라인 종료 상태

    전이 규칙 (선형, 첫 실패에서 종료):
    - 검증 실패 → VALIDATION_ERROR
    - 거래처 없음 → PARTY_NOT_FOUND
    - PDF 생성 실패 → RENDER_ERROR
    - 파일 저장 실패 → PERSIST_ERROR
    - SMTP 설정 누락 → CONFIGURATION_ERROR
    - 메일 발송 실패 → DELIVERY_ERROR
    - 모두 완료 → SENT
    """

    SENT = "SENT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PARTY_NOT_FOUND = "PARTY_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    RENDER_ERROR = "RENDER_ERROR"
    PERSIST_ERROR = "PERSIST_ERROR"
    DELIVERY_ERROR = "DELIVERY_ERROR"

    @property
    def is_client_error(self) -> bool:
        """요청자 책임 오류 여부 (400 계열)"""
        return self in (DeliveryOutcome.VALIDATION_ERROR, DeliveryOutcome.PARTY_NOT_FOUND)

    @property
    def http_status(self) -> int:
        """HTTP 상태 코드"""
        if self == DeliveryOutcome.SENT:
            return 200
        if self.is_client_error:
            return 400
        return 500
