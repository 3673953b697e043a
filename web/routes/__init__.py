"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- parties: 거래처 목록 / 원장 미리보기
- statements: 명세서 메일 발송, 회계연도, 메일 기본값
"""
