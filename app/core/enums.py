# app/core/enums.py

"""
SQLAlchemy Enum 컬럼 공용 헬퍼입니다.
"""


def enum_values(enum_cls):
    """Enum 컬럼이 멤버 이름 대신 값(PRODUCTO, ENTRADA 등)으로 저장되도록 values_callable 로 사용합니다."""
    return [member.value for member in enum_cls]
