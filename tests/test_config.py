# tests/test_config.py

"""
애플리케이션 설정(app.core.config.Settings) 검증 테스트 모듈입니다.
"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings, settings
from app.core.dependencies import get_lot_selection_policy
from app.domains.inv.models import LotSelectionPolicy


@pytest.mark.parametrize("policy", ["FIFO", "FEFO", "LIFO"])
def test_lot_selection_policy_accepts_known_values(policy):
    assert Settings(LOT_SELECTION_POLICY=policy).LOT_SELECTION_POLICY == policy


@pytest.mark.parametrize("policy", ["RANDOM", "fifo", ""])
def test_lot_selection_policy_rejects_unknown_values(policy):
    """(실패) 알 수 없는 정책은 설정 로드 시점에 ValidationError 로 거부되는지 테스트"""
    with pytest.raises(ValidationError) as exc_info:
        Settings(LOT_SELECTION_POLICY=policy)

    assert exc_info.value.errors()[0]["loc"] == ("LOT_SELECTION_POLICY",)


def test_policy_dependency_falls_back_to_setting(monkeypatch):
    """(성공) 쿼리 파라미터가 없으면 설정값의 정책을 사용하는지 테스트"""
    monkeypatch.setattr(settings, "LOT_SELECTION_POLICY", "LIFO")

    assert get_lot_selection_policy(None) == LotSelectionPolicy.LIFO
    assert get_lot_selection_policy(LotSelectionPolicy.FEFO) == LotSelectionPolicy.FEFO
