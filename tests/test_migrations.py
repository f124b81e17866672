# tests/test_migrations.py

"""
Alembic 마이그레이션(migrations/versions) 테스트 모듈입니다.

임시 SQLite 파일에 동기 엔진으로 연결하고, env.py 가 그 연결을 그대로 사용하도록
config.attributes["connection"] 으로 넘겨 단계별 upgrade/downgrade 를 검증합니다.
"""

import os

import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConstraintViolation

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
REVISIONS = ["0001", "0002", "0003", "0004", "0005"]


@pytest.fixture(scope="function")
def engine(tmp_path):
    engine = sa.create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield engine
    engine.dispose()


def _alembic_config(connection) -> Config:
    cfg = Config(os.path.join(PROJECT_ROOT, "alembic.ini"))
    cfg.attributes["connection"] = connection
    return cfg


def _upgrade(engine, revision: str) -> None:
    with engine.begin() as connection:
        command.upgrade(_alembic_config(connection), revision)


def _downgrade(engine, revision: str) -> None:
    with engine.begin() as connection:
        command.downgrade(_alembic_config(connection), revision)


def _snapshot(engine) -> dict:
    """테이블별 컬럼/유일성 제약/인덱스/외래 키를 비교 가능한 형태로 수집합니다."""
    with engine.connect() as connection:
        inspector = sa.inspect(connection)
        snapshot = {}
        for table in inspector.get_table_names():
            if table == "alembic_version":
                continue
            snapshot[table] = {
                "columns": sorted(
                    (col["name"], str(col["type"]), col["nullable"]) for col in inspector.get_columns(table)
                ),
                "unique": sorted(
                    (uq["name"], tuple(uq["column_names"])) for uq in inspector.get_unique_constraints(table)
                ),
                "indexes": sorted(
                    (ix["name"], tuple(ix["column_names"]), bool(ix["unique"])) for ix in inspector.get_indexes(table)
                ),
                "foreign_keys": sorted(
                    (tuple(fk["constrained_columns"]), fk["referred_table"], tuple(fk["referred_columns"]))
                    for fk in inspector.get_foreign_keys(table)
                ),
            }
        return snapshot


def _insert_stock_out_detail(connection, movement_detail_id: int) -> None:
    # SQLite 는 PRAGMA foreign_keys 가 꺼져 있으면 외래 키를 검사하지 않습니다.
    connection.execute(
        sa.text(
            "INSERT INTO detalle_salidas (id_movimiento_detalle, cantidad, costo_unitario, costo_total) "
            "VALUES (:id, 1, 10, 10)"
        ),
        {"id": movement_detail_id},
    )


# =================================================================================
# 1. 단계별 upgrade / downgrade
# =================================================================================
def test_stepwise_upgrade_and_downgrade_restore_schema(engine):
    """(성공) 각 downgrade 가 직전 revision 의 스키마를 그대로 복원하는지 테스트"""
    # [Given] base -> 0001 -> ... -> 0005, 각 단계의 스키마를 기록
    snapshots = {"base": _snapshot(engine)}
    for revision in REVISIONS:
        _upgrade(engine, revision)
        snapshots[revision] = _snapshot(engine)

    # [Then] 각 revision 이 실제로 스키마를 바꿨는지 확인
    head = snapshots["0005"]
    assert ("tipo", "VARCHAR(8)", False) in head["categoria"]["columns"]
    assert ("nombre", "VARCHAR(255)", True) in head["producto"]["columns"]
    assert ("costo_promedio_actual", "NUMERIC(12, 4)", False) in head["inventarios"]["columns"]
    assert head["detalle_salidas"]["unique"] == []
    assert (
        "ix_detalle_salidas_id_movimiento_detalle", ("id_movimiento_detalle",), False
    ) in head["detalle_salidas"]["indexes"]
    assert snapshots["0001"]["detalle_salidas"]["unique"] == [
        ("uq_detalle_salidas_id_movimiento_detalle", ("id_movimiento_detalle",))
    ]

    # [When / Then] 한 단계씩 되돌리며 이전 스키마와 비교
    previous = ["base"] + REVISIONS[:-1]
    for revision, target in zip(reversed(REVISIONS), reversed(previous)):
        _downgrade(engine, target)
        assert _snapshot(engine) == snapshots[target], f"downgrade {revision} -> {target}"


def test_categoria_tipo_backfilled_with_producto(engine):
    """(성공) 0005 적용 시 기존 카테고리의 tipo 가 PRODUCTO 로 채워지는지 테스트"""
    # [Given]
    _upgrade(engine, "0004")
    with engine.begin() as connection:
        connection.execute(sa.text("INSERT INTO categoria (nombre, estado) VALUES ('Bebidas', 1)"))

    # [When]
    _upgrade(engine, "0005")

    # [Then]
    with engine.connect() as connection:
        assert connection.execute(sa.text("SELECT tipo FROM categoria")).scalar_one() == "PRODUCTO"


def test_costo_promedio_actual_defaults_to_zero(engine):
    """(성공) 0003 적용 시 기존 재고 레코드의 평균 단가가 0 으로 채워지는지 테스트"""
    _upgrade(engine, "0002")
    with engine.begin() as connection:
        connection.execute(sa.text("INSERT INTO inventarios (id_producto, id_almacen) VALUES (1, 1)"))

    _upgrade(engine, "0003")

    with engine.connect() as connection:
        value = connection.execute(sa.text("SELECT costo_promedio_actual FROM inventarios")).scalar_one()
    assert float(value) == 0


# =================================================================================
# 2. detalle_salidas 유일성 완화
# =================================================================================
def test_unique_enforced_at_initial_schema(engine):
    """(실패) 0001 에서는 같은 출고 라인을 참조하는 두 번째 행이 거부되는지 테스트"""
    _upgrade(engine, "0001")

    with pytest.raises(IntegrityError):
        with engine.begin() as connection:
            _insert_stock_out_detail(connection, 1)
            _insert_stock_out_detail(connection, 1)


def test_duplicates_allowed_after_relaxation(engine):
    """(성공) 0002 이후에는 같은 출고 라인을 여러 행이 참조할 수 있는지 테스트"""
    _upgrade(engine, "head")

    with engine.begin() as connection:
        _insert_stock_out_detail(connection, 1)
        _insert_stock_out_detail(connection, 1)

    with engine.connect() as connection:
        count = connection.execute(
            sa.text("SELECT COUNT(*) FROM detalle_salidas WHERE id_movimiento_detalle = 1")
        ).scalar_one()
    assert count == 2


def test_downgrade_with_duplicates_raises(engine):
    """(실패) 중복 행이 있으면 유일성 제약 복원 downgrade 가 ConstraintViolation 으로 중단되는지 테스트"""
    # [Given]
    _upgrade(engine, "head")
    with engine.begin() as connection:
        _insert_stock_out_detail(connection, 7)
        _insert_stock_out_detail(connection, 7)

    # [When / Then]
    with pytest.raises(ConstraintViolation) as exc_info:
        _downgrade(engine, "0001")

    assert "id_movimiento_detalle=7" in exc_info.value.message


def test_downgrade_without_duplicates_restores_unique(engine):
    """(성공) 중복이 없으면 downgrade 후 유일성 제약이 다시 적용되는지 테스트"""
    _upgrade(engine, "0002")
    with engine.begin() as connection:
        _insert_stock_out_detail(connection, 1)
        _insert_stock_out_detail(connection, 2)

    _downgrade(engine, "0001")

    with pytest.raises(IntegrityError):
        with engine.begin() as connection:
            _insert_stock_out_detail(connection, 2)
