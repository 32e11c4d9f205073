"""
KZG Flask Blueprint — 커밋/열기/검증 데모 엔드포인트
=====================================================

JSON 요청/응답. 상태(SRS, 다항식, 커밋먼트, 증명)는 TinyDB에
"kzg." 접두사 키로 저장한다.

  POST /kzg/setup         SRS 생성 (안전하지 않은 테스트용 설정)
  POST /kzg/commit        다항식 저장 + 커밋
  POST /kzg/open          단일 점 열기 증명
  POST /kzg/verify        단일 점 검증
  POST /kzg/open-multi    코셋 열기 증명
  POST /kzg/verify-multi  코셋 검증
  POST /kzg/clear         상태 삭제
  GET  /kzg/state         저장된 상태 요약
"""

import logging

from flask import Blueprint, jsonify, request
from tinydb import Query

from kzg.errors import BadArgumentsError
from kzg.fft import FFTSettings
from kzg.field import is_power_of_two
from kzg.proofs import (
    commit, create_witness, verify_opening,
    create_coset_witness, verify_coset_opening,
)
from kzg.settings import KZGSettings
from kzg.srs import SRS

from kzg_serializers import (
    serialize_fr, deserialize_fr,
    serialize_g1, deserialize_g1,
    serialize_poly, deserialize_poly,
    serialize_fr_list, deserialize_fr_list,
    serialize_srs, deserialize_srs,
    g1_short,
)

logger = logging.getLogger(__name__)

kzg_bp = Blueprint('kzg', __name__, url_prefix='/kzg')

DATA = Query()

# DB는 app.py에서 주입
DB = None

DEFAULT_SEED = 12345
DEFAULT_SCALE = 4

# 데모에서 허용하는 최대 도메인 (SRS 생성 비용 제한)
MAX_DEMO_SCALE = 8


def init_kzg_bp(db):
    """app.py에서 DB를 주입받는다."""
    global DB
    DB = db


class MissingStateError(Exception):
    """요청에 필요한 이전 단계(설정, 커밋)가 없다."""


# ─── DB 헬퍼 ───

def db_get(key):
    """DB에서 키로 데이터를 조회한다."""
    result = DB.search(DATA.type == key)
    if not result:
        return None
    return result[0].get("data")


def db_set(key, data):
    """DB에 키로 데이터를 저장한다."""
    DB.upsert({"type": key, "data": data}, DATA.type == key)


def db_remove_prefix(prefix):
    """prefix로 시작하는 모든 키를 삭제한다."""
    DB.remove(DATA.type.test(lambda t: t.startswith(prefix)))


def load_settings():
    """저장된 SRS로 KZGSettings를 재구성한다."""
    setup = db_get("kzg.setup")
    if not setup:
        raise MissingStateError("먼저 /kzg/setup 을 호출하세요")
    srs = deserialize_srs(db_get("kzg.srs.raw"))
    fs = FFTSettings(setup["scale"])
    return KZGSettings(srs.g1_powers, srs.g2_powers, srs.length, fs)


def load_poly():
    data = db_get("kzg.poly")
    if data is None:
        raise MissingStateError("먼저 /kzg/commit 을 호출하세요")
    return deserialize_poly(data)


def _json():
    return request.get_json(silent=True) or {}


def _int_field(body, name, default=None):
    value = body.get(name, default)
    if value is None:
        raise BadArgumentsError(f"'{name}' 값이 필요합니다")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise BadArgumentsError(f"'{name}'는 정수여야 합니다: {value!r}") from exc


@kzg_bp.errorhandler(BadArgumentsError)
def handle_bad_arguments(exc):
    return jsonify({"error": str(exc)}), 400


@kzg_bp.errorhandler(MissingStateError)
def handle_missing_state(exc):
    return jsonify({"error": str(exc)}), 409


# ──────────────────────────────────────────────────────────────
# Setup
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/setup", methods=["POST"])
def setup():
    """SRS를 생성한다. 길이는 2^scale + 1 ([sⁿ]₂ 까지 필요)."""
    body = _json()
    seed = _int_field(body, "seed", DEFAULT_SEED)
    scale = _int_field(body, "scale", DEFAULT_SCALE)
    if scale < 0 or scale > MAX_DEMO_SCALE:
        raise BadArgumentsError(f"scale은 0 이상 {MAX_DEMO_SCALE} 이하여야 합니다: {scale}")

    length = (1 << scale) + 1
    logger.info("데모 SRS 생성: seed=%d, scale=%d, length=%d", seed, scale, length)
    srs = SRS.generate(length=length, seed=seed)

    db_set("kzg.srs.raw", serialize_srs(srs))
    db_set("kzg.setup", {"seed": seed, "scale": scale, "length": length})

    # SRS 변경 시 하위 데이터 클리어
    db_remove_prefix("kzg.poly")
    db_remove_prefix("kzg.commitment")
    db_remove_prefix("kzg.proof")

    return jsonify({
        "seed": seed,
        "scale": scale,
        "length": length,
        "g1_samples": [g1_short(p) for p in srs.g1_powers[:3]],
    })


# ──────────────────────────────────────────────────────────────
# Commit
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/commit", methods=["POST"])
def commit_poly():
    """계수 리스트를 받아 다항식을 저장하고 커밋한다."""
    body = _json()
    ks = load_settings()
    coeffs = body.get("coeffs")
    poly = deserialize_poly(coeffs if coeffs is not None else [])

    commitment = commit(poly, ks)

    db_set("kzg.poly", serialize_poly(poly))
    db_set("kzg.commitment", {"point": serialize_g1(commitment)})
    db_remove_prefix("kzg.proof")

    return jsonify({
        "length": len(poly),
        "commitment": serialize_g1(commitment),
        "commitment_short": g1_short(commitment),
    })


# ──────────────────────────────────────────────────────────────
# Single-point opening
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/open", methods=["POST"])
def open_single():
    """저장된 다항식의 x에서의 값과 열기 증명."""
    body = _json()
    ks = load_settings()
    poly = load_poly()
    x = deserialize_fr(_int_field(body, "x"))

    proof = create_witness(poly, x, ks)
    y = poly.evaluate(x)
    db_set("kzg.proof.single", {"x": serialize_fr(x), "proof": serialize_g1(proof)})

    return jsonify({
        "x": serialize_fr(x),
        "y": serialize_fr(y),
        "proof": serialize_g1(proof),
    })


@kzg_bp.route("/verify", methods=["POST"])
def verify_single():
    """단일 점 검증. commitment/proof를 생략하면 저장된 값을 쓴다."""
    body = _json()
    ks = load_settings()
    x = deserialize_fr(_int_field(body, "x"))
    y = deserialize_fr(_int_field(body, "y"))
    commitment = _stored_or_given(body, "commitment", "kzg.commitment", "point")
    proof = _stored_or_given(body, "proof", "kzg.proof.single", "proof")

    result = verify_opening(commitment, proof, x, y, ks)
    return jsonify({"result": result})


# ──────────────────────────────────────────────────────────────
# Coset opening
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/open-multi", methods=["POST"])
def open_multi():
    """코셋 {x·ωⁱ} 위의 평가값들과 열기 증명."""
    body = _json()
    ks = load_settings()
    poly = load_poly()
    x = deserialize_fr(_int_field(body, "x"))
    n = _int_field(body, "n")

    proof = create_coset_witness(poly, x, n, ks)
    ys = [poly.evaluate(x * w) for w in ks.fs.roots_of_unity(n)]
    db_set("kzg.proof.multi", {
        "x": serialize_fr(x), "n": n, "proof": serialize_g1(proof),
    })

    return jsonify({
        "x": serialize_fr(x),
        "n": n,
        "ys": serialize_fr_list(ys),
        "proof": serialize_g1(proof),
    })


@kzg_bp.route("/verify-multi", methods=["POST"])
def verify_multi():
    """코셋 검증. commitment/proof를 생략하면 저장된 값을 쓴다."""
    body = _json()
    ks = load_settings()
    x = deserialize_fr(_int_field(body, "x"))
    n = _int_field(body, "n")
    if not is_power_of_two(n):
        raise BadArgumentsError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    ys = deserialize_fr_list(body.get("ys"))
    commitment = _stored_or_given(body, "commitment", "kzg.commitment", "point")
    proof = _stored_or_given(body, "proof", "kzg.proof.multi", "proof")

    result = verify_coset_opening(commitment, proof, x, ys, n, ks)
    return jsonify({"result": result})


# ──────────────────────────────────────────────────────────────
# State
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/clear", methods=["POST"])
def clear():
    """모든 KZG 데이터를 클리어한다."""
    db_remove_prefix("kzg.")
    return jsonify({"cleared": True})


@kzg_bp.route("/state")
def state():
    """저장된 상태 요약."""
    commitment = db_get("kzg.commitment")
    poly = db_get("kzg.poly")
    return jsonify({
        "setup": db_get("kzg.setup"),
        "poly_length": len(poly) if poly is not None else None,
        "has_commitment": commitment is not None,
        "commitment_short": (
            g1_short(deserialize_g1(commitment["point"])) if commitment is not None else None
        ),
        "has_single_proof": db_get("kzg.proof.single") is not None,
        "has_multi_proof": db_get("kzg.proof.multi") is not None,
    })


def _stored_or_given(body, field, key, subfield=None):
    """요청 본문의 G1 점, 없으면 DB에 저장된 값을 돌려준다."""
    if field in body:
        return deserialize_g1(body[field])
    stored = db_get(key)
    if stored is None:
        raise MissingStateError(f"'{field}'가 요청에도 DB에도 없습니다")
    if subfield is not None:
        stored = stored[subfield]
    return deserialize_g1(stored)
