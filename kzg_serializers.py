"""
KZG 데이터 직렬화/역직렬화 헬퍼
=================================

TinyDB 저장과 JSON 응답에 쓸 수 있는 형태로 KZG 객체를 변환한다.
FR, G1, G2, Polynomial, SRS.

정수는 모두 10진 문자열로 저장한다. 곡선 점은 역직렬화 시
곡선 위에 있는지 확인하며, 형식이 잘못되면 BadArgumentsError를 던진다.
"""

from py_ecc import bn128
from py_ecc.fields import bn128_FQ as FQ

from kzg.errors import BadArgumentsError
from kzg.field import FR
from kzg.polynomial import Polynomial
from kzg.srs import SRS


def _to_int(s):
    try:
        return int(s)
    except (TypeError, ValueError) as exc:
        raise BadArgumentsError(f"정수가 아닙니다: {s!r}") from exc


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) 또는 int → FR"""
    return FR(_to_int(s))


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(int(point[0])), str(int(point[1]))]


def deserialize_g1(data):
    """[str, str] or None → G1 point"""
    if data is None:
        return None
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise BadArgumentsError(f"G1 점 형식이 아닙니다: {data!r}")
    point = (FQ(_to_int(data[0])), FQ(_to_int(data[1])))
    if not bn128.is_on_curve(point, bn128.b):
        raise BadArgumentsError("G1 점이 곡선 위에 있지 않습니다")
    return point


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if point is None:
        return None
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))]
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return None
    try:
        point = (
            bn128.FQ2([_to_int(data[0][0]), _to_int(data[0][1])]),
            bn128.FQ2([_to_int(data[1][0]), _to_int(data[1][1])])
        )
    except (IndexError, TypeError, KeyError) as exc:
        raise BadArgumentsError(f"G2 점 형식이 아닙니다: {data!r}") from exc
    if not bn128.is_on_curve(point, bn128.b2):
        raise BadArgumentsError("G2 점이 곡선 위에 있지 않습니다")
    return point


# ─── Polynomial ───

def serialize_poly(poly):
    """Polynomial → list of str (계수, 길이 유지)"""
    if poly is None:
        return None
    return [str(int(c)) for c in poly.coeffs]


def deserialize_poly(data):
    """list of str → Polynomial"""
    if data is None:
        return None
    if not isinstance(data, list):
        raise BadArgumentsError(f"계수 리스트가 아닙니다: {data!r}")
    return Polynomial([FR(_to_int(s)) for s in data])


# ─── FR list ───

def serialize_fr_list(lst):
    """list[FR] → list[str]"""
    return [str(int(v)) for v in lst]


def deserialize_fr_list(data):
    """list[str] → list[FR]"""
    if not isinstance(data, list):
        raise BadArgumentsError(f"리스트가 아닙니다: {data!r}")
    return [FR(_to_int(s)) for s in data]


# ─── SRS ───

def serialize_srs(srs):
    """SRS → dict"""
    return {
        "g1_powers": [serialize_g1(p) for p in srs.g1_powers],
        "g2_powers": [serialize_g2(p) for p in srs.g2_powers],
    }


def deserialize_srs(data):
    """dict → SRS"""
    g1_powers = [deserialize_g1(p) for p in data["g1_powers"]]
    g2_powers = [deserialize_g2(p) for p in data["g2_powers"]]
    return SRS(g1_powers, g2_powers)


# ─── 표시용 ───

def _shorten(s):
    if len(s) <= 8:
        return s
    return s[:4] + "..." + s[-4:]


def g1_short(point):
    """G1 point → 축약 문자열 (UI 표시용)"""
    if point is None:
        return "∞"
    return f"({_shorten(str(int(point[0])))}, {_shorten(str(int(point[1])))})"


def g2_short(point):
    """G2 point → 축약 문자열 (UI 표시용)"""
    if point is None:
        return "∞"
    x0 = str(int(point[0].coeffs[0]))
    x1 = str(int(point[0].coeffs[1]))
    return f"({_shorten(x0)}+{_shorten(x1)}i, ...)"
