"""
KZG 다항식 커밋먼트 — 데이터 가용성 샘플링용
=============================================

  ┌─────────────────────────────────────────────────────┐
  │  FFTSettings(max_scale)      단위근 도메인           │
  │  KZGSettings(g1, g2, len, fs) SRS 사본 + 도메인 참조 │
  ├─────────────────────────────────────────────────────┤
  │  commit(p, ks)                    → C              │
  │  create_witness(p, x0, ks)        → π              │
  │  verify_opening(C, π, x, y, ks)   → bool           │
  │  create_coset_witness(p, x0, n, ks)     → π        │
  │  verify_coset_opening(C, π, x, ys, n, ks) → bool   │
  └─────────────────────────────────────────────────────┘

사용 예시:
    >>> from kzg import FFTSettings, KZGSettings, commit, create_witness, verify_opening
"""

from kzg.errors import KZGError, BadArgumentsError, InternalError
from kzg.field import FR
from kzg.polynomial import Polynomial
from kzg.fft import FFTSettings
from kzg.settings import KZGSettings
from kzg.proofs import (
    commit,
    create_witness,
    verify_opening,
    create_coset_witness,
    verify_coset_opening,
)
