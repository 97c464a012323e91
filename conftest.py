"""Pytest configuration and fixtures."""
import pytest

from ctydat.index import build


FINLAND_LINE = "Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH,=OH2ET/SA;\n"

SAMPLE_CTY = """\
Finland:                  15:  18:  EU:   61.38:   -24.82:    -2.0:  OH:
    OF,OG,OH,OI,OJ,=OH2ET/SA,=OH0J/1(16)[19],
    =OH2ET(14){AS};
United States:            05:  08:  NA:   37.53:    91.67:     5.0:  K:
    AA,K,N,W,KH6(31)[61]<21.12/157.48>{OC}~10.0~,
    =K1ABC(4),=VER20240801;
Hawaii:                   31:  61:  OC:   21.12:   157.48:    10.0:  KH6:
    AH6,KH7;
"""


@pytest.fixture
def sample_index():
    """Index built from the sample database."""
    return build(SAMPLE_CTY)


@pytest.fixture
def cty_file(tmp_path):
    """Sample database written to a temporary cty.dat."""
    path = tmp_path / "cty.dat"
    path.write_text(SAMPLE_CTY, encoding="utf-8")
    return path
