import pytest

PIXELS_2X1 = bytes([10, 20, 30, 40, 50, 60])


@pytest.fixture
def p6_bytes() -> bytes:
    return b"P6\n2 1\n255\n" + PIXELS_2X1


@pytest.fixture
def p3_bytes() -> bytes:
    return b"P3\n2 1\n255\n10 20 30\n40 50 60\n"
