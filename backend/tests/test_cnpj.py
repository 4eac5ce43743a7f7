import pytest

from empresas_api.core.cnpj import format_cnpj, is_valid_cnpj, normalize_cnpj, normalize_phone


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.345.678/0001-12", "12345678000112"),
        (" 12 345 678 0001 12 ", "12345678000112"),
        ("abc1d2e3", "123"),
        ("", ""),
        (None, ""),
        ("sem digitos", ""),
    ],
)
def test_normalize_cnpj(raw, expected):
    assert normalize_cnpj(raw) == expected


def test_normalize_keeps_only_ascii_digits_in_order():
    raw = "9x8-7/6.5 4\t3٣2"  # '٣' é dígito arábico, não ASCII
    out = normalize_cnpj(raw)
    assert out == "98765432"
    assert all(ch in "0123456789" for ch in out)


def test_format_cnpj():
    assert format_cnpj("12345678000112") == "12.345.678/0001-12"


def test_format_after_normalize_roundtrip():
    assert format_cnpj(normalize_cnpj("12.345.678/0001-12")) == "12.345.678/0001-12"


@pytest.mark.parametrize("bad", ["", "1234567800011", "123456780001123", "12.345.678/0001-12", "12345678000112\n"])
def test_format_cnpj_requires_exactly_14_digits(bad):
    with pytest.raises(ValueError):
        format_cnpj(bad)


def test_is_valid_cnpj():
    assert is_valid_cnpj("12.345.678/0001-12")
    assert not is_valid_cnpj("12.345.678/0001-1")
    assert not is_valid_cnpj(None)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("(11) 12345-6789", "11123456789"),
        ("11123456789", "11123456789"),
        ("", None),
        ("   ", None),
        ("abc", ""),
        ("-", ""),
        (None, None),
    ],
)
def test_normalize_phone(raw, expected):
    assert normalize_phone(raw) == expected
