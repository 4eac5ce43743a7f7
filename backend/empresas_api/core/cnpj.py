import re

CNPJ_LENGTH = 14
PHONE_LENGTH = 11

_NON_DIGITS = re.compile(r"[^0-9]")
_CNPJ_PATTERN = re.compile(r"([0-9]{2})([0-9]{3})([0-9]{3})([0-9]{4})([0-9]{2})")


def _only_digits(value: str | None) -> str:
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def normalize_cnpj(value: str | None) -> str:
    """Remove tudo que não for dígito ASCII. None vira string vazia."""
    return _only_digits(value)


def is_valid_cnpj(value: str | None) -> bool:
    return len(normalize_cnpj(value)) == CNPJ_LENGTH


def format_cnpj(cnpj: str) -> str:
    """Formata 14 dígitos como XX.XXX.XXX/XXXX-XX.

    Quem chama deve normalizar e checar o tamanho antes; qualquer outra
    entrada levanta ValueError.
    """
    m = _CNPJ_PATTERN.fullmatch(cnpj or "")
    if not m:
        raise ValueError(f"CNPJ deve ter exatamente {CNPJ_LENGTH} dígitos: {cnpj!r}")
    return "{}.{}.{}/{}-{}".format(*m.groups())


def normalize_phone(value: str | None) -> str | None:
    """Só dígitos. None ou string em branco equivalem a telefone ausente.

    Qualquer outro valor é normalizado mesmo que não sobre dígito algum
    (ex.: "abc" vira ""), para que a checagem de tamanho o rejeite.
    """
    if value is None or not value.strip():
        return None
    return _only_digits(value)
