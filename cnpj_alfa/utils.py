from cnpj_alfa.config import (
    CNPJ_LENGTH,
    DISALLOWED_CHARACTERS_PATTERN,
    MASK_PATTERN,
)


def strip_mask(cnpj: str) -> str:
    """Remove os caracteres de máscara ('.', '/', '-') sem alterar maiúsculas/minúsculas."""
    return MASK_PATTERN.sub("", cnpj)


def has_disallowed_characters(cnpj: str) -> bool:
    """
    Indica se o CNPJ bruto contém algum caractere fora de letras, dígitos e máscara.
    Deve ser aplicado antes de remover a máscara.
    """
    return DISALLOWED_CHARACTERS_PATTERN.search(cnpj) is not None


def format_cnpj(cnpj: str) -> str:
    """
    Formata CNPJ no padrão XX.XXX.XXX/XXXX-XX.

    Não confere os dígitos verificadores. Retorna string vazia se, sem a
    máscara, o CNPJ não tiver 14 letras ou dígitos.
    """
    if not cnpj or has_disallowed_characters(cnpj):
        return ""
    raw = strip_mask(cnpj).upper()
    if len(raw) != CNPJ_LENGTH:
        return ""
    return f"{raw[:2]}.{raw[2:5]}.{raw[5:8]}/{raw[8:12]}-{raw[12:]}"
