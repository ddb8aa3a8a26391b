"""
Testes de normalização e formatação de CNPJ
"""
import pytest

from cnpj_alfa.utils import format_cnpj, has_disallowed_characters, strip_mask


def test_strip_mask_remove_pontuacao():
    assert strip_mask("12.ABC.345/01DE-35") == "12ABC34501DE35"
    assert strip_mask("11014400484862") == "11014400484862"


def test_strip_mask_em_qualquer_posicao():
    """A posição da máscara não é validada, apenas os caracteres."""
    assert strip_mask("-1.1/0144004848-6.2/") == "11014400484862"


def test_strip_mask_preserva_minusculas():
    assert strip_mask("12.abc.345/01de-35") == "12abc34501de35"


def test_strip_mask_vazio():
    assert strip_mask("") == ""
    assert strip_mask("./-") == ""


@pytest.mark.parametrize("cnpj", [
    "12.ABC.345/01DE-35",
    "12abc34501de35",
    "11014400484862",
    "",
])
def test_sem_caracteres_nao_permitidos(cnpj):
    assert has_disallowed_characters(cnpj) is False


@pytest.mark.parametrize("cnpj", [
    "AB#12345678901",
    "11 014 400 4848 62",
    "11014400484862\n",
    "11_014_400_4848_62",
    "12ÁBC34501DE35",
    "١١014400484862",  # dígitos arábico-índicos
])
def test_com_caracteres_nao_permitidos(cnpj):
    assert has_disallowed_characters(cnpj) is True


def test_format_cnpj_numerico():
    assert format_cnpj("11014400484862") == "11.014.400/4848-62"


def test_format_cnpj_alfanumerico_em_maiusculas():
    assert format_cnpj("12abc34501de35") == "12.ABC.345/01DE-35"


def test_format_cnpj_ja_formatado():
    assert format_cnpj("11.014.400/4848-62") == "11.014.400/4848-62"


@pytest.mark.parametrize("cnpj", ["", None, "123", "110144004848620", "11#014400484862"])
def test_format_cnpj_invalido_retorna_vazio(cnpj):
    assert format_cnpj(cnpj) == ""
