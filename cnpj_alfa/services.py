import logging
import random
from typing import NamedTuple, Optional

from cnpj_alfa.config import (
    BASE_VALUE,
    BODY_LENGTH,
    BODY_PATTERN,
    CHECK_DIGIT_WEIGHTS,
    CNPJ_PATTERN,
    ZERO_CNPJ,
)
from cnpj_alfa.utils import has_disallowed_characters, strip_mask

logger = logging.getLogger(__name__)


class CheckDigits(NamedTuple):
    """Os dois dígitos verificadores de um CNPJ."""

    dv1: int
    dv2: int

    @property
    def text(self) -> str:
        return f"{self.dv1}{self.dv2}"


def _mod11_digit(total: int) -> int:
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digits(body: str) -> Optional[CheckDigits]:
    """
    Calcula os dígitos verificadores de um CNPJ sem DV.

    O corpo pode vir com máscara e em minúsculas. Retorna None se tiver
    caracteres não permitidos, não tiver 12 letras ou dígitos, ou for zerado.

    Cada caractere vale ord(c) - ord('0'), então '0'..'9' valem 0..9 e
    'A'..'Z' valem 17..42. O primeiro DV usa os pesos deslocados em uma
    posição; o segundo usa os 12 primeiros pesos e soma o primeiro DV com o
    último peso.
    """
    if not body or has_disallowed_characters(body):
        logger.debug(f"Corpo de CNPJ com caracteres não permitidos: {body!r}")
        return None

    raw = strip_mask(body).upper()
    if not BODY_PATTERN.fullmatch(raw):
        logger.debug(f"Corpo de CNPJ com formato inválido: {body!r}")
        return None
    if raw == ZERO_CNPJ[:BODY_LENGTH]:
        logger.debug("Corpo de CNPJ zerado")
        return None

    sum_dv1 = 0
    sum_dv2 = 0
    for i, char in enumerate(raw):
        value = ord(char) - BASE_VALUE
        sum_dv1 += value * CHECK_DIGIT_WEIGHTS[i + 1]
        sum_dv2 += value * CHECK_DIGIT_WEIGHTS[i]

    dv1 = _mod11_digit(sum_dv1)
    sum_dv2 += dv1 * CHECK_DIGIT_WEIGHTS[BODY_LENGTH]
    dv2 = _mod11_digit(sum_dv2)
    return CheckDigits(dv1, dv2)


def validate(cnpj: str) -> bool:
    """
    Verifica se um CNPJ alfanumérico, com ou sem máscara, é válido.
    Nunca lança exceção: qualquer problema na entrada resulta em False.
    """
    if not cnpj or not isinstance(cnpj, str):
        return False

    if has_disallowed_characters(cnpj):
        logger.debug(f"CNPJ com caracteres não permitidos: {cnpj!r}")
        return False

    raw = strip_mask(cnpj).upper()
    if not CNPJ_PATTERN.fullmatch(raw) or raw == ZERO_CNPJ:
        logger.debug(f"CNPJ com formato inválido: {cnpj!r}")
        return False

    informed = raw[BODY_LENGTH:]
    computed = compute_check_digits(raw[:BODY_LENGTH])
    if computed is None:
        return False

    if informed != computed.text:
        logger.debug(f"DV informado {informed} difere do calculado {computed.text} para CNPJ {cnpj!r}")
        return False
    return True


class CNPJGenerator:
    """
    Gera CNPJs aleatórios, numéricos ou alfanuméricos.

    A fonte de aleatoriedade é qualquer objeto com randint(a, b), como
    random.Random(seed), o que torna a geração reproduzível em testes.
    """

    DIGITS = "0123456789"
    LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _choice(self, alphabet: str) -> str:
        return alphabet[self.rng.randint(0, len(alphabet) - 1)]

    def _random_character(self, alphanumeric: bool) -> str:
        if alphanumeric and self.rng.randint(0, 1) == 1:
            return self._choice(self.LETTERS)
        return self._choice(self.DIGITS)

    def generate_body(self, alphanumeric: bool = True) -> str:
        while True:
            body = "".join(self._random_character(alphanumeric) for _ in range(BODY_LENGTH))
            if body != ZERO_CNPJ[:BODY_LENGTH]:
                return body
            logger.debug("Corpo zerado sorteado, gerando novamente")

    def generate(self, alphanumeric: bool = True) -> str:
        """Gera um CNPJ de 14 caracteres, sem máscara e em maiúsculas."""
        body = self.generate_body(alphanumeric)
        return f"{body}{compute_check_digits(body).text}"


_default_generator = CNPJGenerator()


def generate(alphanumeric: bool = True) -> str:
    return _default_generator.generate(alphanumeric)
