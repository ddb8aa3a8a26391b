import logging

from cnpj_alfa.config import DEMO_ROUNDS, LOG_LEVEL
from cnpj_alfa.services import CNPJGenerator, validate
from cnpj_alfa.utils import format_cnpj

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run_demo(generator: CNPJGenerator = None, rounds: int = DEMO_ROUNDS) -> int:
    """
    Gera CNPJs alfanuméricos e numéricos e registra a validação de cada um.
    Retorna a quantidade de CNPJs gerados que não passaram na validação.
    """
    generator = generator or CNPJGenerator()

    alfa = generator.generate()
    numerico = generator.generate(alphanumeric=False)
    logger.info(f"CNPJ alfanumérico gerado: {alfa} ({format_cnpj(alfa)})")
    logger.info(f"CNPJ numérico gerado: {numerico} ({format_cnpj(numerico)})")

    failures = 0
    for alphanumeric in (False, True):
        tipo = "alfanumérico" if alphanumeric else "numérico"
        for _ in range(rounds):
            cnpj = generator.generate(alphanumeric)
            valid = validate(cnpj)
            logger.info(f"CNPJ {tipo} {format_cnpj(cnpj)} válido: {valid}")
            if not valid:
                failures += 1

    total = rounds * 2
    if failures:
        logger.error(f"Validação falhou para {failures}/{total} CNPJs gerados")
    else:
        logger.info(f"Todos os {total} CNPJs gerados são válidos")
    return failures


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(1 if run_demo() else 0)
