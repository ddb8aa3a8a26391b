import os
import re

# CNPJ Layout
BODY_LENGTH = 12  # caracteres sem os dígitos verificadores
CNPJ_LENGTH = 14
ZERO_CNPJ = "00000000000000"
MASK_CHARACTERS = "./-"

# Check Digits
BASE_VALUE = ord("0")  # 'A' vale 17, 'Z' vale 42
CHECK_DIGIT_WEIGHTS = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

# Patterns
# Apenas ASCII: \d e IGNORECASE aceitariam dígitos e letras Unicode
DISALLOWED_CHARACTERS_PATTERN = re.compile(r"[^A-Za-z0-9./-]")
MASK_PATTERN = re.compile(r"[./-]")
BODY_PATTERN = re.compile(r"[A-Z0-9]{12}")  # usar com fullmatch
CNPJ_PATTERN = re.compile(r"[A-Z0-9]{12}[0-9]{2}")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Demo
DEMO_ROUNDS = 5
