"""
Una contraseña es válida cuando cumple los cinco criterios:
 - al menos 8 caracteres de longitud,
 - al menos un carácter especial (ni letra ni dígito ASCII),
 - al menos dos letras mayúsculas,
 - al menos tres letras minúsculas,
 - al menos un dígito.
"""
import logging
import re
import sys
from collections import namedtuple
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)

Rule = namedtuple("Rule", "name predicate message")
Verdict = namedtuple("Verdict", "password valid failures")

MIN_LENGTH = 8

SPECIAL = re.compile(r"[^a-zA-Z0-9]")
UPPER = re.compile(r"[A-Z].*[A-Z]", re.DOTALL)
LOWER = re.compile(r"[a-z].*[a-z].*[a-z]", re.DOTALL)
DIGIT = re.compile(r"[0-9]")

VALID_MARKER = "✔ VÁLIDA"
INVALID_MARKER = "✖ INVÁLIDA"
FAILURE_HEADER = "   La validación falló:"

RULES = (
    Rule(
        "length",
        lambda pw: len(pw) >= MIN_LENGTH,  # Faster than doing regex
        "Debe tener al menos 8 caracteres de longitud.",
    ),
    Rule(
        "special",
        lambda pw: SPECIAL.search(pw) is not None,
        "Debe contener al menos un carácter especial.",
    ),
    Rule(
        "uppercase",
        lambda pw: UPPER.search(pw) is not None,
        "Debe contener al menos dos letras mayúsculas.",
    ),
    Rule(
        "lowercase",
        lambda pw: LOWER.search(pw) is not None,
        "Debe contener al menos tres letras minúsculas.",
    ),
    Rule(
        "digit",
        lambda pw: DIGIT.search(pw) is not None,
        "Debe contener al menos un dígito.",
    ),
)


def check(password: str) -> Verdict:
    # Every rule runs, a failure never skips the ones after it
    failures = tuple(rule.message for rule in RULES if not rule.predicate(password))
    return Verdict(password, not failures, failures)


def format_verdict(verdict: Verdict) -> List[str]:
    status = VALID_MARKER if verdict.valid else INVALID_MARKER
    lines = [f' [{status}] "{verdict.password}"\n']
    if not verdict.valid:
        lines.append(f"{FAILURE_HEADER}\n")
        lines.extend(f" - {message}\n" for message in verdict.failures)
    return lines


def validate(password: str, stream: Optional[TextIO] = None) -> Verdict:
    """
    Check a password and write its verdict to the console.

    Lines are written one at a time without a shared lock, so verdicts
    printed by other workers at the same moment may interleave with these.
    """
    if stream is None:
        stream = sys.stdout
    verdict = check(password)
    logger.debug(
        "Checked %d character password, %d rule(s) failed",
        len(password),
        len(verdict.failures),
    )
    for line in format_verdict(verdict):
        print(line, end="", file=stream, flush=True)
    return verdict
