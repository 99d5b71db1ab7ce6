# /classroom/services/class_helpers/class_code.py

import secrets
import string

CODE_ALPHABET = string.ascii_uppercase + string.digits
PREFIX_LENGTH = 4
SUFFIX_LENGTH = 6


def generate_class_code(subject: str) -> str:
    """
    Builds a class code such as `MATH-4QZ8TK`: the first four characters of
    the subject, uppercased, then six random letters or digits. Subjects
    shorter than four characters give a shorter prefix.
    """
    prefix = subject[:PREFIX_LENGTH].upper()
    suffix = "".join(secrets.choice(CODE_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{prefix}-{suffix}"
