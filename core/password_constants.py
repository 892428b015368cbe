# core/password_constants.py
from __future__ import annotations
import string

MIN_LENGTH = 8
MAX_LENGTH = 32
DEFAULT_LENGTH = 16

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
# Shared by the scorer and the generator
SPECIAL_CHARACTERS = "!@#$%^&*(),.?\":{}|<>_+-=[]\\;'/`~"

# (name, alphabet) in the order the generator draws its guaranteed characters
CHARACTER_CLASSES = (
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
    ("digits", DIGITS),
    ("special", SPECIAL_CHARACTERS),
)

ALL_CHARACTERS = "".join(alphabet for _, alphabet in CHARACTER_CLASSES)
