# barbershop/core.py

import secrets


def to_title_case(value: str) -> str:
    # lowercase everything, then upper-case the first letter after each space
    return " ".join(word[:1].upper() + word[1:] for word in value.lower().split(" "))


def random_image_name(num_bytes: int = 32) -> str:
    return secrets.token_hex(num_bytes)
