"""
SCID numbers, portal credentials and record ids.
"""

import random
import re
import string
import time
from typing import Iterable, Optional

SCID_PATTERN = re.compile(r"SCID-(\d+)")
SCID_FORMAT = "SCID-{:06d}"
PASSWORD_ALPHABET = string.ascii_lowercase + string.digits
PASSWORD_LENGTH = 8


class IdentifierGenerator:
    """
    Sequence and credential generator.

    Holds no counter: the next SCID is derived from the SCID numbers handed
    in, so callers must pass the full current masterlist. Pass a seeded
    ``random.Random`` (and a fixed ``clock``) for deterministic output.
    """

    def __init__(self, rng: Optional[random.Random] = None, clock=None):
        self.rng = rng or random.SystemRandom()
        self.clock = clock or time.time

    def next_scid(self, scid_numbers: Iterable[str]) -> str:
        highest = 0
        for value in scid_numbers:
            match = SCID_PATTERN.search(str(value or ""))
            if match:
                highest = max(highest, int(match.group(1)))
        return SCID_FORMAT.format(highest + 1)

    def generate_username(self, first_name: str, last_name: str) -> str:
        base = ((first_name or "")[:1] + re.sub(r"\s", "", last_name or "")).lower()
        return f"{base}{self.rng.randint(1000, 9999)}"

    def generate_password(self) -> str:
        return "".join(self.rng.choice(PASSWORD_ALPHABET) for _ in range(PASSWORD_LENGTH))

    def generate_credentials(self, first_name: str, last_name: str) -> tuple:
        """Return a fresh ``(username, password)`` pair for a citizen."""
        return self.generate_username(first_name, last_name), self.generate_password()

    def epoch_millis(self) -> int:
        return int(self.clock() * 1000)

    def record_id(self, prefix: str, is_taken=None) -> str:
        """
        Build ``<prefix>_<epoch ms>``.

        When ``is_taken`` reports the id as used (two records in the same
        millisecond), the next free millisecond is taken instead.
        """
        stamp = self.epoch_millis()
        candidate = f"{prefix}_{stamp}"
        while is_taken is not None and is_taken(candidate):
            stamp += 1
            candidate = f"{prefix}_{stamp}"
        return candidate


_default_generator = None


def get_generator() -> IdentifierGenerator:
    """Get or create the process-wide generator."""
    global _default_generator
    if _default_generator is None:
        _default_generator = IdentifierGenerator()
    return _default_generator
