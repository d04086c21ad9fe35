import logging
import re
from typing import Optional

from .errors import ChallengeNotFound, MalformedInput

logger = logging.getLogger(__name__)

COOKIE_NAME = "acw_sc__v2"

# Token assigned in the interstitial's script: var arg1='3F0B...';
ARG1_RE = re.compile(r"arg1='([0-9A-Z]+)'")

# Character at position i of arg1 goes to position UNBOX_TABLE[i].
UNBOX_TABLE = (
    6, 28, 34, 31, 33, 18, 30, 23, 9, 8,
    19, 38, 17, 24, 0, 5, 32, 21, 10, 22,
    25, 14, 15, 3, 16, 27, 13, 35, 2, 29,
    11, 26, 4, 36, 1, 39, 37, 7, 20, 12,
)
XOR_KEY = "3000176000856006061501533003690027800375"

TOKEN_LENGTH = len(UNBOX_TABLE)
# Placeholder for unbox positions no token character lands on.
UNFILLED = "\0"


class ChallengeSolver:
    """Computes the ``acw_sc__v2`` cookie the site asks for when it serves
    its anti-bot page instead of the real one.

    The page's obfuscated script shuffles ``arg1`` with a fixed table and
    XORs it with a fixed key; the result has to be set as a cookie before
    the original request is sent again.
    """

    def __init__(self, strict: bool = True):
        # strict=False keeps the old behaviour for tokens that aren't 40
        # characters long: missing positions hold UNFILLED, extra ones are dropped.
        self.strict = strict

    @staticmethod
    def detect(markup: str) -> Optional[str]:
        match = ARG1_RE.search(markup)
        if match is None:
            return None
        return match.group(1)

    @staticmethod
    def is_challenge(markup: str) -> bool:
        return ChallengeSolver.detect(markup) is not None

    def unbox(self, token: str) -> str:
        if self.strict and len(token) != TOKEN_LENGTH:
            raise MalformedInput(f"Challenge token must be {TOKEN_LENGTH} characters, got {len(token)}.")

        unboxed = [UNFILLED] * len(token)
        for i, j in enumerate(UNBOX_TABLE):
            if i < len(token) and j < len(unboxed):
                unboxed[j] = token[i]
        return "".join(unboxed)

    @staticmethod
    def hex_xor(hex1: str, hex2: str) -> str:
        out = []
        for i in range(0, min(len(hex1), len(hex2)) - 1, 2):
            pair1, pair2 = hex1[i:i + 2], hex2[i:i + 2]
            try:
                # a pair touching an unfilled position counts as 0
                v1 = 0 if UNFILLED in pair1 else int(pair1, 16)
                v2 = 0 if UNFILLED in pair2 else int(pair2, 16)
            except ValueError:
                raise MalformedInput(f"Not a hex pair: {pair1!r} / {pair2!r}")
            out.append(f"{v1 ^ v2:02x}")
        return "".join(out)

    def solve(self, token: str) -> str:
        return self.hex_xor(self.unbox(token), XOR_KEY)

    def solve_page(self, markup: str) -> str:
        token = self.detect(markup)
        if token is None:
            raise ChallengeNotFound()

        cookie = self.solve(token)
        logger.debug(f"{COOKIE_NAME}: arg1={token} -> {cookie}")
        return cookie
