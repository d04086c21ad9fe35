from .challenge import ChallengeSolver
from .comments import strip_comments
from .config import Settings
from .errors import (
    BaseLanzouError, PatternNotFound, ChallengeNotFound,
    DataBlockNotFound, FormBlockNotFound, MalformedInput,
    ChallengeUnsolved, FetchError
)
from .models import ShareFile
from .normalizer import parse_size, parse_time
from .params import ParamExtractor
from .session import LanzouSession

__version__ = "0.1.0"
__all__ = [
    "ChallengeSolver", "ParamExtractor", "LanzouSession",
    "strip_comments", "parse_size", "parse_time",
    "Settings", "ShareFile",
    "BaseLanzouError", "PatternNotFound", "ChallengeNotFound",
    "DataBlockNotFound", "FormBlockNotFound", "MalformedInput",
    "ChallengeUnsolved", "FetchError"
]
