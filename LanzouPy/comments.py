import re
from typing import Union

# <!-- html -->, // line, /* block */. No nesting; "//" inside a string
# literal (e.g. a URL) is stripped too.
COMMENT_RE = re.compile(r"<!--.*?-->|//.*|/\*.*?\*/")
COMMENT_RE_BYTES = re.compile(COMMENT_RE.pattern.encode())


def strip_comments(markup: Union[str, bytes]) -> Union[str, bytes]:
    if isinstance(markup, bytes):
        return COMMENT_RE_BYTES.sub(b"", markup)
    return COMMENT_RE.sub("", markup)
