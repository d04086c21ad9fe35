import logging
import re
from typing import Dict

from .errors import DataBlockNotFound, FormBlockNotFound, MalformedInput, PatternNotFound

logger = logging.getLogger(__name__)

# data : { 'action':'downprocess', 'sign':ajaxdata, 'p':pwd }
DATA_BLOCK_RE = re.compile(r"data[:\s]+({[^}]+})")
# 'key':'quoted' | 'key':123 | 'key':someVar
KV_PAIR_RE = re.compile(r"'(?P<key>[^']+?)'\s*:\s*(?:'(?P<quoted>[^']*)'|(?P<bare>[^'\s},]*))")
# data : 'action=downprocess&sign=...&ves=1'
FORM_BLOCK_RE = re.compile(r"data\s*:\s*'(.+?)'")


class ParamExtractor:
    """Pulls the request parameters the site's own scripts would send out of
    a page's markup.

    Strip comments first (see ``strip_comments``): the site leaves old,
    commented-out ``var`` assignments next to the live ones.
    """

    @staticmethod
    def is_number(text: str) -> bool:
        return all(ch.isdecimal() for ch in text)

    @staticmethod
    def find_js_var(name: str, markup: str) -> str:
        match = re.search(rf"var\s+{re.escape(name)}\s*=\s*'([^']*)'\s*;", markup)
        if match is None:
            logger.debug(f"js var {name!r} not assigned in page")
            return ""
        return match.group(1)

    def from_json_block(self, markup: str) -> Dict[str, str]:
        block = DATA_BLOCK_RE.search(markup)
        if block is None:
            raise DataBlockNotFound()
        return self.json_to_map(block.group(1), markup)

    def json_to_map(self, data: str, markup: str) -> Dict[str, str]:
        params = {}
        for match in KV_PAIR_RE.finditer(data):
            key, quoted, bare = match.group("key", "quoted", "bare")
            if quoted is not None:
                params[key] = quoted
            elif self.is_number(bare):
                params[key] = bare
            else:
                params[key] = self.find_js_var(bare, markup)
        return params

    def from_form_block(self, markup: str) -> Dict[str, str]:
        block = FORM_BLOCK_RE.search(markup)
        if block is None:
            raise FormBlockNotFound()
        return self.form_to_map(block.group(1))

    @staticmethod
    def form_to_map(form: str) -> Dict[str, str]:
        params = {}
        for pair in form.split("&"):
            if not pair:
                logger.debug("skipping empty form segment")
                continue
            if "=" not in pair:
                raise MalformedInput(f"Form pair without '=': {pair!r}")
            key, value = pair.split("=", 1)
            params[key] = value
        return params

    def extract(self, markup: str) -> Dict[str, str]:
        try:
            return self.from_json_block(markup)
        except DataBlockNotFound:
            pass
        try:
            return self.from_form_block(markup)
        except FormBlockNotFound:
            raise PatternNotFound("\nPage has neither a 'data : {...}' block nor a form string.") from None
