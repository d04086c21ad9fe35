import logging
from typing import Dict, Optional
from urllib.parse import urljoin, urlparse

import requests

from .challenge import COOKIE_NAME, ChallengeSolver
from .comments import strip_comments
from .config import Settings
from .error_handler import error_handler
from .errors import ChallengeUnsolved, FetchError
from .params import ParamExtractor

logger = logging.getLogger(__name__)


class LanzouSession:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.session = requests.Session()
        self.solver = ChallengeSolver(strict=self.settings.strict_token)
        self.extractor = ParamExtractor()
        self.session.headers.update({
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.5",
        })

    def _check(self, resp, url):
        if not resp.ok:
            raise FetchError(f"\nGET/POST {url} returned {resp.status_code}")

    def _url(self, url: str) -> str:
        # "/iAbC12x" -> "https://www.lanzoui.com/iAbC12x"; full URLs pass through
        return urljoin(self.settings.base_url + "/", url)

    def _fetch_page(self, url: str, **kwargs) -> str:
        url = self._url(url)
        resp = self.session.get(url, timeout=self.settings.timeout, **kwargs)
        self._check(resp, url)

        for attempt in range(self.settings.challenge_retries):
            if not self.solver.is_challenge(resp.text):
                return resp.text
            logger.info(f"Challenge page for {url}, solving (round {attempt + 1})")
            cookie = self.solver.solve_page(resp.text)
            self.session.cookies.set(COOKIE_NAME, cookie, domain=urlparse(url).hostname)
            resp = self.session.get(url, timeout=self.settings.timeout, **kwargs)
            self._check(resp, url)

        if self.solver.is_challenge(resp.text):
            logger.warning(f"Still getting a challenge page for {url}")
            raise ChallengeUnsolved()
        return resp.text

    @error_handler
    def get_page(self, url: str, **kwargs) -> str:
        return self._fetch_page(url, **kwargs)

    @error_handler
    def get_params(self, url: str, strip: bool = True) -> Dict[str, str]:
        html = self._fetch_page(url)
        if strip:
            html = strip_comments(html)
        return self.extractor.extract(html)

    @error_handler
    def post_params(self, url: str, params: Dict[str, str], referer: Optional[str] = None) -> dict:
        url = self._url(url)
        headers = {"X-Requested-With": "XMLHttpRequest"}
        if referer:
            headers["Referer"] = self._url(referer)
        resp = self.session.post(url, data=params, headers=headers, timeout=self.settings.timeout)
        self._check(resp, url)
        return resp.json()
