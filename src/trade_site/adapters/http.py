# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from logging import getLogger
from typing import Self

import requests

from trade_site.interfaces import IHttpFetcher

LOG = getLogger(__name__)


class RequestsHttpFetcher(IHttpFetcher):
    """HTTP GET implementation based on requests."""

    def __init__(
        self: Self,
        timeout: float = 10.0,
        user_agent: str = "poloniex-trade-site",
        session: requests.Session | None = None,
    ) -> None:
        self.__timeout = timeout
        self.__session = session or requests.Session()
        self.__session.headers.update({"User-Agent": user_agent})

    def fetch(self: Self, url: str) -> str | None:
        """Send a GET request and return the body of a successful response."""
        LOG.debug("GET %s", url)
        try:
            response = self.__session.get(url, timeout=self.__timeout)
        except requests.RequestException as exc:
            LOG.error("Request to %s failed: %s", url, exc)
            return None

        if not response.ok:
            LOG.error(
                "Request to %s failed with status code %d",
                url,
                response.status_code,
            )
            return None
        return response.text
