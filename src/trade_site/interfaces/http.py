# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from abc import ABC, abstractmethod


class IHttpFetcher(ABC):
    """Interface for blocking HTTP GET requests."""

    @abstractmethod
    def fetch(self, url: str) -> str | None:
        """
        Return the response body of a GET request, or None if the server did
        not answer successfully.
        """
