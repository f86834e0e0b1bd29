# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from pathlib import Path

from pydantic import BaseModel, Field, computed_field, field_validator


class ClientConfigDTO(BaseModel):
    """
    Data transfer object for the exchange client configuration. These values
    are passed via CLI or environment variables.
    """

    base_url: str = "https://poloniex.com/public"
    timeout: float = Field(10.0, gt=0, description="HTTP timeout in seconds")
    user_agent: str = "poloniex-trade-site"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """The base URL must be absolute and must not carry a query string."""
        if not value.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        if "?" in value:
            raise ValueError("Base URL must not contain a query string")
        return value.rstrip("/")


class PersistenceConfigDTO(BaseModel):
    """Location of the flat file holding the known currencies."""

    data_dir: Path
    filename: str = "currency.lst"

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("Filename must be a plain file name")
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def path(self) -> Path:
        return self.data_dir / self.filename
