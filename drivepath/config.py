"""
drivepath Configuration

We read configuration from 2 sources, in order of precedence (higher is more priority)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the DRIVEPATH_ENV_FILE environment variable
"""

import functools
from enum import Enum
from pathlib import Path
from typing import Annotated

from class_doc import extract_docs_from_cls_obj
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "drivepath_"


class DuplicateNames(str, Enum):
    #: several folders with the same name under the same parent: use the first one the drive lists
    first = "first"

    #: several folders with the same name under the same parent: refuse to resolve the path
    error = "error"


for field, doc in extract_docs_from_cls_obj(DuplicateNames).items():
    DuplicateNames[field].__doc__ = "\n".join(doc)


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    authorization_token: Annotated[
        str | None,
        Field(
            description="OAuth bearer token used for the Drive API (can also be set with set_authorization_token)",
        ),
    ] = None

    api_url: Annotated[
        str,
        Field(
            description="Base url of the Drive v3 REST API",
        ),
    ] = "https://www.googleapis.com/drive/v3"

    page_size: Annotated[
        int,
        Field(
            ge=1,
            le=1000,
            description="Number of records requested per page when listing folders and files",
        ),
    ] = 100

    all_drives: Annotated[
        bool,
        Field(
            description="Also list folders and files on shared drives the token has access to",
        ),
    ] = True

    timeout: Annotated[
        float,
        Field(
            gt=0,
            description="Timeout in seconds for a single request to the Drive API",
        ),
    ] = 30

    duplicate_names: Annotated[
        DuplicateNames,
        Field(description="What to do if a path segment matches more than one folder"),
    ] = DuplicateNames.first

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    # Read the settings once to find out where the .env file lives, then again with the .env loaded
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        if k == "authorization_token" and v:
            v = "<hidden>"
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
