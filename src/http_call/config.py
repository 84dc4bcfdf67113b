from __future__ import annotations

import platform
from dataclasses import dataclass

VERSION = "0.1.0"


@dataclass(frozen=True)
class Settings:
    user_agent: str = f"http-call/{VERSION} python-{platform.python_version()}"
    default_protocol: str = "https"
    default_path: str = "/"


settings = Settings()
