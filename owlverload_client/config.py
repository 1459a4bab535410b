from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    api_url: str
    auth_token: Optional[str]
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_url = os.getenv("OWLVERLOAD_API_URL")
        auth_token = os.getenv("OWLVERLOAD_AUTH_TOKEN") or None
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            api_url=api_url,
            auth_token=auth_token,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_url: Optional[str],
        auth_token: Optional[str],
        log_level: str,
    ) -> "Config":
        match api_url:
            case None | "":
                raise ValueError("OWLVERLOAD_API_URL must be set in .env")
            case _:
                pass

        return Config(
            api_url=api_url.rstrip("/"),
            auth_token=auth_token,
            log_level=log_level,
        )
