import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .page import DEFAULT_FIELD_ID, DEFAULT_PARAM

logger = logging.getLogger(__name__)

ENV_PREFIX = "LWCSEARCH_"


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    manifest_path: Optional[str] = None   # JSON article list; None -> bundled samples
    query_param: str = DEFAULT_PARAM
    field_id: str = DEFAULT_FIELD_ID
    log_level: str = "INFO"
    snippet_length: int = 200


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring %s%s=%r: not an integer", ENV_PREFIX, key, raw)
        return default


def _log_level(env: Mapping[str, str], default: str) -> str:
    raw = (env.get(ENV_PREFIX + "LOG_LEVEL") or default).upper()
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("ignoring %sLOG_LEVEL=%r: unknown level", ENV_PREFIX, raw)
        return default
    return raw


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    base = Settings()
    return Settings(
        host=env.get(ENV_PREFIX + "HOST") or base.host,
        port=_int(env, "PORT", base.port),
        manifest_path=env.get(ENV_PREFIX + "MANIFEST") or None,
        query_param=env.get(ENV_PREFIX + "QUERY_PARAM") or base.query_param,
        field_id=env.get(ENV_PREFIX + "FIELD_ID") or base.field_id,
        log_level=_log_level(env, base.log_level),
        snippet_length=_int(env, "SNIPPET_LENGTH", base.snippet_length),
    )
