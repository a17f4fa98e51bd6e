# config.py

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_PORT = 5000
DEFAULT_TABLE = "finantic-waitlist"
DEFAULT_REGION = "us-east-1"
DEFAULT_WAITLIST_ENDPOINT = "http://localhost:5000/api/waitlist"


@dataclass
class Settings:
    """Runtime configuration shared by the server, the Lambda handler and the landing screen."""
    port: int = DEFAULT_PORT
    data_dir: str = "data"
    build_dir: str = "build"
    encryption_key: Optional[str] = None
    table_name: str = DEFAULT_TABLE
    region: str = DEFAULT_REGION
    dynamodb_endpoint: Optional[str] = None
    profile_name: Optional[str] = None
    timeout: float = 10.0
    max_retries: int = 2
    waitlist_endpoint: str = DEFAULT_WAITLIST_ENDPOINT

    @property
    def csv_path(self) -> str:
        return os.path.join(self.data_dir, "waitlist.csv")

    @classmethod
    def from_env(cls, config: Optional[Dict[str, Any]] = None,
                 environ: Optional[Dict[str, str]] = None) -> "Settings":
        """
        Resolve settings with priority: explicit config → environment → default.

        Args:
            config: Overrides keyed by field name (e.g. {'port': 8080})
            environ: Environment mapping; defaults to os.environ
        """
        config = config or {}
        env = os.environ if environ is None else environ

        def pick(key, *names, default=None):
            if config.get(key) is not None:
                return config[key]
            for name in names:
                if env.get(name):
                    return env[name]
            return default

        return cls(
            port=int(pick('port', 'PORT', default=DEFAULT_PORT)),
            data_dir=pick('data_dir', 'FINANTIC_DATA_DIR', default='data'),
            build_dir=pick('build_dir', 'FINANTIC_BUILD_DIR', default='build'),
            encryption_key=pick('encryption_key', 'FINANTIC_ENCRYPTION_KEY'),
            table_name=pick('table_name', 'FINANTIC_WAITLIST_TABLE', default=DEFAULT_TABLE),
            region=pick('region', 'AWS_REGION', 'AWS_DEFAULT_REGION', default=DEFAULT_REGION),
            dynamodb_endpoint=pick('dynamodb_endpoint', 'FINANTIC_DYNAMODB_ENDPOINT'),
            profile_name=pick('profile_name', 'AWS_PROFILE'),
            timeout=float(pick('timeout', 'FINANTIC_TIMEOUT', default=10.0)),
            max_retries=int(pick('max_retries', 'FINANTIC_MAX_RETRIES', default=2)),
            waitlist_endpoint=pick('waitlist_endpoint', 'FINANTIC_WAITLIST_ENDPOINT',
                                   default=DEFAULT_WAITLIST_ENDPOINT),
        )
