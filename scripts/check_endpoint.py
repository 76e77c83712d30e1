from __future__ import annotations

import asyncio
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
PACKAGE_ROOT = REPO_ROOT / "src" / "punch_sync"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from dotenv import load_dotenv

from punch_sync.container import build_container
from punch_sync.core.exceptions import ConfigurationError
from punch_sync.core.logging import configure_logging
from punch_sync.settings import get_settings_module


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    endpoint_url = getattr(settings, "ENDPOINT_URL", "")
    if not endpoint_url:
        raise ConfigurationError("PUNCH_SYNC_ENDPOINT_URL is not set")

    container = build_container(endpoint_url=endpoint_url, timeout=float(getattr(settings, "REQUEST_TIMEOUT", 30)))
    employees = asyncio.run(container.employee_service.list_employees())
    print(f"OK: {endpoint_url} answered with {len(employees)} employees")
    return 0


if __name__ == "__main__":
    sys.exit(main())
