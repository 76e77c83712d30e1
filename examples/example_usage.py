"""Example: drive the board through the service layer (no Flask).

Loads today's board, prints it, and lists what is pending.
"""

import asyncio
import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src" / "punch_sync"))

from punch_sync.common.datetime_utils import clock_from_punch, today
from punch_sync.container import build_container
from punch_sync.settings import get_settings_module


async def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(endpoint_url=settings.ENDPOINT_URL, timeout=settings.REQUEST_TIMEOUT)

    result = await container.attendance_service.load(today())
    print(result.to_dict())
    for row in container.board.rows():
        print(f"{row.employee_id:<8} {row.employee_name:<24} {clock_from_punch(row.check_in) or '--:--'} {clock_from_punch(row.check_out) or '--:--'}")
    print("pending:", [e.to_dict() for e in container.board.pending()])


if __name__ == "__main__":
    asyncio.run(main())
