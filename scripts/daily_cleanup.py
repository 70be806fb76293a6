"""Daily sweep for cron: clear the monitor projection, purge exported events.

Example crontab line (shortly after midnight):
    5 0 * * * cd /srv/kiosk && APP_ENV=production python scripts/daily_cleanup.py
"""

from __future__ import annotations

import importlib
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "kiosk_attendance"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from kiosk_attendance.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO))

    container = build_container(db_config=dict(settings.DB_CONFIG))
    try:
        report = container.cleanup_service.run()
    except Exception as e:
        logging.getLogger("daily_cleanup").exception("Cleanup error")
        print(json.dumps({"success": False, "error": str(e)}))
        raise SystemExit(1)

    print(json.dumps({"success": True, "message": "Daily cleanup completed", **report.to_dict()}))


if __name__ == "__main__":
    main()
