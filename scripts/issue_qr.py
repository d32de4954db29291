"""Print (or save as PNG) a fresh staff check-in QR payload.

Usage: python scripts/issue_qr.py [STAFF_ID] [--png out.png]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staff_checkin.staff_checkin.checkin.issuer import TokenIssuer
from src.staff_checkin.staff_checkin.checkin.qr import render_png
from src.staff_checkin.staff_checkin.core.constants import DEFAULT_PUBLIC_ORIGIN


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("staff_id", nargs="?", default=None)
    parser.add_argument("--png", type=Path, default=None)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    issuer = TokenIssuer(
        display_ttl_seconds=int(getattr(settings, "QR_DISPLAY_TTL_SECONDS", 60)),
        default_origin=getattr(settings, "PUBLIC_ORIGIN", None) or DEFAULT_PUBLIC_ORIGIN,
    )
    code = issuer.issue(args.staff_id)

    print(code.payload.to_json())
    if args.png:
        args.png.write_bytes(render_png(code.payload.to_json()))
        print(f"OK: wrote {args.png} (display countdown {code.seconds_left()}s)")


if __name__ == "__main__":
    main()
