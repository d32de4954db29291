"""Example: drive the check-in flow through the service layer (no Flask).

Issue a code, decode what a scanner would read, and submit it.
"""

import importlib

from config import get_settings_module

from src.staff_checkin.staff_checkin.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    code = container.kiosk.issue_token("TCH001")
    print(code.payload.to_json(), f"({code.seconds_left()}s left)")

    decoded = container.kiosk.decode_payload(code.payload.to_json())
    print(container.kiosk.submit_check_in(decoded.staff_id, decoded.token))


if __name__ == "__main__":
    main()
