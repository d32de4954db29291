from __future__ import annotations

from datetime import timedelta

import pytest

from src.staff_checkin.staff_checkin.checkin.issuer import TokenIssuer
from src.staff_checkin.staff_checkin.checkin.kiosk import CheckinKiosk
from src.staff_checkin.staff_checkin.checkin.model import CheckinForm
from src.staff_checkin.staff_checkin.checkin.service import CheckinService
from src.staff_checkin.staff_checkin.core.constants import MSG_ATTENDANCE_RECORDED, MSG_INVALID_SCAN


@pytest.fixture
def kiosk(staff_repo, attendance_repo) -> CheckinKiosk:
    return CheckinKiosk(TokenIssuer(), CheckinService(staff_repo, attendance_repo))


def test_scan_of_rich_payload_submits(kiosk, attendance_repo, fixed_now):
    code = TokenIssuer().issue("tch002", now=fixed_now)

    form, result = kiosk.scan(code.payload.to_json(), now=fixed_now + timedelta(seconds=3))

    assert form == CheckinForm(token=str(code.token), staff_id="tch002")
    assert result.ok is True
    assert result.message == MSG_ATTENDANCE_RECORDED
    assert attendance_repo.records[0].staff_id == "TCH002"


def test_bare_token_uses_staff_id_already_on_form(kiosk, fixed_now):
    code = TokenIssuer().issue(now=fixed_now)

    form, result = kiosk.scan(str(code.token), CheckinForm(staff_id="TCH001"), now=fixed_now)

    assert form.staff_id == "TCH001"
    assert result.ok is True


def test_undecodable_scan_leaves_form_and_skips_submit(kiosk, staff_repo, attendance_repo, fixed_now):
    before = CheckinForm(token="", staff_id="TCH001")

    form, result = kiosk.scan("hello", before, now=fixed_now)

    assert form == before
    assert result.ok is False
    assert result.message == MSG_INVALID_SCAN
    assert staff_repo.lookups == []
    assert attendance_repo.records == []


def test_submit_reports_rejection_message(kiosk, fixed_now):
    code = kiosk.issue_token("ZZZ999")
    result = kiosk.submit_check_in("ZZZ999", str(code.token))

    assert result.ok is False
    assert result.message.startswith("Staff ID not found: ZZZ999")


def test_issue_and_decode_round_trip(kiosk):
    code = kiosk.issue_token("TCH001", origin="http://kiosk.local")
    decoded = kiosk.decode_payload(code.payload.to_json())

    assert decoded.token == str(code.token)
    assert decoded.staff_id == "TCH001"
