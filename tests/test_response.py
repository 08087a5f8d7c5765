"""Tests for envelope classification and the history model."""

import pytest

from shopee_lib.core import check_response, ensure_logged_in, require_data
from shopee_lib.errors import (
    ErrorKind, RemoteDomainError, StructuralError, UnauthenticatedSession,
)
from shopee_lib.models import (
    NO_REWARD, CheckinHistory, Envelope, EnvelopeOutcome, NoReward,
)


class TestEnvelope:

    def test_from_payload_matches_schema(self):
        env = Envelope.from_payload({"code": 0, "msg": "ok", "data": {"x": 1}})
        assert env == Envelope(code=0, msg="ok", data={"x": 1})
        assert env.outcome is EnvelopeOutcome.SUCCESS

    @pytest.mark.parametrize("payload", [
        [1, 2, 3],
        "text",
        None,
        {"coins": 10},
        {"code": "0", "msg": "ok"},
        {"code": 0, "msg": None},
        {"code": True, "msg": "ok"},
        {"code": 0},
    ])
    def test_non_envelope_payloads(self, payload):
        assert Envelope.from_payload(payload) is None

    def test_outcomes(self):
        assert Envelope(401, "x").outcome is EnvelopeOutcome.UNAUTHENTICATED
        assert Envelope(7, "x").outcome is EnvelopeOutcome.DOMAIN_ERROR
        assert Envelope(0.0, "x").outcome is EnvelopeOutcome.SUCCESS


class TestCheckResponse:

    def test_success_returns_payload(self):
        payload = {"code": 0, "msg": "ok", "coins": 5}
        assert check_response(payload) is payload

    def test_passthrough_returns_payload(self):
        payload = {"coins": 5}
        assert check_response(payload) is payload
        assert check_response([1]) == [1]

    def test_401_is_unauthenticated(self):
        with pytest.raises(UnauthenticatedSession) as exc:
            check_response({"code": 401, "msg": "not login"})
        assert exc.value.kind is ErrorKind.UNAUTHENTICATED

    def test_other_codes_are_domain_errors(self):
        with pytest.raises(RemoteDomainError) as exc:
            check_response({"code": 7, "msg": "quota exceeded"})
        assert exc.value.code == 7
        assert exc.value.message == "quota exceeded"
        assert str(exc.value) == "Shopee server: quota exceeded"
        assert exc.value.kind is ErrorKind.REMOTE_DOMAIN

    def test_require_data(self):
        assert require_data({"data": {"a": 1}}, "x") == {"a": 1}
        with pytest.raises(StructuralError):
            require_data({"code": 0, "msg": "ok"}, "x")
        with pytest.raises(StructuralError):
            require_data({"data": [1]}, "x")

    def test_ensure_logged_in(self):
        ensure_logged_in("99")
        with pytest.raises(UnauthenticatedSession):
            ensure_logged_in("-1")


class TestCheckinHistory:

    def test_from_dict_adjusts_index(self):
        history = CheckinHistory.from_dict({
            "checkin_list": [1, 2, 3, 4, 5, 6, 7],
            "checked_in_today": False,
            "today_index": 3,
        })
        assert history.amounts == (1, 2, 3, 4, 5, 6, 7)
        assert history.today_index == 2
        assert history.amounts[history.today_index] == 3
        assert history.checked_in_today is False

    @pytest.mark.parametrize("today_index", [0, 8, -1, "3", None])
    def test_from_dict_rejects_bad_today_index(self, today_index):
        with pytest.raises(StructuralError):
            CheckinHistory.from_dict({
                "checkin_list": [1, 2, 3, 4, 5, 6, 7],
                "checked_in_today": False,
                "today_index": today_index,
            })

    def test_from_dict_keeps_first_seven(self):
        history = CheckinHistory.from_dict({
            "checkin_list": list(range(10)),
            "checked_in_today": True,
            "today_index": 1,
        })
        assert history.amounts == (0, 1, 2, 3, 4, 5, 6)
        assert history.today_index == 0

    def test_from_dict_short_list(self):
        with pytest.raises(StructuralError):
            CheckinHistory.from_dict({"checkin_list": [1] * 6, "today_index": 1})

    def test_direct_construction_needs_seven(self):
        with pytest.raises(ValueError):
            CheckinHistory(amounts=(1, 2, 3), checked_in_today=False, today_index=0)


def test_no_reward_is_falsy_singleton():
    assert not NO_REWARD
    assert NoReward() is NO_REWARD
