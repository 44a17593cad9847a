import pytest
from pydantic import ValidationError

from ecard.responses.dtos import ResponseStatus
from ecard.responses.schemas import RSVPSubmission


def test_defaults():
    submission = RSVPSubmission.model_validate({"respondent_name": "Alex", "status": "maybe"})

    assert submission.status == ResponseStatus.MAYBE
    assert submission.headcount == 1
    assert submission.response_data == {}
    assert submission.respondent_email is None


def test_empty_email_is_allowed():
    submission = RSVPSubmission.model_validate(
        {"respondent_name": "Alex", "respondent_email": "", "status": "attending"}
    )

    assert submission.to_dto().respondent_email is None


def test_response_data_keeps_key_order():
    submission = RSVPSubmission.model_validate(
        {
            "respondent_name": "Alex",
            "status": "attending",
            "response_data": {"zeta": 1, "alpha": {"nested": True}, "mid": ["a", "b"]},
        }
    )

    assert list(submission.response_data) == ["zeta", "alpha", "mid"]


@pytest.mark.parametrize(
    "payload,field",
    [
        ({"status": "attending"}, "respondent_name"),
        ({"respondent_name": "  ", "status": "attending"}, "respondent_name"),
        ({"respondent_name": "Alex", "status": "accepted"}, "status"),
        ({"respondent_name": "Alex", "status": "attending", "headcount": 0}, "headcount"),
        ({"respondent_name": "Alex", "status": "attending", "headcount": 51}, "headcount"),
        ({"respondent_name": "Alex", "status": "attending", "headcount": 1.5}, "headcount"),
        ({"respondent_name": "Alex", "status": "attending", "headcount": "2"}, "headcount"),
        ({"respondent_name": "Alex", "status": "attending", "respondent_email": "x"}, "respondent_email"),
        ({"respondent_name": "Alex", "status": "attending", "response_data": []}, "response_data"),
    ],
)
def test_invalid_submissions(payload, field):
    with pytest.raises(ValidationError) as exc_info:
        RSVPSubmission.model_validate(payload)

    assert field in {str(error["loc"][0]) for error in exc_info.value.errors()}
