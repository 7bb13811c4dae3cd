import pytest

from designpatterns.bridge import CommonMessage, UrgencyMessage, via_email, via_sms


@pytest.mark.parametrize(
    ("message_type", "channel", "expected"),
    [
        (CommonMessage, via_sms, "send have a drink? to bob via SMS"),
        (CommonMessage, via_email, "send have a drink? to bob via Email"),
        (UrgencyMessage, via_sms, "send [Urgency] have a drink? to bob via SMS"),
        (UrgencyMessage, via_email, "send [Urgency] have a drink? to bob via Email"),
    ],
)
def test_messages(capsys, message_type, channel, expected):
    m = message_type(channel())
    m.send_message("have a drink?", "bob")
    assert capsys.readouterr().out == expected