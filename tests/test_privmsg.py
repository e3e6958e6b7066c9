"""Tests for the PRIVMSG record."""

from __future__ import annotations

import pytest

from twitchwire.errors import CommandMismatch, MalformedCtcp, MissingField
from twitchwire.messages import Ctcp, CtcpKind, Privmsg
from twitchwire.twitch import Badge, BadgeKind, Color, Emote, MsgRange
from twitchwire.wire.tokenizer import tokenize

FULL = (
    "@badge-info=;badges=global_mod/1,turbo/1;color=#0D4200;display-name=ronni;"
    "emotes=25:0-4,12-16/1902:6-10;id=b34ccfc7-4977-403a-8a94-33c6bac34fb8;mod=0;"
    "room-id=1337;subscriber=0;tmi-sent-ts=1507246572675;turbo=1;user-id=1337;"
    "user-type=global_mod :ronni!ronni@ronni.tmi.twitch.tv PRIVMSG #ronni :Kappa Keepo Kappa"
)


def test_basic_fields() -> None:
    msg = Privmsg.parse(":test!user@host PRIVMSG #museun :this is a test\r\n")
    assert msg.name == "test"
    assert msg.channel == "#museun"
    assert msg.data == "this is a test"
    assert msg.ctcp() is None
    assert not msg.is_action()
    assert not msg.has_tags()


def test_tag_accessors() -> None:
    msg = Privmsg.parse(FULL)
    assert msg.badge_info() == []
    assert msg.badges() == [Badge.simple(BadgeKind.GLOBAL_MOD), Badge.simple(BadgeKind.TURBO)]
    assert msg.color().unwrap() == Color.parse("#0D4200")
    assert msg.display_name() == "ronni"
    assert msg.emotes() == [
        Emote(25, (MsgRange(0, 4), MsgRange(12, 16))),
        Emote(1902, (MsgRange(6, 10),)),
    ]
    assert msg.flags() == []
    assert msg.id() == "b34ccfc7-4977-403a-8a94-33c6bac34fb8"
    assert msg.room_id().unwrap() == 1337
    assert msg.tmi_sent_ts().unwrap() == 1507246572675
    assert msg.user_id().unwrap() == 1337
    assert msg.bits() is None
    assert msg.custom_reward_id() is None


def test_badge_predicates() -> None:
    msg = Privmsg.parse(FULL)
    assert msg.is_global_moderator()
    assert msg.is_turbo()
    assert not msg.is_broadcaster()
    assert not msg.is_moderator()
    assert not msg.is_vip()
    assert not msg.is_subscriber()
    assert not msg.is_staff()


def test_subscriber_predicate() -> None:
    line = "@badges=subscriber/3012,vip/1 :a!a@a PRIVMSG #c :hi"
    msg = Privmsg.parse(line)
    assert msg.is_subscriber()
    assert msg.is_vip()
    assert Privmsg.parse("@badges=subscriber/6 :a!a@a PRIVMSG #c :hi").is_subscriber()


def test_action() -> None:
    msg = Privmsg.parse(":test!user@host PRIVMSG #museun :\x01ACTION this is a test\x01\r\n")
    assert msg.is_action()
    assert msg.ctcp() == Ctcp(CtcpKind.ACTION, "ACTION")
    assert msg.data == "this is a test"


def test_unknown_ctcp() -> None:
    msg = Privmsg.parse(":test!user@host PRIVMSG #museun :\x01FOOBAR this is a test\x01\r\n")
    assert not msg.is_action()
    assert msg.ctcp() == Ctcp(CtcpKind.UNKNOWN, "FOOBAR")
    assert msg.data == "this is a test"


def test_ctcp_payload_is_verbatim() -> None:
    msg = Privmsg.parse(":a!a@a PRIVMSG #c :\x01ACTION  two  spaces \x01")
    assert msg.data == " two  spaces "


def test_ctcp_without_space() -> None:
    with pytest.raises(MalformedCtcp):
        Privmsg.parse(":a!a@a PRIVMSG #c :\x01ACTION\x01")


def test_single_marker_is_plain_text() -> None:
    msg = Privmsg.parse(":a!a@a PRIVMSG #c :\x01ACTION dangling")
    assert msg.ctcp() is None
    assert msg.data == "\x01ACTION dangling"


def test_non_ascii_data() -> None:
    msg = Privmsg.parse(":test!user@host PRIVMSG #museun :�\U0001f468\r\n")
    assert msg.data == "�\U0001f468"


def test_reward_and_highlight() -> None:
    msg = Privmsg.parse(
        "@custom-reward-id=abc-123-foo;msg-id=highlighted-message "
        ":test!user@host PRIVMSG #museun :Notice me!\r\n"
    )
    assert msg.custom_reward_id() == "abc-123-foo"
    assert msg.msg_id() == "highlighted-message"
    assert msg.data == "Notice me!"


def test_bits_and_invalid_color() -> None:
    msg = Privmsg.parse("@bits=100;color=nope :a!a@a PRIVMSG #c :cheer100")
    assert msg.bits().unwrap() == 100
    color = msg.color()
    assert color is not None and not color.ok


def test_display_name_is_unescaped() -> None:
    msg = Privmsg.parse("@display-name=Foo\\sBar :a!a@a PRIVMSG #c :hi")
    assert msg.display_name() == "Foo Bar"


def test_missing_fields() -> None:
    with pytest.raises(MissingField) as exc:
        Privmsg.parse(":tmi.twitch.tv PRIVMSG #c :hi")
    assert exc.value.field == "nick"
    with pytest.raises(MissingField):
        Privmsg.parse(":a!a@a PRIVMSG :hi")
    with pytest.raises(MissingField):
        Privmsg.parse(":a!a@a PRIVMSG #c")


def test_wrong_command() -> None:
    with pytest.raises(CommandMismatch):
        Privmsg.from_irc(tokenize(":a!a@a WHISPER b :hi"))


def test_to_dict() -> None:
    data = Privmsg.parse(":a!a@a PRIVMSG #c :\x01ACTION waves\x01").to_dict()
    assert data["command"] == "PRIVMSG"
    assert data["name"] == "a"
    assert data["channel"] == "#c"
    assert data["data"] == "waves"
    assert data["ctcp"] == "ACTION"
    assert data["color"] is None
    assert data["tags"] == {}
