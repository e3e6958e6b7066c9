from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from ..twitch.notice import NoticeType, SubPlan
from ..wire.buffer import ByteRange
from ..wire.tags import ParsedTag, parse_flag
from ..wire.tokenizer import USER_NOTICE, IrcMessage
from .base import Message, UserTagsMixin


@dataclass(frozen=True, slots=True)
class UserNotice(UserTagsMixin, Message):
    """Announces a Twitch event in a channel (a subscription, a raid...).

    Which ``msg-param-*`` tags are present depends on ``msg_id``; each
    accessor names the notice kinds that carry it.
    """

    COMMAND = USER_NOTICE

    channel_range: ByteRange
    message_range: ByteRange | None = None

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        return cls(
            **cls._base_fields(msg),
            channel_range=msg.expect_arg_index(0),
            message_range=msg.data_range,
        )

    @property
    def channel(self) -> str:
        return self.raw.slice(self.channel_range)

    @property
    def message(self) -> str | None:
        """Text the user attached to the event, if any."""
        return self._slice(self.message_range)

    def id(self) -> str | None:
        return self.tags().get("id")

    def login(self) -> str | None:
        """Login of the user the notice is about."""
        return self.tags().get("login")

    def is_moderator(self) -> bool:
        return self.tags().get_as_bool("mod")

    def msg_id(self) -> ParsedTag[NoticeType] | None:
        return self._parsed("msg-id", NoticeType.parse)

    def room_id(self) -> ParsedTag[int] | None:
        return self._u64("room-id")

    def tmi_sent_ts(self) -> ParsedTag[int] | None:
        return self._u64("tmi-sent-ts")

    def user_id(self) -> ParsedTag[int] | None:
        return self._u64("user-id")

    def system_msg(self) -> str | None:
        """The line Twitch prints in chat for this notice, unescaped."""
        return self.tags().get_unescaped("system-msg")

    # sub, resub
    def msg_param_cumulative_months(self) -> ParsedTag[int] | None:
        return self._u64("msg-param-cumulative-months")

    def msg_param_should_share_streak(self) -> ParsedTag[bool] | None:
        return self._parsed("msg-param-should-share-streak", parse_flag)

    def msg_param_streak_months(self) -> ParsedTag[int] | None:
        """Consecutive months subscribed; 0 when the streak is not shared."""
        return self._u64("msg-param-streak-months")

    # raid
    def msg_param_display_name(self) -> str | None:
        return self.tags().get("msg-param-displayName")

    def msg_param_login(self) -> str | None:
        return self.tags().get("msg-param-login")

    def msg_param_viewer_count(self) -> ParsedTag[int] | None:
        return self._u64("msg-param-viewerCount")

    # subgift, anonsubgift
    def msg_param_months(self) -> ParsedTag[int] | None:
        return self._u64("msg-param-months")

    def msg_param_recipient_display_name(self) -> str | None:
        return self.tags().get("msg-param-recipient-display-name")

    def msg_param_recipient_id(self) -> ParsedTag[int] | None:
        return self._u64("msg-param-recipient-id")

    def msg_param_recipient_user_name(self) -> str | None:
        return self.tags().get("msg-param-recipient-user-name")

    def msg_param_gift_months(self) -> ParsedTag[int] | None:
        return self._u64("msg-param-gift-months")

    # giftpaidupgrade, anongiftpaidupgrade
    def msg_param_promo_gift_total(self) -> ParsedTag[int] | None:
        return self._u64("msg-param-promo-gift-total")

    def msg_param_promo_name(self) -> str | None:
        """Ongoing subscription promo, e.g. ``Subtember 2018``."""
        return self.tags().get_unescaped("msg-param-promo-name")

    def msg_param_sender_login(self) -> str | None:
        return self.tags().get("msg-param-sender-login")

    def msg_param_sender_name(self) -> str | None:
        return self.tags().get("msg-param-sender-name")

    # sub, resub, subgift, anonsubgift
    def msg_param_sub_plan(self) -> SubPlan | None:
        value = self.tags().get("msg-param-sub-plan")
        return None if value is None else SubPlan.parse(value)

    def msg_param_sub_plan_name(self) -> str | None:
        """Plan name; the channel owner may have customized it."""
        return self.tags().get_unescaped("msg-param-sub-plan-name")

    # ritual
    def msg_param_ritual_name(self) -> str | None:
        return self.tags().get("msg-param-ritual-name")

    # bitsbadgetier
    def msg_param_threshold(self) -> ParsedTag[int] | None:
        """Bits badge tier just earned, e.g. 100 or 1000."""
        return self._u64("msg-param-threshold")

    def _fields_dict(self) -> dict[str, Any]:
        return {
            "channel": self.channel,
            "message": self.message,
            "msg_id": self.tags().get("msg-id"),
            "system_msg": self.system_msg(),
            **self._user_fields(),
        }


__all__ = ["UserNotice"]
