from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import RawfinClient

BOT_USERNAME = "rawfin_bot"


@dataclass(frozen=True)
class TelegramApi:
    client: RawfinClient
    bot_username: str = BOT_USERNAME

    def bot_info(self) -> Any:
        return self.client.request_with_retry("/telegram/bot-info")

    def send_message(self, chat_id: int | str, message: str) -> Any:
        return self.client.request(
            "/telegram/send",
            method="POST",
            json_body={"chatId": chat_id, "message": message},
        )

    def bot_link(self) -> str:
        return f"https://t.me/{self.bot_username}"

    def open_bot(self) -> None:
        self.client.browser.open(self.bot_link(), new_tab=True)
