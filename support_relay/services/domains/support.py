"""
Support Domain Service

Relays Mini App support questions to the operator chat:
verify initData, save the question, notify the admin bot, remember
the admin message id.
"""
from typing import Optional

from support_relay.auth import InitDataValid, TelegramUser, verify_init_data
from support_relay.bot.callbacks import parse_support_answer_token
from support_relay.config import SupportRelayConfig
from support_relay.errors import EmptyQuestion, InternalError, SaveFailed, SupportRelayError, Unauthorized
from support_relay.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from support_relay.services.models import Profile, SupportTicket, TicketStatus
from support_relay.services.notifications import build_operator_notification
from support_relay.services.telegram_messaging import Delivered, DeliveryResult, Undelivered

logger = get_logger(__name__)


class SupportRelayService:
    """
    Support question relay.

    Collaborators are injected:
    - db: exposes find_profile_by_telegram_id / insert_ticket / update_ticket
      / find_tickets_by_short_id (see services.database.Database)
    - messenger: exposes send_message() returning a DeliveryResult
    """

    def __init__(self, db, messenger, config: SupportRelayConfig):
        self.db = db
        self.messenger = messenger
        self.config = config

    async def submit_question(self, init_data: Optional[str], question: Optional[str]) -> str:
        """
        Save a support question and forward it to the operators.

        Args:
            init_data: Raw Telegram WebApp initData
            question: Question text as typed by the user

        Returns:
            ID of the saved ticket

        Raises:
            Unauthorized: initData failed verification
            EmptyQuestion: nothing left after trimming
            SaveFailed: the ticket could not be stored
            InternalError: anything unexpected
        """
        try:
            return await self._submit_question(init_data, question)
        except SupportRelayError:
            raise
        except Exception as e:
            logger.error("Unexpected error while submitting support question", exc_info=True)
            raise InternalError() from e

    async def _submit_question(self, init_data: Optional[str], question: Optional[str]) -> str:
        user = self._authenticate(init_data or "")

        text = (question or "").strip()
        if not text:
            raise EmptyQuestion()

        profile = await self._find_profile(user.id)

        try:
            ticket = await self.db.insert_ticket({
                "user_telegram_id": user.id,
                "user_profile_id": profile.id if profile else None,
                "question": text,
                "status": TicketStatus.PENDING.value,
            })
        except Exception as e:
            logger.error(f"Failed to save support question for {user.id}", exc_info=True)
            raise SaveFailed() from e

        logger.info(f"Saved support question {sanitize_id_for_logging(ticket.id)} from {user.id}")

        result = await self._notify_operator(ticket, user, profile)
        if isinstance(result, Delivered):
            await self._attach_admin_message(ticket, result.message_id)
        else:
            logger.warning(
                f"Support question {sanitize_id_for_logging(ticket.id)} not delivered to operators: "
                f"{sanitize_string_for_logging(result.reason)}"
            )

        return ticket.id

    def _authenticate(self, init_data: str) -> TelegramUser:
        verification = verify_init_data(init_data, self.config.telegram_token)
        if isinstance(verification, InitDataValid):
            logger.info(f"initData verified: length={len(init_data)}, user_id={verification.user.id}")
            return verification.user

        logger.warning(f"initData rejected: length={len(init_data)}, reason={verification.reason.value}")
        raise Unauthorized()

    async def _find_profile(self, telegram_id: int) -> Optional[Profile]:
        """Profile lookup is best-effort; a failure means no profile."""
        try:
            return await self.db.find_profile_by_telegram_id(telegram_id)
        except Exception:
            logger.warning(f"Failed to look up profile for {telegram_id}", exc_info=True)
            return None

    async def _notify_operator(
        self, ticket: SupportTicket, user: TelegramUser, profile: Optional[Profile]
    ) -> DeliveryResult:
        try:
            notification = build_operator_notification(ticket, user, profile)
            return await self.messenger.send_message(
                chat_id=self.config.admin_chat_id,
                text=notification.text,
                keyboard=notification.keyboard,
            )
        except Exception as e:
            logger.error(f"Operator notification for {ticket.short_id} raised", exc_info=True)
            return Undelivered(type(e).__name__)

    async def _attach_admin_message(self, ticket: SupportTicket, message_id: int) -> None:
        try:
            await self.db.update_ticket(ticket.id, {"admin_message_id": message_id})
        except Exception:
            # The ticket exists; the reply can still be matched by its token
            logger.error(
                f"Failed to store admin message {message_id} for {ticket.short_id}", exc_info=True
            )

    async def resolve_correlation(self, token: str) -> Optional[SupportTicket]:
        """
        Find the ticket an operator reply button points to.

        The token only carries an 8-char ID prefix, so the lookup is scoped
        to the user and refuses to pick when several of their tickets share it.
        """
        callback = parse_support_answer_token(token)
        if callback is None:
            logger.warning(f"Not a support answer token: {sanitize_string_for_logging(token)}")
            return None

        tickets = await self.db.find_tickets_by_short_id(callback.telegram_id, callback.ticket)
        if len(tickets) == 1:
            return tickets[0]
        if tickets:
            logger.error(
                f"Ambiguous support token: {len(tickets)} tickets of {callback.telegram_id} "
                f"start with {sanitize_id_for_logging(callback.ticket)}"
            )
        return None
