"""Contact form submission store."""

from __future__ import annotations

import logging

from result import Err

from folio.api.protocols import ContactApiProtocol
from folio.models.contact import ContactMessage
from folio.models.state import LoadingState
from folio.state.base import BaseStore, StoreMessages
from folio.state.observable import Writable
from folio.state.toasts import ToastService

logger = logging.getLogger(__name__)

CONTACT_MESSAGES = StoreMessages(load_failed="Erreur lors de l'envoi du message")
SENT_TITLE = "Message envoyé"
SENT_MESSAGE = "Votre message a été envoyé avec succès. Je vous répondrai bientôt !"
SEND_FAILED_TITLE = "Erreur d'envoi"


class ContactStore(BaseStore):
    """Tracks one contact form submission at a time.

    Messages are forwarded as given; field validation belongs to the form
    (see :mod:`folio.forms`).
    """

    def __init__(self, api: ContactApiProtocol, toasts: ToastService) -> None:
        super().__init__(toasts, CONTACT_MESSAGES, "contact")
        self._api = api
        self.success: Writable[bool] = Writable(False)

    async def send_message(self, message: ContactMessage) -> bool:
        self._begin_load()
        self.success.set(False)

        result = await self._api.send_contact_message(message)

        if isinstance(result, Err):
            error = result.err_value
            logger.error("Contact message failed: %s %s", error.code, error.message)
            self.loading.set(LoadingState(is_loading=False, error=error))
            self._notify_failure(error, SEND_FAILED_TITLE, CONTACT_MESSAGES.load_failed)
            return False

        self._end_load()
        self.success.set(True)
        self._toasts.success(SENT_TITLE, SENT_MESSAGE)
        return True

    def clear_success(self) -> None:
        self.success.set(False)

    def reset(self) -> None:
        self.loading.set(LoadingState())
        self.success.set(False)
