"""Observable stores and the toast queue."""

from folio.state.contact import ContactStore
from folio.state.observable import Derived, Writable
from folio.state.profile import ProfileStore
from folio.state.projects import ProjectStore
from folio.state.skills import SkillStore
from folio.state.toasts import ToastService

__all__ = [
    "ContactStore",
    "Derived",
    "ProfileStore",
    "ProjectStore",
    "SkillStore",
    "ToastService",
    "Writable",
]
