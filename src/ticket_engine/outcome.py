"""Issue d'une intervention: décide du paragraphe de résultat et du commentaire client."""
from enum import Enum
from typing import Iterable, Sequence

from .lexicon import RESET_ACTION_LABELS


class Outcome(Enum):
    ESCALATION = "escalation"
    RESOLVED = "resolved"
    PENDING = "pending"


def select_outcome(actions: Iterable[str], escalations: Sequence[str]) -> Outcome:
    """
    Priorité: escalade > action de type réinitialisation > générique.

    Une note qui contient à la fois une escalade et un reset est une escalade.
    """
    if escalations:
        return Outcome.ESCALATION
    if RESET_ACTION_LABELS.intersection(actions):
        return Outcome.RESOLVED
    return Outcome.PENDING
