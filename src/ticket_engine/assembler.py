"""
Assemblage du ticket formaté.

Le document final est une suite de lignes séparées par "\\n", les sections
délimitées par des lignes "---" et introduites par des en-têtes Markdown
("###" suivi de deux espaces).
"""
import logging

from src.utils.text_utils import normalize_whitespace
from .extractor import extract
from .renderer import DEFAULT_SIGNATURE, TicketRenderer

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "---"
DESCRIPTION_HEADER = "###  Description"
INTERNAL_NOTES_HEADER = "###  Note de travail interne"
CLIENT_COMMENT_HEADER = "###  Commentaire visible par le client"


def assemble_ticket(summary: str, description: str, internal_notes: str, client_comment: str) -> str:
    """Concatène les blocs rendus avec séparateurs et en-têtes."""
    return "\n".join([
        SECTION_SEPARATOR,
        DESCRIPTION_HEADER,
        f"- {summary}",
        "",
        description,
        SECTION_SEPARATOR,
        INTERNAL_NOTES_HEADER,
        internal_notes,
        SECTION_SEPARATOR,
        CLIENT_COMMENT_HEADER,
        client_comment,
        SECTION_SEPARATOR,
    ])


class TicketFormatter:
    """
    Transforme une note technique courte en ticket formaté en français.

    Usage:
        formatter = TicketFormatter(signature="SD Nova")
        print(formatter.format("Reset MDP via AD, vérif connexion OK."))
    """

    def __init__(self, signature: str = DEFAULT_SIGNATURE, strict_tools: bool = False):
        """
        Args:
            signature: Signature du commentaire client
            strict_tools: Recherche des outils par mots entiers au lieu de sous-chaînes
        """
        self.strict_tools = strict_tools
        self.renderer = TicketRenderer(signature=signature)

    def format(self, note: str) -> str:
        """Formate une note; ne lève jamais d'exception pour une chaîne en entrée."""
        text = normalize_whitespace(note)
        extraction = extract(text, strict_tools=self.strict_tools)

        ticket = assemble_ticket(
            extraction.summary,
            self.renderer.build_description(text, extraction),
            self.renderer.build_internal_notes(extraction),
            self.renderer.build_client_comment(extraction),
        )
        logger.debug(f"Ticket formaté: {len(ticket)} caractères")
        return ticket


_default_formatter = TicketFormatter()


def format_ticket(note: str) -> str:
    """Formate une note avec la configuration par défaut (signature "SD Nova", outils par sous-chaîne)."""
    return _default_formatter.format(note)
