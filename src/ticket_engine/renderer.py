"""
TicketRenderer - rédaction des blocs du ticket en français.

Trois blocs sont produits à partir d'un ExtractionResult:
1. Description détaillée (résumé, problème, diagnostic, résultat)
2. Note de travail interne (liste à puces)
3. Commentaire visible par le client

Le paragraphe de résultat et le commentaire client suivent la même
priorité (voir select_outcome): escalade > réinitialisation > générique.
"""
import logging
from typing import Optional

from src.utils.text_utils import join_labels
from .extractor import ExtractionResult
from .outcome import select_outcome
from .pybars_renderer import PybarsRenderer
from .templates import (
    CLIENT_COMMENT_BODIES,
    CLIENT_COMMENT_TEMPLATE,
    DESCRIPTION_TEMPLATE,
    INTERNAL_NOTES_TEMPLATE,
    RESULT_TEMPLATES,
)

logger = logging.getLogger(__name__)

DEFAULT_SIGNATURE = "SD Nova"


class TicketRenderer:
    """Rend les blocs de texte d'un ticket à partir des faits extraits."""

    def __init__(self, signature: str = DEFAULT_SIGNATURE, engine: Optional[PybarsRenderer] = None):
        """
        Args:
            signature: Signature du commentaire client
            engine: Moteur Handlebars (partagé pour profiter du cache de compilation)
        """
        self.signature = signature
        self.engine = engine or PybarsRenderer()

    def build_description(self, note: str, extraction: ExtractionResult) -> str:
        """
        Description détaillée en quatre paragraphes.

        Args:
            note: Note normalisée (reprise telle quelle si aucun problème n'est extrait)
            extraction: Faits extraits de la note
        """
        outcome = select_outcome(extraction.actions, extraction.escalations)
        result = self.engine.render(RESULT_TEMPLATES[outcome], {
            'escalations': join_labels(extraction.escalations),
        })
        return self.engine.render(DESCRIPTION_TEMPLATE, {
            'summary': extraction.summary,
            'user_problem': extraction.user_problem,
            'note': note,
            'has_details': bool(extraction.actions or extraction.tools),
            'actions': join_labels(extraction.actions),
            'tools': join_labels(extraction.tools),
            'result': result,
        })

    def build_internal_notes(self, extraction: ExtractionResult) -> str:
        """Une puce par action, une puce regroupant les outils, une puce par vérification."""
        bullets = list(extraction.actions)
        if extraction.tools:
            bullets.append(f"Outils consultés : {join_labels(extraction.tools)}")
        bullets.extend(extraction.checks)

        rendered = self.engine.render(INTERNAL_NOTES_TEMPLATE, {'bullets': bullets})
        return rendered.rstrip("\n")

    def build_client_comment(self, extraction: ExtractionResult) -> str:
        """Message court et poli: "Bonjour," ... "Cordialement," + signature."""
        outcome = select_outcome(extraction.actions, extraction.escalations)
        logger.debug(f"Commentaire client: issue {outcome.value}")

        body = self.engine.render(CLIENT_COMMENT_BODIES[outcome], {
            'escalations': join_labels(extraction.escalations),
            'tools': join_labels(extraction.tools),
        })
        return self.engine.render(CLIENT_COMMENT_TEMPLATE, {
            'body': body,
            'signature': self.signature,
        })