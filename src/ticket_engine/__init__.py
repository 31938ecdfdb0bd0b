"""
Ticket Engine - Formatage déterministe de notes techniques en tickets.

Ce package transforme une note de support courte en ticket structuré:
1. Le lexique reconnaît outils, actions et équipes d'escalade
2. L'extracteur en déduit les faits (résumé, problème, vérifications)
3. Le renderer rédige les blocs en français via des templates Handlebars
4. L'assembleur produit le document final

Composants:
- extract: Faits extraits d'une note
- TicketRenderer: Description, note interne, commentaire client
- TicketFormatter / format_ticket: Document complet
"""

from .extractor import ExtractionResult, extract
from .outcome import Outcome, select_outcome
from .renderer import TicketRenderer
from .assembler import TicketFormatter, format_ticket

__all__ = [
    'ExtractionResult',
    'extract',
    'Outcome',
    'select_outcome',
    'TicketRenderer',
    'TicketFormatter',
    'format_ticket',
]
