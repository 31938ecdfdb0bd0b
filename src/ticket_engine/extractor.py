"""
Extraction des faits d'une note technique.

Toutes les fonctions sont pures et totales: aucune ne lève d'exception,
quelle que soit la chaîne d'entrée (y compris vide). L'absence
d'information est représentée par des tuples vides ou None.

Les libellés sont dédupliqués et retournés dans l'ordre du lexique,
pas dans l'ordre d'apparition dans la note.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from src.utils.text_utils import (
    capitalize_first,
    ensure_period,
    normalize_whitespace,
    split_sentences,
)
from .lexicon import (
    ACTIONS,
    CHECK_PATTERN,
    ESCALATIONS,
    TOOL_TOKENS,
    TOOLS,
    USER_PROBLEM_PATTERNS,
    LexiconEntry,
    tool_label,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Faits extraits d'une note normalisée."""
    summary: str = ''
    tools: Tuple[str, ...] = ()
    actions: Tuple[str, ...] = ()
    escalations: Tuple[str, ...] = ()
    user_problem: Optional[str] = None
    checks: Tuple[str, ...] = ()


def _ordered_unique(labels: Iterable[str]) -> Tuple[str, ...]:
    """Déduplique en conservant le premier ordre rencontré."""
    seen: Set[str] = set()
    ordered: List[str] = []
    for label in labels:
        if label not in seen:
            seen.add(label)
            ordered.append(label)
    return tuple(ordered)


def _matching_labels(entries: Tuple[LexiconEntry, ...], text: str) -> Tuple[str, ...]:
    return _ordered_unique(entry.label for entry in entries if entry.matches(text))


def pick_first_sentence(text: str) -> str:
    """
    Première phrase utile de la note, utilisée comme résumé (1 ligne).

    Retourne le texte entier si aucun fragment non vide n'est trouvé.
    """
    candidates = split_sentences(text)
    return candidates[0] if candidates else text


def find_tools(text: str, strict: bool = False) -> Tuple[str, ...]:
    """
    Outils/plateformes mentionnés dans la note.

    Par défaut, test de sous-chaîne sur le texte en minuscules: "ad" est
    trouvé dans "adresse". strict=True exige des mots entiers.
    """
    if strict:
        return _matching_labels(TOOLS, text)

    lower = text.lower()
    return _ordered_unique(tool_label(token) for token in TOOL_TOKENS if token in lower)


def find_escalations(text: str) -> Tuple[str, ...]:
    """Équipes cibles d'une escalade (L2, L3, L2 SAP, Réseau...)."""
    return _matching_labels(ESCALATIONS, text)


def find_actions(text: str) -> Tuple[str, ...]:
    """Catégories d'actions techniques réalisées."""
    return _matching_labels(ACTIONS, text)


def extract_user_problem(text: str) -> Optional[str]:
    """
    Fragment décrivant le problème de l'utilisateur.

    Les motifs sont essayés par ordre de priorité ("utilisateur:",
    "poste:", "session:", "impossible de", "ne peut pas", "erreur:");
    le premier qui matche est retenu, même si un suivant serait plus précis.

    Returns:
        Le texte complet du match, première lettre en majuscule, ou None
    """
    for pattern in USER_PROBLEM_PATTERNS:
        match = pattern.search(text)
        if match:
            return capitalize_first(match.group(0))
    return None


def extract_checks(text: str) -> Tuple[str, ...]:
    """Phrases mentionnant une vérification ou un élément de diagnostic, terminées par un point."""
    return tuple(
        ensure_period(sentence)
        for sentence in split_sentences(text)
        if CHECK_PATTERN.search(sentence)
    )


def extract(note: str, strict_tools: bool = False) -> ExtractionResult:
    """
    Normalise la note puis en extrait tous les faits.

    Args:
        note: Note brute
        strict_tools: Recherche des outils par mots entiers

    Returns:
        ExtractionResult
    """
    text = normalize_whitespace(note)
    result = ExtractionResult(
        summary=pick_first_sentence(text),
        tools=find_tools(text, strict=strict_tools),
        actions=find_actions(text),
        escalations=find_escalations(text),
        user_problem=extract_user_problem(text),
        checks=extract_checks(text),
    )
    logger.debug(
        f"Extraction: {len(result.tools)} outils, {len(result.actions)} actions, "
        f"{len(result.escalations)} escalades, {len(result.checks)} vérifications"
    )
    return result
