"""
Lexique - vocabulaire reconnu dans les notes techniques.

Trois familles ordonnées de (motif, libellé):
- TOOLS: outils/plateformes, recherche par sous-chaîne
- ACTIONS: actions techniques, racines ancrées en début de mot
- ESCALATIONS: équipes cibles d'une escalade, mots entiers

L'ordre de chaque tuple définit l'ordre d'affichage des libellés.
"SAP" figure à la fois dans TOOLS et ESCALATIONS: une note qui le mentionne
produit l'outil "Sap" ET l'escalade "L2 SAP".
"""
import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LexiconEntry:
    """Un motif compilé et son libellé canonique."""
    pattern: re.Pattern
    label: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def tool_label(token: str) -> str:
    """Libellé d'un outil: première lettre en majuscule, sauf token déjà en majuscules."""
    if token.isupper():
        return token
    return token[:1].upper() + token[1:]


TOOL_TOKENS: Tuple[str, ...] = (
    "intune", "zscaler", "sap", "azure", "ldap", "ad", "okta", "vpn",
    "teams", "outlook", "exchange", "sccm", "jamf", "mobility", "sls",
)

# Mode strict (opt-in): mots entiers au lieu de sous-chaînes
TOOLS: Tuple[LexiconEntry, ...] = tuple(
    LexiconEntry(re.compile(rf"\b{re.escape(token)}\b", re.IGNORECASE), tool_label(token))
    for token in TOOL_TOKENS
)

ACTIONS: Tuple[LexiconEntry, ...] = (
    LexiconEntry(re.compile(r"\b(?:reset|réinitialis)", re.IGNORECASE), "Réinitialisation"),
    LexiconEntry(re.compile(r"\b(?:sync|synchronis)", re.IGNORECASE), "Synchronisation"),
    LexiconEntry(re.compile(r"\b(?:vérif|vérificat|contrôl|check)", re.IGNORECASE), "Vérification"),
    LexiconEntry(re.compile(r"\b(?:escalad|escalation|escalé)", re.IGNORECASE), "Escalade"),
    LexiconEntry(re.compile(r"\bconfigur", re.IGNORECASE), "Configuration"),
    LexiconEntry(re.compile(r"\bdiagnos", re.IGNORECASE), "Diagnostic"),
    LexiconEntry(re.compile(r"\b(?:connex|déconnex|déconnect)", re.IGNORECASE), "Actions réseau/connexion"),
    LexiconEntry(re.compile(r"\b(?:mot de passe|mdp|password)", re.IGNORECASE), "Intervention mot de passe"),
)

ESCALATIONS: Tuple[LexiconEntry, ...] = (
    LexiconEntry(re.compile(r"\b(?:l2|level ?2|support niveau 2)\b", re.IGNORECASE), "L2"),
    LexiconEntry(re.compile(r"\b(?:l3|level ?3|support niveau 3)\b", re.IGNORECASE), "L3"),
    LexiconEntry(re.compile(r"\bsap\b", re.IGNORECASE), "L2 SAP"),
    LexiconEntry(re.compile(r"\b(?:mobility|mobile)\b", re.IGNORECASE), "L2 Mobility"),
    LexiconEntry(re.compile(r"\bsls\b", re.IGNORECASE), "SLS"),
    LexiconEntry(re.compile(r"\b(?:réseau|network)\b", re.IGNORECASE), "Réseau"),
    LexiconEntry(re.compile(r"\b(?:sécurité|firewall|fire wall)\b", re.IGNORECASE), "Sécurité"),
)

# Vocabulaire de diagnostic pour les phrases de vérification (sous-chaînes)
CHECK_PATTERN = re.compile(
    r"vérif|check|sync|synchronis|intune|zscaler|réinitialis|reset|mdp|mot de passe"
    r"|connect|vpn|ldap|ad|sap",
    re.IGNORECASE,
)

# Ordre de priorité: seul le premier motif qui matche est retenu
USER_PROBLEM_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"utilisateur[:\s\-]*([^.;\n]+)", re.IGNORECASE),
    re.compile(r"poste[:\s\-]*([^.;\n]+)", re.IGNORECASE),
    re.compile(r"session[:\s\-]*([^.;\n]+)", re.IGNORECASE),
    re.compile(r"impossible de ([^.;\n]+)", re.IGNORECASE),
    re.compile(r"ne peut pas ([^.;\n]+)", re.IGNORECASE),
    re.compile(r"erreur[:\s\-]*([^.;\n]+)", re.IGNORECASE),
)

RESET_ACTION_LABELS = frozenset({"Réinitialisation", "Intervention mot de passe"})
