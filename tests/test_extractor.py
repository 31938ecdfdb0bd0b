"""Tests for the note extractor."""

import pytest
from src.ticket_engine.extractor import (
    pick_first_sentence,
    find_tools,
    find_escalations,
    find_actions,
    extract_user_problem,
    extract_checks,
    extract,
    ExtractionResult,
)
from src.utils.text_utils import normalize_whitespace

NOTE_PASSWORD = (
    "Utilisateur: Dupont - Impossible de se connecter à sa session. Mot de passe bloqué. "
    "Réinitialisé le mot de passe via AD, vérif connexion OK."
)
NOTE_OUTLOOK = (
    "PC: poste123 - Outlook ne démarre pas, erreur 0x80070005. Vérif profil, reset MAPI, "
    "test sur webmail OK. Escalade L2 Exchange si persiste."
)


# ─── normalize_whitespace tests ───

class TestNormalizeWhitespace:
    def test_trims_and_collapses(self):
        assert normalize_whitespace("  reset \t\n  vpn   OK  ") == "reset vpn OK"

    def test_empty(self):
        assert normalize_whitespace("") == ""

    def test_only_whitespace(self):
        assert normalize_whitespace(" \n\t ") == ""


# ─── pick_first_sentence tests ───

class TestPickFirstSentence:
    def test_first_sentence(self):
        assert pick_first_sentence("VPN KO. Reset fait.") == "VPN KO"

    def test_question_and_exclamation(self):
        assert pick_first_sentence("Ça marche ?! Oui.") == "Ça marche"

    def test_line_breaks(self):
        assert pick_first_sentence("Première ligne\r\nDeuxième ligne") == "Première ligne"

    def test_leading_terminators_skipped(self):
        assert pick_first_sentence("... Outlook bloqué") == "Outlook bloqué"

    def test_run_on_clause_returns_whole_text(self):
        text = "poste bloqué au démarrage depuis ce matin sans message d'erreur"
        assert pick_first_sentence(text) == text

    def test_empty(self):
        assert pick_first_sentence("") == ""

    def test_only_terminators_returns_text(self):
        assert pick_first_sentence("...") == "..."


# ─── find_tools tests ───

class TestFindTools:
    def test_labels_in_lexicon_order(self):
        assert find_tools("Outlook et VPN via Intune") == ("Intune", "Vpn", "Outlook")

    def test_case_insensitive(self):
        assert find_tools("ZSCALER") == ("Zscaler",)

    def test_duplicates_removed(self):
        assert find_tools("vpn VPN Vpn vpn") == ("Vpn",)

    def test_substring_matching(self):
        # "ad" est trouvé dans "adresse"
        assert find_tools("Changement d'adresse mail") == ("Ad",)

    def test_strict_matching_requires_whole_words(self):
        assert find_tools("Changement d'adresse mail", strict=True) == ()
        assert find_tools("Compte AD verrouillé", strict=True) == ("Ad",)

    def test_sap_is_a_tool(self):
        assert "Sap" in find_tools("Accès SAP refusé")

    def test_empty(self):
        assert find_tools("") == ()


# ─── find_escalations tests ───

class TestFindEscalations:
    @pytest.mark.parametrize("text,label", [
        ("Escalade L2", "L2"),
        ("transmis au level 2", "L2"),
        ("transmis au level3", "L3"),
        ("support niveau 3 requis", "L3"),
        ("Voir avec SAP", "L2 SAP"),
        ("souci mobile", "L2 Mobility"),
        ("Transmis à SLS", "SLS"),
        ("problème réseau", "Réseau"),
        ("network down", "Réseau"),
        ("règle firewall", "Sécurité"),
        ("équipe sécurité", "Sécurité"),
    ])
    def test_targets(self, text, label):
        assert label in find_escalations(text)

    def test_whole_words_only(self):
        assert find_escalations("sapin mobiles l2x") == ()

    def test_lexicon_order_and_dedup(self):
        assert find_escalations("Sécurité puis L3 puis L2 puis l2") == ("L2", "L3", "Sécurité")

    def test_empty(self):
        assert find_escalations("") == ()


# ─── find_actions tests ───

class TestFindActions:
    def test_password_note(self):
        assert find_actions(normalize_whitespace(NOTE_PASSWORD)) == (
            "Réinitialisation",
            "Vérification",
            "Actions réseau/connexion",
            "Intervention mot de passe",
        )

    def test_outlook_note(self):
        assert find_actions(NOTE_OUTLOOK) == ("Réinitialisation", "Vérification", "Escalade")

    @pytest.mark.parametrize("text,label", [
        ("réinitialisation du compte", "Réinitialisation"),
        ("Synchronisé avec Intune", "Synchronisation"),
        ("contrôle du poste", "Vérification"),
        ("checked", "Vérification"),
        ("ticket escaladé", "Escalade"),
        ("escalation faite", "Escalade"),
        ("reconfiguré", None),
        ("configuration du proxy", "Configuration"),
        ("diagnostic réseau", "Diagnostic"),
        ("utilisateur déconnecté", "Actions réseau/connexion"),
        ("MDP expiré", "Intervention mot de passe"),
    ])
    def test_categories(self, text, label):
        actions = find_actions(text)
        if label is None:
            assert "Configuration" not in actions
        else:
            assert label in actions

    def test_stem_must_start_a_word(self):
        assert find_actions("preset") == ()

    def test_dedup(self):
        assert find_actions("reset reset RESET réinitialisé") == ("Réinitialisation",)

    def test_empty(self):
        assert find_actions("") == ()


# ─── extract_user_problem tests ───

class TestExtractUserProblem:
    def test_utilisateur_marker(self):
        assert extract_user_problem(NOTE_PASSWORD) == (
            "Utilisateur: Dupont - Impossible de se connecter à sa session"
        )

    def test_poste_marker_capitalized(self):
        assert extract_user_problem(NOTE_OUTLOOK) == (
            "Poste123 - Outlook ne démarre pas, erreur 0x80070005"
        )

    def test_priority_order_wins_over_position(self):
        # "impossible de" apparaît avant "session" mais "session" est prioritaire
        text = "Impossible de lancer Teams; session: gelée"
        assert extract_user_problem(text) == "Session: gelée"

    def test_ne_peut_pas(self):
        assert extract_user_problem("Il ne peut pas imprimer. Reset spooler.") == "Ne peut pas imprimer"

    def test_erreur(self):
        assert extract_user_problem("Erreur - 403 sur le portail") == "Erreur - 403 sur le portail"

    def test_no_match(self):
        assert extract_user_problem("Reset VPN effectué") is None

    def test_empty(self):
        assert extract_user_problem("") is None


# ─── extract_checks tests ───

class TestExtractChecks:
    def test_filters_and_adds_period(self):
        assert extract_checks("Appel reçu. Vérif VPN OK. Rien d'autre") == ("Vérif VPN OK.",)

    def test_keeps_order_without_dedup(self):
        assert extract_checks("sync OK. sync OK") == ("sync OK.", "sync OK.")

    def test_password_note(self):
        assert extract_checks(NOTE_PASSWORD) == (
            "Utilisateur: Dupont - Impossible de se connecter à sa session.",
            "Mot de passe bloqué.",
            "Réinitialisé le mot de passe via AD, vérif connexion OK.",
        )

    def test_empty(self):
        assert extract_checks("") == ()


# ─── extract tests ───

class TestExtract:
    def test_password_note(self):
        result = extract(NOTE_PASSWORD)
        assert result.summary == "Utilisateur: Dupont - Impossible de se connecter à sa session"
        assert "Ad" in result.tools
        assert {"Réinitialisation", "Vérification", "Intervention mot de passe"} <= set(result.actions)
        assert result.escalations == ()

    def test_outlook_note(self):
        result = extract(NOTE_OUTLOOK)
        assert {"Outlook", "Exchange"} <= set(result.tools)
        assert {"Vérification", "Réinitialisation", "Escalade"} <= set(result.actions)
        assert result.escalations == ("L2",)

    def test_sap_sets_tool_and_escalation(self):
        result = extract("Accès SAP refusé, transmis.")
        assert "Sap" in result.tools
        assert "L2 SAP" in result.escalations

    def test_normalizes_before_matching(self):
        result = extract("  Poste   bloqué\n\ndepuis ce matin  ")
        assert result.summary == "Poste bloqué depuis ce matin"

    def test_empty_note(self):
        assert extract("") == ExtractionResult()

    def test_idempotent(self):
        assert extract(NOTE_OUTLOOK) == extract(NOTE_OUTLOOK)

    @pytest.mark.parametrize("note", [
        "",
        "   ",
        "é" * 10000,
        "🙂 ?!.    ;;; ((([[[",
        "utilisateur:",
    ])
    def test_never_raises(self, note):
        assert isinstance(extract(note), ExtractionResult)
