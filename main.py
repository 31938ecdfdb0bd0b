"""
Main entry point for the ticket formatter.

Usage:
    python main.py                       -> formats the built-in example notes
    python main.py "ma note..."          -> formats the note given as arguments
    python main.py --file note.txt       -> formats a note read from a file ("-" for stdin)
"""
import argparse
import sys

from config import settings
from src.utils.logging_config import setup_logging
from src.ticket_engine import TicketFormatter

EXAMPLE_NOTES = [
    "Utilisateur: Dupont - Impossible de se connecter à sa session. Mot de passe bloqué. "
    "Réinitialisé le mot de passe via AD, vérif connexion OK.",
    "PC: poste123 - Outlook ne démarre pas, erreur 0x80070005. Vérif profil, reset MAPI, "
    "test sur webmail OK. Escalade L2 Exchange si persiste.",
    "Télétravail: VPN ne s'établit pas. Vérification Zscaler et Intune effectuée, "
    "appareil non compliant. Transmis à Mobility.",
]


def read_note(args: argparse.Namespace) -> str:
    """Note from --file (or stdin with "-"), else the positional words joined with spaces."""
    if args.file == "-":
        return sys.stdin.read()
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    return " ".join(args.note)


def run_examples(formatter: TicketFormatter):
    """Format each example note, framed by banner lines."""
    for note in EXAMPLE_NOTES:
        print("=== NOTE SOURCE ===")
        print(note)
        print("\n--- TICKET FORMATTÉ ---\n")
        print(formatter.format(note))
        print("\n\n")


def main(argv=None) -> int:
    """Main CLI interface."""
    parser = argparse.ArgumentParser(
        description="Transforme une note technique courte en ticket formaté en français"
    )
    parser.add_argument("note", nargs="*", help="Note to format (words are joined with spaces)")
    parser.add_argument("--file", help="Read the note from a file ('-' for stdin)")
    parser.add_argument("--strict-tools", action=argparse.BooleanOptionalAction,
                        default=settings.strict_tool_matching,
                        help="Match tool names as whole words instead of substrings")
    parser.add_argument("--signature", default=settings.client_signature,
                        help="Signature of the client comment")

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging()

    formatter = TicketFormatter(signature=args.signature, strict_tools=args.strict_tools)

    try:
        note = read_note(args)
    except OSError as e:
        print(f"Erreur: impossible de lire {args.file}: {e}", file=sys.stderr)
        return 1

    if args.file or note:
        print(formatter.format(note))
    else:
        run_examples(formatter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
