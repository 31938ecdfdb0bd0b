"""
Templates Handlebars des blocs du ticket.

Toutes les valeurs sont insérées en triple moustache ({{{...}}}): le ticket
est du texte brut, pas du HTML, et les apostrophes ne doivent pas être
échappées. Les blocs conditionnels sont écrits en ligne pour maîtriser
exactement les sauts de ligne.
"""
from .outcome import Outcome

NO_ACTION_DETAIL = "Aucune action technique détaillée fournie dans la note initiale."

DESCRIPTION_TEMPLATE = (
    "{{{summary}}}\n"
    "\n"
    "Description détaillée :\n"
    "{{#if user_problem}}{{{user_problem}}}"
    "{{else}}Problème signalé par l'utilisateur : {{{note}}}{{/if}}\n"
    "\n"
    "{{#if has_details}}Diagnostic et actions menées : "
    "{{#if actions}}Actions réalisées : {{{actions}}}.{{#if tools}} {{/if}}{{/if}}"
    "{{#if tools}}Outils/plateformes consultés : {{{tools}}}.{{/if}}"
    "{{else}}Le technicien a réalisé un diagnostic initial. " + NO_ACTION_DETAIL + "{{/if}}\n"
    "\n"
    "Résultat / étape suivante :\n"
    "{{{result}}}"
)

RESULT_TEMPLATES = {
    Outcome.ESCALATION: (
        "La demande nécessite une escalade vers : {{{escalations}}}. Transmission effectuée."
    ),
    Outcome.RESOLVED: (
        "Résolution effectuée : réinitialisation réalisée / intervention effectuée. "
        "Vérifier si l'utilisateur confirme la résolution."
    ),
    Outcome.PENDING: (
        "Aucune résolution définitive fournie ; suivre la prochaine étape renseignée dans la note "
        "(p. ex. surveillance, rendez-vous, informations complémentaires nécessaires)."
    ),
}

INTERNAL_NOTES_TEMPLATE = (
    "{{#if bullets}}{{#each bullets}}- {{{this}}}\n{{/each}}"
    "{{else}}- " + NO_ACTION_DETAIL + "{{/if}}"
)

CLIENT_COMMENT_BODIES = {
    Outcome.ESCALATION: (
        "Votre demande a été transmise à l'équipe suivante : {{{escalations}}} pour prise en charge. "
        "Nous reviendrons vers vous dès qu'ils auront un retour."
    ),
    Outcome.RESOLVED: (
        "Votre mot de passe / accès a été réinitialisé. Merci de vérifier que vous pouvez vous "
        "connecter et de nous informer en cas de problème."
    ),
    Outcome.PENDING: (
        "L'intervention a été réalisée{{#if tools}} ({{{tools}}}){{/if}}. "
        "Si le problème persiste, merci de nous le signaler pour un suivi."
    ),
}

CLIENT_COMMENT_TEMPLATE = "Bonjour,\n\n{{{body}}}\n\nCordialement,\n{{{signature}}}"
