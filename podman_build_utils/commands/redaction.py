"""Expurgation des secrets dans les textes destinés aux journaux.

podman recopie la ligne de commande complète dans ses messages
d'erreur : un `podman login` en échec exposerait le mot de passe
passé via `-p=`. redact_password remplace en une seule passe le
segment porteur du secret et toute occurrence isolée de la valeur.

Example:
    >>> redact_password("login quay.io -u bob -p=s3cr.t", "s3cr.t")
    'login quay.io -u bob -p=**********'
"""

import re

MASK = "**********"
MASKED_PASSWORD_FLAG = f"-p={MASK}"
PLACEHOLDER = "<masqué>"

_FLAG_PREFIX = r"(?:--password|-p)(?:[,=]+|\s+)"


def redact_password(message: str, password: str) -> str:
    """Retire toute occurrence littérale du mot de passe d'un message.

    Les formes `-p=<pwd>`, `-p,<pwd>`, `-p <pwd>` et leurs équivalents
    `--password` deviennent `-p=**********`, les occurrences isolées
    deviennent `**********`. Le mot de passe est traité comme un
    littéral, jamais comme un motif.

    Un mot de passe contenu dans `-p=**********` (ex: "p" ou "**")
    ne peut pas être masqué par ce texte : chaque occurrence, flag
    compris, est alors remplacée par `<masqué>`.

    Args:
        message: Texte à expurger.
        password: Valeur secrète. Une valeur vide laisse le message
            inchangé.

    Returns:
        Le message, garanti sans le mot de passe en sous-chaîne.
    """
    if not password:
        return message
    literal = re.escape(password)
    pattern = re.compile(f"(?P<flag>{_FLAG_PREFIX}){literal}|{literal}")

    if password in MASKED_PASSWORD_FLAG:
        scrubbed = pattern.sub(lambda _match: PLACEHOLDER, message)
    else:
        scrubbed = pattern.sub(
            lambda match: (
                MASKED_PASSWORD_FLAG
                if match.group("flag") is not None else MASK
            ),
            message,
        )

    # Occurrence reformée à la jonction d'un masque et du texte voisin
    while password in scrubbed:
        scrubbed = scrubbed.replace(password, "")
    return scrubbed
