"""
Valeurs littérales des priorités et statuts.

Attention : les statuts ne sont pas orthographiés pareil selon l'usage
(avec accents à la création / pour "aujourd'hui", sans accents pour le
tableau par statut, la mise à jour de statut et l'historique).
Ces valeurs sont celles stockées en base par le front : ne pas les unifier ici.
"""

# -----------------------------
# Priorités
# -----------------------------
PRIORITY_LOW = "moins important"
PRIORITY_MEDIUM = "important"
PRIORITY_HIGH = "urgent"

PRIORITIES = (PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH)

# ordre d'affichage : urgent > important > moins important
PRIORITY_ORDER = (PRIORITY_HIGH, PRIORITY_MEDIUM, PRIORITY_LOW)

# -----------------------------
# Statuts (création / tâches du jour)
# -----------------------------
STATUS_NOT_STARTED = "pas commencé"
STATUS_IN_PROGRESS = "en cours"

DEFAULT_STATUS = STATUS_NOT_STARTED
OPEN_STATUSES = (STATUS_NOT_STARTED, STATUS_IN_PROGRESS)

# -----------------------------
# Statuts (tableau, mise à jour, historique)
# -----------------------------
BOARD_NOT_STARTED = "pas commence"
BOARD_IN_PROGRESS = "en cours"
BOARD_DONE = "termine"
BOARD_CANCELLED = "annule"

BOARD_BUCKETS = (BOARD_NOT_STARTED, BOARD_IN_PROGRESS, BOARD_DONE)
STATUS_UPDATE_ALLOWED = (BOARD_NOT_STARTED, BOARD_IN_PROGRESS, BOARD_DONE, BOARD_CANCELLED)
HISTORY_STATUS = BOARD_DONE

# Heure appliquée quand la création ne précise pas d'heure
END_OF_DAY = "23:59:59"
