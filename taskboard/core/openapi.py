"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

documenter les valeurs attendues (priorités, statuts),

centraliser la personnalisation du Swagger.
"""

from fastapi.openapi.utils import get_openapi

from taskboard.features.tasks.constants import PRIORITIES, STATUS_UPDATE_ALLOWED


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Les échéances sont en heure locale du serveur (`YYYY-MM-DD HH:MM:SS`).\n"
            f"- Priorités : {', '.join(PRIORITIES)}.\n"
            f"- Statuts (mise à jour) : {', '.join(STATUS_UPDATE_ALLOWED)}.\n"
            "- Aucune pagination.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
