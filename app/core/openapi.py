"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée,

documenter les conventions communes (format des erreurs, tri des listes).
"""

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi


def custom_openapi(app: FastAPI):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API REST pour des todos et des notes (FastAPI + PostgreSQL).\n\n"
            "### Conventions\n"
            "- Les erreurs ont toujours la forme `{\"error\": \"message\"}`.\n"
            "- Les todos sont triés par `id` croissant.\n"
            "- Les notes sont triées de la plus récente à la plus ancienne.\n"
            "- Pas d'authentification, pas de pagination.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
