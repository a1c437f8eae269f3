"""
➡️ But : Définir la taxonomie des erreurs de l'API et leur traduction HTTP.

ValidationError → 400 (champ requis absent, rien à mettre à jour)

NotFoundError → 404 (aucune ligne pour cet id)

StoreError → 500 (toute erreur de la base : connexion, contrainte, timeout)

Le corps de réponse est toujours {"error": "<message court>"}.
Le détail d'une erreur de base est loggé, jamais renvoyé au client.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@contextmanager
def store_errors(action: str, message: str = "Server error") -> Iterator[None]:
    """
    Convertit une erreur SQLAlchemy en StoreError (500 générique).
    Utilisation :
        with store_errors("fetching todos"):
            return svc.list()
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Error %s", action)
        raise StoreError(message) from exc


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    # Corps JSON invalide, id non entier… → 400 (et non 422)
    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Invalid request on %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")
