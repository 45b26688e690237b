from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppError(Exception):
	status_code = 500

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message


class ValidationError(AppError):
	status_code = 400


class NotFoundError(AppError):
	status_code = 404


class StorageError(AppError):
	status_code = 500


class GenerationError(AppError):
	status_code = 500


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def register_error_handlers(app: FastAPI) -> None:
	app.add_exception_handler(AppError, _app_error_handler)
	app.add_exception_handler(RequestValidationError, _request_validation_handler)
