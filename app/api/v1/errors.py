# app/api/v1/errors.py
from fastapi import HTTPException, status

from app.core.exceptions import (
	TeminatError, NotFoundError, ReferenceInUseError, DuplicateCurrencyError,
	InvalidRepaymentError, RateNotFoundError,
)

STATUS_BY_ERROR = {
	NotFoundError: status.HTTP_404_NOT_FOUND,
	RateNotFoundError: status.HTTP_404_NOT_FOUND,
	ReferenceInUseError: status.HTTP_409_CONFLICT,
	DuplicateCurrencyError: status.HTTP_409_CONFLICT,
	InvalidRepaymentError: status.HTTP_400_BAD_REQUEST,
}


def http_error(exc: TeminatError) -> HTTPException:
	"""Domain error -> HTTPException with the error text as detail."""
	for error_type, status_code in STATUS_BY_ERROR.items():
		if isinstance(exc, error_type):
			return HTTPException(status_code=status_code, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
