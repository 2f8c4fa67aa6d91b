from uuid import UUID

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from quote_api.db.session import get_db
from quote_api.schemas.quote import QuotePayload
from quote_api.services import quotes as service
from quote_api.services.quotes import Outcome, ServiceResult

router = APIRouter()

_STATUS_BY_OUTCOME = {
    Outcome.OK: 200,
    Outcome.NOT_FOUND: 404,
    Outcome.STORE_ERROR: 500,
}


def _status_only(result: ServiceResult) -> Response:
    return Response(status_code=_STATUS_BY_OUTCOME[result.outcome])


@router.post("", status_code=201)
def create_quote(payload: QuotePayload, db: Session = Depends(get_db)):
    result = service.create_quote(db, book=payload.book, quote=payload.quote)
    if not result.ok:
        return _status_only(result)
    return JSONResponse(status_code=201, content=result.value.model_dump(mode="json"))


@router.get("")
def list_quotes(db: Session = Depends(get_db)):
    result = service.list_quotes(db)
    if not result.ok:
        return _status_only(result)
    return JSONResponse(content=[q.model_dump(mode="json") for q in result.value])


@router.put("/{id}")
def update_quote(id: UUID, payload: QuotePayload, db: Session = Depends(get_db)):
    return _status_only(service.update_quote(db, id, book=payload.book, quote=payload.quote))


@router.delete("/{id}")
def delete_quote(id: UUID, db: Session = Depends(get_db)):
    return _status_only(service.delete_quote(db, id))
